"""
Parser for chat commands.

This module turns a command string (bot prefix already stripped) into a
typed command value. The string is tokenized, then each command family's
productions are tried in a fixed order: Meta, Quote, Search, PotentialUser,
Help. The first production that consumes every token wins.
"""

import logging
from collections.abc import Sequence

from oxbow.exceptions import GrammarError, LexError
from oxbow.parsing.ast import Command, CommandType
from oxbow.parsing.grammar import FAMILIES, Family
from oxbow.parsing.lexer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

# Family a message is aimed at, judged by its leading token
LEADING_TOKEN_FAMILIES = {
    TokenKind.COMMAND: CommandType.META,
    TokenKind.QUOTE: CommandType.QUOTE,
    TokenKind.SEARCH: CommandType.SEARCH,
    TokenKind.LOWER: CommandType.SEARCH,
    TokenKind.UPPER: CommandType.SEARCH,
    TokenKind.FOUND: CommandType.SEARCH,
    TokenKind.WORD: CommandType.POTENTIAL_USER,
    TokenKind.HELP: CommandType.HELP,
}


class CommandParser:
    """Parser for chat commands."""

    def __init__(self, families: Sequence[Family] = FAMILIES):
        """
        Params:
            families: Command families in the order they are tried
        """
        self.families = tuple(families)

    def parse(self, command: str) -> Command:
        """
        Parse a command string into the matching command value.

        Params:
            command: The command text, without the bot prefix

        Returns:
            The command built by the first family that accepts every token

        Raises:
            LexError: If part of the input matches no token pattern
            GrammarError: If no production consumes the whole token sequence
        """
        try:
            tokens = tokenize(command)
        except LexError as e:
            # Everything before the failure lexes, so its leading keyword is known
            leading = tokenize(command[: e.position])
            error = LexError(command, e.position, family=self._aimed_family(leading))
            logger.debug("Rejected command %r: %s", command, error)
            raise error from e
        return self.parse_tokens(tokens, command)

    def parse_tokens(self, tokens: Sequence[Token], source: str) -> Command:
        """
        Dispatch a token sequence to the command families.

        Params:
            tokens: Tokens produced by `tokenize(source)`
            source: The command text, used for error positions

        Returns:
            The command built by the first family that accepts every token

        Raises:
            GrammarError: If no production consumes the whole token sequence
        """
        furthest = 0
        for family in self.families:
            result, reached = family.match(tokens, source)
            if result is not None:
                logger.debug("Parsed %s command: %s", family.command_type.value, result)
                return result
            furthest = max(furthest, reached)

        error = GrammarError(
            source,
            tuple(tokens[furthest:]),
            family=self._aimed_family(tokens),
        )
        logger.debug("Rejected command %r: %s", source, error)
        raise error

    @staticmethod
    def _aimed_family(tokens: Sequence[Token]) -> CommandType | None:
        if not tokens:
            return None
        return LEADING_TOKEN_FAMILIES.get(tokens[0].kind)


def parse_command(command: str) -> Command:
    """
    Convenience function to parse a command string.

    Params:
        command: The command string to parse, without the bot prefix

    Returns:
        Appropriate command value based on the command family

    Raises:
        CommandParseError: If the command is malformed
    """
    parser = CommandParser()
    return parser.parse(command)
