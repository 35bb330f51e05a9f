"""
Grammar productions for each command family.

A production is an ordered sequence of token kinds, some of them optional,
plus a builder that turns the matched tokens into a command. A production
only matches when it consumes every token. Families hold their productions
in the order they are tried.
"""

from collections.abc import Callable, Sequence

from attrs import field, frozen

from oxbow.exceptions import NumberRangeError
from oxbow.parsing.ast import (
    Command,
    CommandType,
    HelpGeneral,
    HelpQuote,
    MetaCommand,
    PotentialUser,
    QuoteAdd,
    QuoteGet,
    QuoteRandom,
    SearchFound,
    SearchLower,
    SearchStart,
    SearchUpper,
)
from oxbow.parsing.lexer import Token, TokenKind

MAX_NUMBER = 2**64 - 1


@frozen
class Symbol:
    """One position of a production."""

    kind: TokenKind
    optional: bool = False


def optional(kind: TokenKind) -> Symbol:
    """Mark a token kind as optional within a production."""
    return Symbol(kind, optional=True)


def _as_symbol(item: TokenKind | Symbol) -> Symbol:
    return item if isinstance(item, Symbol) else Symbol(item)


def _symbols(items: Sequence[TokenKind | Symbol]) -> tuple[Symbol, ...]:
    return tuple(_as_symbol(item) for item in items)


MatchResult = tuple[list[Token | None] | None, int]


@frozen
class Production:
    """
    An ordered sequence of symbols and the builder for its command.

    The builder receives one argument per non-keyword symbol, in order. An
    absent optional symbol is passed as None; numbers are passed as int.
    """

    symbols: tuple[Symbol, ...] = field(converter=_symbols)
    build: Callable[..., Command]

    def match(self, tokens: Sequence[Token]) -> MatchResult:
        """
        Match the whole token sequence against this production.

        Params:
            tokens: Tokens of one command

        Returns:
            The tokens bound to each symbol (None for skipped optionals), or
            None if there is no full match, paired with the index of the
            furthest token the production could not place
        """
        return self._match_from(tokens, 0, 0)

    def _match_from(
        self, tokens: Sequence[Token], symbol_index: int, token_index: int
    ) -> MatchResult:
        if symbol_index == len(self.symbols):
            if token_index == len(tokens):
                return [], token_index
            return None, token_index

        symbol = self.symbols[symbol_index]
        furthest = token_index

        # Optional symbols are taken greedily, then skipped if that fails
        if token_index < len(tokens) and tokens[token_index].kind is symbol.kind:
            rest, reached = self._match_from(tokens, symbol_index + 1, token_index + 1)
            if rest is not None:
                return [tokens[token_index], *rest], reached
            furthest = max(furthest, reached)

        if symbol.optional:
            rest, reached = self._match_from(tokens, symbol_index + 1, token_index)
            if rest is not None:
                return [None, *rest], reached
            furthest = max(furthest, reached)

        return None, furthest

    def apply(
        self, bound: list[Token | None], source: str, family: CommandType
    ) -> Command:
        """
        Build the command from the tokens bound by `match`.

        Raises:
            NumberRangeError: If a number does not fit an unsigned 64-bit integer
        """
        arguments = [
            _token_value(token, source, family)
            for symbol, token in zip(self.symbols, bound)
            if not symbol.kind.is_keyword
        ]
        return self.build(*arguments)


def _token_value(token: Token | None, source: str, family: CommandType):
    if token is None:
        return None
    if token.kind is TokenKind.NUMBER:
        number = int(token.value)
        if number > MAX_NUMBER:
            raise NumberRangeError(source, token, family=family)
        return number
    return token.value


@frozen
class Family:
    """The productions of one command family, in the order they are tried."""

    command_type: CommandType
    productions: tuple[Production, ...]

    def match(self, tokens: Sequence[Token], source: str) -> tuple[Command | None, int]:
        """
        Try each production in order.

        Params:
            tokens: Tokens of one command
            source: The command text the tokens came from

        Returns:
            The command built by the first fully matching production, or
            None, paired with the furthest token index reached
        """
        furthest = 0
        for production in self.productions:
            bound, reached = production.match(tokens)
            if bound is not None:
                return production.apply(bound, source, self.command_type), reached
            furthest = max(furthest, reached)
        return None, furthest


META = Family(
    CommandType.META,
    (
        Production(
            (TokenKind.COMMAND, TokenKind.WORD, TokenKind.QUOTED),
            lambda trigger, response: MetaCommand(trigger=trigger, response=response),
        ),
    ),
)

# Both key positions are spelled out; a quote key may come before or after
# the quoted text.
QUOTE = Family(
    CommandType.QUOTE,
    (
        Production(
            (
                TokenKind.QUOTE,
                TokenKind.USERNAME,
                optional(TokenKind.KEY),
                TokenKind.QUOTED,
            ),
            lambda username, key, text: QuoteAdd(username=username, key=key, text=text),
        ),
        Production(
            (TokenKind.QUOTE, TokenKind.USERNAME, TokenKind.QUOTED, TokenKind.KEY),
            lambda username, text, key: QuoteAdd(username=username, key=key, text=text),
        ),
        Production((TokenKind.QUOTE, TokenKind.KEY), lambda key: QuoteGet(key=key)),
        Production((TokenKind.QUOTE,), QuoteRandom),
    ),
)

SEARCH = Family(
    CommandType.SEARCH,
    (
        Production((TokenKind.SEARCH,), SearchStart),
        Production(
            (TokenKind.LOWER, TokenKind.WORD, optional(TokenKind.NUMBER)),
            lambda word, distance: SearchLower(word=word, distance=distance),
        ),
        Production(
            (TokenKind.UPPER, TokenKind.WORD, optional(TokenKind.NUMBER)),
            lambda word, distance: SearchUpper(word=word, distance=distance),
        ),
        Production((TokenKind.FOUND,), SearchFound),
    ),
)

POTENTIAL_USER = Family(
    CommandType.POTENTIAL_USER,
    (Production((TokenKind.WORD,), lambda trigger: PotentialUser(trigger=trigger)),),
)

HELP = Family(
    CommandType.HELP,
    (
        Production((TokenKind.HELP,), HelpGeneral),
        Production((TokenKind.HELP, TokenKind.QUOTE), HelpQuote),
    ),
)

# Precedence order used by the dispatcher
FAMILIES: tuple[Family, ...] = (META, QUOTE, SEARCH, POTENTIAL_USER, HELP)
