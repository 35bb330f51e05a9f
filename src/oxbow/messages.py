"""
Message layer between chat lines and the command parser.

Recognizes lines that start with the bot prefix, parses the rest, and hands
back a result value instead of raising, so a malformed command never
interrupts the bot.
"""

import logging

from attrs import frozen

from oxbow.exceptions import CommandParseError, ErrorLevel
from oxbow.parsing.ast import Command, HelpGeneral, HelpQuote
from oxbow.parsing.parser import CommandParser
from oxbow.settings import Settings
from oxbow.usage import help_text, usage_hint

logger = logging.getLogger(__name__)


@frozen
class ParsedMessage:
    """Outcome of parsing one chat line; exactly one of command/error is set."""

    line: str
    command: Command | None = None
    error: CommandParseError | None = None

    def __attrs_post_init__(self):
        if (self.command is None) == (self.error is None):
            raise ValueError("ParsedMessage needs exactly one of command or error")

    @property
    def ok(self) -> bool:
        return self.error is None


class MessageParser:
    """Parses chat lines that carry the bot prefix."""

    def __init__(
        self, settings: Settings | None = None, parser: CommandParser | None = None
    ):
        self.settings = settings or Settings()
        self.parser = parser or CommandParser()

    def strip_prefix(self, line: str) -> str | None:
        """
        Remove the bot prefix from a chat line.

        Returns:
            The rest of the line, or None if it does not start with the prefix
        """
        if not line.startswith(self.settings.prefix):
            return None
        return line[len(self.settings.prefix) :]

    def parse_message(self, line: str) -> ParsedMessage | None:
        """
        Parse a chat line.

        Params:
            line: The raw chat message

        Returns:
            None if the line is not a command, otherwise the parsed command
            or the parse error
        """
        body = self.strip_prefix(line)
        if body is None:
            return None

        try:
            command = self.parser.parse(body)
        except CommandParseError as e:
            logger.info("Could not parse command %r: %s", line, e.reason)
            return ParsedMessage(line=line, error=e)
        return ParsedMessage(line=line, command=command)

    def reply(self, message: ParsedMessage) -> str | None:
        """
        The reply the bot itself gives to a parsed message.

        Params:
            message: Result of `parse_message`

        Returns:
            Help text for help commands, an error line with a usage hint for
            failures, None for commands handled elsewhere
        """
        prefix = self.settings.prefix
        if message.error is not None:
            text = message.error.describe(self.settings.error_level)
            hint = usage_hint(message.error.family, prefix)
            if hint is None:
                return text
            if self.settings.error_level == ErrorLevel.USER:
                return f"{text}. Usage: {hint}"
            return f"{text}\nUsage: {hint}"

        if isinstance(message.command, (HelpGeneral, HelpQuote)):
            return help_text(message.command, prefix)
        return None
