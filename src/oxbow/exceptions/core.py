"""
Exception classes for oxbow command parsing.

This module defines specific exception types for the different ways a chat
message can fail to become a command: input the lexer cannot classify, and
token sequences no grammar production accepts.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oxbow.parsing.ast import CommandType
    from oxbow.parsing.lexer import Token

SNIPPET_LENGTH = 12


class ErrorLevel(Enum):
    """Error message detail level for chat replies vs developers."""

    USER = "user"  # One short line, fit for a chat reply
    DEVELOPER = "developer"  # Source line with a caret under the position


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where in a command an error occurred. Supports formatting at
    different detail levels for user-facing replies vs developer debugging.

    Params:
        source: The command text that was being parsed (prefix already stripped)
        position: Character offset of the error within `source`
        snippet: Short excerpt of the input at `position`, if any
    """

    source: str
    position: int
    snippet: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        if self.position >= len(self.source):
            location = "at end of input"
        else:
            location = f"at position {self.position}"
        if self.snippet:
            location += f" near '{self.snippet}'"

        if error_level == ErrorLevel.USER:
            return location

        lines = [f"  {location}", f"  | {self.source}"]
        # Tabs are kept so the caret lines up under tab-expanded source
        padding = "".join(
            char if char == "\t" else " " for char in self.source[: self.position]
        )
        lines.append("  | " + padding + "^")
        return "\n".join(lines)


class OxbowError(Exception):
    """Base exception for all oxbow errors."""

    pass


class CommandParseError(OxbowError):
    """Base exception for messages that cannot be parsed into a command."""

    def __init__(
        self,
        reason: str,
        source: str,
        position: int,
        snippet: str | None = None,
        family: "CommandType | None" = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            reason: What went wrong, without location information
            source: The command text that was being parsed
            position: Character offset of the failure within `source`
            snippet: Short excerpt of the input at `position`
            family: The command family the message was aimed at, if known
            error_level: Level of detail to show in the error message
        """
        self.reason = reason
        self.source = source
        self.position = position
        self.family = family
        self.context = ErrorContext(source=source, position=position, snippet=snippet)
        self.error_level = error_level
        super().__init__(self.describe(error_level))

    def describe(self, error_level: ErrorLevel) -> str:
        """
        Render the error at the given detail level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            The reason followed by its location
        """
        location = self.context.format_location(error_level)
        if error_level == ErrorLevel.USER:
            return f"{self.reason} {location}"
        return f"{self.reason}\n{location}"


class LexError(CommandParseError):
    """Raised when a span of the input matches no token pattern."""

    def __init__(
        self,
        source: str,
        position: int,
        family: "CommandType | None" = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            source: The command text that was being tokenized
            position: Offset of the first character no token pattern accepts
            family: The command family named by the leading keyword, if any
            error_level: Level of detail to show in the error message
        """
        self.snippet = source[position : position + SNIPPET_LENGTH]
        super().__init__(
            "Unrecognized input",
            source,
            position,
            snippet=self.snippet,
            family=family,
            error_level=error_level,
        )


class GrammarError(CommandParseError):
    """Raised when no grammar production fully consumes the token sequence."""

    def __init__(
        self,
        source: str,
        unconsumed: "tuple[Token, ...]",
        family: "CommandType | None" = None,
        reason: str | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            source: The command text that was being parsed
            unconsumed: Tokens from the first one no production could place
            family: The command family the message was aimed at, if known
            reason: Override for the generated reason text
            error_level: Level of detail to show in the error message
        """
        self.unconsumed = tuple(unconsumed)

        if self.unconsumed:
            first = self.unconsumed[0]
            position = first.start
            default_reason = f"Unexpected {first.kind.value} '{first.text}'"
        else:
            position = len(source)
            default_reason = "Incomplete command"

        super().__init__(
            reason or default_reason,
            source,
            position,
            family=family,
            error_level=error_level,
        )


class NumberRangeError(GrammarError):
    """Raised when a number token does not fit an unsigned 64-bit integer."""

    def __init__(
        self,
        source: str,
        token: "Token",
        family: "CommandType | None" = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            source: The command text that was being parsed
            token: The out-of-range number token
            family: The command family the number belongs to
            error_level: Level of detail to show in the error message
        """
        self.token = token
        super().__init__(
            source,
            (token,),
            family=family,
            reason=f"Number {token.text} is too large",
            error_level=error_level,
        )
