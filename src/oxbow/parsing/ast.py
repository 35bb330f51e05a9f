"""
Command values produced by the parser.

Every command is an immutable value that compares by content and renders
back to its canonical command text with `str()`.
"""

from enum import Enum
from typing import ClassVar, TypeAlias

from attrs import frozen


class CommandType(Enum):
    """Command family a parsed command belongs to."""

    META = "meta"
    QUOTE = "quote"
    SEARCH = "search"
    POTENTIAL_USER = "potential_user"
    HELP = "help"


class HelpTopic(Enum):
    """Topic a help command asks about."""

    GENERAL = "general"
    QUOTE = "quote"


def _quoted(text: str) -> str:
    return f'"{text}"'


@frozen
class QuoteAdd:
    """Store a quote said by `username`, optionally retrievable by `key`."""

    username: str
    key: str | None
    text: str

    command_type: ClassVar[CommandType] = CommandType.QUOTE

    def __str__(self) -> str:
        parts = ["quote", f"@{self.username}"]
        if self.key is not None:
            parts.append(f"#{self.key}")
        parts.append(_quoted(self.text))
        return " ".join(parts)


@frozen
class QuoteGet:
    """Fetch the quote stored under `key`."""

    key: str

    command_type: ClassVar[CommandType] = CommandType.QUOTE

    def __str__(self) -> str:
        return f"quote #{self.key}"


@frozen
class QuoteRandom:
    """Fetch a random quote."""

    command_type: ClassVar[CommandType] = CommandType.QUOTE

    def __str__(self) -> str:
        return "quote"


@frozen
class MetaCommand:
    """Define or update the custom command `trigger`."""

    trigger: str
    response: str

    command_type: ClassVar[CommandType] = CommandType.META

    def __str__(self) -> str:
        return f"command {self.trigger} {_quoted(self.response)}"


@frozen
class SearchStart:
    """Start a word search, or report the one in progress."""

    command_type: ClassVar[CommandType] = CommandType.SEARCH

    def __str__(self) -> str:
        return "search"


@frozen
class SearchLower:
    """The hidden word sorts after `word`."""

    word: str
    distance: int | None = None  # None lets the word search pick its default

    command_type: ClassVar[CommandType] = CommandType.SEARCH

    def __str__(self) -> str:
        if self.distance is None:
            return f"lower {self.word}"
        return f"lower {self.word} {self.distance}"


@frozen
class SearchUpper:
    """The hidden word sorts before `word`."""

    word: str
    distance: int | None = None

    command_type: ClassVar[CommandType] = CommandType.SEARCH

    def __str__(self) -> str:
        if self.distance is None:
            return f"upper {self.word}"
        return f"upper {self.word} {self.distance}"


@frozen
class SearchFound:
    """The hidden word was found; stop the search."""

    command_type: ClassVar[CommandType] = CommandType.SEARCH

    def __str__(self) -> str:
        return "found"


@frozen
class PotentialUser:
    """
    A single unrecognized word.

    Possibly the trigger of a custom command; whether it exists is up to the
    command store.
    """

    trigger: str

    command_type: ClassVar[CommandType] = CommandType.POTENTIAL_USER

    def __str__(self) -> str:
        return self.trigger


@frozen
class HelpGeneral:
    command_type: ClassVar[CommandType] = CommandType.HELP
    topic: ClassVar[HelpTopic] = HelpTopic.GENERAL

    def __str__(self) -> str:
        return "help"


@frozen
class HelpQuote:
    command_type: ClassVar[CommandType] = CommandType.HELP
    topic: ClassVar[HelpTopic] = HelpTopic.QUOTE

    def __str__(self) -> str:
        return "help quote"


Quote: TypeAlias = QuoteAdd | QuoteGet | QuoteRandom
Search: TypeAlias = SearchStart | SearchLower | SearchUpper | SearchFound
Help: TypeAlias = HelpGeneral | HelpQuote
Command: TypeAlias = MetaCommand | Quote | Search | PotentialUser | Help
