"""
Lexer for chat commands.

Splits a command string (bot prefix already stripped) into classified tokens.
At every position all token patterns are tried; the longest match wins and
ties go to the pattern declared first. Keywords are declared before bare
words, so `quote` is a keyword while `quoted` is a bare word.
"""

import re
from enum import Enum

from attrs import frozen

from oxbow.exceptions import LexError


class TokenKind(Enum):
    """Kind of lexical token."""

    QUOTE = "quote"
    COMMAND = "command"
    SEARCH = "search"
    LOWER = "lower"
    UPPER = "upper"
    FOUND = "found"
    HELP = "help"
    WORD = "word"
    NUMBER = "number"
    QUOTED = "quoted text"
    KEY = "key"
    USERNAME = "username"

    @property
    def is_keyword(self) -> bool:
        """Check if this kind is one of the fixed keywords."""
        return self in KEYWORDS


KEYWORDS = (
    TokenKind.QUOTE,
    TokenKind.COMMAND,
    TokenKind.SEARCH,
    TokenKind.LOWER,
    TokenKind.UPPER,
    TokenKind.FOUND,
    TokenKind.HELP,
)


@frozen
class Token:
    """A classified span of the input."""

    kind: TokenKind
    text: str  # Source text, including quotes or sigil
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def value(self) -> str:
        """Payload of the token with delimiters and sigils removed."""
        if self.kind is TokenKind.QUOTED:
            return self.text[1:-1]
        if self.kind in (TokenKind.KEY, TokenKind.USERNAME):
            return self.text[1:]
        return self.text


# Declaration order breaks ties between equally long matches.
# A kind of None marks insignificant whitespace.
TOKEN_PATTERNS: tuple[tuple[TokenKind | None, re.Pattern[str]], ...] = (
    *((keyword, re.compile(keyword.value)) for keyword in KEYWORDS),
    (TokenKind.WORD, re.compile(r"[a-z]+")),
    (TokenKind.NUMBER, re.compile(r"[0-9]+")),
    (TokenKind.QUOTED, re.compile(r'"[^"]+"')),
    (TokenKind.KEY, re.compile(r"#[a-zA-Z0-9_-]+")),
    (TokenKind.USERNAME, re.compile(r"@[a-zA-Z0-9][a-zA-Z0-9_]{2,25}")),
    (None, re.compile(r"\s+")),
)


def _longest_match(
    text: str, position: int
) -> tuple[TokenKind | None, re.Match[str] | None]:
    best_kind = None
    best_match = None
    for kind, pattern in TOKEN_PATTERNS:
        match = pattern.match(text, position)
        if match is None:
            continue
        if best_match is None or match.end() > best_match.end():
            best_kind, best_match = kind, match
    return best_kind, best_match


def tokenize(text: str) -> list[Token]:
    """
    Split a command string into tokens.

    Params:
        text: The command text, without the bot prefix

    Returns:
        Tokens in source order, whitespace discarded

    Raises:
        LexError: If some span of the input matches no token pattern
    """
    tokens = []
    position = 0
    while position < len(text):
        kind, match = _longest_match(text, position)
        if match is None:
            raise LexError(text, position)
        if kind is not None:
            tokens.append(Token(kind=kind, text=match.group(), start=position))
        position = match.end()
    return tokens
