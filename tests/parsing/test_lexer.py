"""
Tests for the command lexer.

This module tests token classification, including:
- Keyword vs bare word disambiguation by maximal munch
- Sigil and quote stripping in token values
- Username length limits
- Lex errors and their positions
"""

from typing import NamedTuple

import pytest

from oxbow.exceptions import LexError
from oxbow.parsing.lexer import Token, TokenKind, tokenize


class LexTestCase(NamedTuple):
    """Test case for tokenization."""

    name: str
    text: str
    kinds: list[TokenKind]
    values: list[str]


VALID_INPUTS = [
    LexTestCase(
        "quote_add",
        'quote @nerosnm "hi hello there"',
        [TokenKind.QUOTE, TokenKind.USERNAME, TokenKind.QUOTED],
        ["quote", "nerosnm", "hi hello there"],
    ),
    LexTestCase(
        "keyword_prefix_is_word",
        "quoted",
        [TokenKind.WORD],
        ["quoted"],
    ),
    LexTestCase(
        "search_prefix_is_word",
        "searching",
        [TokenKind.WORD],
        ["searching"],
    ),
    LexTestCase(
        "all_keywords",
        "quote command search lower upper found help",
        [
            TokenKind.QUOTE,
            TokenKind.COMMAND,
            TokenKind.SEARCH,
            TokenKind.LOWER,
            TokenKind.UPPER,
            TokenKind.FOUND,
            TokenKind.HELP,
        ],
        ["quote", "command", "search", "lower", "upper", "found", "help"],
    ),
    LexTestCase(
        "quoted_then_key_without_space",
        '"some text"#key',
        [TokenKind.QUOTED, TokenKind.KEY],
        ["some text", "key"],
    ),
    LexTestCase(
        "word_then_number_without_space",
        "abc3",
        [TokenKind.WORD, TokenKind.NUMBER],
        ["abc", "3"],
    ),
    LexTestCase(
        "tabs_and_runs_of_spaces",
        "lower\tabc   12",
        [TokenKind.LOWER, TokenKind.WORD, TokenKind.NUMBER],
        ["lower", "abc", "12"],
    ),
    LexTestCase(
        "key_with_dash_and_underscore",
        "#Test-quote_2",
        [TokenKind.KEY],
        ["Test-quote_2"],
    ),
    LexTestCase(
        "quoted_keeps_sigils_and_uppercase",
        "\"I quote @nerosnm as having #said: 'hi'\"",
        [TokenKind.QUOTED],
        ["I quote @nerosnm as having #said: 'hi'"],
    ),
    LexTestCase(
        "shortest_username",
        "@abc",
        [TokenKind.USERNAME],
        ["abc"],
    ),
    LexTestCase(
        "longest_username",
        "@" + "a" * 26,
        [TokenKind.USERNAME],
        ["a" * 26],
    ),
    LexTestCase(
        "overlong_username_splits",
        "@" + "a" * 27,
        [TokenKind.USERNAME, TokenKind.WORD],
        ["a" * 26, "a"],
    ),
    LexTestCase("empty", "", [], []),
    LexTestCase("whitespace_only", "  \t ", [], []),
]


class InvalidLexCase(NamedTuple):
    """Input the lexer must reject, with the offending position."""

    name: str
    text: str
    position: int


INVALID_INPUTS = [
    InvalidLexCase("uppercase_keyword", "Quote", 0),
    InvalidLexCase("short_username", 'quote @ab "x"', 6),
    InvalidLexCase("unterminated_quote", 'quote @name "unterminated', 12),
    InvalidLexCase("empty_quote", 'quote @name ""', 12),
    InvalidLexCase("bare_hash", "quote #", 6),
    InvalidLexCase("username_leading_underscore", "@_abc", 0),
    InvalidLexCase("non_ascii_word", "café", 3),
    InvalidLexCase("negative_number", "lower abc -3", 10),
    InvalidLexCase("punctuation", "help?", 4),
]


class TestTokenize:
    """Test suite for tokenize()."""

    def test_valid_inputs(self):
        """Test kinds and values of all valid inputs."""
        for case in VALID_INPUTS:
            tokens = tokenize(case.text)
            assert [token.kind for token in tokens] == case.kinds, case.name
            assert [token.value for token in tokens] == case.values, case.name

    def test_invalid_inputs(self):
        """Test that unmatched spans raise LexError at the right position."""
        for case in INVALID_INPUTS:
            with pytest.raises(LexError) as exc_info:
                tokenize(case.text)
            assert exc_info.value.position == case.position, case.name

    def test_token_positions(self):
        """Test that tokens record their source span."""
        tokens = tokenize('quote @nerosnm "hi hello there"')
        assert [token.start for token in tokens] == [0, 6, 15]
        assert [token.end for token in tokens] == [5, 14, 31]
        assert tokens[2].text == '"hi hello there"'

    def test_tokens_are_immutable(self):
        """Test that tokens cannot be modified after lexing."""
        token = tokenize("quote")[0]
        with pytest.raises(AttributeError):
            token.text = "help"

    def test_tokens_compare_by_value(self):
        """Test that lexing is deterministic."""
        assert tokenize("lower abc 3") == tokenize("lower abc 3")
        assert tokenize("found")[0] == Token(TokenKind.FOUND, "found", 0)

    def test_lex_error_snippet(self):
        """Test that LexError carries the text at the failure."""
        with pytest.raises(LexError) as exc_info:
            tokenize('quote @ab "x"')
        assert exc_info.value.snippet == '@ab "x"'
        assert exc_info.value.source == 'quote @ab "x"'


class TestTokenKind:
    """Tests for TokenKind."""

    def test_keywords(self):
        """Test keyword classification."""
        assert TokenKind.QUOTE.is_keyword
        assert TokenKind.HELP.is_keyword
        assert not TokenKind.WORD.is_keyword
        assert not TokenKind.QUOTED.is_keyword
