"""
oxbow command parsing components.

This package provides the lexer, the command values, the grammar productions
and the dispatcher that turns a command string into a command value.
"""

from oxbow.parsing.ast import (
    Command,
    CommandType,
    Help,
    HelpGeneral,
    HelpQuote,
    HelpTopic,
    MetaCommand,
    PotentialUser,
    Quote,
    QuoteAdd,
    QuoteGet,
    QuoteRandom,
    Search,
    SearchFound,
    SearchLower,
    SearchStart,
    SearchUpper,
)
from oxbow.parsing.grammar import FAMILIES, Family, Production
from oxbow.parsing.lexer import Token, TokenKind, tokenize
from oxbow.parsing.parser import CommandParser, parse_command

__all__ = [
    "Command",
    "CommandParser",
    "CommandType",
    "FAMILIES",
    "Family",
    "Help",
    "HelpGeneral",
    "HelpQuote",
    "HelpTopic",
    "MetaCommand",
    "PotentialUser",
    "Production",
    "Quote",
    "QuoteAdd",
    "QuoteGet",
    "QuoteRandom",
    "Search",
    "SearchFound",
    "SearchLower",
    "SearchStart",
    "SearchUpper",
    "Token",
    "TokenKind",
    "parse_command",
    "tokenize",
]
