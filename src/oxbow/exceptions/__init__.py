"""
oxbow exception classes.

This package provides all exception types used by the command parser for
consistent error handling and reporting.
"""

from oxbow.exceptions.core import (
    CommandParseError,
    ErrorContext,
    ErrorLevel,
    GrammarError,
    LexError,
    NumberRangeError,
    OxbowError,
)

__all__ = [
    "OxbowError",
    "CommandParseError",
    "ErrorContext",
    "ErrorLevel",
    "GrammarError",
    "LexError",
    "NumberRangeError",
]
