"""
Shared test fixtures and utilities for the oxbow test suite.
"""

import pytest

from oxbow.messages import MessageParser
from oxbow.parsing.parser import CommandParser
from oxbow.settings import Settings


@pytest.fixture
def command_parser():
    """A parser with the default family order."""
    return CommandParser()


@pytest.fixture
def message_parser():
    """Message parser with default settings (prefix `!`, user-level errors).

    Usage:
        def test_something(message_parser):
            result = message_parser.parse_message("!quote")
    """
    return MessageParser(Settings())
