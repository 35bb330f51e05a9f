"""
oxbow - command grammar for a Twitch chat bot

oxbow turns chat messages such as `!quote @name "text"` into typed command
values for the bot's quote, custom command, word search and help handlers.
"""

from importlib.metadata import version

from oxbow.messages import MessageParser, ParsedMessage
from oxbow.parsing import CommandParser, parse_command
from oxbow.settings import Settings

__version__ = version("oxbow")

__all__ = [
    "__version__",
    "CommandParser",
    "MessageParser",
    "ParsedMessage",
    "Settings",
    "parse_command",
]
