"""
Tests for help text and usage hints.
"""

from oxbow.parsing.ast import CommandType, HelpGeneral, HelpQuote, HelpTopic
from oxbow.usage import help_text, usage, usage_hint


class TestUsageHint:
    """Tests for usage_hint()."""

    def test_quote_forms(self):
        """Test the quote family's usage line."""
        assert usage_hint(CommandType.QUOTE) == (
            '!quote | !quote #<key> | !quote @<user> "<text>" | '
            '!quote @<user> #<key> "<text>" | !quote @<user> "<text>" #<key>'
        )

    def test_prefix(self):
        """Test that the prefix is shown in front of every form."""
        assert usage_hint(CommandType.HELP, prefix="?") == "?help | ?help quote"

    def test_family_without_forms(self):
        """Test that the fallback family and unknown families have no hint."""
        assert usage_hint(CommandType.POTENTIAL_USER) is None
        assert usage_hint(None) is None


class TestHelpText:
    """Tests for help replies."""

    def test_general(self):
        """Test the general help text."""
        assert usage(HelpTopic.GENERAL) == (
            "Commands: !quote, !command, !search, !lower, !upper, !found, !help. "
            "Try !help quote for quote usage."
        )

    def test_help_commands(self):
        """Test that help commands map to their topic's text."""
        assert help_text(HelpGeneral()) == usage(HelpTopic.GENERAL)
        assert help_text(HelpQuote(), prefix="?") == usage(HelpTopic.QUOTE, prefix="?")
        assert help_text(HelpQuote()).startswith("Quotes: !quote")
