"""
Usage text for help replies and usage hints after failed parses.
"""

from oxbow.parsing.ast import CommandType, Help, HelpTopic

USAGE_LINES: dict[CommandType, tuple[str, ...]] = {
    CommandType.META: ('command <trigger> "<response>"',),
    CommandType.QUOTE: (
        "quote",
        "quote #<key>",
        'quote @<user> "<text>"',
        'quote @<user> #<key> "<text>"',
        'quote @<user> "<text>" #<key>',
    ),
    CommandType.SEARCH: (
        "search",
        "lower <word> [distance]",
        "upper <word> [distance]",
        "found",
    ),
    CommandType.HELP: ("help", "help quote"),
}

COMMAND_NAMES = ("quote", "command", "search", "lower", "upper", "found", "help")


def usage_hint(family: CommandType | None, prefix: str = "!") -> str | None:
    """
    One-line usage of a command family.

    Params:
        family: The family a failed command was aimed at
        prefix: Bot prefix to show in front of each form

    Returns:
        The family's command forms joined by " | ", or None if the family has
        no fixed forms
    """
    if family not in USAGE_LINES:
        return None
    return " | ".join(f"{prefix}{line}" for line in USAGE_LINES[family])


def usage(topic: HelpTopic, prefix: str = "!") -> str:
    """
    Help text for a help topic.

    Params:
        topic: What the help command asked about
        prefix: Bot prefix to show in front of each command

    Returns:
        A single-line help reply
    """
    if topic is HelpTopic.QUOTE:
        return f"Quotes: {usage_hint(CommandType.QUOTE, prefix)}"

    names = ", ".join(f"{prefix}{name}" for name in COMMAND_NAMES)
    return f"Commands: {names}. Try {prefix}help quote for quote usage."


def help_text(command: Help, prefix: str = "!") -> str:
    """Reply for a parsed help command."""
    return usage(command.topic, prefix)
