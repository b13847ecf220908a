"""Command parser for the directory prompt."""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ParsedCommand:
    """A parsed command with name and arguments."""

    name: str
    args: List[str] = field(default_factory=list)
    raw: str = ""

    @property
    def first_arg(self) -> str:
        """Get the first argument or empty string."""
        return self.args[0] if self.args else ""


# Command aliases
COMMAND_ALIASES: Dict[str, str] = {
    "q": "quit",
    "h": "history",
    "b": "back",
    "f": "forward",
    "p": "pop",
    "ch": "chooser",
    "pwd": "curdir",
    "cd-base": "cdb",
}


def parse_command(command_str: str) -> ParsedCommand:
    """Parse a command string into a ParsedCommand.

    Supports:
    - Simple commands: back, stack
    - Commands with args: cd /tmp, cd -
    - Quoted args: cd "My Documents"

    Args:
        command_str: Raw command string

    Returns:
        ParsedCommand instance
    """
    command_str = command_str.strip()
    if not command_str:
        return ParsedCommand(name="", raw=command_str)

    try:
        tokens = shlex.split(command_str)
    except ValueError:
        # Fallback for unbalanced quotes
        tokens = command_str.split()

    if not tokens:
        return ParsedCommand(name="", raw=command_str)

    name = tokens[0].lower()
    name = COMMAND_ALIASES.get(name, name)

    return ParsedCommand(name=name, args=tokens[1:], raw=command_str)


def get_command_names() -> List[str]:
    """Get list of available command names.

    Returns:
        List of command names for completion
    """
    return [
        "back",
        "cd",
        "cdb",
        "chooser",
        "curdir",
        "forward",
        "help",
        "history",
        "pop",
        "push",
        "quit",
        "setup",
        "stack",
        "stacksize",
    ]
