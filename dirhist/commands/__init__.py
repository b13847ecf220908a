"""Command parsing and handling for dirhist."""

from dirhist.commands.parser import parse_command, ParsedCommand
from dirhist.commands.handlers import CommandHandler, CommandResult

__all__ = ["parse_command", "ParsedCommand", "CommandHandler", "CommandResult"]
