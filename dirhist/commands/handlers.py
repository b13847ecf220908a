"""Command handlers for the directory prompt."""

from dataclasses import dataclass

from dirhist.commands.parser import ParsedCommand
from dirhist.hooks import EditorHooks
from dirhist.session import DirSession, NavResult


HELP_TEXT = """
Commands:
  cd [dir|-]     - Change directory (- = previous in history)
  cdb <path>     - Change to the directory containing path
  back, b        - Previous directory in history
  forward, f     - Next directory in history
  pop, p         - Go back and drop the current directory
  push           - Record the working directory
  chooser, ch    - Pick a directory from history
  history, h     - Show history (> marks the cursor)
  stack          - List history entries
  stacksize      - Number of history entries
  curdir, pwd    - Current history entry
  setup          - Record directory before every prompt
  quit, q        - Quit

Keys:
  alt+left/right - Word left/right, or back/forward on an empty line
  ctrl+r         - Directory chooser
"""


@dataclass
class CommandResult:
    """Result of command execution."""

    success: bool
    message: str = ""
    action: str = ""  # Special action to take: "quit", "chooser"

    @classmethod
    def from_nav(cls, result: NavResult) -> "CommandResult":
        return cls(success=result.success, message=result.message)


class CommandHandler:
    """Handles command execution."""

    def __init__(self, session: DirSession, editor_hooks: EditorHooks) -> None:
        self.session = session
        self.editor_hooks = editor_hooks

    def execute(self, cmd: ParsedCommand) -> CommandResult:
        """Execute a parsed command.

        Hook exceptions raised while changing directory propagate.
        """
        if not cmd.name:
            return CommandResult(success=False, message="No command")

        handler_name = f"_cmd_{cmd.name.replace('-', '_')}"
        handler = getattr(self, handler_name, None)

        if handler:
            return handler(cmd)
        else:
            return CommandResult(
                success=False,
                message=f"Unknown command: {cmd.name}"
            )

    def _cmd_quit(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, action="quit")

    def _cmd_help(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, message=HELP_TEXT)

    def _cmd_cd(self, cmd: ParsedCommand) -> CommandResult:
        """Handle cd command."""
        return CommandResult.from_nav(self.session.cd(*cmd.args))

    def _cmd_cdb(self, cmd: ParsedCommand) -> CommandResult:
        """Handle cdb command."""
        if len(cmd.args) != 1:
            return CommandResult(success=False, message="Usage: cdb <path>")
        return CommandResult.from_nav(self.session.cd_to_base_of(cmd.first_arg))

    def _cmd_back(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult.from_nav(self.session.back())

    def _cmd_forward(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult.from_nav(self.session.forward())

    def _cmd_pop(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult.from_nav(self.session.pop())

    def _cmd_push(self, cmd: ParsedCommand) -> CommandResult:
        """Handle push command."""
        if self.session.push():
            return CommandResult(success=True, message=f"Recorded {self.session.curdir()}")
        return CommandResult(success=True, message="Already current")

    def _cmd_chooser(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, action="chooser")

    def _cmd_history(self, cmd: ParsedCommand) -> CommandResult:
        """Handle history command."""
        lines = []
        for path, is_current in self.session.history():
            lines.append(("> " if is_current else "  ") + path)
        return CommandResult(success=True, message="\n".join(lines))

    def _cmd_stack(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, message="\n".join(self.session.entries()))

    def _cmd_stacksize(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, message=str(self.session.stacksize()))

    def _cmd_curdir(self, cmd: ParsedCommand) -> CommandResult:
        return CommandResult(success=True, message=self.session.curdir())

    def _cmd_setup(self, cmd: ParsedCommand) -> CommandResult:
        """Handle setup command."""
        if self.session.setup(self.editor_hooks):
            return CommandResult(success=True, message="Directory tracking enabled")
        return CommandResult(success=True, message="Directory tracking already enabled")
