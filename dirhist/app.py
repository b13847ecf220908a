"""Main Textual application for dirhist."""

import logging
from typing import Callable, Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header

from dirhist.chooser import Candidate, ChooserOptions, HistoryChooser
from dirhist.commands import CommandHandler, CommandResult, parse_command
from dirhist.commands.parser import get_command_names
from dirhist.config import Config, get_config
from dirhist.hooks import EditorHooks
from dirhist.session import DirSession, NavResult
from dirhist.widgets import CommandInput, DirPicker, HistoryView, StatusBar

logger = logging.getLogger(__name__)


class DirHistApp(App):
    """Directory navigation shell with back/forward history."""

    TITLE = "dirhist"
    AUTO_FOCUS = "#cmd-input"

    BINDINGS = [
        Binding("ctrl+r", "chooser", "Dir history", priority=True),
        Binding("alt+left", "left_word_or_back", "Back", show=False, priority=True),
        Binding("alt+right", "right_word_or_forward", "Forward", show=False, priority=True),
    ]

    def __init__(self, config: Optional[Config] = None) -> None:
        super().__init__()
        self._config = config or get_config()

        self.session = DirSession(
            max_size=self._config.max_stack_size,
            start_dir=self._config.start_dir,
        )
        self.editor_hooks = EditorHooks()
        self.chooser = HistoryChooser(
            self.session,
            ChooserOptions(
                modeline=self._config.chooser_modeline,
                ignore_case=self._config.chooser_ignore_case,
                keep_selection_at_bottom=self._config.chooser_keep_bottom,
            ),
        )
        self._command_handler = CommandHandler(self.session, self.editor_hooks)
        self._pending_accept: Optional[Callable[[str], None]] = None

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        yield HistoryView(id="history-view")
        yield CommandInput(commands=get_command_names(), id="command-input")
        yield StatusBar(id="status-bar")

    def on_mount(self) -> None:
        """Register directory tracking and show the first prompt."""
        self.session.setup(self.editor_hooks)
        self._prompt_cycle()

    # ==================== Selectable list ====================

    def show(
        self,
        candidates: Sequence[Candidate],
        on_accept: Callable[[str], None],
        options: ChooserOptions,
    ) -> None:
        """Mount a picker; on_accept fires only if the user commits."""
        self._close_picker()
        self._pending_accept = on_accept
        self.mount(
            DirPicker(candidates, options, current=self.session.curdir()),
            before="#command-input",
        )

    def on_dir_picker_accepted(self, event: DirPicker.Accepted) -> None:
        accept = self._pending_accept
        self._close_picker()
        if accept is not None:
            if self._guarded(lambda: accept(event.candidate.content)):
                if self.chooser.last_result is not None:
                    self._show_nav(self.chooser.last_result)
            self._prompt_cycle()
        # The removed picker is still in the DOM until the next refresh
        self.query_one("#command-input", CommandInput).focus()

    def on_dir_picker_cancelled(self, event: DirPicker.Cancelled) -> None:
        self._close_picker()
        self.query_one("#command-input", CommandInput).focus()

    def _close_picker(self) -> None:
        self._pending_accept = None
        for picker in self.query(DirPicker):
            picker.remove()

    # ==================== Actions ====================

    def action_chooser(self) -> None:
        """Open the directory history chooser."""
        self._guarded(lambda: self.chooser.run(self))

    def action_left_word_or_back(self) -> None:
        """Move a word left, or go back in history on an empty line."""
        command_input = self.query_one("#command-input", CommandInput)
        if command_input.value:
            command_input.input_widget.action_cursor_left_word()
            return
        self._show_nav(self.session.back())
        self._refresh()

    def action_right_word_or_forward(self) -> None:
        """Move a word right, or go forward in history on an empty line."""
        command_input = self.query_one("#command-input", CommandInput)
        if command_input.value:
            command_input.input_widget.action_cursor_right_word()
            return
        self._show_nav(self.session.forward())
        self._refresh()

    # ==================== Command handling ====================

    def on_command_input_command_submitted(
        self, event: CommandInput.CommandSubmitted
    ) -> None:
        """Handle submitted command."""
        self._guarded(self.editor_hooks.after_readline.run)

        if event.command:
            try:
                result = self._command_handler.execute(parse_command(event.command))
            except Exception as e:
                self._report_error(e)
            else:
                if result.action == "quit":
                    self.exit()
                    return
                self._handle_command_result(result)

        self._prompt_cycle()

    def _handle_command_result(self, result: CommandResult) -> None:
        """Act on a command result."""
        status = self.query_one("#status-bar", StatusBar)

        if result.action == "chooser":
            self.action_chooser()
            return

        if "\n" in result.message.strip():
            self.notify(result.message, timeout=15)
            status.clear_message()
        elif result.message:
            status.show_message(result.message, error=not result.success)
        else:
            status.clear_message()

    def _show_nav(self, result: NavResult) -> None:
        status = self.query_one("#status-bar", StatusBar)
        if result.success:
            status.clear_message()
        else:
            status.show_message(result.message, error=True)

    def _prompt_cycle(self) -> None:
        """Run before-readline hooks and redraw for the next prompt."""
        self._guarded(self.editor_hooks.before_readline.run)
        self._refresh()
        if not self.query(DirPicker):
            self.query_one("#command-input", CommandInput).focus()

    def _guarded(self, func: Callable[[], object]) -> bool:
        """Run func, reporting hook failures instead of crashing the UI."""
        try:
            func()
        except Exception as e:
            self._report_error(e)
            return False
        return True

    def _report_error(self, error: Exception) -> None:
        logger.exception("hook failed")
        self.notify(f"{type(error).__name__}: {error}", title="Hook error", severity="error")

    def _refresh(self) -> None:
        """Update history panel, status bar and subtitle."""
        stack = self.session.stack
        self.sub_title = stack.current
        self.query_one("#history-view", HistoryView).update_entries(stack.listing())
        self.query_one("#status-bar", StatusBar).set_position(
            stack.current, stack.cursor, stack.size
        )
