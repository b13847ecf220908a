"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Status bar showing the current directory and history position."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        # Prefixed names: Widget already owns _size and friends
        self._dir_path = ""
        self._stack_cursor = 0
        self._stack_size = 0
        self._status_message: Optional[str] = None
        self._status_error = False

    def set_position(self, path: str, cursor: int, size: int) -> None:
        """Set the current directory and its place in history."""
        self._dir_path = path
        self._stack_cursor = cursor
        self._stack_size = size
        self._update()

    def show_message(self, message: str, error: bool = False) -> None:
        """Show a temporary message."""
        self._status_message = message
        self._status_error = error
        self._update()

    def clear_message(self) -> None:
        """Clear the temporary message."""
        self._status_message = None
        self._status_error = False
        self._update()

    def _update(self) -> None:
        text = Text()
        text.append(f"[{self._stack_cursor + 1}/{self._stack_size}] ", style="bold")
        text.append(self._dir_path, style="bold cyan")
        if self._status_message:
            text.append("  ")
            text.append(
                self._status_message,
                style="bold red" if self._status_error else "italic",
            )
        self.update(text)
