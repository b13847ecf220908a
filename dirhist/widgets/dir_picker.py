"""Directory picker widget for the history chooser."""

from typing import List, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, ListView, ListItem, Static

from dirhist.chooser import Candidate, ChooserOptions, filter_candidates


class DirPicker(Widget):
    """Filterable list of history candidates."""

    DEFAULT_CSS = """
    DirPicker {
        width: 80%;
        height: 20;
        background: $surface;
        border: solid $primary;
        padding: 1;
    }

    DirPicker > .picker-title {
        height: 1;
        text-style: bold;
        color: $primary;
    }

    DirPicker > .picker-input {
        height: 3;
        margin-bottom: 1;
    }

    DirPicker > .picker-list {
        height: 1fr;
    }

    DirPicker > .picker-hint {
        height: 1;
        color: $text-muted;
    }
    """

    class Accepted(Message):
        """Message sent when a candidate is accepted."""

        def __init__(self, candidate: Candidate) -> None:
            self.candidate = candidate
            super().__init__()

    class Cancelled(Message):
        """Message sent when picker is cancelled."""

        pass

    def __init__(
        self,
        candidates: Sequence[Candidate],
        options: ChooserOptions,
        current: str = "",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._candidates: List[Candidate] = list(candidates)
        self._filtered: List[Candidate] = list(candidates)
        self._options = options
        self._current = current

    def compose(self) -> ComposeResult:
        yield Static(self._options.modeline, classes="picker-title")
        yield Input(
            placeholder="Filter...",
            classes="picker-input",
            id="picker-input"
        )
        yield ListView(classes="picker-list", id="picker-list")
        yield Static("Enter=select, Esc=cancel", classes="picker-hint")

    def on_mount(self) -> None:
        """Initialize the picker."""
        self._update_list()
        self.query_one("#picker-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Handle input changes for filtering."""
        self._filtered = filter_candidates(
            self._candidates, event.value, ignore_case=self._options.ignore_case
        )
        self._update_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        self._select_current()

    def on_key(self, event) -> None:
        """Handle key events."""
        key = event.key

        if key == "escape":
            event.stop()
            self.post_message(self.Cancelled())
        elif key == "down":
            event.stop()
            lst = self.query_one("#picker-list", ListView)
            if lst.index is not None and lst.index < len(self._filtered) - 1:
                lst.index += 1
        elif key == "up":
            event.stop()
            lst = self.query_one("#picker-list", ListView)
            if lst.index is not None and lst.index > 0:
                lst.index -= 1

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle list item selection."""
        event.stop()
        self._select_current()

    def _update_list(self) -> None:
        """Rebuild the candidate list."""
        lst = self.query_one("#picker-list", ListView)
        lst.clear()

        for candidate in self._filtered:
            text = Text()
            if candidate.path == self._current:
                text.append("* ", style="bold green")
                path_style = "bold green"
            else:
                text.append("  ")
                path_style = ""
            text.append(f"{candidate.index:>3} ", style="dim")
            text.append(candidate.path, style=path_style)
            lst.append(ListItem(Static(text)))

        if self._filtered:
            # Most recent entries sit at the bottom
            if self._options.keep_selection_at_bottom:
                lst.index = len(self._filtered) - 1
            else:
                lst.index = 0

    def _select_current(self) -> None:
        """Accept the highlighted candidate."""
        lst = self.query_one("#picker-list", ListView)
        if lst.index is not None and lst.index < len(self._filtered):
            self.post_message(self.Accepted(self._filtered[lst.index]))
