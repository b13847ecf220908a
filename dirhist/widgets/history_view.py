"""History view widget showing the directory stack."""

from typing import Iterable, List, Tuple

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Static


class HistoryItem(Static):
    """A single directory in the history panel."""

    DEFAULT_CSS = """
    HistoryItem {
        width: 100%;
        padding: 0 1;
        background: $surface;
    }
    """

    def __init__(self, path: str, index: int, is_cursor: bool = False, **kwargs):
        super().__init__("", **kwargs)
        self._dir_path = path
        self._entry_index = index
        self._is_cursor = is_cursor
        self._render_item()

    def _render_item(self) -> None:
        text = Text()
        prefix = "> " if self._is_cursor else "  "
        text.append(prefix, style="bold yellow" if self._is_cursor else "")
        text.append(f"{self._entry_index:>3} ", style="dim")
        text.append(self._dir_path, style="bold cyan" if self._is_cursor else "")
        self.update(text)

    @property
    def is_cursor(self) -> bool:
        return self._is_cursor


class HistoryView(Widget):
    """Panel listing the directory history, cursor marked."""

    DEFAULT_CSS = """
    HistoryView {
        width: 100%;
        height: 1fr;
        background: $surface;
    }

    HistoryView > #history-header {
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }

    HistoryView > #history-scroll {
        height: 1fr;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._items: List[HistoryItem] = []

    def compose(self) -> ComposeResult:
        yield Static("Directory history", id="history-header")
        with VerticalScroll(id="history-scroll"):
            yield Vertical(id="history-content")

    def update_entries(self, listing: Iterable[Tuple[str, bool]]) -> None:
        """Rebuild the panel from (path, is_current) pairs."""
        content = self.query_one("#history-content", Vertical)
        content.remove_children()

        self._items = [
            HistoryItem(path, i, is_cursor=is_current)
            for i, (path, is_current) in enumerate(listing)
        ]
        content.mount_all(self._items)

        header = self.query_one("#history-header", Static)
        header.update(f"Directory history ({len(self._items)})")

        for item in self._items:
            if item.is_cursor:
                item.scroll_visible()
                break
