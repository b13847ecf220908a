"""Directory history stack (browser-style back / forward)."""

from typing import Iterator, List, Optional, Tuple

DEFAULT_MAX_SIZE = 100


class HistoryStack:
    """Visited directories with a movable cursor.

    The cursor marks the directory considered current for navigation.
    Pushing a new directory from a rewound position discards the forward
    history, the same way a browser does.
    """

    def __init__(self, initial: Optional[str] = None, max_size: int = DEFAULT_MAX_SIZE) -> None:
        self._entries: List[str] = []
        self._cursor: int = 0
        self.max_size = max_size  # 0 means unbounded
        if initial is not None:
            self.push(initial)

    def push(self, path: str) -> bool:
        """Record path as the current directory.

        Returns False when path is already current (nothing changes).
        """
        if self._entries and self._entries[self._cursor] == path:
            return False

        self.trim_forward()
        self._entries.append(path)

        if self.max_size > 0 and len(self._entries) > self.max_size:
            self._entries = self._entries[-self.max_size :]

        self._cursor = len(self._entries) - 1
        return True

    def trim_forward(self) -> None:
        """Discard every entry after the cursor."""
        if self._entries:
            del self._entries[self._cursor + 1 :]

    def back(self) -> Optional[str]:
        """Move one step back. Returns None at the beginning of history."""
        if self._cursor <= 0:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def forward(self) -> Optional[str]:
        """Move one step forward. Returns None at the end of history."""
        if self._cursor >= len(self._entries) - 1:
            return None
        self._cursor += 1
        return self._entries[self._cursor]

    def pop(self) -> Optional[str]:
        """Step back and drop the position we came from.

        Returns the new current entry, or None when there is nothing to pop.
        """
        if self.back() is None:
            return None
        self.trim_forward()
        return self._entries[self._cursor]

    def peek(self, offset: int) -> Optional[str]:
        """Entry at cursor + offset, without moving the cursor."""
        index = self._cursor + offset
        if not self._entries or index < 0 or index >= len(self._entries):
            return None
        return self._entries[index]

    def listing(self) -> Iterator[Tuple[str, bool]]:
        """Yield (path, is_current) for every entry, oldest first."""
        for i, path in enumerate(self._entries):
            yield path, i == self._cursor

    @property
    def current(self) -> str:
        """Entry at the cursor, or "" when the stack is empty."""
        if not self._entries:
            return ""
        return self._entries[self._cursor]

    @property
    def entries(self) -> List[str]:
        """Return a copy of all entries."""
        return self._entries.copy()

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
