"""Tests for the directory history stack."""

import pytest

from dirhist.history import HistoryStack


def make_stack(*paths, max_size=0):
    stack = HistoryStack(max_size=max_size)
    for p in paths:
        stack.push(p)
    return stack


class TestPush:
    """Test recording directories."""

    def test_seeded(self):
        """A seeded stack has one entry and the cursor on it."""
        stack = HistoryStack("/start")
        assert stack.entries == ["/start"]
        assert stack.cursor == 0
        assert stack.current == "/start"

    def test_empty_current(self):
        """An unseeded stack reports an empty current entry."""
        stack = HistoryStack()
        assert stack.size == 0
        assert stack.current == ""

    def test_push_same_is_noop(self):
        """Pushing the current entry changes nothing."""
        stack = make_stack("/a", "/b")
        assert stack.push("/b") is False
        assert stack.size == 2
        assert stack.cursor == 1

    def test_push_grows(self):
        """Pushing a new path adds one entry and moves the cursor to it."""
        stack = make_stack("/a")
        assert stack.push("/b") is True
        assert stack.size == 2
        assert stack.cursor == stack.size - 1
        assert stack.current == "/b"

    def test_non_adjacent_duplicates_kept(self):
        """The same path may appear twice if not consecutive."""
        stack = make_stack("/a", "/b", "/a")
        assert stack.entries == ["/a", "/b", "/a"]

    def test_branch_truncates_forward(self):
        """Pushing from a rewound position discards forward history."""
        stack = make_stack("/a", "/b", "/c", "/d")
        stack.back()
        stack.back()
        assert stack.cursor == 1

        stack.push("/x")
        assert stack.entries == ["/a", "/b", "/x"]
        assert stack.cursor == 2

    def test_push_current_after_back_keeps_forward(self):
        """Re-pushing the entry under the cursor keeps forward history."""
        stack = make_stack("/a", "/b", "/c")
        stack.back()
        stack.push("/b")
        assert stack.entries == ["/a", "/b", "/c"]
        assert stack.cursor == 1

    def test_eviction(self):
        """Oldest entries are dropped beyond max_size."""
        stack = make_stack("/a", "/b", "/c", "/d", max_size=3)
        assert stack.entries == ["/b", "/c", "/d"]
        assert stack.cursor == 2

    def test_unbounded(self):
        """max_size 0 never evicts."""
        stack = make_stack(*[f"/d{i}" for i in range(250)], max_size=0)
        assert stack.size == 250

    def test_trim_forward(self):
        """trim_forward drops everything after the cursor."""
        stack = make_stack("/a", "/b", "/c")
        stack.back()
        stack.back()
        stack.trim_forward()
        assert stack.entries == ["/a"]


class TestNavigation:
    """Test back, forward and pop."""

    def test_back(self):
        """back moves the cursor without dropping entries."""
        stack = make_stack("/a", "/b", "/c")
        assert stack.back() == "/b"
        assert stack.cursor == 1
        assert stack.size == 3

    def test_back_at_start(self):
        """back at the first entry returns None and changes nothing."""
        stack = make_stack("/a", "/b")
        stack.back()
        assert stack.back() is None
        assert stack.cursor == 0
        assert stack.entries == ["/a", "/b"]

    def test_forward_at_end(self):
        """forward at the last entry returns None and changes nothing."""
        stack = make_stack("/a", "/b")
        assert stack.forward() is None
        assert stack.cursor == 1

    @pytest.mark.parametrize("steps", [0, 1, 2, 3])
    def test_back_forward_symmetry(self, steps):
        """n backs followed by n forwards restore the position."""
        stack = make_stack("/a", "/b", "/c", "/d")
        for _ in range(steps):
            stack.back()
        for _ in range(steps):
            stack.forward()
        assert stack.cursor == 3
        assert stack.current == "/d"

    def test_pop_sequence(self):
        """pop walks back while shrinking the stack."""
        stack = make_stack("/a", "/b", "/c")

        assert stack.pop() == "/b"
        assert stack.entries == ["/a", "/b"]
        assert stack.cursor == 1

        assert stack.pop() == "/a"
        assert stack.entries == ["/a"]
        assert stack.cursor == 0

        assert stack.pop() is None
        assert stack.entries == ["/a"]

    def test_pop_from_middle(self):
        """pop from a rewound position also drops the forward entries."""
        stack = make_stack("/a", "/b", "/c", "/d")
        stack.back()
        assert stack.pop() == "/b"
        assert stack.entries == ["/a", "/b"]
        assert stack.cursor == 1

    def test_pop_at_start_does_not_trim(self):
        """pop at cursor 0 leaves forward entries alone."""
        stack = make_stack("/a", "/b", "/c")
        stack.back()
        stack.back()
        assert stack.pop() is None
        assert stack.entries == ["/a", "/b", "/c"]
        assert stack.cursor == 0

    def test_peek(self):
        """peek looks around the cursor without moving it."""
        stack = make_stack("/a", "/b", "/c")
        stack.back()
        assert stack.peek(-1) == "/a"
        assert stack.peek(0) == "/b"
        assert stack.peek(1) == "/c"
        assert stack.peek(2) is None
        assert stack.peek(-2) is None
        assert stack.cursor == 1


class TestListing:
    """Test the read-only listing."""

    def test_marks_cursor(self):
        """listing flags only the entry under the cursor."""
        stack = make_stack("/a", "/b", "/c")
        stack.back()
        assert list(stack.listing()) == [("/a", False), ("/b", True), ("/c", False)]

    def test_entries_is_copy(self):
        """Mutating the returned list does not touch the stack."""
        stack = make_stack("/a")
        stack.entries.append("/z")
        assert stack.entries == ["/a"]
