"""Tests for the history chooser."""

import pytest

from dirhist.chooser import (
    Candidate,
    ChooserOptions,
    HistoryChooser,
    filter_candidates,
)
from dirhist.session import DirSession


class FakeList:
    """Selectable list that records what it was given."""

    def __init__(self):
        self.candidates = None
        self.on_accept = None
        self.options = None

    def show(self, candidates, on_accept, options):
        self.candidates = list(candidates)
        self.on_accept = on_accept
        self.options = options


@pytest.fixture
def session(fs):
    s = DirSession(chdir=fs.chdir, getcwd=fs.getcwd)
    s.cd("/b")
    s.cd("/c")
    return s


class TestCandidates:
    """Test candidate building."""

    def test_order(self, session):
        """Candidates follow history order, oldest first."""
        chooser = HistoryChooser(session)
        assert chooser.build_candidates() == [
            Candidate(0, "/a"),
            Candidate(1, "/b"),
            Candidate(2, "/c"),
        ]

    def test_order_ignores_cursor(self, session):
        """Candidate order does not depend on the cursor."""
        session.back()
        session.back()
        chooser = HistoryChooser(session)
        assert [c.path for c in chooser.build_candidates()] == ["/a", "/b", "/c"]

    def test_texts(self):
        """Display and filter text prefix the path with its index."""
        c = Candidate(3, "/usr/lib")
        assert c.content == "/usr/lib"
        assert c.display_text == "3 /usr/lib"
        assert c.filter_text == "3 /usr/lib"


class TestFilter:
    """Test candidate filtering."""

    CANDIDATES = [
        Candidate(0, "/home/me/Projects"),
        Candidate(1, "/usr/lib"),
        Candidate(2, "/home/me/projects/dirhist"),
    ]

    def test_empty_query(self):
        """A blank query keeps every candidate."""
        assert filter_candidates(self.CANDIDATES, "  ") == self.CANDIDATES

    def test_ignore_case(self):
        """Matching ignores case by default."""
        result = filter_candidates(self.CANDIDATES, "PROJECTS")
        assert [c.index for c in result] == [0, 2]

    def test_case_sensitive(self):
        """Case-sensitive matching can be requested."""
        result = filter_candidates(self.CANDIDATES, "Projects", ignore_case=False)
        assert [c.index for c in result] == [0]

    def test_all_words_must_match(self):
        """Every query word must match."""
        result = filter_candidates(self.CANDIDATES, "home dirhist")
        assert [c.index for c in result] == [2]

    def test_index_is_filterable(self):
        """The index prefix can be matched."""
        result = filter_candidates(self.CANDIDATES, "1 ")
        assert [c.index for c in result] == [1]


class TestRun:
    """Test the chooser protocol."""

    def test_shows_candidates_and_options(self, session):
        """run passes all candidates and the options to the list."""
        options = ChooserOptions(modeline="Pick ", ignore_case=False)
        chooser = HistoryChooser(session, options)
        ui = FakeList()

        chooser.run(ui)

        assert [c.path for c in ui.candidates] == ["/a", "/b", "/c"]
        assert ui.options is options

    def test_accept_navigates(self, session):
        """Accepting an entry changes to it and records it."""
        chooser = HistoryChooser(session)
        ui = FakeList()
        chooser.run(ui)

        ui.on_accept("/a")

        assert session.curdir() == "/a"
        assert session.entries() == ["/a", "/b", "/c", "/a"]
        assert chooser.last_result.success

    def test_accept_current_is_noop(self, session):
        """Accepting the current directory adds nothing."""
        chooser = HistoryChooser(session)
        ui = FakeList()
        chooser.run(ui)
        ui.on_accept("/c")
        assert session.stacksize() == 3

    def test_hooks_order(self, session):
        """before hooks run on show, after hooks once the cd is done."""
        chooser = HistoryChooser(session)
        calls = []
        chooser.before.append(lambda: calls.append("before"))
        chooser.after.append(lambda: calls.append(("after", session.curdir())))
        ui = FakeList()

        chooser.run(ui)
        assert calls == ["before"]

        ui.on_accept("/b")
        assert calls == ["before", ("after", "/b")]

    def test_cancel_skips_after_hooks(self, session):
        """Without an accept, after hooks never run."""
        chooser = HistoryChooser(session)
        calls = []
        chooser.after.append(lambda: calls.append("after"))
        chooser.run(FakeList())
        assert calls == []
        assert session.stacksize() == 3

    def test_before_failure_aborts(self, session):
        """A failing before hook stops the chooser from showing."""
        chooser = HistoryChooser(session)

        def boom():
            raise RuntimeError("boom")

        chooser.before.append(boom)
        ui = FakeList()
        with pytest.raises(RuntimeError):
            chooser.run(ui)
        assert ui.candidates is None

    def test_after_failure_propagates(self, session):
        """A failing after hook propagates once the cd is done."""
        chooser = HistoryChooser(session)

        def boom():
            raise ValueError("after")

        chooser.after.append(boom)
        ui = FakeList()
        chooser.run(ui)
        with pytest.raises(ValueError):
            ui.on_accept("/a")
        assert session.curdir() == "/a"

    def test_accept_vanished_dir(self, session):
        """A directory that cannot be entered is reported, not raised."""
        chooser = HistoryChooser(session)
        ui = FakeList()
        chooser.run(ui)
        ui.on_accept("/gone")
        assert not chooser.last_result.success
        assert session.curdir() == "/c"
