"""Interactive history chooser.

The chooser does not draw anything itself. It turns the history stack into
candidates, hands them to a :class:`SelectableList` implementation and
navigates when that list reports an accepted entry.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence

from dirhist.hooks import HookList
from dirhist.session import DirSession, NavResult


@dataclass(frozen=True)
class Candidate:
    """A selectable history entry."""

    index: int
    path: str

    @property
    def content(self) -> str:
        return self.path

    @property
    def display_text(self) -> str:
        return f"{self.index} {self.path}"

    @property
    def filter_text(self) -> str:
        return f"{self.index} {self.path}"


@dataclass
class ChooserOptions:
    """Presentation options passed through to the list."""

    modeline: str = "Dir history "
    ignore_case: bool = True
    keep_selection_at_bottom: bool = True


class SelectableList(Protocol):
    """A filterable list that calls on_accept at most once."""

    def show(
        self,
        candidates: Sequence[Candidate],
        on_accept: Callable[[str], None],
        options: ChooserOptions,
    ) -> None: ...


def filter_candidates(
    candidates: Sequence[Candidate], query: str, ignore_case: bool = True
) -> List[Candidate]:
    """Keep candidates whose filter text contains every word of query."""
    words = query.split()
    if not words:
        return list(candidates)
    if ignore_case:
        words = [w.lower() for w in words]

    result = []
    for candidate in candidates:
        text = candidate.filter_text.lower() if ignore_case else candidate.filter_text
        if all(w in text for w in words):
            result.append(candidate)
    return result


class HistoryChooser:
    """Pick any directory from the session history."""

    def __init__(self, session: DirSession, options: Optional[ChooserOptions] = None) -> None:
        self.session = session
        self.options = options or ChooserOptions()
        self.before = HookList()
        self.after = HookList()
        self.last_result: Optional[NavResult] = None

    def build_candidates(self) -> List[Candidate]:
        return [Candidate(i, path) for i, path in enumerate(self.session.entries())]

    def on_select(self, candidate: Candidate) -> NavResult:
        self.last_result = self.session.cd(candidate.path)
        return self.last_result

    def run(self, ui: SelectableList) -> None:
        """Show the chooser on ui.

        Before hooks run first; after hooks run only once a selection
        has been committed.
        """
        self.last_result = None
        self.before.run()
        candidates = self.build_candidates()
        by_content = {c.content: c for c in candidates}

        def accept(content: str) -> None:
            self.on_select(by_content.get(content) or Candidate(-1, content))
            self.after.run()

        ui.show(candidates, accept, self.options)
