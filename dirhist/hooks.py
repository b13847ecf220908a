"""Ordered callback lists for cd and line-editor hooks."""

from dataclasses import dataclass, field
from typing import Callable, List

Hook = Callable[[], None]


class HookList:
    """Zero-argument callbacks, run in registration order.

    Exceptions raised by a callback are not caught: they stop the run and
    reach whoever triggered it.
    """

    def __init__(self) -> None:
        self._hooks: List[Hook] = []

    def append(self, hook: Hook) -> None:
        self._hooks.append(hook)

    def run(self) -> None:
        # Snapshot so a hook that registers another one does not see it this round
        for hook in list(self._hooks):
            hook()

    def __contains__(self, hook: object) -> bool:
        return hook in self._hooks

    def __len__(self) -> int:
        return len(self._hooks)


@dataclass
class EditorHooks:
    """Hook lists a line editor runs around each read cycle."""

    before_readline: HookList = field(default_factory=HookList)
    after_readline: HookList = field(default_factory=HookList)
