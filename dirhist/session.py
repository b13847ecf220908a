"""Directory session: the history stack plus the cd wrapper around it."""

import logging
import os
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from dirhist.history import DEFAULT_MAX_SIZE, HistoryStack
from dirhist.hooks import EditorHooks, HookList

logger = logging.getLogger(__name__)

PREVIOUS_DIR = "-"


@dataclass
class NavResult:
    """Outcome of a navigation request."""

    success: bool
    message: str = ""
    path: str = ""


class DirSession:
    """Owns the directory history for one shell session.

    Every explicit directory change goes through :meth:`cd`, which changes
    the process directory first and records it in the history second.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        start_dir: Optional[str] = None,
        chdir: Callable[[str], None] = os.chdir,
        getcwd: Callable[[], str] = os.getcwd,
    ) -> None:
        self._chdir = chdir
        self._getcwd = getcwd
        self.before_cd = HookList()
        self.after_cd = HookList()
        self._readline_hook: Optional[Callable[[], None]] = None

        if start_dir is not None:
            self._chdir(start_dir)
        self.stack = HistoryStack(self._getcwd(), max_size=max_size)

    # --- Queries ---

    def curdir(self) -> str:
        return self.stack.current

    def stacksize(self) -> int:
        return self.stack.size

    def entries(self) -> List[str]:
        return self.stack.entries

    def history(self) -> Iterator[Tuple[str, bool]]:
        return self.stack.listing()

    # --- Recording ---

    def push(self, path: Optional[str] = None) -> bool:
        """Record path (default: the process directory) in the history."""
        if path is None:
            path = self._getcwd()
        pushed = self.stack.push(path)
        if pushed:
            logger.debug("pushed %s (%d entries)", path, self.stack.size)
        return pushed

    # --- Changing directory ---

    def cd(self, *targets: str) -> NavResult:
        """Change directory and record the result.

        No target goes home, ``-`` goes to the entry before the cursor.
        """
        self.before_cd.run()

        if len(targets) > 1:
            return NavResult(False, "cd: too many arguments")
        if not targets:
            target = os.path.expanduser("~")
        elif targets[0] == PREVIOUS_DIR:
            previous = self.stack.peek(-1)
            if previous is None:
                return NavResult(False, "No previous directory")
            target = previous
        else:
            target = targets[0]

        error = self._change(target)
        if error:
            return NavResult(False, error)

        cwd = self._getcwd()
        self.push(cwd)
        self.after_cd.run()
        return NavResult(True, path=cwd)

    def cd_to_base_of(self, path: str) -> NavResult:
        """cd into the directory containing path."""
        return self.cd(os.path.dirname(path) or ".")

    def back(self) -> NavResult:
        target = self.stack.peek(-1)
        if target is None:
            return NavResult(False, "Beginning of directory history")
        error = self._change(target)
        if error:
            return NavResult(False, error)
        self.stack.back()
        return NavResult(True, path=target)

    def forward(self) -> NavResult:
        target = self.stack.peek(1)
        if target is None:
            return NavResult(False, "End of directory history")
        error = self._change(target)
        if error:
            return NavResult(False, error)
        self.stack.forward()
        return NavResult(True, path=target)

    def pop(self) -> NavResult:
        """Go back and drop the directory we left from the history."""
        target = self.stack.peek(-1)
        if target is None:
            return NavResult(False, "No previous directory to pop")
        error = self._change(target)
        if error:
            return NavResult(False, error)
        self.stack.pop()
        return NavResult(True, path=target)

    def _change(self, target: str) -> str:
        """chdir to target. Returns the failure reason, or "" on success."""
        try:
            self._chdir(target)
        except OSError as e:
            reason = f"{target}: {e.strerror or e}"
            logger.warning("cd failed: %s", reason)
            return reason
        logger.debug("chdir %s", target)
        return ""

    # --- Line editor integration ---

    def setup(self, editor_hooks: EditorHooks) -> bool:
        """Capture the directory before every prompt.

        Safe to call repeatedly; returns False if already registered.
        """
        if self._readline_hook is None:
            self._readline_hook = self._capture_cwd
        if self._readline_hook in editor_hooks.before_readline:
            return False
        editor_hooks.before_readline.append(self._readline_hook)
        return True

    def _capture_cwd(self) -> None:
        try:
            cwd = self._getcwd()
        except OSError as e:
            logger.warning("cannot read working directory: %s", e)
            return
        self.cd(cwd)
