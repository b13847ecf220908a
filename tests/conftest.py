"""Shared fixtures for dirhist tests."""

import pytest


class FakeFS:
    """In-memory chdir/getcwd pair over a fixed set of directories."""

    def __init__(self, cwd, existing):
        self.cwd = cwd
        self.existing = set(existing)

    def chdir(self, path):
        if path not in self.existing:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.cwd = path

    def getcwd(self):
        return self.cwd


@pytest.fixture
def make_fs():
    """Factory: make_fs("/a", ["/a", "/b"]) starts in /a."""
    return FakeFS


@pytest.fixture
def fs(make_fs):
    """Fake filesystem with /a, /b and /c, starting in /a."""
    return make_fs("/a", ["/a", "/b", "/c"])


@pytest.fixture
def dirs(tmp_path, monkeypatch):
    """Four real directories a-d; the test starts inside a."""
    root = tmp_path.resolve()
    made = {}
    for name in "abcd":
        d = root / name
        d.mkdir()
        made[name] = str(d)
    monkeypatch.chdir(made["a"])
    return made
