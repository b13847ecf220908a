"""Directory history tracker with back/forward navigation and a chooser."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dirhist")
except PackageNotFoundError:
    __version__ = "0.0.0.dev"
