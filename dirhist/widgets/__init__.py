"""Textual widgets for dirhist."""

from dirhist.widgets.command_input import CommandInput
from dirhist.widgets.dir_picker import DirPicker
from dirhist.widgets.history_view import HistoryView
from dirhist.widgets.status_bar import StatusBar

__all__ = [
    "CommandInput",
    "DirPicker",
    "HistoryView",
    "StatusBar",
]
