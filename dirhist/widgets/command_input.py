"""Prompt widget for directory commands."""

from typing import List, Optional

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, Static


class CommandInput(Widget):
    """Single-line prompt with command completion."""

    DEFAULT_CSS = """
    CommandInput {
        dock: bottom;
        height: 1;
        layout: horizontal;
        background: $surface;
    }

    CommandInput > .command-prefix {
        width: 2;
        height: 1;
        color: $text;
    }

    CommandInput > .command-text {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
        background: $surface;
    }

    CommandInput > .command-text:focus {
        border: none;
    }
    """

    class CommandSubmitted(Message):
        """Message sent when a command is submitted."""

        def __init__(self, command: str) -> None:
            self.command = command
            super().__init__()

    def __init__(
        self,
        commands: Optional[List[str]] = None,
        prompt: str = "$",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._commands = commands or []
        self._prompt = prompt

    def compose(self) -> ComposeResult:
        yield Static(self._prompt, classes="command-prefix", id="cmd-prefix")
        yield Input(placeholder="cd <dir>, back, forward, pop, help", classes="command-text", id="cmd-input")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#cmd-input", Input)

    @property
    def value(self) -> str:
        return self.input_widget.value

    def focus(self, scroll_visible: bool = True) -> "CommandInput":
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)
        return self

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        command = self.input_widget.value.strip()
        self.input_widget.value = ""
        self.post_message(self.CommandSubmitted(command))

    def on_key(self, event) -> None:
        if event.key == "tab":
            event.prevent_default()
            event.stop()
            self._complete()

    def _complete(self) -> None:
        """Tab completion for command names."""
        if not self._commands:
            return

        current = self.input_widget.value.lstrip()
        if not current:
            return

        parts = current.split(maxsplit=1)
        cmd_part = parts[0]
        rest = parts[1] if len(parts) > 1 else ""

        matches = [c for c in self._commands if c.startswith(cmd_part)]

        if len(matches) == 1:
            self.input_widget.value = matches[0] + " " + rest
        elif len(matches) > 1:
            # Complete the common prefix
            common = matches[0]
            for match in matches[1:]:
                while not match.startswith(common):
                    common = common[:-1]
            if len(common) > len(cmd_part):
                self.input_widget.value = common + (" " + rest if rest else "")
        self.input_widget.cursor_position = len(self.input_widget.value)
