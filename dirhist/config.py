"""Configuration management for dirhist."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dirhist.history import DEFAULT_MAX_SIZE


CONFIG_DIR = Path.home() / ".config" / "dirhist"
CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass
class Config:
    """Application configuration."""

    max_stack_size: int = DEFAULT_MAX_SIZE
    chooser_modeline: str = "Dir history "
    chooser_ignore_case: bool = True
    chooser_keep_bottom: bool = True
    start_dir: Optional[str] = None

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load config from file, or return defaults."""
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
                max_stack_size = int(data.get("max_stack_size", DEFAULT_MAX_SIZE))
                if max_stack_size < 0:
                    max_stack_size = DEFAULT_MAX_SIZE
                return cls(
                    max_stack_size=max_stack_size,
                    chooser_modeline=data.get("chooser_modeline", "Dir history "),
                    chooser_ignore_case=bool(data.get("chooser_ignore_case", True)),
                    chooser_keep_bottom=bool(data.get("chooser_keep_bottom", True)),
                    start_dir=data.get("start_dir"),
                )
        except (json.JSONDecodeError, OSError, TypeError, ValueError, AttributeError):
            return cls()

    def save(self, path: Path = CONFIG_FILE) -> None:
        """Save config to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "max_stack_size": self.max_stack_size,
            "chooser_modeline": self.chooser_modeline,
            "chooser_ignore_case": self.chooser_ignore_case,
            "chooser_keep_bottom": self.chooser_keep_bottom,
            "start_dir": self.start_dir,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
