#!/usr/bin/env python3
"""
Configuration for Megethos

In-memory defaults for the ranked table and its key bindings.
Nothing is loaded from or saved to disk.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from file_ranker import DEFAULT_TOP_N


class KeyAction(Enum):
    """Inputs the interactive table reacts to"""

    UP = "up"
    DOWN = "down"
    TOP = "top"
    BOTTOM = "bottom"
    DELETE = "delete"
    YES = "yes"
    NO = "no"
    QUIT = "quit"


DEFAULT_KEY_BINDINGS: dict[str, KeyAction] = {
    "up": KeyAction.UP,
    "k": KeyAction.UP,
    "down": KeyAction.DOWN,
    "j": KeyAction.DOWN,
    "home": KeyAction.TOP,
    "g": KeyAction.TOP,
    "end": KeyAction.BOTTOM,
    "G": KeyAction.BOTTOM,
    "d": KeyAction.DELETE,
    "D": KeyAction.DELETE,
    "y": KeyAction.YES,
    "Y": KeyAction.YES,
    "n": KeyAction.NO,
    "N": KeyAction.NO,
    "q": KeyAction.QUIT,
    "esc": KeyAction.QUIT,
    "ctrl+c": KeyAction.QUIT,
}

# Shown in the help line, in this order
HELP_ENTRIES: list[tuple[str, str]] = [
    ("↑/k", "up"),
    ("↓/j", "down"),
    ("home/g", "top"),
    ("end/G", "bottom"),
    ("d", "delete"),
    ("q", "quit"),
]


@dataclass
class ColumnWidths:
    index: int = 5
    filename: int = 30
    directory: int = 50
    size: int = 15


@dataclass
class MegethosConfig:
    """Configuration for Megethos"""

    top_n: int = DEFAULT_TOP_N
    table_height: int = DEFAULT_TOP_N
    columns: ColumnWidths = field(default_factory=ColumnWidths)
    key_bindings: dict[str, KeyAction] = field(default_factory=lambda: dict(DEFAULT_KEY_BINDINGS))
    help_entries: list[tuple[str, str]] = field(default_factory=lambda: list(HELP_ENTRIES))

    def action_for(self, key: str) -> Optional[KeyAction]:
        """Map a key name to its action, None for unbound keys"""
        return self.key_bindings.get(key)

    @classmethod
    def default(cls) -> "MegethosConfig":
        """Create default configuration"""
        return cls()
