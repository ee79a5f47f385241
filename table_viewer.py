#!/usr/bin/env python3
"""
Interactive table viewer for Megethos

The application talks to the terminal only through the small Viewer
protocol below. TableViewer implements it with a Rich table redrawn on
every change and single keypresses read in raw terminal mode.
"""

import os
import select
import sys
from typing import Callable, Optional, Protocol

try:
    import termios
    import tty

    _HAS_TERMIOS = True
except ImportError:
    _HAS_TERMIOS = False

from rich import box
from rich.table import Table
from rich.text import Text

from auxiliary import format_path_for_display, truncate_path
from console_ui import ConsoleUI
from file_ranker import DisplayRow
from megethos_config import KeyAction, MegethosConfig

KeyHandler = Callable[[KeyAction], bool]  # returns False to stop reading keys

SELECTED_STYLE = "color(229) on color(57)"

_ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1bOA": "up",
    "\x1b[B": "down",
    "\x1bOB": "down",
    "\x1b[H": "home",
    "\x1bOH": "home",
    "\x1b[1~": "home",
    "\x1b[7~": "home",
    "\x1b[F": "end",
    "\x1bOF": "end",
    "\x1b[4~": "end",
    "\x1b[8~": "end",
}


class Viewer(Protocol):
    def render(self, rows: list[DisplayRow], selected: int, status: Optional[str] = None) -> None: ...

    def show_confirmation(self, prompt: str) -> None: ...

    def on_key(self, handler: KeyHandler) -> None: ...


def key_name(raw: str) -> str:
    """Translate raw terminal input into a key name used by the bindings"""
    if raw in _ESCAPE_SEQUENCES:
        return _ESCAPE_SEQUENCES[raw]
    if raw == "\x1b":
        return "esc"
    if raw == "\x03":
        return "ctrl+c"
    return raw


def _get_single_key() -> str:
    """Read a single keypress without requiring Enter.

    Arrow, Home and End keys arrive as escape sequences and are returned whole. Falls back
    to input() if the terminal doesn't support raw mode.
    """
    if not _HAS_TERMIOS:
        return input("> ").strip()[:1]
    try:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            data = os.read(fd, 1)
            if data == b"\x1b":
                # A lone Esc has nothing queued behind it
                while (
                    len(data) < 4
                    and data.decode(errors="replace") not in _ESCAPE_SEQUENCES
                    and select.select([fd], [], [], 0.05)[0]
                ):
                    data += os.read(fd, 1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        return data.decode(errors="replace")
    except (termios.error, OSError):
        return input("> ").strip()[:1]


class TableViewer:
    """Rich implementation of the Viewer protocol"""

    def __init__(
        self,
        ui: ConsoleUI,
        title: str,
        config: Optional[MegethosConfig] = None,
        read_key: Optional[Callable[[], str]] = None,
    ):
        self.ui = ui
        self.title = title
        self.config = config or MegethosConfig.default()
        self.read_key = read_key or _get_single_key

    def build_table(self, rows: list[DisplayRow], selected: int) -> Table:
        widths = self.config.columns
        table = Table(box=box.ROUNDED, show_lines=False, header_style="bold")
        table.add_column("#", justify="right", width=widths.index, no_wrap=True)
        table.add_column("Filename", width=widths.filename, no_wrap=True, overflow="ellipsis")
        table.add_column("Directory", style="dim", width=widths.directory, no_wrap=True)
        table.add_column("Size", justify="right", style="yellow", width=widths.size, no_wrap=True)

        for i, row in enumerate(rows):
            directory = truncate_path(format_path_for_display(row.directory), widths.directory)
            table.add_row(
                str(row.index),
                Text(row.filename),
                Text(directory),
                row.size,
                style=SELECTED_STYLE if i == selected else None,
            )

        # Blank rows keep the table height fixed as rows get deleted
        for _ in range(self.config.table_height - len(rows)):
            table.add_row("", "", "", "")

        return table

    def help_line(self) -> Text:
        line = Text()
        for i, (keys, description) in enumerate(self.config.help_entries):
            if i:
                line.append(" • ", style="dim")
            line.append(keys, style="bold")
            line.append(f" {description}", style="dim")
        return line

    def render(self, rows: list[DisplayRow], selected: int, status: Optional[str] = None) -> None:
        self.ui.clear_screen()
        self.ui.print_header("Megethos", self.title)
        self.ui.print_renderable(self.build_table(rows, selected))
        self.ui.print_renderable(self.help_line())
        if not rows and status is None:
            status = "No files found."
        if status:
            self.ui.print_renderable(Text(status, style="cyan"))

    def show_confirmation(self, prompt: str) -> None:
        self.ui.clear_screen()
        self.ui.print_header("Megethos", self.title)
        self.ui.print_renderable(Text(prompt, style="yellow bold"))

    def on_key(self, handler: KeyHandler) -> None:
        while True:
            action = self.config.action_for(key_name(self.read_key()))
            if action is None:
                continue
            if not handler(action):
                break
