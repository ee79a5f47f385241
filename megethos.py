#!/usr/bin/env python3
"""
Megethos — Ancient Greek μέγεθος (size, magnitude)

Finds the largest files below a directory and shows them in an
interactive table. The selected file can be deleted after a yes/no
confirmation; a failed delete is reported and the session goes on.

Usage:
    megethos                 # Largest files below the current directory
    megethos <path>          # Largest files below <path>

Keys:
    ↑/k ↓/j   move selection
    home/g    first row
    end/G     last row
    d         delete selected file (asks y/n)
    q         quit
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from auxiliary import format_path_for_display
from console_ui import ConsoleUI
from delete_action import DeleteController, DeleteOutcome
from file_ranker import DisplayRow, rank_entries
from file_scanner import FileScanner, ScanError
from megethos_config import KeyAction, MegethosConfig
from table_viewer import TableViewer, Viewer

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io

    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")


class Megethos:
    """Main application class for the Megethos largest-file browser."""

    def __init__(
        self,
        args: argparse.Namespace,
        viewer: Optional[Viewer] = None,
        config: Optional[MegethosConfig] = None,
        ui: Optional[ConsoleUI] = None,
    ):
        self.args = args
        self.ui = ui or ConsoleUI()
        self.config = config or MegethosConfig.default()
        self.root: str = getattr(args, "path", None) or "."
        self.viewer: Viewer = viewer or TableViewer(
            self.ui, f"Largest files in {format_path_for_display(str(Path(self.root).resolve()))}", self.config
        )

        self.controller: Optional[DeleteController] = None
        self.cursor = 0
        self.status: Optional[str] = None

    # -- scanning ------------------------------------------------------------

    def scan(self) -> DeleteController:
        """Scan the root, rank the result and set up the delete controller

        Raises:
            ScanError: the tree could not be walked completely
        """
        progress = self.ui.create_activity_progress()
        with progress:
            task = progress.add_task(f"Scanning {escape(format_path_for_display(self.root))}...", total=None)

            def on_progress(files_seen: int, current_dir: str):
                progress.update(task, description=f"Scanning... {files_seen:,} files")

            entries = FileScanner(progress_callback=on_progress).scan(self.root)

        ranked = rank_entries(entries, self.config.top_n)
        self.controller = DeleteController(ranked)
        self.cursor = 0
        self.status = None
        return self.controller

    # -- interactive session -------------------------------------------------

    @property
    def rows(self) -> list[DisplayRow]:
        return self.controller.rows if self.controller else []

    def selected_row(self) -> Optional[DisplayRow]:
        rows = self.rows
        if 0 <= self.cursor < len(rows):
            return rows[self.cursor]
        return None

    def refresh_view(self):
        if self.controller and self.controller.confirming:
            self.viewer.show_confirmation(self.controller.pending.prompt)
        else:
            self.viewer.render(self.rows, self.cursor, self.status)

    def _move(self, delta: int):
        count = len(self.rows)
        if count:
            self.cursor = min(max(self.cursor + delta, 0), count - 1)

    def _confirm(self, yes: bool):
        result = self.controller.confirm(yes)
        if result.outcome is DeleteOutcome.DELETED:
            self.status = f"Deleted {result.pending.filename}"
            self.cursor = min(self.cursor, max(len(self.rows) - 1, 0))
        elif result.outcome is DeleteOutcome.FAILED:
            self.status = f"Could not delete {result.pending.filename}: {result.error_message}"
        else:
            self.status = None

    def handle_key(self, action: KeyAction) -> bool:
        """Apply one key action. Returns False when the session should end."""
        if action is KeyAction.QUIT:
            return False

        if self.controller.confirming:
            if action is KeyAction.YES:
                self._confirm(True)
            elif action is KeyAction.NO:
                self._confirm(False)
        elif action is KeyAction.UP:
            self._move(-1)
        elif action is KeyAction.DOWN:
            self._move(1)
        elif action is KeyAction.TOP:
            self._move(-len(self.rows))
        elif action is KeyAction.BOTTOM:
            self._move(len(self.rows))
        elif action is KeyAction.DELETE:
            if self.controller.request_delete(self.selected_row()) is not None:
                self.status = None

        self.refresh_view()
        return True

    # -- main entry point ----------------------------------------------------

    def run(self) -> int:
        try:
            self.scan()
        except ScanError as e:
            self.ui.print_error(f"Error walking the path: {e}")
            return 1

        self.refresh_view()
        self.viewer.on_key(self.handle_key)
        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="megethos",
        description="Megethos — browse and delete the largest files in a directory tree",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to scan (default: current directory)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    app = Megethos(args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
