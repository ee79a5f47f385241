#!/usr/bin/env python3
"""
Ranking and table projection for scanned files

Orders FileEntry values by size and turns the top of the list into
display rows for the interactive table.
"""

import os
from dataclasses import dataclass

from auxiliary import human_readable
from file_scanner import FileEntry

DEFAULT_TOP_N = 10


@dataclass(frozen=True)
class DisplayRow:
    """Read-only table projection of a ranked FileEntry"""

    index: int  # 1-based rank, index - 1 is the position in the ranked list
    filename: str
    directory: str
    size: str

    @property
    def position(self) -> int:
        return self.index - 1

    @property
    def path(self) -> str:
        """Path recombined from the directory and filename columns"""
        return os.path.join(self.directory, self.filename)


def rank_entries(entries: list[FileEntry], limit: int = DEFAULT_TOP_N) -> list[FileEntry]:
    """Return the `limit` largest entries, largest first

    Entries of equal size are ordered by path so the result does not
    depend on the order the scan produced them in.
    """
    if limit <= 0:
        return []
    return sorted(entries, key=lambda e: (-e.size, e.path))[:limit]


def split_path(path: str) -> tuple[str, str]:
    """Split a path into (directory, filename) without a trailing separator"""
    # os.path.split keeps the separator only when the directory is the root
    return os.path.split(path)


def build_display_rows(ranked: list[FileEntry]) -> list[DisplayRow]:
    rows = []
    for i, entry in enumerate(ranked, 1):
        directory, filename = split_path(entry.path)
        rows.append(DisplayRow(index=i, filename=filename, directory=directory, size=human_readable(entry.size)))
    return rows
