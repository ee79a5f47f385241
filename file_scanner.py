#!/usr/bin/env python3
"""
File Scanner Module for Megethos

Walks a directory tree and collects the size of every file it contains.
The walk is all-or-nothing: the first unreadable directory or entry aborts
it with a ScanError, so callers never see a partial inventory.

Symbolic links are never followed. A link is reported as an entry of its
own (with the size of the link itself), which also means a link pointing
back up the tree cannot make the walk loop.
"""

import os
import stat
from dataclasses import dataclass
from typing import Callable, Optional

ProgressCallback = Callable[[int, str], None]  # (files_seen, current_dir)


@dataclass(frozen=True)
class FileEntry:
    """A file found by the scan and its size in bytes"""

    path: str
    size: int


class ScanError(OSError):
    """Raised when the tree cannot be walked completely"""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"Cannot scan {path}: {cause.strerror or cause}")
        self.errno = cause.errno
        self.path = path
        self.cause = cause


def _is_listed(mode: int) -> bool:
    """Regular files and symlinks are listed, special files are not."""
    return stat.S_ISREG(mode) or stat.S_ISLNK(mode)


class FileScanner:
    """Collects FileEntry values for every file below a root path"""

    def __init__(self, progress_callback: Optional[ProgressCallback] = None):
        """Initialize scanner

        Args:
            progress_callback: Optional callback invoked once per directory
                with the number of files seen so far and the directory path
        """
        self.progress_callback = progress_callback
        self._files_seen = 0

    def scan(self, root: str) -> list[FileEntry]:
        """Scan root and return one entry per file reachable from it

        Raises:
            ScanError: root does not exist, or some directory or entry
                below it cannot be read
        """
        self._files_seen = 0
        entries: list[FileEntry] = []

        try:
            st = os.lstat(root)
        except OSError as e:
            raise ScanError(root, e) from e

        if stat.S_ISDIR(st.st_mode):
            self._walk(root, entries)
        elif _is_listed(st.st_mode):
            entries.append(FileEntry(path=root, size=st.st_size))

        return entries

    def _walk(self, root: str, entries: list[FileEntry]):
        # Explicit stack, so tree depth is not bounded by the recursion limit
        pending = [root]
        while pending:
            dir_path = pending.pop()
            try:
                with os.scandir(dir_path) as it:
                    children = sorted(it, key=lambda e: e.name)
            except OSError as e:
                raise ScanError(dir_path, e) from e

            if self.progress_callback:
                self.progress_callback(self._files_seen, dir_path)

            subdirs = []
            for child in children:
                try:
                    st = child.stat(follow_symlinks=False)
                except OSError as e:
                    raise ScanError(child.path, e) from e

                if stat.S_ISDIR(st.st_mode):
                    subdirs.append(child.path)
                elif _is_listed(st.st_mode):
                    entries.append(FileEntry(path=child.path, size=st.st_size))
                    self._files_seen += 1

            # Reversed so subdirectories are popped in name order
            pending.extend(reversed(subdirs))


def scan_files(root: str, progress_callback: Optional[ProgressCallback] = None) -> list[FileEntry]:
    """Convenience wrapper around FileScanner.scan"""
    return FileScanner(progress_callback).scan(root)
