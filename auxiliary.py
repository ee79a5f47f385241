#!/usr/bin/env python3
"""
Auxiliary utility functions for Megethos

Size formatting and path display helpers shared by the scanner,
the ranked table and the console output.
"""

import pathlib
from typing import Optional

SIZE_UNITS = "KMGTPE"


def human_readable(size_bytes: int) -> str:
    """Format byte size into human-readable string

    Uses binary multiples (1 KB = 1024 B) with one decimal place. The
    exponent is picked by integer steps, only the displayed value is a
    float division.

    Args:
        size_bytes: Non-negative size in bytes

    Returns:
        Formatted string like "1.5 MB", "2.0 KB" or "789 B"
    """
    unit = 1024
    if size_bytes < unit:
        return f"{size_bytes} B"

    divisor, exp = unit, 0
    n = size_bytes // unit
    while n >= unit and exp < len(SIZE_UNITS) - 1:
        divisor *= unit
        exp += 1
        n //= unit

    return f"{size_bytes / divisor:.1f} {SIZE_UNITS[exp]}B"


def format_path_for_display(path: str, home_path: Optional[str] = None) -> str:
    """Format file path for display by replacing home directory with ~

    Args:
        path: File path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with home directory replaced by ~ if applicable
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    if path == home_path or path.startswith(home_path.rstrip("/\\") + "/"):
        return "~" + path[len(home_path.rstrip("/\\")) :]
    return path


def truncate_path(path: str, max_length: int = 50) -> str:
    """Truncate long paths for display

    Args:
        path: Path to truncate
        max_length: Maximum length before truncation

    Returns:
        Truncated path with ... in the middle if too long
    """
    if len(path) <= max_length:
        return path

    available = max_length - 3  # Account for "..."

    start_len = available // 2
    end_len = available - start_len

    return f"{path[:start_len]}...{path[-end_len:]}"
