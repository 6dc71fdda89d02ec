#!/usr/bin/env python3
"""
Auxiliary text formatting functions for peek

Size formatting, name truncation and count summaries shared by the
renderer and the CLI.
"""

from rich.cells import cell_len

SIZE_UNITS = ("B", "K", "M", "G", "T")
MIN_TRUNCATE_WIDTH = 4
ELLIPSIS = "…"


def human_size(num_bytes: int) -> str:
    """Format byte size into a short human-readable string

    Args:
        num_bytes: Size in bytes to format

    Returns:
        Formatted string like "0 B", "789 B", "1.5 K", "12 M" or "3.0 G"
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"

    exponent = 0
    while exponent < len(SIZE_UNITS) - 1 and num_bytes >= 1024 ** (exponent + 1):
        exponent += 1

    value = num_bytes / 1024**exponent
    unit = SIZE_UNITS[exponent]
    if value >= 10:
        return f"{int(value)} {unit}"
    return f"{value:.1f} {unit}"


def truncate_name(name: str, max_width: int) -> str:
    """Truncate a name to fit in max_width terminal cells

    Args:
        name: Name to truncate
        max_width: Maximum display width (floored at MIN_TRUNCATE_WIDTH)

    Returns:
        The name unchanged if it fits, otherwise its longest fitting prefix
        followed by an ellipsis
    """
    max_width = max(max_width, MIN_TRUNCATE_WIDTH)
    if cell_len(name) <= max_width:
        return name

    budget = max_width - cell_len(ELLIPSIS)
    kept = []
    used = 0
    for char in name:
        width = cell_len(char)
        if used + width > budget:
            break
        kept.append(char)
        used += width

    return "".join(kept) + ELLIPSIS


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def count_summary(dirs: int, files: int) -> str:
    """Summarize directory and file counts, e.g. "2 dirs, 1 file"

    Zero counts are left out; returns an empty string when both are zero.
    """
    parts = []
    if dirs > 0:
        parts.append(_plural(dirs, "dir"))
    if files > 0:
        parts.append(_plural(files, "file"))
    return ", ".join(parts)


def dir_subtitle(sub_dirs: int, sub_files: int) -> str:
    """Subtitle shown under a directory name"""
    return count_summary(sub_dirs, sub_files) or "empty"
