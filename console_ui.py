#!/usr/bin/env python3
"""
Console UI Module for peek using Rich

Renders a directory listing as rounded, bordered panels (DIRS and FILES)
with a count footer, and prints errors and configuration tables.
"""

import os
import sys
from typing import IO, Any, Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from auxiliary import count_summary, dir_subtitle, human_size, truncate_name
from layout import DEFAULT_SIZE, GAP, PanelLayout, PanelMode
from listing import Entry, Listing

PEEK_THEME = Theme(
    {
        "title": "bold #00ff66",
        "dir": "#00ff66",
        "file": "#00cc55",
        "hidden": "#005c2e",
        "symlink": "#00ffaa",
        "subtitle": "italic #003d1a",
        "count": "#003d1a",
        "border": "#004d26",
        "error": "#ff3334",
    }
)


def terminal_size(stream: Optional[IO] = None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind stream, or DEFAULT_SIZE"""
    stream = stream or sys.__stdout__
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, ValueError, OSError):
        return DEFAULT_SIZE
    if size.columns <= 0:
        return DEFAULT_SIZE
    return size.columns, size.lines


def entry_style(entry: Entry) -> str:
    """Theme style for an entry name"""
    if entry.is_symlink:
        return "symlink"
    if entry.hidden:
        return "hidden"
    return "dir" if entry.is_dir else "file"


def entry_subtitle(entry: Entry) -> str:
    if entry.is_dir:
        return dir_subtitle(entry.sub_dirs, entry.sub_files)
    return human_size(entry.size)


def build_panel(title: str, entries: list[Entry], layout: PanelLayout) -> Panel:
    """Build one titled panel with a name line and a subtitle line per entry"""
    lines = [Text(title, style="title"), Text()]
    for entry in entries:
        lines.append(Text(truncate_name(entry.name, layout.name_max), style=entry_style(entry), no_wrap=True))
        lines.append(Text(entry_subtitle(entry), style="subtitle", no_wrap=True))

    return Panel(
        Group(*lines),
        box=box.ROUNDED,
        border_style="border",
        padding=(1, 2),
        width=layout.panel_width,
    )


class ConsoleUI:
    """Console output handler for peek"""

    def __init__(
        self,
        force_terminal: Optional[bool] = None,
        file: Optional[IO[str]] = None,
        stderr_file: Optional[IO[str]] = None,
    ):
        """Initialize consoles for standard output and standard error

        Args:
            force_terminal: Force (or suppress) terminal control codes
            file: Replacement for standard output
            stderr_file: Replacement for standard error
        """
        self.console = Console(force_terminal=force_terminal, file=file, theme=PEEK_THEME, highlight=False)
        self.error_console = Console(
            force_terminal=force_terminal, file=stderr_file, stderr=stderr_file is None, theme=PEEK_THEME, highlight=False
        )

    def print_error(self, message: str):
        """Print error message to standard error"""
        self.error_console.print(Text(message, style="error"), soft_wrap=True)

    def print_empty(self):
        """Print the message shown for a listing with nothing in it"""
        self.console.print(Text("  empty", style="count"))

    def print_footer(self, dir_count: int, file_count: int):
        """Print the dir/file count line followed by a blank line"""
        self.console.print(Text("  ") + Text(count_summary(dir_count, file_count), style="count"))
        self.console.print()

    def show_listing(self, listing: Listing, mode: PanelMode, layout: PanelLayout, width: int):
        """Render the listing panels and footer

        Args:
            listing: Listing to render
            mode: Which panels to show
            layout: Widths for each panel
            width: Terminal width the layout was computed for
        """
        if mode is PanelMode.BOTH:
            grid = Table.grid(padding=(0, GAP, 0, 0))
            grid.add_column()
            grid.add_column()
            grid.add_row(
                build_panel("DIRS", listing.dirs, layout),
                build_panel("FILES", listing.files, layout),
            )
            renderable: Any = grid
            needed = 2 * layout.panel_width + GAP
        else:
            title, entries = ("DIRS", listing.dirs) if mode is PanelMode.DIRS else ("FILES", listing.files)
            renderable = build_panel(title, entries, layout)
            needed = layout.panel_width

        # Panels never wrap, even below the minimum width
        self.console.width = max(width, needed)

        self.console.print()
        self.console.print(renderable)
        self.console.print()
        self.print_footer(len(listing.dirs), len(listing.files))

    def show_configuration(self, config: dict[str, Any]):
        """Display configuration in a formatted table"""
        table = Table(show_header=False, box=box.SIMPLE)
        table.add_column("Setting", style="cyan dim", min_width=20, justify="right")
        table.add_column("Value", style="cyan", min_width=30)

        for key, value in config.items():
            table.add_row(key, "-" if value is None else str(value))

        self.console.print(table)
