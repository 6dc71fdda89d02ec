#!/usr/bin/env python3
"""
Panel layout arithmetic for peek

Decides how many panels to show and how wide they are for a given
terminal width.
"""

from dataclasses import dataclass
from enum import Enum

from listing import Listing

GAP = 2
BORDER = 2
PADDING = 4
MIN_INNER_WIDTH = 20
MAX_NAME_LEN = 40
CHROME_LINES = 10
DEFAULT_SIZE = (80, 24)


class PanelMode(Enum):
    BOTH = "both"
    DIRS = "dirs"
    FILES = "files"


@dataclass(frozen=True)
class PanelLayout:
    """Widths for one rendered panel

    panel_width includes the border, name_max is the widest name allowed.
    """

    panel_width: int
    name_max: int

    @property
    def inner_width(self) -> int:
        return self.panel_width - BORDER


def panel_mode(listing: Listing) -> PanelMode:
    """Pick which panels to render for a listing"""
    if listing.files_only or not listing.dirs:
        return PanelMode.FILES
    if not listing.files:
        return PanelMode.DIRS
    return PanelMode.BOTH


def needed_height(listing: Listing) -> int:
    """Terminal rows needed to show the listing without scrolling"""
    return listing.content_lines + CHROME_LINES


def compute_layout(width: int, two_panels: bool, max_name_len: int = MAX_NAME_LEN) -> PanelLayout:
    """Compute panel and name widths for a terminal width

    Args:
        width: Terminal width in columns
        two_panels: Whether two panels share the width
        max_name_len: Upper bound for displayed names

    Returns:
        PanelLayout for each panel
    """
    if two_panels:
        inner = (width - GAP) // 2 - PADDING
    else:
        inner = width - PADDING - BORDER
    inner = max(inner, MIN_INNER_WIDTH)

    return PanelLayout(panel_width=inner + BORDER, name_max=min(inner - PADDING, max_name_len))
