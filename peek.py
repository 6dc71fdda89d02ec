#!/usr/bin/env python3
"""
Peek - a two-panel directory listing

Lists the directories and files of a path side by side in rounded boxes,
with child counts for directories and human-readable sizes for files.

Usage:
    peek                     # List the current directory
    peek <path>              # List another directory
    peek -a <path>           # Include hidden (dot) entries
    peek -f <path>           # Files only
    peek --show-config       # Show effective configuration
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from console_ui import ConsoleUI, terminal_size
from font_scaler import FontScaler, alacritty_config_path
from layout import PanelMode, compute_layout, needed_height, panel_mode
from listing import DirectoryReadError, read_listing
from peek_config import ConfigManager, PeekConfig

# Fixed name so records keep it when this file runs as __main__
logger = logging.getLogger("peek")


class Peek:
    """Main application class for the peek directory lister."""

    def __init__(self, args: argparse.Namespace, config: Optional[PeekConfig] = None, ui: Optional[ConsoleUI] = None):
        self.args = args
        self.ui = ui or ConsoleUI()
        self.config = config if config is not None else ConfigManager().load()

    @property
    def show_all(self) -> bool:
        return bool(getattr(self.args, "all", False) or self.config.show_all)

    @property
    def files_only(self) -> bool:
        return bool(getattr(self.args, "files", False) or self.config.files_only)

    def _font_scaler(self) -> FontScaler:
        if getattr(self.args, "no_autoscale", False) or not self.config.autoscale_font:
            return FontScaler(None)
        return FontScaler(alacritty_config_path(self.config.alacritty_config), min_size=self.config.min_font_size)

    def show_configuration(self):
        config = {
            "Show hidden": self.show_all,
            "Files only": self.files_only,
            "Max name length": self.config.max_name_len,
            "Font autoscale": self.config.autoscale_font and not getattr(self.args, "no_autoscale", False),
            "Min font size": self.config.min_font_size,
            "Alacritty config": alacritty_config_path(self.config.alacritty_config),
        }
        self.ui.show_configuration(config)

    def run(self) -> int:
        if getattr(self.args, "show_config", False):
            self.show_configuration()
            return 0

        paths = getattr(self.args, "path", None) or ["."]
        target = paths[-1]
        try:
            listing = read_listing(target, show_all=self.show_all, files_only=self.files_only)
        except DirectoryReadError as e:
            self.ui.print_error(f"error: {e}")
            return 1

        if listing.is_empty:
            self.ui.print_empty()
            return 0

        width, height = terminal_size()
        scaler = self._font_scaler()
        with scaler.fit(height, needed_height(listing)) as rescaled:
            if rescaled:
                width, height = terminal_size()

            mode = panel_mode(listing)
            layout = compute_layout(width, mode is PanelMode.BOTH, self.config.max_name_len)
            self.ui.show_listing(listing, mode, layout, width)

        return 0


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peek",
        description="Peek - list directories and files side by side",
    )
    parser.add_argument(
        "path", nargs="*", help="Directory to list (default: current directory); the last one given wins"
    )
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files")
    parser.add_argument("-f", "--files", action="store_true", help="Files only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to standard error")
    parser.add_argument("--no-autoscale", action="store_true", help="Never change the Alacritty font size")
    parser.add_argument("--show-config", action="store_true", help="Show effective configuration and exit")
    return parser


def configure_logging(verbose: bool = False):
    """Send log records to standard error through Rich"""
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args, ignored = parser.parse_known_intermixed_args(argv)
    configure_logging(args.verbose)
    if ignored:
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(ignored))

    app = Peek(args)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
