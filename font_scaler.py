#!/usr/bin/env python3
"""
Alacritty font autoscaling for peek

When a listing is taller than the terminal, the Alacritty font size is
lowered for the duration of the render so everything fits on one screen,
then written back. Only active on Windows-style setups where the config
lives under %APPDATA%.
"""

import logging
import os
import pathlib
import re
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

MIN_FONT_SIZE = 7.0
REFLOW_DELAY = 0.2

FONT_SIZE_RE = re.compile(rb"^size\s*=\s*([0-9.]+)", re.MULTILINE)


def alacritty_config_path(override: Optional[str] = None) -> Optional[pathlib.Path]:
    """Locate the Alacritty config file

    Args:
        override: Explicit path from the peek config, used instead of %APPDATA%

    Returns:
        Path to an existing alacritty.toml, or None
    """
    if override:
        path = pathlib.Path(override).expanduser()
    else:
        appdata = os.environ.get("APPDATA")
        if not appdata:
            return None
        path = pathlib.Path(appdata) / "alacritty" / "alacritty.toml"

    return path if path.is_file() else None


def read_font_size(config_path: pathlib.Path) -> float:
    """Return the first `size = N` value in the config, or 0.0 if unavailable"""
    try:
        data = config_path.read_bytes()
    except OSError as e:
        logger.debug("Could not read %s: %s", config_path, e)
        return 0.0

    match = FONT_SIZE_RE.search(data)
    if not match:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        logger.debug("Unparseable font size %r in %s", match.group(1), config_path)
        return 0.0


def write_font_size(config_path: pathlib.Path, size: float) -> bool:
    """Rewrite every `size = N` line with the new size

    The file is handled as bytes so comments in any encoding survive.

    Returns:
        True if the file was written
    """
    try:
        data = config_path.read_bytes()
        config_path.write_bytes(FONT_SIZE_RE.sub(b"size = %.1f" % size, data))
    except OSError as e:
        logger.debug("Could not write font size to %s: %s", config_path, e)
        return False
    return True


def scaled_font_size(current: float, height: int, needed: int, min_size: float = MIN_FONT_SIZE) -> float:
    """Font size that makes `needed` rows fit in `height` rows, floored at min_size"""
    return max(current * height / needed, min_size)


class FontScaler:
    """Temporarily shrinks the Alacritty font so a tall listing fits"""

    def __init__(
        self,
        config_path: Optional[pathlib.Path],
        min_size: float = MIN_FONT_SIZE,
        delay: float = REFLOW_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the scaler

        Args:
            config_path: Alacritty config, or None to disable scaling
            min_size: Smallest font size that will be set
            delay: Seconds to wait for the terminal to reflow after a change
            sleep: Sleep function, replaceable in tests
        """
        self.config_path = config_path
        self.min_size = min_size
        self.delay = delay
        self._sleep = sleep

    @property
    def enabled(self) -> bool:
        return self.config_path is not None

    @contextmanager
    def fit(self, height: int, needed: int) -> Iterator[bool]:
        """Shrink the font while the block runs, restoring it afterwards

        Yields:
            True if the font was changed and the terminal should be re-measured
        """
        if not self.enabled or needed <= height:
            yield False
            return

        original = read_font_size(self.config_path)
        if original <= 0:
            yield False
            return

        new_size = scaled_font_size(original, height, needed, self.min_size)
        if new_size >= original or not write_font_size(self.config_path, new_size):
            yield False
            return

        logger.debug("Font size %.1f -> %.1f (%d rows needed, %d available)", original, new_size, needed, height)
        try:
            self._sleep(self.delay)
            yield True
        finally:
            write_font_size(self.config_path, original)
            logger.debug("Font size restored to %.1f", original)
