#!/usr/bin/env python3
"""
Peek Configuration Manager

Loads user defaults for peek from ~/.peek/config.json. A missing or
corrupted file falls back to the built-in defaults.
"""

import json
import logging
import pathlib
from dataclasses import asdict, dataclass, fields
from typing import Any, Optional

from font_scaler import MIN_FONT_SIZE
from layout import MAX_NAME_LEN

logger = logging.getLogger(__name__)


@dataclass
class PeekConfig:
    """User defaults for peek"""

    show_all: bool = False
    files_only: bool = False
    max_name_len: int = MAX_NAME_LEN
    autoscale_font: bool = True
    min_font_size: float = MIN_FONT_SIZE
    alacritty_config: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PeekConfig":
        """Create from dictionary, ignoring unknown keys and mistyped values"""
        defaults = cls()
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = getattr(defaults, f.name)
            if not _type_matches(value, expected, optional=f.name == "alacritty_config"):
                logger.warning("Ignoring config value %s=%r", f.name, value)
                continue
            values[f.name] = value
        return cls(**values)


def _type_matches(value: Any, default: Any, optional: bool = False) -> bool:
    if value is None:
        return optional
    if optional:
        return isinstance(value, str)
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    if isinstance(default, float):
        return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
    return isinstance(value, type(default))


class ConfigManager:
    """Reads and writes the peek configuration file"""

    def __init__(self, peek_dir: Optional[pathlib.Path] = None):
        """Initialize configuration manager

        Args:
            peek_dir: Override default .peek directory location
        """
        if peek_dir:
            self.peek_dir = peek_dir
        else:
            self.peek_dir = pathlib.Path.home() / ".peek"

        self.config_file = self.peek_dir / "config.json"

    def load(self) -> PeekConfig:
        """Load configuration from file"""
        if not self.config_file.exists():
            return PeekConfig()

        try:
            with self.config_file.open(encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning("Could not load %s, using defaults: %s", self.config_file, e)
            return PeekConfig()

        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.config_file)
            return PeekConfig()

        return PeekConfig.from_dict(data)

    def save(self, config: PeekConfig):
        """Save configuration to file"""
        self.peek_dir.mkdir(parents=True, exist_ok=True)
        with self.config_file.open("w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)
