"""
config.py — Scanner configuration.

Defaults match the standard schematic alphabet. A YAML file can override
them:

  scanner:
    blank: "."
    gear: "*"
    max_number: 4294967295
    skip_empty_lines: true

The top-level `scanner:` key is optional; a flat mapping is accepted too.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from partscan.errors import ConfigError
from partscan.row import MAX_NUMBER
from partscan.symbols import BLANK, GEAR, DIGITS, LINE_ENDINGS


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannerConfig:
    """Alphabet and limits used by the scanner."""

    blank: str = BLANK
    gear: str = GEAR
    max_number: int = MAX_NUMBER
    skip_empty_lines: bool = True

    def validate(self, path: Optional[Path] = None) -> 'ScannerConfig':
        """
        Check marker characters and limits.

        Raises:
            ConfigError: If any value is unusable
        """
        for name in ('blank', 'gear'):
            marker = getattr(self, name)
            if not isinstance(marker, str) or len(marker) != 1:
                raise ConfigError(f"'{name}' must be a single character, got {marker!r}", path)
            if marker in DIGITS or marker in LINE_ENDINGS:
                raise ConfigError(f"'{name}' cannot be a digit or line ending, got {marker!r}", path)
        if self.blank == self.gear:
            raise ConfigError(f"'blank' and 'gear' must differ, both are {self.blank!r}", path)
        # bool is an int subclass; reject it explicitly
        if isinstance(self.max_number, bool) or not isinstance(self.max_number, int):
            raise ConfigError(f"'max_number' must be an integer, got {self.max_number!r}", path)
        if self.max_number <= 0:
            raise ConfigError(f"'max_number' must be positive, got {self.max_number}", path)
        if not isinstance(self.skip_empty_lines, bool):
            raise ConfigError(
                f"'skip_empty_lines' must be true or false, got {self.skip_empty_lines!r}", path
            )
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[Path] = None) -> 'ScannerConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown scanner setting(s): {', '.join(unknown)}", path)
        return cls(**data).validate(path)


def load_config(config_path: Optional[Path] = None) -> ScannerConfig:
    """
    Load scanner configuration from a YAML file.

    Args:
        config_path: YAML file, or None for the defaults

    Raises:
        ConfigError: If the file is missing, unparseable or invalid
    """
    if config_path is None:
        return ScannerConfig()

    if not config_path.exists():
        raise ConfigError("Configuration file not found", config_path)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", config_path) from e

    if data is None:
        logger.info(f"Empty configuration file {config_path}, using defaults")
        return ScannerConfig()

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping", config_path)

    if 'scanner' in data:
        data = data['scanner'] or {}
        if not isinstance(data, dict):
            raise ConfigError("'scanner' must be a mapping", config_path)

    config = ScannerConfig.from_dict(data, config_path)
    logger.info(f"Loaded scanner config from {config_path}")
    return config
