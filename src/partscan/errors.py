"""
errors.py — Error types raised while scanning a schematic.

All errors derive from SchematicError and carry the structured data needed
to describe the problem (coordinates, offending digits, etc.); the message
is built from those fields so callers can render their own if they prefer.

Rows are counted from 0 over schematic rows only, so skipped empty lines do
not advance them; `line_number` is the 1-based line of the input file.
"""

from pathlib import Path
from typing import Optional, Tuple


class SchematicError(ValueError):
    """Base class for every fatal scanner error."""

    pass


def _location(row: int, line_number: Optional[int]) -> str:
    if line_number is None:
        return f"row {row}"
    return f"row {row} (line {line_number})"


class NumberParseError(SchematicError):
    """Raised when a digit run cannot be represented as a part number."""

    def __init__(
        self,
        digits: str,
        row: int,
        start: int,
        end: int,
        limit: int,
        line_number: Optional[int] = None,
    ):
        self.digits = digits
        self.row = row
        self.start = start
        self.end = end
        self.limit = limit
        self.line_number = line_number
        super().__init__(
            f"At {_location(row, line_number)}, columns {start}-{end - 1}: "
            f"number '{digits}' exceeds the maximum of {limit}"
        )


class GearOverflowError(SchematicError):
    """Raised when a third number is attributed to a single gear at column `x`, row `y`."""

    def __init__(
        self,
        x: int,
        y: int,
        numbers: Tuple[int, int],
        value: int,
        line_number: Optional[int] = None,
    ):
        self.x = x
        self.y = y
        self.numbers = numbers
        self.value = value
        self.line_number = line_number
        super().__init__(
            f"Gear at column {x}, {_location(y, line_number)} already holds "
            f"{numbers[0]} and {numbers[1]}; cannot add {value}"
        )


class ConfigError(SchematicError):
    """Raised when a scanner configuration file is missing or invalid."""

    def __init__(self, reason: str, path: Optional[Path] = None):
        self.reason = reason
        self.path = path
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{reason}")
