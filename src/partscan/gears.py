"""
gears.py — Gear records and the coordinate-keyed registry that owns them.

A gear is a `*` symbol that counts only when exactly two part numbers
touch it; its ratio is the product of those two numbers.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from partscan.errors import GearOverflowError


@dataclass
class Gear:
    """A gear at column `x`, row `y` (input line `line_number`) with up to two adjacent numbers."""

    x: int
    y: int
    first: Optional[int] = None
    second: Optional[int] = None
    line_number: Optional[int] = None

    def add_num(self, value: int) -> None:
        """
        Attach a number to this gear.

        Raises:
            GearOverflowError: If the gear already holds two numbers
        """
        if self.first is None:
            self.first = value
        elif self.second is None:
            self.second = value
        else:
            raise GearOverflowError(
                self.x, self.y, (self.first, self.second), value, self.line_number
            )

    @property
    def is_paired(self) -> bool:
        return self.first is not None and self.second is not None

    def ratio(self) -> Optional[int]:
        if not self.is_paired:
            return None
        return self.first * self.second


class GearRegistry:
    """Owns every Gear seen during a scan, keyed by exact (x, y)."""

    def __init__(self):
        self._gears: Dict[Tuple[int, int], Gear] = {}

    def get_or_create(self, x: int, y: int, line_number: Optional[int] = None) -> Gear:
        key = (x, y)
        gear = self._gears.get(key)
        if gear is None:
            gear = Gear(x, y, line_number=line_number)
            self._gears[key] = gear
        return gear

    def get(self, x: int, y: int) -> Optional[Gear]:
        return self._gears.get((x, y))

    def __len__(self) -> int:
        return len(self._gears)

    def __iter__(self) -> Iterator[Gear]:
        return iter(self._gears.values())

    def paired(self) -> List[Gear]:
        return [gear for gear in self._gears.values() if gear.is_paired]

    def ratio_sum(self) -> int:
        """Sum of ratios over gears holding two numbers; the rest contribute 0."""
        return sum(gear.ratio() for gear in self.paired())
