"""
row.py — One schematic row and the number extractor that consumes it.

A Row keeps its text unchanged for its whole lifetime. Digits that have
already been counted are tracked in a parallel `consumed` mask rather than
overwritten, so a later extraction attempt over the same cells finds
nothing while the original characters stay available for classification
and logging.
"""

from dataclasses import dataclass
from typing import List, Optional

from partscan.errors import NumberParseError
from partscan.symbols import BLANK, is_digit


# Largest part number accepted (unsigned 32-bit range)
MAX_NUMBER = 2**32 - 1


@dataclass(frozen=True)
class Number:
    """A part number and the half-open column range [start, end) it occupied."""

    value: int
    start: int
    end: int


class Row:
    """
    A single line of the schematic plus its consumption mask.

    `index` counts schematic rows (skipped empty lines excluded); `line_number`
    is the 1-based line of the input it came from, None for synthetic rows.
    """

    def __init__(self, text: str, index: int = 0, line_number: Optional[int] = None):
        self.text = text
        self.index = index
        self.line_number = line_number
        self.consumed: List[bool] = [False] * len(text)

    @classmethod
    def blank(cls, length: int, index: int = 0, blank: str = BLANK) -> 'Row':
        """Row of blank placeholders, used above the first and below the last row."""
        return cls(blank * length, index)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"Row({self.index}, {self.render()!r})"

    def is_live_digit(self, pos: int) -> bool:
        """True if `pos` is inside the row, holds a digit and has not been consumed."""
        if pos < 0 or pos >= len(self.text):
            return False
        return is_digit(self.text[pos]) and not self.consumed[pos]

    def consume(self, start: int, end: int) -> None:
        for pos in range(start, end):
            self.consumed[pos] = True

    def render(self, blank: str = BLANK) -> str:
        """Text with consumed cells shown as blanks (for debug output)."""
        return ''.join(
            blank if used else c for c, used in zip(self.text, self.consumed)
        )


def extract_number_at(row: Row, pivot: int, max_number: int = MAX_NUMBER) -> Optional[Number]:
    """
    Extract the live digit run passing through `pivot`, consuming it.

    Returns None when `pivot` is out of range, not a digit, or part of a run
    that was already extracted.

    Raises:
        NumberParseError: If the run's value is larger than `max_number`
    """
    if not row.is_live_digit(pivot):
        return None

    start = pivot
    while row.is_live_digit(start - 1):
        start -= 1

    end = pivot
    while row.is_live_digit(end):
        end += 1

    if start == end:
        return None

    digits = row.text[start:end]
    value = int(digits)
    if value > max_number:
        raise NumberParseError(digits, row.index, start, end, max_number, row.line_number)

    row.consume(start, end)
    return Number(value, start, end)
