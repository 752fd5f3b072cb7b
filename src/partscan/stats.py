"""Statistics collection for the schematic scanner.

Collects counts during a scan that help explain its result:
- Rows and row widths (including rows that differ from the first row's width)
- Symbol frequencies per character
- Part numbers extracted and where they were found (same row, row above/below)
- Gears seen, paired and left unpaired

The statistics are written to a separate JSON file from the main output.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import orjson


@dataclass
class ScanStats:
    """Accumulator for scanner statistics."""

    # Row counts
    rows: int = 0
    empty_lines_skipped: int = 0
    width: Optional[int] = None
    max_width: int = 0
    ragged_rows: int = 0

    # Symbol frequencies (every special character, gears included)
    symbol_counts: Counter = field(default_factory=Counter)

    # Part numbers
    part_numbers: int = 0
    largest_part_number: int = 0
    neighbor_counts: Counter = field(default_factory=Counter)

    # Gears (filled in once the scan finishes)
    gears_seen: int = 0
    gears_paired: int = 0

    def record_row(self, width: int) -> None:
        """Record a row; rows whose width differs from the first are ragged."""
        self.rows += 1
        if self.width is None:
            self.width = width
        elif width != self.width:
            self.ragged_rows += 1
        self.max_width = max(self.max_width, width)

    def record_empty_line(self) -> None:
        self.empty_lines_skipped += 1

    def record_symbol(self, c: str) -> None:
        self.symbol_counts[c] += 1

    def record_part_number(self, value: int, neighbor: str) -> None:
        """Record an extracted number and which neighbor row it was found in."""
        self.part_numbers += 1
        self.largest_part_number = max(self.largest_part_number, value)
        self.neighbor_counts[neighbor] += 1

    def record_gears(self, seen: int, paired: int) -> None:
        self.gears_seen = seen
        self.gears_paired = paired

    def to_dict(self) -> dict:
        """Convert stats to a JSON-serializable dict."""
        return {
            "rows": {
                "total": self.rows,
                "width": self.width or 0,
                "max_width": self.max_width,
                "ragged": self.ragged_rows,
                "empty_lines_skipped": self.empty_lines_skipped,
            },
            "symbols": {
                "total": sum(self.symbol_counts.values()),
                "by_char": dict(self.symbol_counts.most_common()),
            },
            "part_numbers": {
                "total": self.part_numbers,
                "largest": self.largest_part_number,
                "by_neighbor": dict(self.neighbor_counts.most_common()),
            },
            "gears": {
                "seen": self.gears_seen,
                "paired": self.gears_paired,
                "unpaired": self.gears_seen - self.gears_paired,
            },
        }

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)

    def write_to_file(self, path: Union[str, Path]) -> None:
        """Write stats to a JSON file."""
        with open(path, 'wb') as f:
            f.write(self.to_json())
