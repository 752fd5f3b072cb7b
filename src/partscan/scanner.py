"""
scanner.py — Streaming adjacency scanner for engine schematics.

The scanner never holds more than two rows. Each new row becomes the
"current" row and the row before it the "previous" row. Two passes then
cover every symbol/number adjacency exactly once:

  Pass A: symbols in the previous row look left/right in their own row
          and at the three cells below them (current row).
  Pass B: symbols in the current row look at the three cells above them
          (previous row) and left/right in their own row.

Extraction consumes the digits it finds, so a number touching several
symbols is counted once, by whichever symbol reaches it first.

Usage:
    result = scan_lines(open('schematic.txt'))
    print(result.part_sum, result.gear_ratio_sum)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from partscan.config import ScannerConfig
from partscan.gears import GearRegistry
from partscan.row import Row, extract_number_at
from partscan.stats import ScanStats
from partscan.symbols import is_gear, is_special


logger = logging.getLogger(__name__)

# (row, column offset from the symbol, neighbor label for stats)
Neighbor = Tuple[Row, int, str]


@dataclass(frozen=True)
class ScanResult:
    """Final totals of a scan."""

    part_sum: int
    gear_ratio_sum: int
    stats: Optional[ScanStats] = None

    def to_dict(self) -> dict:
        return {'part_sum': self.part_sum, 'gear_ratio_sum': self.gear_ratio_sum}


class SchematicScanner:
    """Sliding two-row window over a schematic, fed one line at a time."""

    def __init__(self, config: Optional[ScannerConfig] = None):
        self.config = config or ScannerConfig()
        self.previous_row: Optional[Row] = None
        self.row_index = 0
        self.line_number = 0
        self.part_sum = 0
        self.gears = GearRegistry()
        self.stats = ScanStats()
        self._result: Optional[ScanResult] = None

    def feed(self, line: str) -> None:
        """
        Process the next line of the schematic.

        Raises:
            NumberParseError: If an adjacent digit run is too large
            GearOverflowError: If a gear ends up touching three numbers
        """
        if self._result is not None:
            raise RuntimeError("Scanner already finished; create a new one")

        self.line_number += 1
        # Trailing whitespace (line ending included) is never part of the grid
        text = line.rstrip()
        if not text and self.config.skip_empty_lines:
            self.stats.record_empty_line()
            logger.debug(f"Skipping empty line {self.line_number}")
            return

        current = Row(text, self.row_index, self.line_number)
        if self.previous_row is None:
            # Nothing above the first row
            self.previous_row = Row.blank(len(current), self.row_index - 1, self.config.blank)

        self.stats.record_row(len(current))
        for c in text:
            if is_special(c, self.config.blank):
                self.stats.record_symbol(c)

        previous = self.previous_row
        logger.debug("-" * 21)
        logger.debug(f"prev_line: {previous.render(self.config.blank)}")
        logger.debug(f"     line: {current.text}")

        self._scan_symbols(previous, [
            (previous, 1, 'same'),
            (previous, -1, 'same'),
            (current, 0, 'below'),
            (current, 1, 'below'),
            (current, -1, 'below'),
        ])
        self._scan_symbols(current, [
            (previous, 1, 'above'),
            (previous, -1, 'above'),
            (previous, 0, 'above'),
            (current, 1, 'same'),
            (current, -1, 'same'),
        ])

        self.previous_row = current
        self.row_index += 1

    def finish(self) -> ScanResult:
        """Flush the last row against a blank row and return the totals."""
        if self._result is not None:
            return self._result

        if self.previous_row is not None:
            last = self.previous_row
            below = Row.blank(len(last), self.row_index, self.config.blank)
            self._scan_symbols(last, [
                (last, 1, 'same'),
                (last, -1, 'same'),
                (below, 0, 'below'),
                (below, 1, 'below'),
                (below, -1, 'below'),
            ])

        self.stats.record_gears(len(self.gears), len(self.gears.paired()))
        self._result = ScanResult(self.part_sum, self.gears.ratio_sum(), self.stats)
        logger.debug(
            f"Scanned {self.row_index} rows: sum={self._result.part_sum}, "
            f"gear ratio sum={self._result.gear_ratio_sum}"
        )
        return self._result

    def _scan_symbols(self, symbol_row: Row, neighbors: List[Neighbor]) -> None:
        """Extract numbers around every symbol of `symbol_row`, in neighbor order."""
        for pos, c in enumerate(symbol_row.text):
            if not is_special(c, self.config.blank):
                continue

            gear = None
            if is_gear(c, self.config.gear):
                gear = self.gears.get_or_create(pos, symbol_row.index, symbol_row.line_number)

            for row, offset, neighbor in neighbors:
                number = extract_number_at(row, pos + offset, self.config.max_number)
                if number is None:
                    continue

                self.part_sum += number.value
                self.stats.record_part_number(number.value, neighbor)
                logger.debug(
                    f"  {c!r} at ({pos}, {symbol_row.index}) -> {number.value} "
                    f"(row {row.index}, columns {number.start}-{number.end - 1})"
                )
                if gear is not None:
                    gear.add_num(number.value)


def scan_lines(lines: Iterable[str], config: Optional[ScannerConfig] = None) -> ScanResult:
    """Scan an iterable of text lines and return the totals."""
    scanner = SchematicScanner(config)
    for line in lines:
        scanner.feed(line)
    return scanner.finish()


def scan_file(path: Path, config: Optional[ScannerConfig] = None) -> ScanResult:
    """
    Scan a schematic file.

    Raises:
        OSError: If the file cannot be read
        SchematicError: If the schematic is invalid
    """
    with open(path, 'r', encoding='utf-8') as f:
        return scan_lines(f, config)
