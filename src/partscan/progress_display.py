"""
Rich-based live progress panel for scans of large schematics.

Uses Rich's Live display so the counters update in place instead of
scrolling the terminal.
"""

import time
from typing import Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ScanProgressDisplay:
    """
    Context manager showing rows scanned, running sum and gears.

    Usage:
        with ScanProgressDisplay("Scanning schematic.txt") as progress:
            for line in f:
                scanner.feed(line)
                progress.update(scanner)
    """

    def __init__(
        self,
        title: str = "Scanning",
        refresh_per_second: int = 10,
        update_interval: int = 100,
        console: Optional[Console] = None,
    ):
        """
        Args:
            title: Title for the progress panel
            refresh_per_second: How many times per second Rich redraws
            update_interval: Rebuild the panel every N update() calls
            console: Console to draw on (defaults to stderr)
        """
        self.title = title
        self.refresh_per_second = refresh_per_second
        self.update_interval = update_interval
        self.console = console or Console(stderr=True)

        self.rows = 0
        self.part_sum = 0
        self.gears = 0
        self.iteration_count = 0
        self.start_time: float = 0
        self.live: Optional[Live] = None

    def __enter__(self):
        self.start_time = time.time()
        self.live = Live(
            self._make_panel(),
            console=self.console,
            refresh_per_second=self.refresh_per_second,
        )
        self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
        return False

    def update(self, scanner) -> None:
        """Copy counters from a SchematicScanner; redraw every `update_interval` calls."""
        self.iteration_count += 1
        self.rows = scanner.row_index
        self.part_sum = scanner.part_sum
        self.gears = len(scanner.gears)

        if self.live and self.iteration_count % self.update_interval == 0:
            self.live.update(self._make_panel())

    def elapsed(self) -> float:
        return time.time() - self.start_time if self.start_time else 0.0

    def _make_panel(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        elapsed = self.elapsed()
        rate = self.rows / elapsed if elapsed > 0 else 0.0
        metrics = [
            ("Rows", f"{self.rows:,}"),
            ("Part sum", f"{self.part_sum:,}"),
            ("Gears", f"{self.gears:,}"),
            ("Elapsed", format_elapsed(elapsed)),
            ("Rate", f"{rate:,.1f}/s"),
        ]
        for label, value in metrics:
            grid.add_row(Text(f"{label}:", style="bold grey50"), Text(value, style="bright_cyan"))

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")


def format_elapsed(seconds: float) -> str:
    """Format as HH:MM:SS past an hour, MM:SS otherwise."""
    if seconds >= 3600:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours:02d}:{minutes:02d}:{int(seconds % 60):02d}"
    return f"{int(seconds // 60):02d}:{int(seconds % 60):02d}"
