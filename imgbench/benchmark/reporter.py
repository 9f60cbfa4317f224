"""
Console reporting for benchmark results.
"""

from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table

from ..codecs.base import ImageFormat
from .metrics import AggregateStat
from .runner import EncodeRun


STAT_COLUMNS = ["size", "duration", "isLess", "difference", "save", "lost"]

STAT_COLUMN_STYLES = {
    "isLess": {},
    "save": {"justify": "right", "style": "green"},
    "lost": {"justify": "right", "style": "red"},
}


class Reporter:
    """
    Print benchmark results as console tables.

    Output, in order:
        - Raw results per format
        - Original combined size
        - Aggregate stats per format

    Example:
        reporter = Reporter()
        reporter.print_report(run, stats)
    """

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize reporter.

        Args:
            console: Rich console to print to (default: stdout)
        """
        self.console = console or Console()

    def print_report(self, run: EncodeRun, stats: Dict[ImageFormat, AggregateStat]) -> None:
        """Print raw results, original size and aggregate stats."""
        self.print_results(run)
        self.print_original_size(run.original_total_size)
        self.print_stats(stats)

    def print_results(self, run: EncodeRun) -> None:
        """Print one row per format with every encode result."""
        table = Table(title="Encode Results")
        table.add_column("Format", style="cyan")
        for index in range(run.image_count):
            table.add_column(str(index), justify="right")

        for name, format_results in run.to_dict().items():
            table.add_row(
                name,
                *(f"{r['size']} B / {r['duration']} ms" for r in format_results),
            )

        self.console.print(table)

    def print_original_size(self, size: int) -> None:
        self.console.print(f"Original Size: {size}")

    def print_stats(self, stats: Dict[ImageFormat, AggregateStat]) -> None:
        """Print aggregate stats per format."""
        table = Table(title="Totals")
        table.add_column("Format", style="cyan")
        for column in STAT_COLUMNS:
            table.add_column(column, **STAT_COLUMN_STYLES.get(column, {"justify": "right"}))

        for fmt, stat in stats.items():
            row = stat.to_dict()
            table.add_row(fmt.value, *(_format_cell(column, row[column]) for column in STAT_COLUMNS))

        self.console.print(table)


def _format_cell(column: str, value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if column == "duration":
        return f"{value}ms"
    return str(value)
