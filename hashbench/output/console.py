"""
HashBench Console Output
=========================

Rich-based formatters for the result log: one table with the label,
encoded output and average time of every result, and a spread table
for the most recent measurement.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich.table import Table
from rich.text import Text

from shared.console import BenchConsole
from hashbench.core.models import HashResult
from hashbench.core.timing import TimingMeasurement

_ALGORITHM_COLOURS: dict[str, str] = {
    "SHA256": "bright_green",
    "SHA512": "green",
    "MD5": "bold red",
    "BCrypt": "yellow",
    "Argon2id": "bright_magenta",
}


def _colour_for(label: str) -> str:
    for prefix, colour in _ALGORITHM_COLOURS.items():
        if label.startswith(prefix):
            return colour
    return "white"


class BenchConsoleOutput:
    """Console output formatters for HashBench results.

    Usage::

        console = BenchConsole()
        output = BenchConsoleOutput(console)
        output.display_results(engine.results)
    """

    def __init__(self, console: Optional[BenchConsole] = None) -> None:
        self.console = console or BenchConsole()
        self._rich = self.console.rich

    def display_results(self, results: Iterable[HashResult]) -> None:
        """Render every result, oldest first."""
        self.console.section("Hash Results")

        tbl = Table(
            title="Results",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Algorithm", style="bold")
        tbl.add_column("Output", overflow="fold", ratio=3)
        tbl.add_column("Time", justify="right")

        for idx, result in enumerate(results, start=1):
            label = Text(result.algorithm, style=_colour_for(result.algorithm))
            output = (
                Text(result.output, style="bold red")
                if result.is_error
                else Text(result.output)
            )
            tbl.add_row(str(idx), label, output, result.time_display)

        self._rich.print(tbl)

    def display_spread(self, label: str, measurement: TimingMeasurement) -> None:
        """Show min / max / stdev of the per-run durations."""
        self.console.table(
            f"Timing Spread -- {label}",
            ["Runs", "Average (ms)", "Min (ms)", "Max (ms)", "Stdev (ms)"],
            [[
                len(measurement.samples),
                f"{measurement.average_ms:.3f}",
                f"{measurement.min_ms:.3f}",
                f"{measurement.max_ms:.3f}",
                f"{measurement.stdev_ms:.3f}",
            ]],
        )

    def display_validation_error(self, result: HashResult) -> None:
        self.console.error(result.message or "Request refused.")
