"""
HashBench Console Interface
============================

Rich-powered console abstraction providing a unified presentation layer
for the HashBench command-line interface.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers, severity-coloured messages, tables and
the busy spinner -- all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_BENCH_THEME = Theme(
    {
        "bench.banner": "bold bright_cyan",
        "bench.section": "bold bright_magenta",
        "bench.warning": "bold yellow",
        "bench.error": "bold red",
        "bench.info": "bold bright_blue",
        "bench.dim": "dim white",
        "bench.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
  _   _           _     ____                  _
 | | | | __ _ ___| |__ | __ )  ___ _ __   ___| |__
 | |_| |/ _` / __| '_ \|  _ \ / _ \ '_ \ / __| '_ \
 |  _  | (_| \__ \ | | | |_) |  __/ | | | (__| | | |
 |_| |_|\__,_|___/_| |_|____/ \___|_| |_|\___|_| |_|
[/bright_cyan]"""

_TAGLINE = "Multi-Algorithm Hashing Benchmark"


class BenchConsole:
    """Unified console interface for HashBench output.

    Usage::

        con = BenchConsole()
        con.banner()
        con.section("Results")
        con.warning("Input text is empty")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_BENCH_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / section header
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the HashBench ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[bench.highlight]{_TAGLINE}[/bench.highlight]\n"
            f"[bench.dim]Version: {version}  |  {now}[/bench.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="bench.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def warning(self, message: str) -> None:
        self._console.print(
            f"[bench.warning][⚠] WARNING:[/bench.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[bench.error][✘] ERROR:[/bench.error] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(
        self, message: str = "Working..."
    ) -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Hashing..."):
                result = engine.submit_sync(request)
        """
        with self._console.status(
            f"[bench.info]{message}[/bench.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

