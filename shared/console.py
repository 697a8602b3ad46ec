"""
RotorCore Console Interface
============================

Rich-powered console abstraction giving every RotorCore tool the same
banner, section headers, status lines and table styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_ROTOR_THEME = Theme(
    {
        "rotor.banner": "bold bright_cyan",
        "rotor.section": "bold bright_magenta",
        "rotor.warning": "bold yellow",
        "rotor.info": "bold bright_blue",
        "rotor.dim": "dim white",
        "rotor.highlight": "bold bright_white",
        "rotor.window": "bold black on bright_yellow",
        "rotor.lamp": "bold bright_yellow",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ███████╗███╗   ██╗██╗ ██████╗ ███╗   ███╗ █████╗
  ██╔════╝████╗  ██║██║██╔════╝ ████╗ ████║██╔══██╗
  █████╗  ██╔██╗ ██║██║██║  ███╗██╔████╔██║███████║
  ██╔══╝  ██║╚██╗██║██║██║   ██║██║╚██╔╝██║██╔══██║
  ███████╗██║ ╚████║██║╚██████╔╝██║ ╚═╝ ██║██║  ██║
  ╚══════╝╚═╝  ╚═══╝╚═╝ ╚═════╝ ╚═╝     ╚═╝╚═╝  ╚═╝
[/bright_cyan]"""

_TAGLINE = "Rotor Cipher Machine Simulator"


class RotorConsole:
    """Unified console interface for RotorCore tools.

    Usage::

        con = RotorConsole()
        con.banner()
        con.section("Settings")
        con.info("Message encoded")

    Args:
        quiet:  Suppress all output (library / test mode).
        record: Enable Rich recording for later export.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        self._console = Console(
            theme=_ROTOR_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner & sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[rotor.highlight]{_TAGLINE}[/rotor.highlight]\n"
            f"[rotor.dim]Version: {version}  |  {now}[/rotor.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="rotor.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def warning(self, message: str) -> None:
        self._console.print(f"[rotor.warning][⚠] WARNING:[/rotor.warning] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[rotor.info][ℹ] INFO:[/rotor.info] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
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
            rows:     Row tuples; each cell is stringified.
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
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Recorded output as plain text (requires ``record=True``)."""
        return self._console.export_text()
