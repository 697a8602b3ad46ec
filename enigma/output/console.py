"""
Enigma Console Output
======================

Rich-based formatters for machine settings, rotor windows, encode results,
stepping traces and the rotor catalog, built on the shared
:class:`RotorConsole` styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import RotorConsole
from enigma.core.catalog import ReflectorSpec, RotorSpec
from enigma.core.models import EncodeResult, MachineSettings, StepTrace


class EnigmaConsoleOutput:
    """Console output formatters for Enigma results.

    Usage::

        output = EnigmaConsoleOutput(RotorConsole())
        output.display_settings(result.settings)
        output.display_result(result)
    """

    def __init__(self, console: Optional[RotorConsole] = None) -> None:
        self.console = console or RotorConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Settings
    # ------------------------------------------------------------------ #

    def display_settings(self, settings: MachineSettings) -> None:
        """Key-sheet style table of the machine configuration."""
        self.console.section("Machine Settings")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Reflector", justify="center")
        for i, name in enumerate(settings.rotors):
            tbl.add_column(self._slot_label(i, len(settings.rotors)), justify="center")

        tbl.add_row(settings.reflector, *settings.rotors)
        tbl.add_row(
            "ring",
            *(f"{letter} ({r + 1:02d})" for letter, r in zip(settings.ring_letters, settings.ring_settings)),
        )
        tbl.add_row("start", *settings.position_letters)
        self._rich.print(tbl)

        plugs = " ".join(settings.plugboard) if settings.plugboard else "none"
        self._rich.print(f"[bold]Plugboard:[/bold] {plugs}")
        self._rich.print()

    @staticmethod
    def _slot_label(index: int, count: int) -> str:
        if index == count - 1:
            return "Right"
        if index == 0:
            return "Left"
        return "Middle" if count == 3 else f"Slot {index + 1}"

    def display_window(self, letters: str) -> None:
        """Rotor window letters as the operator sees them."""
        window = Text()
        for letter in letters:
            window.append(f" {letter} ", style="rotor.window")
            window.append(" ")
        self._rich.print(Panel(window, title="Rotor Window", expand=False))

    # ------------------------------------------------------------------ #
    #  Results
    # ------------------------------------------------------------------ #

    def display_result(self, result: EncodeResult) -> None:
        self.console.section("Result")

        body = Text()
        body.append("Input:  ", style="bold")
        body.append(f"{result.processed_text or '-'}\n")
        body.append("Output: ", style="bold")
        body.append(result.grouped_output or result.output_text or "-", style="rotor.lamp")
        self._rich.print(Panel(body, border_style="cyan"))

        self._rich.print(
            f"[rotor.dim]{result.character_count} letters, rotors "
            f"{result.start_positions} -> {result.end_positions}[/rotor.dim]"
        )
        if result.processed_text != result.input_text.upper():
            self.console.warning("Non-letter characters were removed before encoding")

    def display_trace(self, trace: StepTrace) -> None:
        """Per-keypress table with moved rotors highlighted."""
        self.console.section("Stepping Trace")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("#", justify="right", style="dim")
        tbl.add_column("Key", justify="center")
        tbl.add_column("Before", justify="center")
        tbl.add_column("After", justify="center")
        tbl.add_column("Lamp", justify="center", style="rotor.lamp")
        tbl.add_column("Note")

        for rec in trace.records:
            after = Text()
            for letter, moved in zip(rec.positions_after, rec.stepped):
                after.append(letter, style="bold bright_green" if moved else "dim")
            note = "double step" if rec.double_step else ""
            tbl.add_row(
                str(rec.index), rec.key, rec.positions_before, after, rec.output, note
            )

        self._rich.print(tbl)
        if trace.double_steps:
            self.console.info(
                "Double step at keypress "
                + ", ".join(str(i) for i in trace.double_steps)
            )

    def display_catalog(
        self,
        rotors: Sequence[RotorSpec],
        reflectors: Sequence[ReflectorSpec],
    ) -> None:
        self.console.table(
            "Rotors",
            ["Name", "Wiring", "Notches", "Description"],
            [(r.name, r.wiring, r.notches or "-", r.description) for r in rotors],
            styles=["bold", "", "bright_yellow", "dim"],
        )
        self.console.table(
            "Reflectors",
            ["Name", "Wiring", "Description"],
            [(r.name, r.wiring, r.description) for r in reflectors],
            styles=["bold", "", "dim"],
        )
