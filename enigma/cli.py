"""
Enigma CLI
===========

Click-based command-line front end for the Enigma simulator.

Usage::

    python -m enigma encode "Attack at dawn"
    python -m enigma encode BDZGO --rotors "I II III" --positions AAA --plugboard ""
    python -m enigma trace --rotors "I II III" --positions ADU --count 4
    python -m enigma catalog
    python -m enigma keygen --seed 1939

Settings not given on the command line come from the ``[enigma]`` section
of the configuration file (default: rotors I-II-III, reflector B, rings
and positions AAA, plugs AB CD).

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import functools
import json
from typing import Any, Callable, Optional

import click

from shared.config import RotorConfig
from shared.console import RotorConsole
from shared.logger import RotorLogger

from enigma import __version__
from enigma.core.engine import EnigmaEngine
from enigma.core.errors import EnigmaError
from enigma.core.models import MachineSettings
from enigma.output.console import EnigmaConsoleOutput


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a RotorCore configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """RotorCore Enigma -- rotor cipher machine simulator.

    Encode and decode messages, watch the rotors step and draw random
    key sheets.
    """
    ctx.ensure_object(dict)

    try:
        rotor_config = RotorConfig.load(config) if config else RotorConfig()
        engine = EnigmaEngine(rotor_config)
    except ValueError as exc:
        # Malformed TOML or an invalid custom wheel table
        raise click.ClickException(
            f"Configuration {config or 'defaults'}: {exc}"
        ) from exc

    ctx.obj["config"] = rotor_config
    ctx.obj["output_format"] = output
    ctx.obj["quiet"] = quiet

    console = RotorConsole(quiet=quiet or output == "json")
    ctx.obj["console"] = console
    ctx.obj["engine"] = engine
    ctx.obj["display"] = EnigmaConsoleOutput(console)
    ctx.obj["logger"] = RotorLogger.from_config("enigma.cli", rotor_config.global_settings)

    if not quiet and output == "console":
        console.banner(version=__version__)


def _machine_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the machine setting options shared by several commands."""
    options = [
        click.option("--rotors", "-r", default=None,
                     help='Rotor order, left to right (e.g. "I II III").'),
        click.option("--reflector", "-u", default=None,
                     help="Reflector type (e.g. B)."),
        click.option("--rings", default=None,
                     help='Ring settings as letters or 1-based numbers ("AAA", "01 01 01").'),
        click.option("--positions", "-p", default=None,
                     help='Start positions as letters or 1-based numbers ("AAA").'),
        click.option("--plugboard", "-s", default=None,
                     help='Plug pairs (e.g. "AB CD"); pass "" for an empty board.'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _handles_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report engine errors as a click error and a non-zero exit status."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except EnigmaError as exc:
            ctx = click.get_current_context()
            ctx.obj["logger"].error("%s failed: %s", ctx.info_name, exc)
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _settings(ctx: click.Context, **options: Optional[str]) -> MachineSettings:
    engine: EnigmaEngine = ctx.obj["engine"]
    return engine.settings_from_text(
        rotors=options.get("rotors"),
        reflector=options.get("reflector"),
        ring_settings=options.get("rings"),
        positions=options.get("positions"),
        plugboard=options.get("plugboard"),
    )


def _emit_json(model: Any) -> None:
    click.echo(json.dumps(model.model_dump(), indent=2, ensure_ascii=False, default=str))


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("text")
@_machine_options
@click.pass_context
@_handles_errors
def encode(ctx: click.Context, text: str, **options: Optional[str]) -> None:
    """Encode (or decode) TEXT.

    The machine is reciprocal: running the output through a machine with
    the same settings returns the original letters.
    """
    engine: EnigmaEngine = ctx.obj["engine"]
    display: EnigmaConsoleOutput = ctx.obj["display"]

    result = engine.encode_text(text, _settings(ctx, **options))

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    elif ctx.obj["quiet"]:
        click.echo(result.grouped_output)
    else:
        display.display_settings(result.settings)
        display.display_result(result)
        display.display_window(result.end_positions)


@cli.command()
@click.option("--keys", "-k", default=None,
              help="Letters to press (default: COUNT presses of A).")
@click.option("--count", "-n", type=click.IntRange(1, 10_000), default=26,
              show_default=True, help="Number of keypresses when --keys is omitted.")
@_machine_options
@click.pass_context
@_handles_errors
def trace(
    ctx: click.Context,
    keys: Optional[str],
    count: int,
    **options: Optional[str],
) -> None:
    """Show rotor positions keypress by keypress, marking double steps."""
    engine: EnigmaEngine = ctx.obj["engine"]
    display: EnigmaConsoleOutput = ctx.obj["display"]

    result = engine.trace_stepping(keys if keys is not None else "A" * count,
                                   _settings(ctx, **options))

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    else:
        display.display_settings(result.settings)
        display.display_trace(result)


@cli.command()
@click.pass_context
def catalog(ctx: click.Context) -> None:
    """List the available rotor and reflector types."""
    engine: EnigmaEngine = ctx.obj["engine"]
    rotors, reflectors = engine.list_catalog()

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({
            "rotors": [
                {"name": r.name, "wiring": r.wiring, "notches": r.notches}
                for r in rotors
            ],
            "reflectors": [{"name": r.name, "wiring": r.wiring} for r in reflectors],
        }, indent=2))
    else:
        ctx.obj["display"].display_catalog(rotors, reflectors)


@cli.command()
@click.option("--seed", type=int, default=None, help="Seed for a reproducible sheet.")
@click.option("--rotor-count", type=click.IntRange(1), default=3, show_default=True,
              help="Rotors per machine.")
@click.option("--plugs", type=click.IntRange(0, 13), default=10, show_default=True,
              help="Plugboard cables.")
@click.pass_context
@_handles_errors
def keygen(ctx: click.Context, seed: Optional[int], rotor_count: int, plugs: int) -> None:
    """Draw random machine settings in key-sheet form."""
    engine: EnigmaEngine = ctx.obj["engine"]
    settings = engine.generate_settings(seed, rotor_count=rotor_count, plug_count=plugs)

    if ctx.obj["output_format"] == "json":
        _emit_json(settings)
    elif ctx.obj["quiet"]:
        click.echo(settings.describe())
    else:
        ctx.obj["display"].display_settings(settings)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Enigma CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
