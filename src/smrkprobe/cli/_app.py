"""App definition and root callback for the SMRK Probe CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from ._theme import SMRK_THEME

app = typer.Typer(
    help="Matrix-vector products and randomized symmetry probes for the SMRK operator.",
    epilog=(
        "[dim]Common workflows:\n"
        "  Apply H to a vector   → smrkprobe matvec 4 2 --x 1,0,0,0\n"
        "  Probe symmetry        → smrkprobe probe 4 2 --seed 42 --trials 100\n"
        "  System info           → smrkprobe doctor[/dim]"
    ),
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console(theme=SMRK_THEME)

# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def _version_callback(value: bool) -> None:
    if value:
        from smrkprobe.service import get_version

        console.print(get_version())
        raise typer.Exit()


def _debug_callback(debug: bool) -> None:
    """Enable debug logging when --debug is passed."""
    if debug:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """SMRK Probe command-line interface."""
    _debug_callback(debug)
