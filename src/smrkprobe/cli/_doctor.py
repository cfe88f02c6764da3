"""The ``doctor`` and ``version`` commands."""

from __future__ import annotations

import platform

import typer

from ._app import app, console
from ._rich_output import status_table


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Print the service identity string.

    [dim]Examples:[/dim]
      smrkprobe version
    """
    from smrkprobe.service import get_version

    console.print(get_version())


@app.command(rich_help_panel="Utilities")
def doctor() -> None:
    """Check the environment SMRK Probe runs in.

    [dim]Examples:[/dim]
      smrkprobe doctor
    """
    from importlib.metadata import version as dist_version

    from smrkprobe import __version__
    from smrkprobe.service import matvec

    rows: list[tuple[str, str, str]] = [
        ("pass", "SMRK Probe", __version__),
        ("pass", "Python", platform.python_version()),
        ("pass", "NumPy", dist_version("numpy")),
        ("pass", "Typer", dist_version("typer")),
        ("pass", "Rich", dist_version("rich")),
        ("pass", "Platform", platform.platform()),
    ]

    # H e_1 for N=4, Pmax=2 is (0, 1/2, 0, 0).
    expected = [0.0, 0.5, 0.0, 0.0]
    if matvec(4, 2, 0.0, 0.0, [1.0, 0.0, 0.0, 0.0]) == expected:
        rows.append(("pass", "Operator self-check", "H e_1 matches the reference column"))
    else:
        rows.append(("fail", "Operator self-check", "[smrk.fail]unexpected H e_1[/smrk.fail]"))

    console.print(status_table(rows, title="SMRK Probe Doctor"))

    if rows[-1][0] == "fail":
        raise typer.Exit(code=1)
