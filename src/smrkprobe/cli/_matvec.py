"""The ``matvec`` command: apply the operator to a vector."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from smrkprobe.core.exceptions import SmrkError

from ._app import app, console
from ._theme import VECTOR_PREVIEW_ROWS
from ._utils import _load_vector_file, _parse_vector, _resolve_project_config, _write_json


@app.command(rich_help_panel="Operator")
def matvec(
    n: int = typer.Argument(..., help="Dimension N of the operator."),
    p_max: int = typer.Argument(..., help="Largest prime in the shift summation."),
    alpha: float = typer.Option(0.0, "--alpha", "-a", help="Weight of the von Mangoldt term."),
    beta: float = typer.Option(0.0, "--beta", "-b", help="Weight of the log term."),
    x: str | None = typer.Option(None, "--x", help="Comma-separated input vector."),
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="JSON file holding the input vector."
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to smrkprobe.toml."),
    output: Path | None = typer.Option(None, "--output", "-o"),
    format: str = typer.Option("rich", "--format", "-f"),
) -> None:
    """Apply the operator H to a vector and print Hx.

    [dim]Examples:[/dim]
      smrkprobe matvec 4 2 --x 1,0,0,0
      smrkprobe matvec 1000 97 --alpha 0.5 --input x.json --format json
    """
    from smrkprobe.service import matvec as service_matvec

    if (x is None) == (input_path is None):
        console.print("[smrk.fail]Provide exactly one of --x or --input.[/smrk.fail]")
        raise typer.Exit(code=1)

    try:
        vector = _parse_vector(x) if x is not None else _load_vector_file(input_path)
    except (OSError, ValueError) as exc:
        console.print(f"[smrk.fail]Invalid input vector:[/smrk.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    try:
        project = _resolve_project_config(config)
        result = service_matvec(n, p_max, alpha, beta, vector, config=project)
    except (SmrkError, FileNotFoundError) as exc:
        console.print(f"[smrk.fail]matvec failed:[/smrk.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    payload = {"n": n, "p_max": p_max, "alpha": alpha, "beta": beta, "y": result}
    if output is not None:
        _write_json(output, payload)

    if format == "json":
        typer.echo(json.dumps(payload, indent=2))
        return

    from ._rich_output import vector_table

    # entries are floats once the service has accepted them
    console.print(
        vector_table(
            [float(value) for value in vector],
            result,
            title=f"Hx | N={payload['n']}, Pmax={payload['p_max']}, alpha={alpha}, beta={beta}",
            max_rows=VECTOR_PREVIEW_ROWS,
        )
    )
    if output is not None:
        console.print(f"[smrk.pass]Result written to:[/smrk.pass] {output.resolve()}")
