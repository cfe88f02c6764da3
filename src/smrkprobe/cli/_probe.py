"""The ``probe`` command: run the randomized symmetry probe."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from smrkprobe.core.exceptions import SmrkError

from ._app import app, console
from ._rich_output import key_value_panel
from ._theme import STATUS_ICONS, STATUS_STYLES, residual_status
from ._utils import _resolve_project_config


@app.command(rich_help_panel="Operator")
def probe(
    n: int = typer.Argument(..., help="Dimension N of the operator."),
    p_max: int = typer.Argument(..., help="Largest prime in the shift summation."),
    alpha: float = typer.Option(0.0, "--alpha", "-a", help="Weight of the von Mangoldt term."),
    beta: float = typer.Option(0.0, "--beta", "-b", help="Weight of the log term."),
    seed: int | None = typer.Option(None, "--seed", "-s", help="64-bit sampler seed."),
    trials: int | None = typer.Option(None, "--trials", "-t", help="Number of trials."),
    workers: int | None = typer.Option(None, "--workers", "-w", help="Worker threads."),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to smrkprobe.toml."),
    output: Path | None = typer.Option(None, "--output", "-o"),
    format: str = typer.Option("rich", "--format", "-f"),
) -> None:
    """Estimate how far H deviates from self-adjointness.

    Seed, trial count and worker count fall back to the probe section of
    smrkprobe.toml.

    [dim]Examples:[/dim]
      smrkprobe probe 4 2 --seed 42 --trials 100
      smrkprobe probe 5000 97 --alpha 1 --beta 0.5 --workers 4 -o report.json
    """
    from contextlib import nullcontext

    from rich.status import Status

    from smrkprobe.service import symmetry_probe

    try:
        project = _resolve_project_config(config)
    except (SmrkError, FileNotFoundError) as exc:
        console.print(f"[smrk.fail]Failed to load configuration:[/smrk.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    resolved_seed = project.probe.seed if seed is None else seed
    resolved_trials = project.probe.trials if trials is None else trials

    try:
        spinner = (
            nullcontext()
            if format == "json"
            else Status("[bold cyan]Running symmetry probe...[/bold cyan]", console=console)
        )
        with spinner:
            report = symmetry_probe(
                n,
                p_max,
                alpha,
                beta,
                resolved_seed,
                resolved_trials,
                workers=workers,
                config=project,
            )
    except SmrkError as exc:
        console.print(f"[smrk.fail]Symmetry probe failed:[/smrk.fail] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    if output is not None:
        report.save(output)

    if format == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    console.print(
        key_value_panel(
            {
                "N": report.n,
                "Pmax": report.p_max,
                "alpha": report.alpha,
                "beta": report.beta,
                "seed": report.seed,
                "trials": report.trials,
            },
            title="SMRK Spectral Probe",
        )
    )
    status = residual_status(report.sym_abs_max)
    style = STATUS_STYLES[status]
    console.print(
        key_value_panel(
            {
                "sym_abs_mean": f"{report.sym_abs_mean:.6e}",
                "sym_abs_max": (
                    f"[{style}]{report.sym_abs_max:.6e} {STATUS_ICONS[status]}[/{style}]"
                ),
                "hx_norm_mean": f"{report.hx_norm_mean:.6f}",
                "x_norm_mean": f"{report.x_norm_mean:.6f}",
            },
            title="Statistics",
            border="smrk.border.info",
        )
    )
    if output is not None:
        console.print(f"[smrk.pass]Report written to:[/smrk.pass] {output.resolve()}")
