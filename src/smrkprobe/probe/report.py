"""Symmetry report container and assembly."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from smrkprobe.core.exceptions import IncompleteProbeError
from smrkprobe.core.params import OperatorParams

from .accumulator import Accumulator

REPORT_FIELDS: tuple[str, ...] = (
    "n",
    "p_max",
    "alpha",
    "beta",
    "seed",
    "trials",
    "sym_abs_mean",
    "sym_abs_max",
    "hx_norm_mean",
    "x_norm_mean",
)


@dataclass(frozen=True)
class SymmetryReport:
    """Summary of a finished symmetry probe.

    Field names, order and types are the record returned to remote callers
    and must not change.
    """

    n: int
    p_max: int
    alpha: float
    beta: float
    seed: int
    trials: int

    sym_abs_mean: float
    sym_abs_max: float
    hx_norm_mean: float
    x_norm_mean: float

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in REPORT_FIELDS}

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2))


def finalize(
    params: OperatorParams, seed: int, trials: int, accumulator: Accumulator
) -> SymmetryReport:
    """Turn a fully folded accumulator into a :class:`SymmetryReport`.

    Raises:
        IncompleteProbeError: If the accumulator is empty or has not folded
            exactly ``trials`` trials.
    """
    if accumulator.empty:
        raise IncompleteProbeError("cannot finalize a probe with no completed trials")
    if accumulator.count != trials:
        raise IncompleteProbeError(
            f"probe folded {accumulator.count} of {trials} trials; refusing partial report"
        )

    total = float(trials)
    return SymmetryReport(
        n=params.n,
        p_max=params.p_max,
        alpha=params.alpha,
        beta=params.beta,
        seed=seed,
        trials=trials,
        sym_abs_mean=accumulator.sym_abs_sum / total,
        sym_abs_max=accumulator.sym_abs_max,
        hx_norm_mean=accumulator.hx_norm_sum / total,
        x_norm_mean=accumulator.x_norm_sum / total,
    )
