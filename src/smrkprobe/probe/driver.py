"""Randomized symmetry probe for the prime-shift operator."""

from __future__ import annotations

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import numpy as np

from smrkprobe.core.exceptions import InvalidParameterError, InvalidTrialCountError
from smrkprobe.core.params import OperatorParams, as_unsigned
from smrkprobe.operator.matvec import PrimeShiftOperator

from .accumulator import Accumulator, TrialOutcome
from .report import SymmetryReport, finalize
from .sampler import sample_pair

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeRun:
    """Accumulated statistics plus the per-trial outcomes they were folded from."""

    params: OperatorParams
    seed: int
    trials: int
    accumulator: Accumulator
    outcomes: tuple[TrialOutcome, ...]


def asymmetry(x: np.ndarray, y: np.ndarray, hx: np.ndarray, hy: np.ndarray) -> float:
    """
    Normalized bilinear commutation residual.

    ``|<x, Hy> - <Hx, y>| / (|x| |Hy| + |Hx| |y|)``. Scaling ``x`` or ``y``
    scales numerator and denominator alike. Returns ``0.0`` when the
    denominator vanishes (the zero operator).
    """
    return _scaled_residual(x, y, hx, hy, *_norms(x, y, hx, hy))


def _norms(*vectors: np.ndarray) -> tuple[float, ...]:
    return tuple(float(np.linalg.norm(v)) for v in vectors)


def _scaled_residual(
    x: np.ndarray,
    y: np.ndarray,
    hx: np.ndarray,
    hy: np.ndarray,
    x_norm: float,
    y_norm: float,
    hx_norm: float,
    hy_norm: float,
) -> float:
    residual = abs(float(np.dot(x, hy)) - float(np.dot(hx, y)))
    scale = x_norm * hy_norm + hx_norm * y_norm
    if scale == 0.0:
        return 0.0
    return residual / scale


def run_trial(operator: PrimeShiftOperator, seed: int, index: int) -> TrialOutcome:
    """Sample, apply and measure a single trial; touches no shared state."""
    x, y = sample_pair(seed, index, operator.n)
    hx = operator.apply(x)
    hy = operator.apply(y)
    x_norm, y_norm, hx_norm, hy_norm = _norms(x, y, hx, hy)
    outcome = TrialOutcome(
        index=index,
        sym_abs=_scaled_residual(x, y, hx, hy, x_norm, y_norm, hx_norm, hy_norm),
        hx_norm=hx_norm,
        x_norm=x_norm,
    )
    logger.debug(
        "trial=%d sym_abs=%.3e hx_norm=%.6f x_norm=%.6f",
        index,
        outcome.sym_abs,
        outcome.hx_norm,
        outcome.x_norm,
    )
    return outcome


def _validate_trials(trials: Any) -> int:
    count = as_unsigned(trials, bits=32, name="trials")
    if count == 0:
        raise InvalidTrialCountError("symmetry probe requires at least one trial")
    return count


def _validate_workers(workers: Any) -> int:
    count = as_unsigned(workers, bits=32, name="workers")
    if count < 1:
        raise InvalidParameterError(f"must be >= 1, got {count}", parameter="workers")
    return count


def probe(params: OperatorParams, seed: int, trials: int, *, workers: int = 1) -> ProbeRun:
    """Run ``trials`` independent trials and fold them into an accumulator.

    Args:
        params: Operator parameters.
        seed: 64-bit seed; together with the trial index it fixes every sample.
        trials: Number of trials, at least 1.
        workers: Number of threads evaluating trials. Outcomes are folded in
            trial-index order, so the result does not depend on this value.

    Raises:
        InvalidTrialCountError: If ``trials`` is zero.
        InvalidParameterError: If ``seed`` or ``workers`` is out of range.
    """
    trials = _validate_trials(trials)
    seed = as_unsigned(seed, bits=64, name="seed")
    workers = _validate_workers(workers)

    operator = PrimeShiftOperator(params)
    indices = range(trials)
    if workers == 1 or trials == 1:
        outcomes = tuple(run_trial(operator, seed, index) for index in indices)
    else:
        with ThreadPoolExecutor(
            max_workers=min(workers, trials), thread_name_prefix="smrk-probe"
        ) as pool:
            # map() yields in submission order and re-raises the first failure
            outcomes = tuple(pool.map(lambda index: run_trial(operator, seed, index), indices))

    accumulator = Accumulator()
    for outcome in outcomes:
        accumulator.fold(outcome)
    return ProbeRun(
        params=params,
        seed=seed,
        trials=trials,
        accumulator=accumulator,
        outcomes=outcomes,
    )


def run_symmetry_probe(
    params: OperatorParams, seed: int, trials: int, *, workers: int = 1
) -> SymmetryReport:
    """Probe the operator and return the finished report."""
    start = time.perf_counter()
    run = probe(params, seed, trials, workers=workers)
    report = finalize(run.params, run.seed, run.trials, run.accumulator)
    elapsed = time.perf_counter() - start
    logger.info(
        "Symmetry probe n=%d p_max=%d trials=%d finished in %.3fs (sym_abs_max=%.3e)",
        params.n,
        params.p_max,
        report.trials,
        elapsed,
        report.sym_abs_max,
    )
    if not math.isfinite(report.sym_abs_mean):
        logger.warning("Symmetry probe produced a non-finite mean: %r", report.sym_abs_mean)
    return report
