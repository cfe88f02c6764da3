"""Caller-facing operations of the SMRK probe service.

Every entry point validates and converts raw values (numbers or numeric
strings coming from a form or an RPC adapter) before they reach the core,
and enforces the configured service limits before any work begins.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from smrkprobe.config_loader import LimitsSectionConfig, ProjectConfig, default_config
from smrkprobe.core.exceptions import (
    DimensionMismatchError,
    InvalidParameterError,
    InvalidTrialCountError,
)
from smrkprobe.core.params import OperatorParams, as_finite_float, as_unsigned
from smrkprobe.operator.matvec import PrimeShiftOperator
from smrkprobe.probe.driver import run_symmetry_probe
from smrkprobe.probe.report import SymmetryReport

logger = logging.getLogger(__name__)

SERVICE_NAME = "smrk_probe"


def get_version() -> str:
    """Return the identity string of the running service."""
    from smrkprobe import __version__

    return f"{SERVICE_NAME} v{__version__} (matvec + symmetry_probe)"


def _operator_params(n: Any, p_max: Any, alpha: Any, beta: Any) -> OperatorParams:
    return OperatorParams(
        n=as_unsigned(n, bits=32, name="n"),
        p_max=as_unsigned(p_max, bits=32, name="p_max"),
        alpha=as_finite_float(alpha, name="alpha"),
        beta=as_finite_float(beta, name="beta"),
    )


def _as_float_vector(x: Any) -> list[float]:
    if isinstance(x, str | bytes):
        raise InvalidParameterError(f"expected a sequence of numbers, got {x!r}", parameter="x")
    if getattr(x, "ndim", 1) != 1:
        raise DimensionMismatchError(f"input vector must be one-dimensional, got shape {x.shape}")
    try:
        items = list(x)
    except TypeError as exc:
        raise InvalidParameterError(
            f"expected a sequence of numbers, got {type(x).__name__}", parameter="x"
        ) from exc

    values: list[float] = []
    for position, item in enumerate(items):
        if isinstance(item, bool):
            raise InvalidParameterError(
                f"entry {position} is not a number: {item!r}", parameter="x"
            )
        try:
            value = float(item)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(
                f"entry {position} is not a number: {item!r}", parameter="x"
            ) from exc
        if not math.isfinite(value):
            raise InvalidParameterError(
                f"entry {position} is not finite: {value!r}", parameter="x"
            )
        values.append(value)
    return values


def _check_limit(value: int, limit: int, *, name: str) -> None:
    if value > limit:
        raise InvalidParameterError(f"must be <= {limit}, got {value}", parameter=name)


def _resolve_limits(
    limits: LimitsSectionConfig | None, config: ProjectConfig | None
) -> LimitsSectionConfig:
    if limits is not None:
        return limits
    return (config or default_config()).limits


def matvec(
    n: Any,
    p_max: Any,
    alpha: Any,
    beta: Any,
    x: Any,
    *,
    limits: LimitsSectionConfig | None = None,
    config: ProjectConfig | None = None,
) -> list[float]:
    """Return ``Hx`` for the operator described by ``(n, p_max, alpha, beta)``.

    Raises:
        InvalidParameterError: If a parameter is malformed or above its limit.
        DimensionMismatchError: If ``len(x) != n``.
    """
    active = _resolve_limits(limits, config)
    params = _operator_params(n, p_max, alpha, beta)
    _check_limit(params.n, active.matvec_max_n, name="n")
    _check_limit(params.p_max, active.max_p_max, name="p_max")
    vector = _as_float_vector(x)

    result = PrimeShiftOperator(params).apply(vector)
    logger.debug("matvec n=%d p_max=%d done", params.n, params.p_max)
    return result.tolist()


def symmetry_probe(
    n: Any,
    p_max: Any,
    alpha: Any,
    beta: Any,
    seed: Any,
    trials: Any,
    *,
    workers: int | None = None,
    limits: LimitsSectionConfig | None = None,
    config: ProjectConfig | None = None,
) -> SymmetryReport:
    """Run the full symmetry probe and return its report.

    ``workers`` defaults to ``config.probe.workers``. Either all trials
    complete and a report is returned, or an exception is raised.

    Raises:
        InvalidTrialCountError: If ``trials`` is zero or above the limit.
        InvalidParameterError: If another parameter is malformed or above its
            limit.
    """
    # trials=0 is reported as such whatever the other arguments are
    trial_count = as_unsigned(trials, bits=32, name="trials")
    if trial_count == 0:
        raise InvalidTrialCountError("symmetry probe requires at least one trial")

    resolved = config or default_config()
    active = _resolve_limits(limits, resolved)
    params = _operator_params(n, p_max, alpha, beta)
    seed_value = as_unsigned(seed, bits=64, name="seed")

    _check_limit(params.n, active.probe_max_n, name="n")
    _check_limit(params.p_max, active.max_p_max, name="p_max")
    if trial_count > active.max_trials:
        raise InvalidTrialCountError(
            f"trials must be <= {active.max_trials}, got {trial_count}"
        )

    return run_symmetry_probe(
        params,
        seed_value,
        trial_count,
        workers=workers if workers is not None else resolved.probe.workers,
    )
