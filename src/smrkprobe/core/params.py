"""Operator parameters and boundary coercion helpers."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidParameterError

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def as_unsigned(value: Any, *, bits: int, name: str) -> int:
    """Coerce *value* to an unsigned integer that fits in ``bits`` bits.

    Accepts Python/NumPy integers, integral floats and decimal strings, which
    is what form-driven callers usually hand over. Booleans are rejected.
    """
    if isinstance(value, bool):
        raise InvalidParameterError(f"expected an integer, got {value!r}", parameter=name)
    if isinstance(value, str):
        try:
            parsed = int(value.strip(), 10)
        except ValueError as exc:
            raise InvalidParameterError(
                f"expected an integer, got {value!r}", parameter=name
            ) from exc
    elif isinstance(value, numbers.Integral):
        parsed = int(value)
    elif isinstance(value, numbers.Real):
        as_float = float(value)
        if not math.isfinite(as_float) or not as_float.is_integer():
            raise InvalidParameterError(f"expected an integer, got {value!r}", parameter=name)
        parsed = int(as_float)
    else:
        raise InvalidParameterError(f"expected an integer, got {value!r}", parameter=name)

    upper = 2**bits - 1
    if not 0 <= parsed <= upper:
        raise InvalidParameterError(f"must be in [0, {upper}], got {parsed}", parameter=name)
    return parsed


def as_finite_float(value: Any, *, name: str) -> float:
    """Coerce *value* to a finite ``float``."""
    if isinstance(value, bool):
        raise InvalidParameterError(f"expected a number, got {value!r}", parameter=name)
    try:
        parsed = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"expected a number, got {value!r}", parameter=name) from exc
    if not math.isfinite(parsed):
        raise InvalidParameterError(f"must be finite, got {parsed!r}", parameter=name)
    return parsed


@dataclass(frozen=True)
class OperatorParams:
    """
    Parameters of the truncated prime-shift operator ``H``.

    Args:
        n: Dimension of the operator; vectors have exactly ``n`` entries.
        p_max: Largest prime included in the shift summation.
        alpha: Weight of the von Mangoldt diagonal term.
        beta: Weight of the ``log m`` diagonal term.

    Example:
        >>> params = OperatorParams(n=4, p_max=2, alpha=0.0, beta=0.0)
        >>> params.n
        4
    """

    n: int
    p_max: int
    alpha: float = 0.0
    beta: float = 0.0

    def __post_init__(self) -> None:
        n = as_unsigned(self.n, bits=32, name="n")
        p_max = as_unsigned(self.p_max, bits=32, name="p_max")
        if n < 1:
            raise InvalidParameterError(f"must be >= 1, got {n}", parameter="n")
        if p_max < 1:
            raise InvalidParameterError(f"must be >= 1, got {p_max}", parameter="p_max")
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "n", n)
        object.__setattr__(self, "p_max", p_max)
        object.__setattr__(self, "alpha", as_finite_float(self.alpha, name="alpha"))
        object.__setattr__(self, "beta", as_finite_float(self.beta, name="beta"))

    def to_dict(self) -> dict[str, Any]:
        return {"n": self.n, "p_max": self.p_max, "alpha": self.alpha, "beta": self.beta}
