"""Truncated prime-shift operator and its matrix-vector product.

Positions ``0..n-1`` stand for the integers ``m = 1..n``::

    (Hx)(m) = sum_{p prime, p <= p_max} (1/p) [x(p m) + 1_{p | m} x(m / p)]
              + (alpha Lambda(m) + beta log m) x(m)

The forward term only exists while ``p m <= n`` and the backward term only
when ``p`` divides ``m``. Both terms put ``1/p`` at ``H[m, pm]`` and
``H[pm, m]``, so ``H`` is symmetric for every ``alpha`` and ``beta``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from smrkprobe.core.exceptions import DimensionMismatchError, InvalidParameterError
from smrkprobe.core.params import OperatorParams

from .arithmetic import log_table, primes_up_to, von_mangoldt_table

logger = logging.getLogger(__name__)


class PrimeShiftOperator:
    """Precomputed tables for one :class:`OperatorParams`.

    The instance is read-only after construction and can be shared across
    threads; :meth:`apply` allocates a fresh output for every call.
    """

    def __init__(self, params: OperatorParams) -> None:
        self.params = params
        n = params.n
        # primes above n never reach an index inside the vector
        primes = primes_up_to(min(params.p_max, n))
        diagonal = params.alpha * von_mangoldt_table(n) + params.beta * log_table(n)
        primes.setflags(write=False)
        diagonal.setflags(write=False)
        self._primes = primes
        self._diagonal = diagonal
        logger.debug(
            "Built operator n=%d p_max=%d with %d primes", n, params.p_max, primes.size
        )

    @property
    def n(self) -> int:
        return self.params.n

    @property
    def primes(self) -> np.ndarray:
        return self._primes

    @property
    def diagonal(self) -> np.ndarray:
        return self._diagonal

    def _as_vector(self, x: np.ndarray | Sequence[float]) -> np.ndarray:
        try:
            vec = np.asarray(x, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(
                "input vector must contain only real numbers", parameter="x"
            ) from exc
        if vec.ndim != 1:
            raise DimensionMismatchError(
                f"input vector must be one-dimensional, got shape {vec.shape}"
            )
        if vec.shape[0] != self.n:
            raise DimensionMismatchError(
                "input vector length must equal n", expected=self.n, got=int(vec.shape[0])
            )
        return vec

    def apply(self, x: np.ndarray | Sequence[float]) -> np.ndarray:
        """Return ``Hx``.

        Cost is ``O(n)`` for the diagonal plus ``O(n / p)`` per prime.

        Raises:
            DimensionMismatchError: If ``x`` is not a vector of length ``n``.
        """
        vec = self._as_vector(x)
        n = self.n
        out = self._diagonal * vec
        for prime in self._primes:
            p = int(prime)
            count = n // p  # number of m with p * m <= n
            inv_p = 1.0 / p
            multiples = slice(p - 1, p * count, p)
            # forward: out[m] += x[p m] / p
            out[:count] += inv_p * vec[multiples]
            # backward: out[p k] += x[k] / p
            out[multiples] += inv_p * vec[:count]
        return out

    def to_dense(self) -> np.ndarray:
        """Return the ``n x n`` matrix of ``H``; intended for diagnostics only."""
        n = self.n
        matrix = np.diag(self._diagonal)
        for prime in self._primes:
            p = int(prime)
            count = n // p
            rows = np.arange(count)
            cols = p * (rows + 1) - 1
            matrix[rows, cols] += 1.0 / p
            matrix[cols, rows] += 1.0 / p
        return matrix


def apply(params: OperatorParams, x: np.ndarray | Sequence[float]) -> np.ndarray:
    """Apply the operator for *params* to *x* (see :meth:`PrimeShiftOperator.apply`)."""
    return PrimeShiftOperator(params).apply(x)


def operator_matrix(params: OperatorParams) -> np.ndarray:
    """Return the dense matrix of the operator for *params*."""
    return PrimeShiftOperator(params).to_dense()
