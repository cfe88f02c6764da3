"""Number-theoretic tables used by the prime-shift operator."""

from __future__ import annotations

import math

import numpy as np


def primes_up_to(limit: int) -> np.ndarray:
    """Return all primes ``p <= limit`` in ascending order (sieve of Eratosthenes)."""
    if limit < 2:
        return np.empty(0, dtype=np.int64)
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False
    for p in range(2, math.isqrt(limit) + 1):
        if is_prime[p]:
            is_prime[p * p :: p] = False
    return np.flatnonzero(is_prime).astype(np.int64)


def von_mangoldt_table(n: int) -> np.ndarray:
    """Return ``Lambda(m)`` for ``m = 1..n`` as a float64 array of length ``n``.

    ``Lambda(m) = log p`` when ``m`` is a power of the prime ``p`` and ``0``
    otherwise.
    """
    table = np.zeros(n, dtype=np.float64)
    primes = primes_up_to(n)
    if primes.size == 0:
        return table
    table[primes - 1] = np.log(primes.astype(np.float64))
    # Only primes up to sqrt(n) have higher powers inside the table.
    for prime in primes[primes <= math.isqrt(n)]:
        p = int(prime)
        log_p = table[p - 1]
        power = p * p
        while power <= n:
            table[power - 1] = log_p
            power *= p
    return table


def log_table(n: int) -> np.ndarray:
    """Return ``log m`` for ``m = 1..n`` (``log 1 == 0``)."""
    return np.log(np.arange(1, n + 1, dtype=np.float64))
