"""Tests for the number-theoretic tables behind the operator."""

from __future__ import annotations

import math

import numpy as np

from smrkprobe.operator.arithmetic import log_table, primes_up_to, von_mangoldt_table


def test_primes_up_to_small_limits() -> None:
    assert primes_up_to(0).tolist() == []
    assert primes_up_to(1).tolist() == []
    assert primes_up_to(2).tolist() == [2]
    assert primes_up_to(30).tolist() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_primes_up_to_counts_primes_below_ten_thousand() -> None:
    primes = primes_up_to(10_000)
    assert primes.size == 1229
    assert primes[-1] == 9973
    assert primes.dtype == np.int64


def test_von_mangoldt_table_matches_definition() -> None:
    expected = [
        0.0,  # 1
        math.log(2),  # 2
        math.log(3),  # 3
        math.log(2),  # 4 = 2^2
        math.log(5),  # 5
        0.0,  # 6
        math.log(7),  # 7
        math.log(2),  # 8 = 2^3
        math.log(3),  # 9 = 3^2
        0.0,  # 10
        math.log(11),  # 11
        0.0,  # 12
    ]
    np.testing.assert_allclose(von_mangoldt_table(12), expected, rtol=1e-12, atol=0.0)


def test_von_mangoldt_table_trivial_sizes() -> None:
    assert von_mangoldt_table(1).tolist() == [0.0]
    assert von_mangoldt_table(0).size == 0


def test_log_table_starts_at_zero() -> None:
    table = log_table(3)
    assert table[0] == 0.0
    np.testing.assert_allclose(table, [0.0, math.log(2), math.log(3)], rtol=1e-12)
