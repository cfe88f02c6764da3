"""Deterministic SplitMix64 sampler for probe vectors.

SplitMix64 advances its state by a fixed odd constant and hashes it, so the
k-th output for a start state ``s`` is ``mix(s + k * GAMMA)``. That lets a
whole vector be produced in one vectorized step and makes every entry a pure
function of ``(seed, trial, stream, position)``.

Entries are uniform on ``[-1, 1)``: the top 53 bits of each output are scaled
to ``[0, 1)`` and mapped affinely.
"""

from __future__ import annotations

import numpy as np

from smrkprobe.core.exceptions import InvalidParameterError
from smrkprobe.core.params import U64_MAX

GAMMA = 0x9E3779B97F4A7C15
_MIX_1 = 0xBF58476D1CE4E5B9
_MIX_2 = 0x94D049BB133111EB
_MASK64 = U64_MAX

STREAM_X = 0
STREAM_Y = 1
STREAMS_PER_TRIAL = 2

_INV_2_53 = 1.0 / float(1 << 53)


def mix64(z: int) -> int:
    """SplitMix64 output finalizer on a Python integer."""
    z &= _MASK64
    z = ((z ^ (z >> 30)) * _MIX_1) & _MASK64
    z = ((z ^ (z >> 27)) * _MIX_2) & _MASK64
    return z ^ (z >> 31)


def splitmix64(state: int, count: int) -> np.ndarray:
    """Return the first ``count`` SplitMix64 outputs for start ``state`` as uint64."""
    if count < 0:
        raise InvalidParameterError(f"must be non-negative, got {count}", parameter="count")
    steps = np.arange(1, count + 1, dtype=np.uint64)
    # uint64 array arithmetic wraps modulo 2**64
    z = np.uint64(state & _MASK64) + steps * np.uint64(GAMMA)
    z = (z ^ (z >> np.uint64(30))) * np.uint64(_MIX_1)
    z = (z ^ (z >> np.uint64(27))) * np.uint64(_MIX_2)
    return z ^ (z >> np.uint64(31))


def stream_key(seed: int, trial: int, stream: int) -> int:
    """Derive the start state of one ``(trial, stream)`` draw from ``seed``.

    The key is output number ``STREAMS_PER_TRIAL * trial + stream + 1`` of a
    SplitMix64 generator seeded with ``seed``.
    """
    if not 0 <= seed <= U64_MAX:
        raise InvalidParameterError(f"must be in [0, {U64_MAX}], got {seed}", parameter="seed")
    if trial < 0:
        raise InvalidParameterError(f"must be non-negative, got {trial}", parameter="trial")
    if not 0 <= stream < STREAMS_PER_TRIAL:
        raise InvalidParameterError(
            f"must be in [0, {STREAMS_PER_TRIAL}), got {stream}", parameter="stream"
        )
    counter = STREAMS_PER_TRIAL * trial + stream + 1
    return mix64(seed + counter * GAMMA)


def uniform_signed(state: int, count: int) -> np.ndarray:
    """Map SplitMix64 outputs to float64 values uniform on ``[-1, 1)``."""
    bits = splitmix64(state, count) >> np.uint64(11)
    return 2.0 * (bits.astype(np.float64) * _INV_2_53) - 1.0


def sample_vector(seed: int, trial: int, n: int, *, stream: int = STREAM_X) -> np.ndarray:
    """Draw the probe vector for ``(seed, trial, stream)``.

    The same arguments always return bit-identical output, regardless of which
    other trials were drawn before.
    """
    if n < 0:
        raise InvalidParameterError(f"must be non-negative, got {n}", parameter="n")
    return uniform_signed(stream_key(seed, trial, stream), n)


def sample_pair(seed: int, trial: int, n: int) -> tuple[np.ndarray, np.ndarray]:
    """Draw the two independent vectors ``(x, y)`` used by one probe trial."""
    return (
        sample_vector(seed, trial, n, stream=STREAM_X),
        sample_vector(seed, trial, n, stream=STREAM_Y),
    )
