"""Running statistics over completed probe trials."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrialOutcome:
    """Scalar results of a single probe trial."""

    index: int
    sym_abs: float
    hx_norm: float
    x_norm: float


@dataclass
class Accumulator:
    """Sums and maximum of per-trial outcomes.

    Outcomes are folded one at a time, in trial-index order, so the sums are
    a plain left-to-right reduction and identical for any scheduling.
    """

    count: int = 0
    sym_abs_sum: float = 0.0
    sym_abs_max: float = 0.0
    hx_norm_sum: float = 0.0
    x_norm_sum: float = 0.0

    @property
    def empty(self) -> bool:
        return self.count == 0

    def fold(self, outcome: TrialOutcome) -> None:
        self.count += 1
        self.sym_abs_sum += outcome.sym_abs
        if outcome.sym_abs > self.sym_abs_max:
            self.sym_abs_max = outcome.sym_abs
        self.hx_norm_sum += outcome.hx_norm
        self.x_norm_sum += outcome.x_norm
