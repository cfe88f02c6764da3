"""Tests for the symmetry probe driver."""

from __future__ import annotations

import math

import numpy as np
import pytest

from smrkprobe.core.exceptions import InvalidParameterError, InvalidTrialCountError
from smrkprobe.core.params import OperatorParams
from smrkprobe.operator.matvec import PrimeShiftOperator
from smrkprobe.probe import driver
from smrkprobe.probe.driver import asymmetry, probe, run_symmetry_probe
from smrkprobe.probe.report import SymmetryReport
from smrkprobe.probe.sampler import sample_pair


@pytest.fixture
def params() -> OperatorParams:
    return OperatorParams(n=64, p_max=17, alpha=0.8, beta=-0.4)


class TestAsymmetry:
    def test_nonsymmetric_matrix_has_unit_residual(self) -> None:
        matrix = np.array([[0.0, 1.0], [0.0, 0.0]])
        x = np.array([1.0, 0.0])
        y = np.array([0.0, 1.0])
        assert asymmetry(x, y, matrix @ x, matrix @ y) == 1.0

    def test_is_scale_invariant(self) -> None:
        matrix = np.array([[1.0, 2.0], [0.5, -1.0]])
        x = np.array([0.3, -0.7])
        y = np.array([0.9, 0.2])
        base = asymmetry(x, y, matrix @ x, matrix @ y)
        scaled_x = 3.0 * x
        scaled_y = 5.0 * y
        scaled = asymmetry(scaled_x, scaled_y, matrix @ scaled_x, matrix @ scaled_y)
        assert base > 0.0
        assert scaled == pytest.approx(base, rel=1e-12)

    def test_zero_operator_yields_zero(self) -> None:
        x = np.array([1.0, 2.0])
        y = np.array([3.0, 4.0])
        zeros = np.zeros(2)
        assert asymmetry(x, y, zeros, zeros) == 0.0


class TestRunTrial:
    def test_each_norm_is_computed_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        operator = PrimeShiftOperator(OperatorParams(n=32, p_max=7, alpha=0.3))
        calls: list[int] = []
        real_norm = np.linalg.norm

        def _counting_norm(vector, *args, **kwargs):
            calls.append(len(vector))
            return real_norm(vector, *args, **kwargs)

        monkeypatch.setattr(driver.np.linalg, "norm", _counting_norm)
        outcome = driver.run_trial(operator, 42, 0)

        # x, y, Hx and Hy
        assert len(calls) == 4
        x, y = sample_pair(42, 0, 32)
        hx, hy = operator.apply(x), operator.apply(y)
        assert outcome.x_norm == real_norm(x)
        assert outcome.hx_norm == real_norm(hx)
        assert outcome.sym_abs == asymmetry(x, y, hx, hy)


class TestPinnedReport:
    def test_seed_42_small_operator(self) -> None:
        report = run_symmetry_probe(OperatorParams(n=4, p_max=2), 42, 3)
        assert report.trials == 3
        assert report.x_norm_mean == pytest.approx(1.1372037231717551, rel=1e-12)
        assert report.hx_norm_mean == pytest.approx(0.69578030693996784, rel=1e-12)
        assert 0.0 <= report.sym_abs_max <= 1e-12

    def test_per_trial_norms(self) -> None:
        run = probe(OperatorParams(n=4, p_max=2), 42, 3)
        assert [o.x_norm for o in run.outcomes] == pytest.approx(
            [1.2955740469653014, 1.5051192691535491, 0.61091785339641491], rel=1e-12
        )
        assert [o.hx_norm for o in run.outcomes] == pytest.approx(
            [0.87335204640692332, 1.0070160686089824, 0.20697280580399788], rel=1e-12
        )


class TestProbe:
    def test_reproducible_for_fixed_inputs(self, params: OperatorParams) -> None:
        first = run_symmetry_probe(params, seed=42, trials=20)
        second = run_symmetry_probe(params, seed=42, trials=20)
        assert first == second

    def test_worker_count_does_not_change_result(self, params: OperatorParams) -> None:
        serial = probe(params, 7, 12, workers=1)
        threaded = probe(params, 7, 12, workers=4)
        assert serial.outcomes == threaded.outcomes
        assert serial.accumulator == threaded.accumulator

    def test_outcomes_are_in_trial_order(self, params: OperatorParams) -> None:
        run = probe(params, 3, 9, workers=3)
        assert [outcome.index for outcome in run.outcomes] == list(range(9))

    def test_aggregation_matches_direct_statistics(self, params: OperatorParams) -> None:
        run = probe(params, 11, 25)
        report = run_symmetry_probe(params, seed=11, trials=25)
        values = [outcome.sym_abs for outcome in run.outcomes]

        assert report.sym_abs_mean == pytest.approx(sum(values) / len(values), rel=1e-9)
        assert report.sym_abs_max == max(values)
        assert report.hx_norm_mean == pytest.approx(
            sum(o.hx_norm for o in run.outcomes) / 25, rel=1e-9
        )
        assert report.x_norm_mean == pytest.approx(
            sum(o.x_norm for o in run.outcomes) / 25, rel=1e-9
        )

    @pytest.mark.parametrize("trials", range(1, 11))
    def test_degenerate_operator_is_symmetric(self, trials: int) -> None:
        degenerate = OperatorParams(n=32, p_max=11, alpha=0.0, beta=0.0)
        report = run_symmetry_probe(degenerate, seed=42, trials=trials)
        assert 0.0 <= report.sym_abs_mean <= 1e-12
        assert 0.0 <= report.sym_abs_max <= 1e-12

    def test_weighted_operator_is_symmetric_up_to_rounding(self, params: OperatorParams) -> None:
        report = run_symmetry_probe(params, seed=5, trials=10)
        assert report.sym_abs_max <= 1e-12

    def test_zero_operator(self) -> None:
        zero = OperatorParams(n=1, p_max=1, alpha=0.0, beta=0.0)
        report = run_symmetry_probe(zero, seed=0, trials=3)
        assert report.sym_abs_mean == 0.0
        assert report.sym_abs_max == 0.0
        assert report.hx_norm_mean == 0.0
        assert report.x_norm_mean > 0.0

    def test_reference_scenario(self) -> None:
        scenario = OperatorParams(n=4, p_max=2, alpha=0.0, beta=0.0)
        report = run_symmetry_probe(scenario, seed=42, trials=100)

        assert isinstance(report, SymmetryReport)
        assert (report.n, report.p_max, report.alpha, report.beta) == (4, 2, 0.0, 0.0)
        assert (report.seed, report.trials) == (42, 100)
        for value in (
            report.sym_abs_mean,
            report.sym_abs_max,
            report.hx_norm_mean,
            report.x_norm_mean,
        ):
            assert math.isfinite(value)

    def test_seed_changes_statistics(self, params: OperatorParams) -> None:
        first = run_symmetry_probe(params, seed=1, trials=5)
        second = run_symmetry_probe(params, seed=2, trials=5)
        assert first.x_norm_mean != second.x_norm_mean
        assert first.hx_norm_mean != second.hx_norm_mean

    def test_x_norm_tracks_uniform_distribution(self) -> None:
        params = OperatorParams(n=300, p_max=2)
        report = run_symmetry_probe(params, seed=8, trials=50)
        # E|x|^2 = n / 3 for entries uniform on [-1, 1)
        assert report.x_norm_mean == pytest.approx(math.sqrt(100.0), rel=0.05)

    def test_zero_trials_rejected(self, params: OperatorParams) -> None:
        with pytest.raises(InvalidTrialCountError, match="SMRK_INVALID_TRIAL_COUNT"):
            run_symmetry_probe(params, seed=42, trials=0)

    def test_zero_trials_rejected_before_any_work(
        self, params: OperatorParams, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(*_args, **_kwargs):
            raise AssertionError("operator must not be built")

        monkeypatch.setattr(driver, "PrimeShiftOperator", _fail)
        with pytest.raises(InvalidTrialCountError):
            probe(params, 42, 0)

    @pytest.mark.parametrize("workers", [0, -2])
    def test_invalid_worker_count(self, params: OperatorParams, workers: int) -> None:
        with pytest.raises(InvalidParameterError):
            probe(params, 42, 3, workers=workers)

    def test_negative_seed_rejected(self, params: OperatorParams) -> None:
        with pytest.raises(InvalidParameterError, match=r"\[seed\]"):
            probe(params, -1, 3)

    @pytest.mark.parametrize("workers", [1, 3])
    def test_failing_trial_produces_no_report(
        self, params: OperatorParams, monkeypatch: pytest.MonkeyPatch, workers: int
    ) -> None:
        real_run_trial = driver.run_trial

        def _flaky(operator, seed, index):
            if index == 3:
                raise RuntimeError("trial exploded")
            return real_run_trial(operator, seed, index)

        monkeypatch.setattr(driver, "run_trial", _flaky)
        with pytest.raises(RuntimeError, match="trial exploded"):
            run_symmetry_probe(params, seed=42, trials=6, workers=workers)
