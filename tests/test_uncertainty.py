"""
Tests for the uncertainty module.

Tests cover:
- Degenerate result without a random source
- Rank-based statistics over all runs
- Clamping of sampled declines
- Closed-form statistics
- Sensitivity sweeps
"""

import math
from dataclasses import replace

import numpy as np
import pytest

from vat_model.engine import evaluate
from vat_model.scenario import InputBasis, Scenario
from vat_model.uncertainty import (
    SimulationStatistics,
    UncertaintySettings,
    analytic_statistics,
    sensitivity_sweep,
    simulate,
)


def _replay_differences(scenario, seed, run_count, range_pct):
    """Recompute every run's difference from the same seeded stream."""
    rng = np.random.default_rng(seed)
    diffs = []
    for _ in range(run_count):
        sampled = min(max(scenario.decline_percent + rng.uniform(-1.0, 1.0) * range_pct, 0.0), 80.0)
        diffs.append(evaluate(replace(scenario, decline_percent=sampled)).difference)
    return np.array(diffs)


class TestDegenerateResult:
    """No random source means no simulation."""

    def test_without_rng(self, net_scenario):
        result = simulate(net_scenario, run_count=1000, uncertainty_range_percent=10)

        assert result.samples == []
        assert result.is_degenerate
        stats = result.statistics
        assert stats.mean == stats.median == stats.p5 == stats.p95 == pytest.approx(5000)
        assert stats.std == 0

    def test_zero_runs(self, net_scenario):
        result = simulate(net_scenario, 0, 10, rng=np.random.default_rng(1))

        assert result.is_degenerate
        assert result.statistics.mean == pytest.approx(5000)

    def test_degenerate_zero_revenue(self, zero_revenue_scenario):
        result = simulate(zero_revenue_scenario, 100, 10)
        assert result.statistics == SimulationStatistics.point(0.0)


class TestSimulation:
    """Seeded simulations."""

    def test_retains_at_most_100_samples(self, net_scenario):
        result = simulate(net_scenario, 1000, 10, rng=np.random.default_rng(7))

        assert result.run_count == 1000
        assert len(result.samples) == 100
        assert [s.run_index for s in result.samples] == list(range(100))

    def test_fewer_runs_than_retain_count(self, net_scenario):
        result = simulate(net_scenario, 40, 10, rng=np.random.default_rng(7))
        assert len(result.samples) == 40

    def test_statistics_cover_all_runs(self, net_scenario):
        seed, runs, range_pct = 123, 2500, 15.0
        result = simulate(net_scenario, runs, range_pct, rng=np.random.default_rng(seed))
        diffs = _replay_differences(net_scenario, seed, runs, range_pct)
        ranked = np.sort(diffs)

        stats = result.statistics
        assert stats.mean == pytest.approx(diffs.mean())
        assert stats.median == pytest.approx(ranked[runs // 2])
        assert stats.p5 == pytest.approx(ranked[int(math.floor(runs * 0.05))])
        assert stats.p95 == pytest.approx(ranked[int(math.floor(runs * 0.95))])
        assert stats.std == pytest.approx(diffs.std(ddof=0))

    def test_mean_differs_from_retained_subset(self, net_scenario):
        result = simulate(net_scenario, 3000, 20, rng=np.random.default_rng(99))
        retained_mean = np.mean([s.difference for s in result.samples])

        assert result.statistics.mean != pytest.approx(retained_mean, rel=1e-12)

    def test_rank_positions_without_interpolation(self, net_scenario, sequence_rng_cls):
        # Declines 20, 21, ..., 29 -> differences 5000, 4850, ..., 3650
        rng = sequence_rng_cls([i / 10 for i in range(10)])
        result = simulate(net_scenario, 10, 10, rng=rng)

        stats = result.statistics
        assert rng.calls == 10
        assert stats.median == pytest.approx(4400)  # rank 5 of the ascending list
        assert stats.p5 == pytest.approx(3650)  # rank 0
        assert stats.p95 == pytest.approx(5000)  # rank 9
        assert stats.mean == pytest.approx(4325)
        assert stats.std == pytest.approx(150 * math.sqrt(8.25))

    def test_single_run(self, net_scenario, sequence_rng_cls):
        result = simulate(net_scenario, 1, 10, rng=sequence_rng_cls([0.5]))

        stats = result.statistics
        assert stats.mean == stats.median == stats.p5 == stats.p95 == pytest.approx(4250)
        assert stats.std == pytest.approx(0)

    @pytest.mark.parametrize("decline,range_pct", [(2, 30), (78, 30), (40, 100), (0, 0), (80, 5)])
    def test_sampled_decline_within_bounds(self, net_scenario, decline, range_pct):
        scenario = replace(net_scenario, decline_percent=decline)
        result = simulate(scenario, 500, range_pct, rng=np.random.default_rng(3), retain_count=500)

        declines = [s.sampled_decline_percent for s in result.samples]
        assert min(declines) >= 0
        assert max(declines) <= 80

    def test_samples_record_engine_values(self, gross_scenario):
        result = simulate(gross_scenario, 20, 10, rng=np.random.default_rng(5))

        for sample in result.samples:
            expected = evaluate(replace(gross_scenario, decline_percent=sample.sampled_decline_percent))
            assert sample.difference == pytest.approx(expected.difference)
            assert sample.new_vat == pytest.approx(expected.new_vat)

    def test_zero_range_collapses_to_point(self, net_scenario):
        result = simulate(net_scenario, 200, 0, rng=np.random.default_rng(11))

        assert result.statistics.mean == pytest.approx(5000)
        assert result.statistics.std == pytest.approx(0, abs=1e-9)

    def test_percentile_ordering(self, gross_scenario):
        result = simulate(replace(gross_scenario, decline_percent=30), 1000, 25, rng=np.random.default_rng(8))
        stats = result.statistics

        assert stats.p5 <= stats.median <= stats.p95

    def test_samples_frame(self, net_scenario):
        df = simulate(net_scenario, 50, 10, rng=np.random.default_rng(2)).samples_frame()

        assert list(df.columns) == ['run_index', 'sampled_decline_percent', 'difference', 'new_vat']
        assert len(df) == 50

    def test_settings_seed_is_reproducible(self, net_scenario):
        settings = UncertaintySettings(seed=2024)
        first = simulate(net_scenario, 300, 10, rng=settings.make_rng())
        second = simulate(net_scenario, 300, 10, rng=settings.make_rng())

        assert first.statistics == second.statistics


class TestAnalyticStatistics:
    """Closed-form statistics of the clipped uniform decline."""

    def test_zero_range(self, net_scenario):
        stats = analytic_statistics(net_scenario, 0)

        assert stats.mean == stats.median == stats.p5 == stats.p95 == pytest.approx(5000)
        assert stats.std == 0

    def test_unclipped_band(self, net_scenario):
        stats = analytic_statistics(net_scenario, 10)

        assert stats.mean == pytest.approx(5000)
        assert stats.median == pytest.approx(5000)
        assert stats.p5 == pytest.approx(8000 - 150 * 29)
        assert stats.p95 == pytest.approx(8000 - 150 * 11)
        assert stats.std == pytest.approx(150 * 20 / math.sqrt(12))

    def test_clipped_band(self, net_scenario):
        stats = analytic_statistics(replace(net_scenario, decline_percent=75), 10)

        assert stats.mean == pytest.approx(8000 - 150 * 74.375)
        assert stats.p5 == pytest.approx(8000 - 150 * 80)

    @pytest.mark.parametrize("basis,decline,range_pct", [
        (InputBasis.NET, 20, 10),
        (InputBasis.NET, 75, 10),
        (InputBasis.GROSS, 5, 20),
    ])
    def test_matches_simulation(self, basis, decline, range_pct):
        scenario = Scenario(input_basis=basis, base_revenue=100_000, decline_percent=decline)
        simulated = simulate(scenario, 5000, range_pct, rng=np.random.default_rng(17)).statistics
        exact = analytic_statistics(scenario, range_pct)

        assert simulated.mean == pytest.approx(exact.mean, abs=60)
        assert simulated.std == pytest.approx(exact.std, rel=0.05)
        assert simulated.median == pytest.approx(exact.median, abs=150)


class TestSensitivitySweep:

    def test_decline_sweep_defaults(self, net_scenario):
        sweep = sensitivity_sweep(net_scenario)

        assert sweep.parameter_name == 'decline_percent'
        assert len(sweep.parameter_values) == 17
        assert sweep.parameter_values[0] == 0 and sweep.parameter_values[-1] == 80
        assert np.all(np.diff(sweep.differences) < 0)
        assert sweep.marginal_effect == pytest.approx(-150)
        assert np.allclose(sweep.break_even, sweep.break_even[0])

    def test_inflation_sweep(self, net_scenario):
        sweep = sensitivity_sweep(net_scenario, 'inflation_percent')

        assert len(sweep.parameter_values) == 11
        assert np.all(np.diff(sweep.new_vat) > 0)
        assert np.allclose(sweep.old_vat, 7000)
        assert sweep.marginal_effect == pytest.approx(120)
        assert np.all(np.diff(sweep.break_even) > 0)

    def test_custom_grid(self, gross_scenario):
        sweep = sensitivity_sweep(gross_scenario, 'decline_percent', values=[10, 50])
        expected = evaluate(replace(gross_scenario, decline_percent=50))

        assert sweep.new_vat[-1] == pytest.approx(expected.new_vat)
        low, high = sweep.range
        assert low == pytest.approx(expected.difference)
        assert high == pytest.approx(sweep.differences[0])

    def test_single_point_grid(self, net_scenario):
        sweep = sensitivity_sweep(net_scenario, values=[20])
        assert sweep.marginal_effect == 0.0

    def test_empty_grid_rejected(self, net_scenario):
        with pytest.raises(ValueError, match="at least one value"):
            sensitivity_sweep(net_scenario, values=[])

    def test_unknown_parameter(self, net_scenario):
        with pytest.raises(ValueError, match="Unknown sweep parameter"):
            sensitivity_sweep(net_scenario, 'base_revenue')

    def test_to_dataframe(self, net_scenario):
        df = sensitivity_sweep(net_scenario).to_dataframe()

        assert list(df.columns) == ['decline_percent', 'old_vat', 'new_vat', 'difference', 'break_even_decline']
        assert len(df) == 17
