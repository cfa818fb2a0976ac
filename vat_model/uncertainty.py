"""
Uncertainty Analysis Module

Quantifies how uncertain the revenue decline makes the VAT comparison.
Provides a Monte Carlo sampler over the decline rate, its closed-form
counterpart and a one-parameter sensitivity sweep.
"""

from dataclasses import dataclass, replace
import logging
import math
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from .engine import evaluate
from .scenario import Scenario

logger = logging.getLogger(__name__)


@dataclass
class UncertaintySettings:
    """
    Settings for the decline-rate simulation.
    """
    run_count: int = 1000
    uncertainty_range_percent: float = 10.0  # Half-width of the decline band (pp)
    retain_count: int = 100  # Samples kept for display; statistics use all runs
    decline_floor: float = 0.0
    decline_ceiling: float = 80.0
    seed: Optional[int] = None

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


DEFAULT_SETTINGS = UncertaintySettings()


@dataclass(frozen=True)
class SimulationSample:
    """One Monte Carlo draw."""
    run_index: int
    sampled_decline_percent: float
    difference: float
    new_vat: float


@dataclass(frozen=True)
class SimulationStatistics:
    """Summary of the simulated VAT differences."""
    mean: float
    median: float
    p5: float
    p95: float
    std: float

    @classmethod
    def point(cls, value: float) -> 'SimulationStatistics':
        """Degenerate statistics where every figure equals one value."""
        return cls(mean=value, median=value, p5=value, p95=value, std=0.0)

    def as_dict(self) -> dict:
        return {
            'mean': self.mean,
            'median': self.median,
            'p5': self.p5,
            'p95': self.p95,
            'std': self.std,
        }


@dataclass
class SimulationResult:
    """
    Output of a simulation run.

    Attributes:
        samples: Retained draws (at most retain_count), in run order
        statistics: Statistics over ALL runs
        run_count: Number of runs executed (0 for the degenerate result)
    """
    samples: list[SimulationSample]
    statistics: SimulationStatistics
    run_count: int = 0

    @property
    def is_degenerate(self) -> bool:
        return self.run_count == 0

    def samples_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [vars(s) for s in self.samples],
            columns=['run_index', 'sampled_decline_percent', 'difference', 'new_vat'],
        )


def _degenerate_result(scenario: Scenario) -> SimulationResult:
    point = evaluate(scenario).difference
    return SimulationResult(samples=[], statistics=SimulationStatistics.point(point), run_count=0)


def _rank_statistic(sorted_values: np.ndarray, q: float) -> float:
    """Value at rank floor(n * q) of an ascending array, no interpolation."""
    return float(sorted_values[int(math.floor(len(sorted_values) * q))])


def simulate(scenario: Scenario,
             run_count: int,
             uncertainty_range_percent: float,
             rng: Optional[np.random.Generator] = None,
             retain_count: int = DEFAULT_SETTINGS.retain_count,
             decline_bounds: tuple[float, float] = (DEFAULT_SETTINGS.decline_floor,
                                                     DEFAULT_SETTINGS.decline_ceiling)) -> SimulationResult:
    """
    Run a Monte Carlo simulation over the revenue decline.

    Each run draws u ~ U[-1, 1], samples the decline as
    clip(decline + u * range, floor, ceiling) and re-evaluates the scenario.

    Args:
        scenario: Scenario providing every input except the decline
        run_count: Number of runs
        uncertainty_range_percent: Half-width of the decline band (pp)
        rng: Random source. Without one, the degenerate point-estimate result
             is returned (empty samples, every statistic equal to the
             scenario's difference).
        retain_count: Number of samples returned for display
        decline_bounds: Clamp applied to every sampled decline

    Returns:
        SimulationResult with statistics computed over all runs
    """
    if rng is None or run_count < 1:
        logger.info(
            "No random source or no runs requested; returning point estimate for %s basis",
            scenario.input_basis.value,
        )
        return _degenerate_result(scenario)

    floor, ceiling = decline_bounds
    logger.debug(
        "Simulating %d runs around %.2f%% decline (±%.2fpp)",
        run_count, scenario.decline_percent, uncertainty_range_percent,
    )

    differences = np.zeros(run_count)
    samples = []

    for run in range(run_count):
        u = rng.uniform(-1.0, 1.0)
        sampled = min(max(scenario.decline_percent + u * uncertainty_range_percent, floor), ceiling)
        result = evaluate(replace(scenario, decline_percent=sampled))

        differences[run] = result.difference
        if run < retain_count:
            samples.append(SimulationSample(
                run_index=run,
                sampled_decline_percent=sampled,
                difference=result.difference,
                new_vat=result.new_vat,
            ))

    average = float(np.mean(differences))
    ranked = np.sort(differences)

    statistics = SimulationStatistics(
        mean=average,
        median=_rank_statistic(ranked, 0.5),
        p5=_rank_statistic(ranked, 0.05),
        p95=_rank_statistic(ranked, 0.95),
        std=float(np.sqrt(np.mean((differences - average) ** 2))),
    )

    return SimulationResult(samples=samples, statistics=statistics, run_count=run_count)


def analytic_statistics(scenario: Scenario,
                        uncertainty_range_percent: float,
                        decline_bounds: tuple[float, float] = (DEFAULT_SETTINGS.decline_floor,
                                                                DEFAULT_SETTINGS.decline_ceiling)) -> SimulationStatistics:
    """
    Closed-form counterpart of simulate().

    The sampled decline is a uniform variable clipped to decline_bounds, and
    the VAT difference is affine in the decline, so the moments and exact
    quantiles follow directly from the clipped uniform distribution.
    """
    floor, ceiling = decline_bounds
    half_width = abs(uncertainty_range_percent)

    at_floor = evaluate(replace(scenario, decline_percent=floor)).difference
    at_ceiling = evaluate(replace(scenario, decline_percent=ceiling)).difference
    slope = (at_ceiling - at_floor) / (ceiling - floor)

    def difference_at(decline: float) -> float:
        return at_floor + slope * (decline - floor)

    if half_width == 0:
        centre = min(max(scenario.decline_percent, floor), ceiling)
        return SimulationStatistics.point(difference_at(centre))

    dist = stats.uniform(loc=scenario.decline_percent - half_width, scale=2 * half_width)
    p_floor = float(dist.cdf(floor))
    p_ceiling = float(dist.sf(ceiling))

    # Continuous part of the clipped distribution
    lo = max(scenario.decline_percent - half_width, floor)
    hi = min(scenario.decline_percent + half_width, ceiling)
    density = 1.0 / (2 * half_width)
    if hi > lo:
        first = density * (hi ** 2 - lo ** 2) / 2
        second = density * (hi ** 3 - lo ** 3) / 3
    else:
        first = second = 0.0

    mean_decline = floor * p_floor + ceiling * p_ceiling + first
    second_moment = floor ** 2 * p_floor + ceiling ** 2 * p_ceiling + second
    variance = max(second_moment - mean_decline ** 2, 0.0)

    def decline_quantile(q: float) -> float:
        return min(max(float(dist.ppf(q)), floor), ceiling)

    def difference_quantile(q: float) -> float:
        # A falling difference maps the upper decline quantile to the lower one
        return difference_at(decline_quantile(q if slope >= 0 else 1 - q))

    return SimulationStatistics(
        mean=difference_at(mean_decline),
        median=difference_quantile(0.5),
        p5=difference_quantile(0.05),
        p95=difference_quantile(0.95),
        std=abs(slope) * math.sqrt(variance),
    )


@dataclass
class SensitivityResult:
    """
    Results from a one-parameter sensitivity sweep.
    """
    parameter_name: str
    parameter_values: np.ndarray
    old_vat: np.ndarray
    new_vat: np.ndarray
    differences: np.ndarray
    break_even: np.ndarray
    marginal_effect: float  # Change in difference per 1pp change in the parameter

    @property
    def range(self) -> tuple[float, float]:
        return (float(np.min(self.differences)), float(np.max(self.differences)))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            self.parameter_name: self.parameter_values,
            'old_vat': self.old_vat,
            'new_vat': self.new_vat,
            'difference': self.differences,
            'break_even_decline': self.break_even,
        })


SWEEP_DEFAULTS = {
    'decline_percent': np.arange(0.0, 81.0, 5.0),
    'inflation_percent': np.arange(0.0, 51.0, 5.0),
}


def sensitivity_sweep(scenario: Scenario,
                      parameter: str = 'decline_percent',
                      values: Optional[Sequence[float]] = None) -> SensitivityResult:
    """
    Evaluate the scenario across a grid of one parameter.

    Args:
        scenario: Scenario providing the other inputs
        parameter: 'decline_percent' or 'inflation_percent'
        values: Grid to evaluate (defaults to 0..80 or 0..50 in steps of 5)
    """
    if parameter not in SWEEP_DEFAULTS:
        raise ValueError(
            f"Unknown sweep parameter {parameter!r}; expected one of {sorted(SWEEP_DEFAULTS)}"
        )

    grid = np.asarray(SWEEP_DEFAULTS[parameter] if values is None else values, dtype=float)
    if grid.size == 0:
        raise ValueError(f"Sweep over {parameter!r} needs at least one value")
    results = [evaluate(replace(scenario, **{parameter: float(v)})) for v in grid]

    differences = np.array([r.difference for r in results])
    span = grid[-1] - grid[0] if len(grid) > 1 else 0.0
    marginal = float((differences[-1] - differences[0]) / span) if span else 0.0

    return SensitivityResult(
        parameter_name=parameter,
        parameter_values=grid,
        old_vat=np.array([r.old_vat for r in results]),
        new_vat=np.array([r.new_vat for r in results]),
        differences=differences,
        break_even=np.array([r.break_even_decline for r in results]),
        marginal_effect=marginal,
    )
