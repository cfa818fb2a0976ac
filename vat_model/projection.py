"""
Cumulative multi-year projection of VAT receipts.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

from .engine import evaluate
from .scenario import Scenario


@dataclass
class ProjectionResult:
    """Year-by-year VAT receipts under the old and new rate."""
    years: np.ndarray
    old_vat: np.ndarray
    new_vat: np.ndarray
    difference: np.ndarray
    cumulative_difference: np.ndarray

    @property
    def total_difference(self) -> float:
        return float(np.sum(self.difference))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            'year': self.years,
            'old_vat': self.old_vat,
            'new_vat': self.new_vat,
            'difference': self.difference,
            'cumulative_difference': self.cumulative_difference,
        })


def project_cumulative(scenario: Scenario,
                       years: int = 5,
                       annual_growth_percent: float = 0.0) -> ProjectionResult:
    """
    Project the point estimate over several years.

    Year t (1-based) scales both the pre-change and post-change VAT by
    (1 + g/100) ** (t - 1), so year 1 equals evaluate(scenario).

    Args:
        scenario: Scenario to project
        years: Number of years (fewer than 1 gives empty arrays)
        annual_growth_percent: Nominal revenue growth per year
    """
    result = evaluate(scenario)
    horizon = max(int(years), 0)

    year_index = np.arange(1, horizon + 1)
    growth = (1 + annual_growth_percent / 100) ** (year_index - 1)

    old_vat = result.old_vat * growth
    new_vat = result.new_vat * growth
    difference = new_vat - old_vat

    return ProjectionResult(
        years=year_index,
        old_vat=old_vat,
        new_vat=new_vat,
        difference=difference,
        cumulative_difference=np.cumsum(difference),
    )
