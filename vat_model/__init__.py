"""
VAT Rate-Change Receipts Calculator

Compares VAT receipts before and after a VAT rate change for a given revenue,
expected revenue decline and price inflation, with Monte Carlo uncertainty,
sensitivity and multi-year projections.
"""

from .scenario import InputBasis, Scenario, VATRates, DEFAULT_RATES
from .engine import CalculationResult, evaluate, break_even_decline, evaluate_decline_cases
from .uncertainty import (
    UncertaintySettings,
    SimulationSample,
    SimulationStatistics,
    SimulationResult,
    SensitivityResult,
    simulate,
    analytic_statistics,
    sensitivity_sweep,
)
from .projection import ProjectionResult, project_cumulative
from .reporting import ScenarioReport, format_currency

__version__ = "1.0.0"
__all__ = [
    "InputBasis",
    "Scenario",
    "VATRates",
    "DEFAULT_RATES",
    "CalculationResult",
    "evaluate",
    "break_even_decline",
    "evaluate_decline_cases",
    "UncertaintySettings",
    "SimulationSample",
    "SimulationStatistics",
    "SimulationResult",
    "SensitivityResult",
    "simulate",
    "analytic_statistics",
    "sensitivity_sweep",
    "ProjectionResult",
    "project_cumulative",
    "ScenarioReport",
    "format_currency",
]
