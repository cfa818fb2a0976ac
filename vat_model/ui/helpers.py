"""
Reusable UI-facing helpers that keep the renderers focused on layout.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from vat_model.app_data import CHART_COLORS, DEFAULT_INPUTS, UI_LIMITS
from vat_model.scenario import InputBasis, Scenario


def _to_float(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _clamp(value: float, bounds: tuple[Optional[float], Optional[float]]) -> float:
    low, high = bounds
    if low is not None:
        value = max(value, low)
    if high is not None:
        value = min(value, high)
    return value


def coerce_scenario_inputs(raw_inputs: dict[str, Any]) -> Scenario:
    """
    Build a Scenario from raw form values.

    Non-numeric values fall back to the form defaults and numbers are clamped
    to the UI bounds; the engine itself does not validate.
    """
    values = {}
    for key in ("base_revenue", "decline_percent", "inflation_percent"):
        number = _to_float(raw_inputs.get(key), DEFAULT_INPUTS[key])
        values[key] = _clamp(number, UI_LIMITS[key])

    basis = raw_inputs.get("input_basis", DEFAULT_INPUTS["input_basis"])
    return Scenario(input_basis=InputBasis.parse(basis), **values)


def coerce_simulation_inputs(raw_settings: dict[str, Any]) -> dict[str, Any]:
    """
    Clamp the enhanced-analysis settings to the UI bounds.
    """
    coerced: dict[str, Any] = {}
    for key in ("run_count", "projection_years"):
        number = _to_float(raw_settings.get(key), DEFAULT_INPUTS[key])
        coerced[key] = int(_clamp(number, UI_LIMITS[key]))
    for key in ("uncertainty_range_percent", "annual_growth_percent"):
        number = _to_float(raw_settings.get(key), DEFAULT_INPUTS[key])
        coerced[key] = _clamp(number, UI_LIMITS[key])

    seed = raw_settings.get("seed")
    coerced["seed"] = int(seed) if seed not in (None, "") else None
    return coerced


def build_vat_chart_data(result: Any, scenario: Scenario) -> list[dict[str, Any]]:
    """
    Bar chart rows for VAT collected before and after the change.
    """
    rates = scenario.rates
    return [
        {
            "name": f"VAT before ({rates.old_rate:.0%})",
            "value": result.old_vat,
            "color": CHART_COLORS["old_vat"],
            "label": "Old rate",
        },
        {
            "name": f"VAT after ({rates.new_rate:.0%})",
            "value": result.new_vat,
            "color": CHART_COLORS["new_vat"],
            "label": "New rate",
        },
    ]


def describe_difference(result: Any, scenario: Scenario) -> str:
    """
    Explanatory note under the chart, depending on the sign of the difference.
    """
    decline = f"{scenario.decline_percent:g}%"
    if result.difference >= 0:
        return (
            f"Despite a revenue decline of {decline}, the state still collects more VAT "
            "because of the higher rate."
        )
    return (
        f"A revenue decline of {decline} is large enough to reduce total VAT collected "
        "despite the higher rate."
    )
