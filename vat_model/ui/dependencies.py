"""
Dependency assembly for Streamlit app bootstrap.
"""

from __future__ import annotations

from types import SimpleNamespace

from vat_model import (
    UncertaintySettings,
    analytic_statistics,
    evaluate,
    evaluate_decline_cases,
    project_cumulative,
    sensitivity_sweep,
    simulate,
)
from vat_model.app_data import (
    BASIS_LABELS,
    BASIS_NOTES,
    DECLINE_WIDGET_KEY,
    DEFAULT_INPUTS,
    MODEL_ASSUMPTIONS,
    PENDING_DECLINE_KEY,
    UI_LIMITS,
)

from .app_controller import run_main_app
from .helpers import coerce_scenario_inputs, coerce_simulation_inputs
from .styles import apply_app_styles
from .tabs import (
    render_decline_cases_tab,
    render_indicators_tab,
    render_methodology_tab,
    render_monte_carlo_tab,
    render_projection_tab,
    render_results_summary_tab,
    render_sensitivity_tab,
)


def build_app_dependencies() -> SimpleNamespace:
    """
    Build all runtime dependencies needed by the app controller.
    """
    return SimpleNamespace(
        DEFAULT_INPUTS=DEFAULT_INPUTS,
        UI_LIMITS=UI_LIMITS,
        BASIS_LABELS=BASIS_LABELS,
        BASIS_NOTES=BASIS_NOTES,
        MODEL_ASSUMPTIONS=MODEL_ASSUMPTIONS,
        DECLINE_WIDGET_KEY=DECLINE_WIDGET_KEY,
        PENDING_DECLINE_KEY=PENDING_DECLINE_KEY,
        UncertaintySettings=UncertaintySettings,
        evaluate=evaluate,
        evaluate_decline_cases=evaluate_decline_cases,
        simulate=simulate,
        analytic_statistics=analytic_statistics,
        project_cumulative=project_cumulative,
        sensitivity_sweep=sensitivity_sweep,
        coerce_scenario_inputs=coerce_scenario_inputs,
        coerce_simulation_inputs=coerce_simulation_inputs,
        render_results_summary_tab=render_results_summary_tab,
        render_decline_cases_tab=render_decline_cases_tab,
        render_indicators_tab=render_indicators_tab,
        render_monte_carlo_tab=render_monte_carlo_tab,
        render_projection_tab=render_projection_tab,
        render_sensitivity_tab=render_sensitivity_tab,
        render_methodology_tab=render_methodology_tab,
        apply_app_styles=apply_app_styles,
        run_main_app=run_main_app,
    )
