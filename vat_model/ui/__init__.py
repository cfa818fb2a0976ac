"""
UI helper utilities for Streamlit app composition.
"""

from .styles import APP_STYLES, apply_app_styles
from .helpers import (
    build_vat_chart_data,
    coerce_scenario_inputs,
    coerce_simulation_inputs,
    describe_difference,
)
from .app_controller import run_main_app
from .dependencies import build_app_dependencies

__all__ = [
    "APP_STYLES",
    "apply_app_styles",
    "build_vat_chart_data",
    "coerce_scenario_inputs",
    "coerce_simulation_inputs",
    "describe_difference",
    "run_main_app",
    "build_app_dependencies",
]
