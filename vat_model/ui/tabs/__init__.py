"""
Tab renderer modules for Streamlit app.
"""

from .decline_cases import render_decline_cases_tab
from .indicators import render_indicators_tab
from .methodology import render_methodology_tab
from .monte_carlo import render_monte_carlo_tab
from .projection import render_projection_tab
from .results_summary import render_results_summary_tab
from .sensitivity import render_sensitivity_tab

__all__ = [
    "render_decline_cases_tab",
    "render_indicators_tab",
    "render_methodology_tab",
    "render_monte_carlo_tab",
    "render_projection_tab",
    "render_results_summary_tab",
    "render_sensitivity_tab",
]
