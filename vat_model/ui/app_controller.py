"""
Top-level Streamlit app orchestration.
"""

from __future__ import annotations

from typing import Any

from .calculation_controller import (
    ensure_results_state,
    execute_calculation,
    render_sidebar_inputs,
)
from .settings_controller import render_settings_tab
from .tabs_controller import build_main_tabs, render_footer, render_result_tabs


def run_main_app(st_module: Any, deps: Any) -> None:
    """
    Render and orchestrate the full Streamlit app flow.

    Every rerun rebuilds the scenario from the widgets and recomputes all results.
    """
    deps.apply_app_styles(st_module)
    st_module.markdown('<div class="main-header">🧮 VAT Receipts Calculator</div>', unsafe_allow_html=True)
    st_module.markdown(
        '<div class="sub-header">Compare VAT collected at <span class="old-rate">7%</span> and '
        '<span class="new-rate">15%</span>, given an expected decline in turnover and inflation.</div>',
        unsafe_allow_html=True,
    )

    # Sidebar Inputs
    with st_module.sidebar:
        st_module.header("⚙️ Calculation Parameters")
        calc_context = render_sidebar_inputs(st_module=st_module, deps=deps)

        st_module.markdown("---")
        settings = render_settings_tab(
            st_module=st_module,
            settings_tab=st_module.expander("🔬 Analysis Settings", expanded=False),
            deps=deps,
        )

    tabs = build_main_tabs(st_module=st_module, enhanced=settings["enhanced"])

    ensure_results_state(st_module=st_module)
    execute_calculation(
        st_module=st_module,
        deps=deps,
        calc_context=calc_context,
        settings=settings,
    )

    render_result_tabs(st_module=st_module, deps=deps, tabs=tabs)
    render_footer(st_module=st_module)
