"""
Tab wiring and render orchestration helpers.
"""

from __future__ import annotations

from typing import Any

BASIC_TABS = ["📊 Summary", "🧪 Test Cases"]
ENHANCED_TABS = ["📐 Indicators", "🎲 Monte Carlo", "⏳ Projection", "🎚️ Sensitivity"]
REFERENCE_TABS = ["ℹ️ Methodology"]


def build_main_tabs(st_module: Any, enhanced: bool) -> dict[str, Any]:
    """
    Create main result tabs layout and return named tab references.
    """
    labels = BASIC_TABS + (ENHANCED_TABS if enhanced else []) + REFERENCE_TABS
    tabs = st_module.tabs(labels)
    return dict(zip(labels, tabs, strict=True))


def render_result_tabs(
    st_module: Any,
    deps: Any,
    tabs: dict[str, Any],
) -> None:
    """
    Render result tabs for the current session results.
    """
    with tabs["ℹ️ Methodology"]:
        deps.render_methodology_tab(st_module=st_module)

    result_data = st_module.session_state.results
    if not result_data:
        with tabs["📊 Summary"]:
            st_module.info("👈 Adjust the inputs in the sidebar to see results.")
        return

    with tabs["📊 Summary"]:
        deps.render_results_summary_tab(st_module=st_module, result_data=result_data)

    with tabs["🧪 Test Cases"]:
        deps.render_decline_cases_tab(st_module=st_module, result_data=result_data)

    if not result_data.get("enhanced") or "🎲 Monte Carlo" not in tabs:
        return

    with tabs["📐 Indicators"]:
        deps.render_indicators_tab(st_module=st_module, result_data=result_data)

    with tabs["🎲 Monte Carlo"]:
        deps.render_monte_carlo_tab(st_module=st_module, result_data=result_data)

    with tabs["⏳ Projection"]:
        deps.render_projection_tab(st_module=st_module, result_data=result_data)

    with tabs["🎚️ Sensitivity"]:
        deps.render_sensitivity_tab(st_module=st_module, result_data=result_data)


def render_footer(st_module: Any) -> None:
    """
    Render app footer.
    """
    st_module.markdown("---")
    st_module.caption(
        """
**VAT Receipts Calculator** | Built with Streamlit |
Shows how a VAT rate increase plays out once the expected drop in turnover is taken into account.
Results are indicative and depend on the assumptions entered.
"""
    )
