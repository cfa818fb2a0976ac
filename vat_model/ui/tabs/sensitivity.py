"""
Sensitivity tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from vat_model.app_data import CHART_COLORS
from vat_model.reporting import format_currency

PARAMETER_LABELS = {
    "decline_percent": "Revenue Decline (%)",
    "inflation_percent": "Inflation (%)",
}


def _render_sweep(st_module: Any, sweep: Any, marker_x: float, break_even: float | None) -> None:
    label = PARAMETER_LABELS[sweep.parameter_name]

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=sweep.parameter_values, y=sweep.old_vat, name="VAT before",
                             mode="lines", line=dict(color=CHART_COLORS["old_vat"], dash="dash")))
    fig.add_trace(go.Scatter(x=sweep.parameter_values, y=sweep.new_vat, name="VAT after",
                             mode="lines+markers", line=dict(color=CHART_COLORS["new_vat"], width=3)))
    fig.add_vline(x=marker_x, line_dash="dot", line_color=CHART_COLORS["neutral"], annotation_text="Current")
    if break_even is not None and 0 <= break_even <= sweep.parameter_values.max():
        fig.add_vline(x=break_even, line_dash="dash", line_color=CHART_COLORS["gain"], annotation_text="Break-even")
    fig.update_layout(
        margin=dict(l=20, r=20, t=20, b=20),
        height=320,
        xaxis_title=label,
        yaxis_title="VAT (€)",
    )
    st_module.plotly_chart(fig, use_container_width=True)

    low, high = sweep.range
    st_module.caption(
        f"Difference ranges from {format_currency(low, signed=True)} to {format_currency(high, signed=True)}; "
        f"each percentage point of {label.lower().split(' (')[0]} moves it by about "
        f"{format_currency(sweep.marginal_effect, signed=True)}."
    )


def render_sensitivity_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render VAT receipts across decline and inflation grids.
    """
    scenario = result_data["scenario"]
    result = result_data["result"]

    st_module.header("🎚️ Sensitivity Analysis")

    c1, c2 = st_module.columns(2)
    with c1:
        st_module.subheader("By Revenue Decline")
        _render_sweep(st_module, result_data["sensitivity_decline"], scenario.decline_percent, result.break_even_decline)
    with c2:
        st_module.subheader("By Inflation")
        _render_sweep(st_module, result_data["sensitivity_inflation"], scenario.inflation_percent, None)

    with st_module.expander("📋 Sensitivity tables", expanded=False):
        st_module.dataframe(result_data["sensitivity_decline"].to_dataframe(), use_container_width=True, hide_index=True)
        st_module.dataframe(result_data["sensitivity_inflation"].to_dataframe(), use_container_width=True, hide_index=True)
