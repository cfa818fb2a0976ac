"""
Cumulative projection tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from vat_model.app_data import CHART_COLORS
from vat_model.reporting import format_currency


def render_projection_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render year-by-year and cumulative VAT differences.
    """
    projection = result_data["projection"]

    st_module.header("⏳ Multi-Year Projection")

    if len(projection.years) == 0:
        st_module.info("Choose at least one projection year in the analysis settings.")
        return

    df = projection.to_dataframe()
    horizon = len(df)

    col1, col2, col3 = st_module.columns(3)
    with col1:
        st_module.metric(f"Old-Rate VAT ({horizon}Y)", format_currency(float(df["old_vat"].sum())))
    with col2:
        st_module.metric(f"New-Rate VAT ({horizon}Y)", format_currency(float(df["new_vat"].sum())))
    with col3:
        st_module.metric(f"Cumulative Difference ({horizon}Y)", format_currency(projection.total_difference, signed=True))

    st_module.markdown("---")
    c1, c2 = st_module.columns(2)

    with c1:
        st_module.subheader("VAT by Year")
        fig_years = go.Figure()
        fig_years.add_trace(go.Bar(x=df["year"], y=df["old_vat"], name="Old rate", marker_color=CHART_COLORS["old_vat"]))
        fig_years.add_trace(go.Bar(x=df["year"], y=df["new_vat"], name="New rate", marker_color=CHART_COLORS["new_vat"]))
        fig_years.update_layout(
            barmode="group",
            margin=dict(l=20, r=20, t=20, b=20),
            height=300,
            xaxis_title="Year",
            yaxis_title="VAT (€)",
        )
        st_module.plotly_chart(fig_years, use_container_width=True)

    with c2:
        st_module.subheader("Cumulative Difference")
        fig_cum = go.Figure()
        fig_cum.add_trace(
            go.Scatter(
                x=df["year"],
                y=df["cumulative_difference"],
                fill="tozeroy",
                mode="lines+markers",
                line=dict(color=CHART_COLORS["gain"], width=3),
            )
        )
        fig_cum.update_layout(
            margin=dict(l=20, r=20, t=20, b=20),
            height=300,
            xaxis_title="Year",
            yaxis_title="Cumulative Difference (€)",
        )
        st_module.plotly_chart(fig_cum, use_container_width=True)

    with st_module.expander("📋 Year-by-year table", expanded=False):
        st_module.dataframe(df, use_container_width=True, hide_index=True)
