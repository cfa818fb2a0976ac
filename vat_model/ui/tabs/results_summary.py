"""
Results summary tab renderer.
"""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go

from vat_model.app_data import CHART_COLORS, MODEL_ASSUMPTIONS
from vat_model.reporting import format_currency
from vat_model.ui.helpers import build_vat_chart_data, describe_difference


def _vat_card(st_module: Any, title: str, css_class: str, amount: str, lines: list[str]) -> None:
    details = "".join(f"<p style='margin:0; color:#475569;'>{line}</p>" for line in lines)
    st_module.markdown(
        f"""
        <div class="vat-card">
            <h4 class="{css_class}">{title}</h4>
            <div class="amount">{amount}</div>
            {details}
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_results_summary_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render headline cards, the VAT comparison chart and the break-even panel.
    """
    scenario = result_data["scenario"]
    result = result_data["result"]
    rates = scenario.rates
    gain = result.difference >= 0

    st_module.header("📈 Results Summary")

    col_old, col_new, col_diff = st_module.columns(3)
    with col_old:
        _vat_card(
            st_module,
            f"VAT before ({rates.old_rate:.0%})",
            "old-rate",
            format_currency(result.old_vat),
            [f"Net: {format_currency(result.net_revenue)}", f"Gross: {format_currency(result.gross_revenue)}"],
        )
    with col_new:
        _vat_card(
            st_module,
            f"VAT after ({rates.new_rate:.0%})",
            "new-rate",
            format_currency(result.new_vat),
            [
                f"Net: {format_currency(result.declined_net_revenue)}",
                f"Gross: {format_currency(result.declined_gross_revenue)}",
            ],
        )
    with col_diff:
        _vat_card(
            st_module,
            f"Difference ({'more' if gain else 'less'} collected)",
            "revenue-gain" if gain else "revenue-loss",
            format_currency(result.difference, signed=True),
            [f"Change in VAT: {result.percentage_change:+.2f}%"],
        )

    st_module.markdown("---")
    st_module.subheader("📊 VAT Collected Before and After")
    st_module.caption(
        f"Absolute VAT amounts at the old ({rates.old_rate:.0%}) and new ({rates.new_rate:.0%}) rate"
    )

    chart_data = build_vat_chart_data(result, scenario)
    fig = go.Figure(
        go.Bar(
            x=[row["name"] for row in chart_data],
            y=[row["value"] for row in chart_data],
            marker_color=[row["color"] for row in chart_data],
            text=[format_currency(row["value"]) for row in chart_data],
            textposition="outside",
            hovertemplate="%{x}<br>VAT: €%{y:,.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        margin=dict(l=20, r=20, t=20, b=20),
        height=360,
        yaxis_title="VAT (€)",
        showlegend=False,
        bargap=0.4,
    )
    st_module.plotly_chart(fig, use_container_width=True)

    note_color = CHART_COLORS["gain"] if gain else CHART_COLORS["loss"]
    st_module.markdown(
        f"<p style='color:{note_color};'><strong>Note:</strong> {describe_difference(result, scenario)}</p>",
        unsafe_allow_html=True,
    )

    st_module.markdown("---")
    st_module.subheader("⚖️ Break-even Decline")
    st_module.metric(
        "Decline at which VAT collected is unchanged",
        f"{result.break_even_decline:.2f}%",
        help="Solves old VAT = new VAT for the decline, holding inflation fixed.",
    )
    st_module.markdown(
        """
        <div class="info-box">
        The formula depends on whether the revenue entered is net (tax base) or gross (including VAT).
        Without inflation, break-even is about 53.3% for net input and about 49.8% for gross input.
        </div>
        """,
        unsafe_allow_html=True,
    )

    with st_module.expander("📋 Model assumptions", expanded=False):
        st_module.markdown("\n".join(f"- {item}" for item in MODEL_ASSUMPTIONS))
