"""
Economic indicators tab renderer.
"""

from __future__ import annotations

from typing import Any

from vat_model.reporting import format_currency


def render_indicators_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render the elasticity, efficiency and deadweight-loss approximations.
    """
    result = result_data["result"]

    st_module.header("📐 Economic Indicators")
    st_module.markdown(
        """
        <div class="info-box">
        💡 <strong>Approximations:</strong> These indicators are rough, single-point estimates
        derived from the entered decline. They are meant for orientation, not for policy scoring.
        </div>
        """,
        unsafe_allow_html=True,
    )

    col1, col2 = st_module.columns(2)
    with col1:
        st_module.metric(
            "VAT Rate Change",
            f"{result.vat_rate_change_percent:+.2f}%",
            help="Relative increase of the rate itself.",
        )
        st_module.metric(
            "Demand Elasticity (approx.)",
            f"{result.demand_elasticity:.2f}",
            help="Revenue decline relative to the relative change in the VAT rate (0 when there is no decline).",
        )
    with col2:
        if result.revenue_efficiency is None:
            st_module.metric("Revenue Efficiency", "n/a", help="Undefined when no VAT was collected before.")
        else:
            st_module.metric(
                "Revenue Efficiency",
                f"{result.revenue_efficiency:.3f}",
                delta=f"{(result.revenue_efficiency - 1) * 100:+.1f}% vs old VAT",
                delta_color="normal",
                help="New VAT divided by old VAT.",
            )
        st_module.metric(
            "Deadweight Loss (approx.)",
            format_currency(result.deadweight_loss),
            help="Half of lost tax base times the rate increase (Harberger triangle).",
        )
