"""
Monte Carlo simulation tab renderer.
"""

from __future__ import annotations

from typing import Any

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from vat_model.reporting import format_currency


def render_monte_carlo_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render the simulated distribution of the VAT difference.
    """
    simulation = result_data["simulation"]
    analytic = result_data["analytic"]
    settings = result_data["simulation_settings"]
    point = result_data["result"].difference

    st_module.header("🎲 Monte Carlo Simulation")
    st_module.markdown(
        f"""
        <div class="info-box">
        💡 <strong>Uncertain decline:</strong> Each of the {settings.run_count:,} runs draws the decline
        uniformly within ±{settings.uncertainty_range_percent:g} percentage points of the entered value,
        clamped to 0-80%, and recomputes the VAT difference.
        </div>
        """,
        unsafe_allow_html=True,
    )

    if simulation.is_degenerate:
        st_module.info("Simulation unavailable; showing the point estimate.")

    stats = simulation.statistics
    col1, col2, col3, col4 = st_module.columns(4)
    with col1:
        st_module.metric("Mean Difference", format_currency(stats.mean, signed=True))
    with col2:
        st_module.metric("Median", format_currency(stats.median, signed=True))
    with col3:
        st_module.metric("90% Range", f"{format_currency(stats.p5)} to {format_currency(stats.p95)}")
    with col4:
        st_module.metric("Std. Deviation", format_currency(stats.std))

    samples = simulation.samples_frame()
    if not samples.empty:
        c1, c2 = st_module.columns(2)

        with c1:
            st_module.subheader("Distribution of the Difference")
            fig_hist = px.histogram(
                samples,
                x="difference",
                nbins=25,
                labels={"difference": "VAT Difference (€)"},
            )
            fig_hist.add_vline(x=point, line_dash="dash", line_color="gray", annotation_text="Point estimate")
            fig_hist.update_layout(margin=dict(l=20, r=20, t=20, b=20), height=320, yaxis_title="Runs")
            st_module.plotly_chart(fig_hist, use_container_width=True)

        with c2:
            st_module.subheader("Sampled Decline vs Difference")
            fig_scatter = go.Figure(
                go.Scatter(
                    x=samples["sampled_decline_percent"],
                    y=samples["difference"],
                    mode="markers",
                    marker=dict(
                        color=["#2563eb" if v >= 0 else "#f97316" for v in samples["difference"]],
                        size=7,
                        opacity=0.7,
                    ),
                )
            )
            fig_scatter.add_hline(y=0, line_dash="dash", line_color="gray")
            fig_scatter.update_layout(
                margin=dict(l=20, r=20, t=20, b=20),
                height=320,
                xaxis_title="Sampled Decline (%)",
                yaxis_title="VAT Difference (€)",
            )
            st_module.plotly_chart(fig_scatter, use_container_width=True)

        st_module.caption(f"Charts show the first {len(samples)} runs; statistics use all {simulation.run_count:,} runs.")

    st_module.subheader("Simulated vs Closed-Form")
    comparison = pd.DataFrame(
        {
            "Statistic": ["Mean", "Median", "5th percentile", "95th percentile", "Std. deviation"],
            "Simulated (€)": list(stats.as_dict().values()),
            "Closed-form (€)": list(analytic.as_dict().values()),
        }
    )
    st_module.dataframe(
        comparison.round(2),
        use_container_width=True,
        hide_index=True,
    )
