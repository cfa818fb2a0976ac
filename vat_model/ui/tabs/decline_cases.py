"""
Decline test cases tab renderer.
"""

from __future__ import annotations

from typing import Any

from vat_model.app_data import PENDING_DECLINE_KEY
from vat_model.reporting import format_currency


def apply_decline_case(st_module: Any, decline_percent: float) -> None:
    """
    Move the sidebar decline slider to a test case and rerun.
    """
    st_module.session_state[PENDING_DECLINE_KEY] = int(decline_percent)
    st_module.rerun()


def render_decline_cases_tab(st_module: Any, result_data: dict[str, Any]) -> None:
    """
    Render the illustrative decline cases for the current revenue and inflation.
    """
    scenario = result_data["scenario"]
    cases = result_data["decline_cases"]

    st_module.header("🧪 Test Cases")
    st_module.caption(
        f"Examples for initial revenue of {format_currency(scenario.base_revenue)} "
        f"and inflation of {scenario.inflation_percent:g}%. Apply a case to use its decline."
    )

    for row in cases.itertuples(index=False):
        col_text, col_value, col_apply = st_module.columns([3, 1, 1])
        with col_text:
            st_module.markdown(f"**{row.description} ({row.decline_percent:g}%)**")
            st_module.caption(f"VAT: {format_currency(row.old_vat)} → {format_currency(row.new_vat)}")
        with col_value:
            color = "#16a34a" if row.difference >= 0 else "#dc2626"
            st_module.markdown(
                f"<p style='color:{color}; font-weight:bold; text-align:right;'>"
                f"{format_currency(row.difference, signed=True)}</p>",
                unsafe_allow_html=True,
            )
        with col_apply:
            current = row.decline_percent == scenario.decline_percent
            if st_module.button(
                "Apply",
                key=f"apply_decline_{row.decline_percent:g}",
                disabled=current,
                help=f"Set the revenue decline to {row.decline_percent:g}%",
            ):
                apply_decline_case(st_module, row.decline_percent)

    with st_module.expander("Table view", expanded=False):
        st_module.dataframe(
            cases.rename(columns={
                "decline_percent": "Decline (%)",
                "description": "Case",
                "old_vat": "VAT before (€)",
                "new_vat": "VAT after (€)",
                "difference": "Difference (€)",
            }),
            use_container_width=True,
            hide_index=True,
        )
