"""
Calculation workflow helpers.
"""

from __future__ import annotations

from typing import Any

from .controller_utils import run_with_spinner_feedback


def render_sidebar_inputs(st_module: Any, deps: Any) -> dict[str, Any]:
    """
    Render scenario input controls in the sidebar and return raw form values.
    """
    defaults = deps.DEFAULT_INPUTS
    limits = deps.UI_LIMITS

    st_module.subheader("Revenue input type")
    basis = st_module.radio(
        "Revenue input type",
        options=["net", "gross"],
        format_func=lambda key: deps.BASIS_LABELS[key],
        horizontal=True,
        label_visibility="collapsed",
    )
    st_module.info(deps.BASIS_NOTES[basis])

    base_revenue = st_module.number_input(
        "Initial revenue (before the rate change), EUR",
        min_value=limits["base_revenue"][0],
        value=defaults["base_revenue"],
        step=1000.0,
        help="Net or gross depending on the input type selected above",
    )

    # A test case applied on the previous run overrides the slider position
    state = st_module.session_state
    if deps.PENDING_DECLINE_KEY in state:
        state[deps.DECLINE_WIDGET_KEY] = state.pop(deps.PENDING_DECLINE_KEY)
    if deps.DECLINE_WIDGET_KEY not in state:
        state[deps.DECLINE_WIDGET_KEY] = int(defaults["decline_percent"])

    decline_percent = st_module.slider(
        "📉 Revenue decline after the rate change (%)",
        min_value=int(limits["decline_percent"][0]),
        max_value=int(limits["decline_percent"][1]),
        step=1,
        help="Estimated revenue decline caused by the rate increase and changes in demand",
        key=deps.DECLINE_WIDGET_KEY,
    )

    inflation_percent = st_module.slider(
        "📈 Price inflation (optional, %)",
        min_value=int(limits["inflation_percent"][0]),
        max_value=int(limits["inflation_percent"][1]),
        value=int(defaults["inflation_percent"]),
        step=1,
        help="Applied to the same revenue type you selected (net or gross) after the rate change",
    )

    return {
        "input_basis": basis,
        "base_revenue": base_revenue,
        "decline_percent": decline_percent,
        "inflation_percent": inflation_percent,
    }


def ensure_results_state(st_module: Any) -> None:
    """
    Initialize results slot in session state when missing.
    """
    if "results" not in st_module.session_state:
        st_module.session_state.results = None


def compute_results(deps: Any, calc_context: dict[str, Any], settings: dict[str, Any]) -> dict[str, Any]:
    """
    Evaluate the scenario and, in enhanced mode, the uncertainty views.
    """
    scenario = deps.coerce_scenario_inputs(calc_context)
    results: dict[str, Any] = {
        "scenario": scenario,
        "result": deps.evaluate(scenario),
        "decline_cases": deps.evaluate_decline_cases(scenario),
        "enhanced": settings["enhanced"],
    }

    if not settings["enhanced"]:
        return results

    sim = deps.coerce_simulation_inputs(settings)
    uncertainty = deps.UncertaintySettings(
        run_count=sim["run_count"],
        uncertainty_range_percent=sim["uncertainty_range_percent"],
        seed=sim["seed"],
    )

    results.update(
        simulation_settings=uncertainty,
        simulation=deps.simulate(
            scenario,
            run_count=uncertainty.run_count,
            uncertainty_range_percent=uncertainty.uncertainty_range_percent,
            rng=uncertainty.make_rng(),
            retain_count=uncertainty.retain_count,
        ),
        analytic=deps.analytic_statistics(scenario, uncertainty.uncertainty_range_percent),
        projection=deps.project_cumulative(
            scenario,
            years=sim["projection_years"],
            annual_growth_percent=sim["annual_growth_percent"],
        ),
        sensitivity_decline=deps.sensitivity_sweep(scenario, "decline_percent"),
        sensitivity_inflation=deps.sensitivity_sweep(scenario, "inflation_percent"),
    )
    return results


def execute_calculation(
    st_module: Any,
    deps: Any,
    calc_context: dict[str, Any],
    settings: dict[str, Any],
) -> None:
    """
    Recompute results for the current inputs and write them to session state.
    """
    def _run() -> None:
        st_module.session_state.results = compute_results(
            deps=deps,
            calc_context=calc_context,
            settings=settings,
        )

    ok = run_with_spinner_feedback(
        st_module=st_module,
        spinner_message="Calculating VAT receipts...",
        error_prefix="❌ Error calculating VAT receipts",
        action_fn=_run,
    )
    if not ok:
        st_module.session_state.results = None
