"""
Settings panel rendering helpers.
"""

from __future__ import annotations

from typing import Any


def render_settings_tab(st_module: Any, settings_tab: Any, deps: Any) -> dict[str, Any]:
    """
    Render the analysis settings panel and return selected configuration values.
    """
    defaults = deps.DEFAULT_INPUTS
    limits = deps.UI_LIMITS

    run_count = defaults["run_count"]
    uncertainty_range = defaults["uncertainty_range_percent"]
    seed = None
    projection_years = defaults["projection_years"]
    annual_growth = defaults["annual_growth_percent"]

    with settings_tab:
        enhanced = st_module.toggle(
            "Enhanced analysis",
            value=False,
            help="Adds economic indicators, Monte Carlo simulation, multi-year projection and sensitivity",
        )

        if enhanced:
            st_module.subheader("🎲 Monte Carlo")
            run_count = st_module.slider(
                "Simulation runs",
                min_value=limits["run_count"][0],
                max_value=limits["run_count"][1],
                value=defaults["run_count"],
                step=100,
            )
            uncertainty_range = st_module.slider(
                "Decline uncertainty (± percentage points)",
                min_value=limits["uncertainty_range_percent"][0],
                max_value=limits["uncertainty_range_percent"][1],
                value=defaults["uncertainty_range_percent"],
                step=1.0,
                help="Each run draws the decline uniformly within this band, clamped to 0-80%",
            )
            fixed_seed = st_module.checkbox(
                "Reproducible runs",
                value=False,
                help="Use a fixed random seed so the simulation repeats exactly",
            )
            if fixed_seed:
                seed = st_module.number_input("Random seed", min_value=0, value=42, step=1)

            st_module.subheader("⏳ Projection")
            projection_years = st_module.slider(
                "Years",
                min_value=limits["projection_years"][0],
                max_value=limits["projection_years"][1],
                value=defaults["projection_years"],
                step=1,
            )
            annual_growth = st_module.slider(
                "Annual revenue growth (%)",
                min_value=limits["annual_growth_percent"][0],
                max_value=limits["annual_growth_percent"][1],
                value=defaults["annual_growth_percent"],
                step=0.5,
            )

        st_module.markdown("---")
        if st_module.button("🗑️ Reset All", type="primary", help="Clear all inputs, results, and settings to default"):
            st_module.session_state.clear()
            st_module.rerun()

    return {
        "enhanced": enhanced,
        "run_count": run_count,
        "uncertainty_range_percent": uncertainty_range,
        "seed": seed,
        "projection_years": projection_years,
        "annual_growth_percent": annual_growth,
    }
