"""
Methodology tab renderer.
"""

from __future__ import annotations

from typing import Any


def render_methodology_tab(st_module: Any) -> None:
    """
    Render methodology/reference tab content.
    """
    st_module.header("ℹ️ Methodology")
    st_module.markdown(
        r"""
        ## How This Calculator Works

        The VAT rate rises from **7%** to **15%**. VAT before the change is levied on the
        original net revenue; VAT after the change is levied on revenue that has been
        inflated and then reduced by the expected decline.

        #### Net input (tax base)

        ```
        VAT before = Net × 7%
        VAT after  = Net × (1 + inflation) × (1 − decline) × 15%
        ```

        #### Gross input (including 7% VAT)

        ```
        Net before = Gross / 1.07
        VAT before = Net before × 7%
        VAT after  = Gross × (1 + inflation) × (1 − decline) × 15 / 115
        ```

        #### Break-even decline

        The decline at which both amounts are equal:

        - Net input: `1 − 0.07 / (0.15 × (1 + inflation))` (≈ 53.3% without inflation)
        - Gross input: `1 − (0.07/1.07) / ((1 + inflation) × 0.15/1.15)` (≈ 49.8% without inflation)

        #### Enhanced analysis

        1. **Economic indicators** – demand elasticity (decline relative to the rate change),
           revenue efficiency (new VAT / old VAT) and a Harberger-triangle deadweight loss.
        2. **Monte Carlo** – the decline is drawn uniformly within a band around the entered value
           and clamped to 0–80%. Percentiles are read off the sorted runs without interpolation,
           and the standard deviation is the population figure. A closed-form result for the same
           clipped uniform distribution is shown alongside.
        3. **Projection** – year-by-year receipts under both rates with constant annual growth.
        4. **Sensitivity** – receipts across a grid of decline or inflation values.

        ### Limitations

        - ⚠️ Rates are fixed and apply to the whole revenue base
        - ⚠️ The decline is a single average, not a demand model
        - ⚠️ Results are indicative and depend on the assumptions entered
        """
    )
