"""
Tax Delta Engine

Computes VAT receipts before and after a rate change for a single scenario,
together with the break-even decline and a few economic indicators.

Conventions:
- NET basis: the revenue figure excludes VAT; inflation and decline are
  applied to the net amount.
- GROSS basis: the revenue figure includes the old VAT; inflation and decline
  are applied to the gross amount, and the post-change net is recovered with
  the NEW rate. The pre- and post-change gross-to-net divisors therefore
  differ.
"""

import math
from dataclasses import dataclass, replace
from typing import Optional, Sequence

import pandas as pd

from .app_data import DECLINE_TEST_CASES
from .scenario import DEFAULT_RATES, InputBasis, Scenario, VATRates


@dataclass(frozen=True)
class CalculationResult:
    """
    Point estimate for one scenario. All amounts are in base currency units.
    """
    # Pre-change
    net_revenue: float
    gross_revenue: float
    old_vat: float

    # Post-change
    declined_net_revenue: float
    declined_gross_revenue: float
    new_vat: float

    # Comparison
    difference: float
    percentage_change: float  # 0 when old_vat is 0
    break_even_decline: float  # May fall outside [0, 100]

    # Economic indicators
    demand_elasticity: float
    revenue_efficiency: Optional[float]  # None when old_vat is 0
    deadweight_loss: float
    vat_rate_change_percent: float

    @property
    def is_revenue_gain(self) -> bool:
        return self.difference >= 0


def break_even_decline(basis: InputBasis,
                       inflation_percent: float,
                       rates: VATRates = DEFAULT_RATES) -> float:
    """
    Decline (in percent) at which new VAT equals old VAT.

    Solves old_vat == new_vat for the decline with inflation held fixed.
    Large inflation can push the root above 100 or below 0; the value is
    returned as computed.
    """
    inflation_multiplier = 1 + inflation_percent / 100
    old, new = rates.old_rate, rates.new_rate

    if basis is InputBasis.GROSS:
        old_share = old / (1 + old)
        divisor = inflation_multiplier * new / (1 + new)
    else:
        old_share = old
        divisor = new * inflation_multiplier

    # Only reachable with -100% inflation: no post-change base at all
    if divisor == 0:
        return -math.inf

    return 100 * (1 - old_share / divisor)


def evaluate(scenario: Scenario) -> CalculationResult:
    """
    Evaluate a scenario.

    The engine does not validate its inputs; callers clamp UI values first.
    """
    rates = scenario.rates
    old, new = rates.old_rate, rates.new_rate

    if scenario.input_basis is InputBasis.GROSS:
        base_gross = scenario.base_revenue
        base_net = base_gross / (1 + old)
        old_vat = base_net * old

        inflated_gross = base_gross * scenario.inflation_multiplier
        declined_gross = inflated_gross * scenario.decline_multiplier
        declined_net = declined_gross / (1 + new)
        new_vat = declined_gross * new / (1 + new)
    else:
        base_net = scenario.base_revenue
        base_gross = base_net * (1 + old)
        old_vat = base_net * old

        inflated_net = base_net * scenario.inflation_multiplier
        declined_net = inflated_net * scenario.decline_multiplier
        declined_gross = declined_net * (1 + new)
        new_vat = declined_net * new

    difference = new_vat - old_vat
    percentage_change = 0.0 if old_vat == 0 else difference / old_vat * 100

    rate_change_pct = rates.rate_change_percent
    if scenario.decline_percent > 0:
        demand_elasticity = -(scenario.decline_percent * 100) / rate_change_pct
    else:
        demand_elasticity = 0.0

    revenue_efficiency = None if old_vat == 0 else new_vat / old_vat
    deadweight_loss = base_net * (scenario.decline_percent / 100) * (new - old) * 0.5

    return CalculationResult(
        net_revenue=base_net,
        gross_revenue=base_gross,
        old_vat=old_vat,
        declined_net_revenue=declined_net,
        declined_gross_revenue=declined_gross,
        new_vat=new_vat,
        difference=difference,
        percentage_change=percentage_change,
        break_even_decline=break_even_decline(
            scenario.input_basis, scenario.inflation_percent, rates
        ),
        demand_elasticity=demand_elasticity,
        revenue_efficiency=revenue_efficiency,
        deadweight_loss=deadweight_loss,
        vat_rate_change_percent=rate_change_pct,
    )


def evaluate_decline_cases(scenario: Scenario,
                           cases: Sequence[dict] = DECLINE_TEST_CASES) -> pd.DataFrame:
    """
    Re-evaluate a scenario at a list of illustrative decline rates.

    Each case is a dict with 'decline' (percent) and 'description'.
    """
    rows = []
    for case in cases:
        result = evaluate(replace(scenario, decline_percent=float(case["decline"])))
        rows.append({
            "decline_percent": float(case["decline"]),
            "description": case["description"],
            "old_vat": result.old_vat,
            "new_vat": result.new_vat,
            "difference": result.difference,
        })

    return pd.DataFrame(
        rows,
        columns=["decline_percent", "description", "old_vat", "new_vat", "difference"],
    )
