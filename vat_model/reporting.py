"""
Reporting and Visualization Module

Generates formatted reports and charts for a VAT rate-change scenario.
"""

import logging
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import pandas as pd

from .app_data import CHART_COLORS
from .engine import CalculationResult, evaluate
from .scenario import Scenario
from .uncertainty import SimulationResult

logger = logging.getLogger(__name__)


def format_currency(amount: float, symbol: str = "€", signed: bool = False) -> str:
    """Two-decimal, comma-grouped currency string for display."""
    sign = "+" if signed and amount >= 0 else ""
    if amount < 0:
        return f"-{symbol}{abs(amount):,.2f}"
    return f"{sign}{symbol}{amount:,.2f}"


def format_percent(value: Optional[float], signed: bool = False) -> str:
    if value is None:
        return "n/a"
    return f"{value:+.2f}%" if signed else f"{value:.2f}%"


class ScenarioReport:
    """
    Generate reports for one evaluated scenario.
    """

    def __init__(self, scenario: Scenario, result: Optional[CalculationResult] = None):
        self.scenario = scenario
        self.result = result if result is not None else evaluate(scenario)

    def generate_text_report(self, simulation: Optional[SimulationResult] = None) -> str:
        """Generate a fixed-width text report."""
        s, r = self.scenario, self.result
        rates = s.rates
        lines = []

        lines.append("=" * 60)
        lines.append("VAT RATE CHANGE REPORT")
        lines.append("=" * 60)
        lines.append("")

        lines.append("INPUTS")
        lines.append("-" * 40)
        lines.append(f"VAT rate:            {rates.old_rate:.0%} -> {rates.new_rate:.0%}")
        lines.append(f"Input basis:         {s.input_basis.value.upper()}")
        lines.append(f"Base revenue:        {format_currency(s.base_revenue):>18}")
        lines.append(f"Revenue decline:     {s.decline_percent:>17.2f}%")
        lines.append(f"Inflation:           {s.inflation_percent:>17.2f}%")
        lines.append("")

        lines.append("RECEIPTS")
        lines.append("-" * 60)
        lines.append(f"{'':<14} {'Net':>14} {'Gross':>14} {'VAT':>14}")
        lines.append(f"{'Before':<14} {r.net_revenue:>14,.2f} {r.gross_revenue:>14,.2f} {r.old_vat:>14,.2f}")
        lines.append(f"{'After':<14} {r.declined_net_revenue:>14,.2f} "
                     f"{r.declined_gross_revenue:>14,.2f} {r.new_vat:>14,.2f}")
        lines.append("-" * 60)
        lines.append(f"Difference:          {format_currency(r.difference, signed=True):>18}")
        lines.append(f"Change in VAT:       {format_percent(r.percentage_change, signed=True):>18}")
        lines.append(f"Break-even decline:  {format_percent(r.break_even_decline):>18}")
        lines.append("")

        lines.append("INDICATORS")
        lines.append("-" * 40)
        lines.append(f"VAT rate change:     {format_percent(r.vat_rate_change_percent):>18}")
        lines.append(f"Demand elasticity:   {r.demand_elasticity:>18.2f}")
        efficiency = "n/a" if r.revenue_efficiency is None else f"{r.revenue_efficiency:.4f}"
        lines.append(f"Revenue efficiency:  {efficiency:>18}")
        lines.append(f"Deadweight loss:     {format_currency(r.deadweight_loss):>18}")

        if simulation is not None:
            st = simulation.statistics
            lines.append("")
            lines.append(f"MONTE CARLO ({simulation.run_count} runs)")
            lines.append("-" * 40)
            if simulation.is_degenerate:
                lines.append("  No simulation run; point estimate shown")
            lines.append(f"  Mean:    {format_currency(st.mean, signed=True):>18}")
            lines.append(f"  Median:  {format_currency(st.median, signed=True):>18}")
            lines.append(f"  5th:     {format_currency(st.p5, signed=True):>18}")
            lines.append(f"  95th:    {format_currency(st.p95, signed=True):>18}")
            lines.append(f"  Std:     {format_currency(st.std):>18}")

        lines.append("=" * 60)
        return "\n".join(lines)

    def to_dataframe(self) -> pd.DataFrame:
        """Line items before, after and the change between them."""
        r = self.result
        return pd.DataFrame({
            'item': ['net_revenue', 'gross_revenue', 'vat'],
            'before': [r.net_revenue, r.gross_revenue, r.old_vat],
            'after': [r.declined_net_revenue, r.declined_gross_revenue, r.new_vat],
            'change': [
                r.declined_net_revenue - r.net_revenue,
                r.declined_gross_revenue - r.gross_revenue,
                r.difference,
            ],
        })

    def export_to_csv(self, filepath: str):
        """Export line items to a CSV file."""
        self.to_dataframe().to_csv(filepath, index=False)
        logger.info("Results exported to %s", filepath)

    def plot_comparison(self,
                        save_path: Optional[str] = None,
                        show: bool = False) -> plt.Figure:
        """
        Bar chart of VAT collected before and after the rate change.
        """
        r = self.result
        rates = self.scenario.rates

        fig, ax = plt.subplots(figsize=(8, 5))
        labels = [f"VAT before ({rates.old_rate:.0%})", f"VAT after ({rates.new_rate:.0%})"]
        values = [r.old_vat, r.new_vat]
        bars = ax.bar(labels, values, color=[CHART_COLORS['old_vat'], CHART_COLORS['new_vat']])

        ax.set_ylabel('VAT collected (€)')
        ax.set_title(f"VAT receipts, {self.scenario.decline_percent:.0f}% revenue decline")
        ax.yaxis.set_major_formatter(mticker.StrMethodFormatter('€{x:,.0f}'))
        ax.grid(True, axis='y', alpha=0.3)

        for bar, value in zip(bars, values):
            ax.annotate(format_currency(value),
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=9)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')

        if show:
            plt.show()

        return fig
