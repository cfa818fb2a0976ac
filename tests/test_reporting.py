"""
Tests for reporting helpers.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from vat_model.reporting import ScenarioReport, format_currency, format_percent
from vat_model.uncertainty import simulate


class TestFormatting:

    @pytest.mark.parametrize("amount,signed,expected", [
        (1234.5, False, "€1,234.50"),
        (0, False, "€0.00"),
        (-1234.5, False, "-€1,234.50"),
        (5000, True, "+€5,000.00"),
        (-5000, True, "-€5,000.00"),
    ])
    def test_format_currency(self, amount, signed, expected):
        assert format_currency(amount, signed=signed) == expected

    def test_format_currency_symbol(self):
        assert format_currency(10, symbol="$") == "$10.00"

    def test_format_percent(self):
        assert format_percent(71.428571, signed=True) == "+71.43%"
        assert format_percent(53.3333) == "53.33%"
        assert format_percent(None) == "n/a"


class TestScenarioReport:

    def test_text_report(self, net_scenario):
        text = ScenarioReport(net_scenario).generate_text_report()

        assert "VAT RATE CHANGE REPORT" in text
        assert "Input basis:         NET" in text
        assert "+€5,000.00" in text
        assert "+71.43%" in text
        assert "53.33%" in text
        assert "MONTE CARLO" not in text

    def test_text_report_zero_revenue(self, zero_revenue_scenario):
        text = ScenarioReport(zero_revenue_scenario).generate_text_report()
        assert "n/a" in text

    def test_text_report_with_simulation(self, net_scenario):
        sim = simulate(net_scenario, 200, 10, rng=np.random.default_rng(4))
        text = ScenarioReport(net_scenario).generate_text_report(simulation=sim)

        assert "MONTE CARLO (200 runs)" in text
        assert "Median:" in text

    def test_text_report_with_degenerate_simulation(self, net_scenario):
        sim = simulate(net_scenario, 200, 10)
        text = ScenarioReport(net_scenario).generate_text_report(simulation=sim)

        assert "point estimate shown" in text

    def test_to_dataframe(self, gross_scenario):
        df = ScenarioReport(gross_scenario).to_dataframe()

        assert df["item"].tolist() == ["net_revenue", "gross_revenue", "vat"]
        vat = df.set_index("item").loc["vat"]
        assert vat["before"] == pytest.approx(7000)
        assert vat["change"] == pytest.approx(6956.52, abs=0.01)

    def test_export_to_csv(self, net_scenario, tmp_path):
        path = tmp_path / "vat.csv"
        ScenarioReport(net_scenario).export_to_csv(str(path))

        df = pd.read_csv(path)
        assert len(df) == 3
        assert df.loc[df["item"] == "vat", "after"].iloc[0] == pytest.approx(12000)

    def test_plot_comparison(self, net_scenario, tmp_path):
        path = tmp_path / "vat.png"
        fig = ScenarioReport(net_scenario).plot_comparison(save_path=str(path))

        heights = [bar.get_height() for bar in fig.axes[0].patches]
        assert heights == pytest.approx([7000, 12000])
        assert path.exists()
        plt.close(fig)
