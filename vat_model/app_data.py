"""
Application data for the VAT Receipts Calculator.

Contains:
- DEFAULT_INPUTS: Initial values of the form controls
- UI_LIMITS: Bounds applied to user input before it reaches the engine
- DECLINE_TEST_CASES: Illustrative decline rates shown under the results
- MODEL_ASSUMPTIONS: Assumption list shown on the summary tab
- CHART_COLORS: Colours shared by the plotly and matplotlib charts
"""

# =============================================================================
# FORM DEFAULTS
# =============================================================================
DEFAULT_INPUTS = {
    "input_basis": "net",
    "base_revenue": 100_000.0,
    "decline_percent": 20.0,
    "inflation_percent": 0.0,
    # Enhanced analysis
    "run_count": 1000,
    "uncertainty_range_percent": 10.0,
    "projection_years": 5,
    "annual_growth_percent": 0.0,
}

# =============================================================================
# INPUT BOUNDS (min, max)
# =============================================================================
UI_LIMITS = {
    "base_revenue": (0.0, None),
    "decline_percent": (0.0, 80.0),
    "inflation_percent": (0.0, 50.0),
    "run_count": (100, 5000),
    "uncertainty_range_percent": (0.0, 30.0),
    "projection_years": (1, 10),
    "annual_growth_percent": (-20.0, 20.0),
}

# =============================================================================
# DECLINE TEST CASES
# =============================================================================
DECLINE_TEST_CASES = [
    {"decline": 10, "description": "Mild decline in turnover"},
    {"decline": 20, "description": "Moderate decline in turnover"},
    {"decline": 30, "description": "Significant decline in turnover"},
    {"decline": 40, "description": "Large decline in turnover"},
    {"decline": 50, "description": "Drastic decline in turnover"},
]

# Session state keys for the decline slider. A widget's own key cannot be
# written after it is drawn, so applied cases go through the pending key.
DECLINE_WIDGET_KEY = "decline_percent_input"
PENDING_DECLINE_KEY = "pending_decline_percent"

# =============================================================================
# DISPLAY TEXT
# =============================================================================
BASIS_LABELS = {
    "net": "Excluding VAT (net)",
    "gross": "Including VAT (gross)",
}

BASIS_NOTES = {
    "net": (
        "If you enter invoice totals from before the rate change, those include 7% VAT "
        "and correspond to gross revenue. If you enter tax bases, choose excluding VAT."
    ),
    "gross": (
        "Enter gross revenue including 7% VAT. The calculator separates the tax base "
        "and the VAT automatically."
    ),
}

MODEL_ASSUMPTIONS = [
    "VAT rates are fixed: 7% → 15%.",
    "The revenue decline is an average over the period after the rate change.",
    "Inflation is optional and applies to the same revenue type you selected (net or gross).",
    "VAT is shown together with the tax base (net) and the matching gross amount.",
    "Results are indicative and depend on the assumptions entered.",
]

CHART_COLORS = {
    "old_vat": "#ef4444",
    "new_vat": "#22c55e",
    "gain": "#2563eb",
    "loss": "#f97316",
    "neutral": "#64748b",
}
