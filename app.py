"""
VAT Receipts Calculator - Main Streamlit App

Compares VAT receipts before and after a VAT rate change, given a revenue
figure, an expected revenue decline and optional inflation.
"""

import logging
import os
import sys
from pathlib import Path

import streamlit as st

# Configure page
st.set_page_config(
    page_title="VAT Receipts Calculator",
    page_icon="🧮",
    layout="wide",
    initial_sidebar_state="expanded"
)

logging.basicConfig(
    level=os.environ.get("VAT_CALCULATOR_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

sys.path.insert(0, str(Path(__file__).parent))

from vat_model.ui import build_app_dependencies  # noqa: E402

deps = build_app_dependencies()
deps.run_main_app(st_module=st, deps=deps)
