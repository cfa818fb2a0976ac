"""
Centralized Streamlit style definitions.
"""

APP_STYLES = """
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: 700;
        color: #2563eb;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #475569;
        margin-bottom: 2rem;
    }
    .vat-card {
        background-color: #f8fafc;
        padding: 1rem;
        border-radius: 0.5rem;
        text-align: center;
        margin: 0.5rem 0;
    }
    .vat-card h4 {
        margin: 0;
    }
    .vat-card .amount {
        font-size: 1.9rem;
        font-weight: 700;
        color: #0f172a;
    }
    .old-rate {
        color: #dc2626;
    }
    .new-rate {
        color: #16a34a;
    }
    .revenue-gain {
        color: #2563eb;
        font-weight: bold;
    }
    .revenue-loss {
        color: #ea580c;
        font-weight: bold;
    }
    .info-box {
        background-color: #eff6ff;
        border-left: 4px solid #2563eb;
        padding: 1rem;
        margin: 1rem 0;
        border-radius: 0.25rem;
    }
</style>
"""


def apply_app_styles(st_module) -> None:
    """Apply shared CSS style block to the Streamlit app."""
    st_module.markdown(APP_STYLES, unsafe_allow_html=True)
