"""
Pytest fixtures for VAT calculator tests.
"""

import pytest
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from vat_model.scenario import InputBasis, Scenario


# =============================================================================
# SCENARIO FIXTURES
# =============================================================================

@pytest.fixture
def net_scenario():
    """100K net revenue, 20% decline, no inflation."""
    return Scenario(
        input_basis=InputBasis.NET,
        base_revenue=100_000,
        decline_percent=20,
        inflation_percent=0,
    )


@pytest.fixture
def gross_scenario():
    """107K gross revenue (100K net at 7%), no decline or inflation."""
    return Scenario(
        input_basis=InputBasis.GROSS,
        base_revenue=107_000,
        decline_percent=0,
        inflation_percent=0,
    )


@pytest.fixture
def zero_revenue_scenario():
    """Degenerate scenario with nothing collected before the change."""
    return Scenario(
        input_basis=InputBasis.NET,
        base_revenue=0,
        decline_percent=20,
        inflation_percent=0,
    )


# =============================================================================
# RANDOM SOURCE FIXTURES
# =============================================================================

class SequenceRng:
    """Random source that replays a fixed list of uniform draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def uniform(self, low, high):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def sequence_rng_cls():
    return SequenceRng


# =============================================================================
# STREAMLIT FIXTURES
# =============================================================================

class FakeContainer:
    """Context manager standing in for columns, tabs, expanders and spinners."""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSessionState(dict):
    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name, value):
        self[name] = value


class FakeStreamlit:
    """
    Minimal stand-in for the streamlit module.

    Input widgets return an override (by key, then label), their value in
    session state when keyed, or their default.
    Output calls are recorded in `calls`.
    """

    def __init__(self, overrides=None):
        self.overrides = overrides or {}
        self.session_state = FakeSessionState()
        self.sidebar = FakeContainer()
        self.calls = []

    def _value(self, label, default, key=None):
        if key is not None and key in self.overrides:
            return self.overrides[key]
        if label in self.overrides:
            return self.overrides[label]
        if key is not None and key in self.session_state:
            return self.session_state[key]
        return default

    # Inputs
    def radio(self, label, options, key=None, **kwargs):
        return self._value(label, options[kwargs.get("index", 0)], key)

    def number_input(self, label, value=0, key=None, **kwargs):
        return self._value(label, value, key)

    def slider(self, label, value=0, key=None, **kwargs):
        return self._value(label, value, key)

    def toggle(self, label, value=False, key=None, **kwargs):
        return self._value(label, value, key)

    def checkbox(self, label, value=False, key=None, **kwargs):
        return self._value(label, value, key)

    def button(self, label, key=None, **kwargs):
        if key is not None and key in self.overrides:
            return self.overrides[key]
        return self.overrides.get(label, False)

    # Layout
    def columns(self, spec, **kwargs):
        count = spec if isinstance(spec, int) else len(spec)
        return [FakeContainer() for _ in range(count)]

    def tabs(self, labels):
        self.calls.append(("tabs", list(labels)))
        return [FakeContainer() for _ in labels]

    def expander(self, label, **kwargs):
        return FakeContainer()

    def spinner(self, message):
        return FakeContainer()

    def rerun(self):
        self.calls.append(("rerun",))

    # Outputs
    def __getattr__(self, name):
        def _record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return _record

    def called(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def fake_streamlit():
    return FakeStreamlit
