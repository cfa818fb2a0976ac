"""
Scenario Definitions

Defines the inputs of a VAT rate-change comparison: which basis the revenue
figure is expressed in, the revenue itself, the expected decline and the
optional price inflation.
"""

from dataclasses import dataclass, field
from enum import Enum


class InputBasis(Enum):
    """Whether the supplied revenue figure excludes or includes VAT."""
    NET = "net"
    GROSS = "gross"

    @classmethod
    def parse(cls, value) -> 'InputBasis':
        """Accept an InputBasis or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown input basis {value!r}; expected 'net' or 'gross'"
            ) from None


@dataclass(frozen=True)
class VATRates:
    """
    VAT rates before and after the change.

    Attributes:
        old_rate: Rate in force before the change (7%)
        new_rate: Rate in force after the change (15%)
    """
    old_rate: float = 0.07
    new_rate: float = 0.15

    @property
    def rate_change_percent(self) -> float:
        """Relative change of the rate itself, in percent (~114.29%)."""
        return (self.new_rate - self.old_rate) / self.old_rate * 100


DEFAULT_RATES = VATRates()


@dataclass(frozen=True)
class Scenario:
    """
    One set of calculator inputs.

    Attributes:
        input_basis: NET if base_revenue excludes the old VAT, GROSS if it includes it
        base_revenue: Revenue before the rate change, in the chosen basis
        decline_percent: Expected revenue contraction after the change (0-100)
        inflation_percent: Price inflation applied to the post-change basis
        rates: Old and new VAT rates
    """
    input_basis: InputBasis = InputBasis.NET
    base_revenue: float = 100_000.0
    decline_percent: float = 20.0
    inflation_percent: float = 0.0
    rates: VATRates = field(default=DEFAULT_RATES)

    @property
    def inflation_multiplier(self) -> float:
        return 1 + self.inflation_percent / 100

    @property
    def decline_multiplier(self) -> float:
        return 1 - self.decline_percent / 100
