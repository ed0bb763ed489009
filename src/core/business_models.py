# src/core/business_models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class BusinessInputs:
    """
    Monthly business assumptions entered by the user.

    All fields must be strictly positive and finite. The calculation engine
    does not validate them; callers reject bad values first
    (see src.ui.business_inputs.validate_business_inputs).
    """

    initial_investment: float  # one-off capital outlay
    monthly_fixed_cost: float  # rent, salaries, insurance...
    variable_cost_per_unit: float
    selling_price_per_unit: float
    monthly_sales_volume: float  # units per month
    tax_rate: float  # 15.0 = 15% of positive operating profit


class Scenario(Enum):
    PESSIMISTIC = "pessimistic"
    REALISTIC = "realistic"
    OPTIMISTIC = "optimistic"

    @property
    def label(self) -> str:
        return self.value.title()

    @property
    def description(self) -> str:
        return _SCENARIO_DESCRIPTIONS[self]


_SCENARIO_DESCRIPTIONS = {
    Scenario.PESSIMISTIC: "-20% sales, +10% costs",
    Scenario.REALISTIC: "Your original figures",
    Scenario.OPTIMISTIC: "+20% sales, -10% costs",
}


def scenario_from_value(value: Union[str, Scenario]) -> Scenario:
    """Parse a scenario name ("optimistic", "Optimistic"...) into a Scenario."""
    if isinstance(value, Scenario):
        return value
    try:
        return Scenario(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in Scenario)
        raise ValueError(f"Unknown scenario {value!r}; expected one of: {valid}") from None


@dataclass(frozen=True)
class ScenarioAdjustment:
    """Multipliers a scenario applies to the seller's own assumptions."""

    volume_multiplier: float
    fixed_cost_multiplier: float
    variable_cost_multiplier: float


@dataclass(frozen=True)
class AdjustedAssumptions:
    """Volume and cost assumptions after the scenario adjustment."""

    scenario: Scenario
    monthly_sales_volume: float
    monthly_fixed_cost: float
    variable_cost_per_unit: float


# ---------------------------------------------------------------------------
# Tagged outcomes for metrics that may never be reached
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Recoverable:
    """Initial investment is paid back after `months` of net profit."""

    months: float

    is_finite = True

    @property
    def value(self) -> Optional[float]:
        return self.months


@dataclass(frozen=True)
class NeverRecovers:
    """Net profit is zero or negative, so the investment is never paid back."""

    is_finite = False

    @property
    def value(self) -> Optional[float]:
        return None


@dataclass(frozen=True)
class BreakEvenPoint:
    """Monthly unit volume at which contribution margin covers fixed costs."""

    units: float

    is_finite = True

    @property
    def value(self) -> Optional[float]:
        return self.units


@dataclass(frozen=True)
class NoBreakEven:
    """Selling price does not exceed variable cost: no volume breaks even."""

    is_finite = False

    @property
    def value(self) -> Optional[float]:
        return None


PaybackPeriod = Union[Recoverable, NeverRecovers]
BreakEven = Union[BreakEvenPoint, NoBreakEven]


@dataclass(frozen=True)
class CalculatedResults:
    """
    Monthly financial results for one set of inputs under one scenario.

    Fully determined by (BusinessInputs, Scenario). Rebuilt on every change,
    never edited in place.
    """

    scenario: Scenario
    assumptions: AdjustedAssumptions

    monthly_revenue: float
    total_monthly_cost: float
    operating_profit: float  # before tax
    net_profit: float  # after tax; losses are not taxed
    margin_percent: float  # net profit / revenue * 100
    contribution_margin: float  # price - adjusted variable cost

    payback_months: PaybackPeriod
    break_even_units: BreakEven

    is_viable: bool
