# src/core/risk_classifier.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List

from src.config import settings
from src.core.business_models import BusinessInputs, CalculatedResults
from src.core.number_format import format_currency, format_number


class Severity(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return self.value.title()


@dataclass(frozen=True)
class RiskFinding:
    code: str  # stable rule identifier, e.g. "low_margin"
    title: str
    description: str
    severity: Severity


def fixed_cost_ratio(results: CalculatedResults, inputs: BusinessInputs) -> float:
    """
    Monthly fixed cost (as entered, not scenario-adjusted) as a % of revenue.

    Returns +inf when there is no revenue to compare against.
    """
    if results.monthly_revenue <= 0:
        return math.inf
    return inputs.monthly_fixed_cost / results.monthly_revenue * 100.0


def identify_risks(
    results: CalculatedResults,
    inputs: BusinessInputs,
) -> List[RiskFinding]:
    """
    Evaluate the risk rules against one set of results.

    Rules run in a fixed order and each adds at most one finding; several can
    fire together. The list keeps rule order (it is not sorted by severity).
    If nothing fires and the business is viable, a single low-severity
    "solid position" finding is returned.
    """
    risks: List[RiskFinding] = []
    margin = results.margin_percent

    # Margin bands
    if 0 < margin < settings.RISK_LOW_MARGIN_PCT:
        risks.append(
            RiskFinding(
                code="low_margin",
                title="Low profit margin",
                description=(
                    f"Your profit margin of {format_number(margin)}% is below the "
                    f"recommended {settings.RISK_LOW_MARGIN_PCT:.0f}%. Small cost "
                    "increases or price cuts could make the business unprofitable."
                ),
                severity=Severity.HIGH,
            )
        )
    elif settings.RISK_LOW_MARGIN_PCT <= margin < settings.RISK_MODERATE_MARGIN_PCT:
        risks.append(
            RiskFinding(
                code="moderate_margin",
                title="Moderate profit margin",
                description=(
                    f"Your margin of {format_number(margin)}% is acceptable, but "
                    "could be improved for more resilience."
                ),
                severity=Severity.MEDIUM,
            )
        )

    # Payback bands (only when the investment is recoverable at all)
    payback = results.payback_months.value
    if payback is not None:
        if payback > settings.RISK_LONG_PAYBACK_MONTHS:
            risks.append(
                RiskFinding(
                    code="long_payback",
                    title="Long payback period",
                    description=(
                        f"Recovering your investment will take "
                        f"{format_number(payback)} months. Consider whether you "
                        "can sustain operations for that long."
                    ),
                    severity=Severity.HIGH,
                )
            )
        elif payback > settings.RISK_MODERATE_PAYBACK_MONTHS:
            risks.append(
                RiskFinding(
                    code="moderate_payback",
                    title="Moderate payback period",
                    description=(
                        f"Your payback period of {format_number(payback)} months is "
                        "reasonable, but requires sustained performance."
                    ),
                    severity=Severity.MEDIUM,
                )
            )

    # Fixed cost burden
    ratio = fixed_cost_ratio(results, inputs)
    ratio_text = format_number(ratio)
    if ratio > settings.RISK_HIGH_FIXED_COST_RATIO_PCT:
        risks.append(
            RiskFinding(
                code="high_fixed_costs",
                title="High fixed cost burden",
                description=(
                    f"Fixed costs represent {ratio_text}% of revenue. This reduces "
                    "flexibility during slow periods."
                ),
                severity=Severity.HIGH,
            )
        )
    elif ratio > settings.RISK_SIGNIFICANT_FIXED_COST_RATIO_PCT:
        risks.append(
            RiskFinding(
                code="significant_fixed_costs",
                title="Significant fixed costs",
                description=(
                    f"Fixed costs are {ratio_text}% of revenue. Monitor them "
                    "closely to stay profitable."
                ),
                severity=Severity.MEDIUM,
            )
        )

    # Close to break-even (against the volume as entered)
    break_even = results.break_even_units.value
    volume = inputs.monthly_sales_volume
    if (
        break_even is not None
        and volume * settings.RISK_NEAR_BREAK_EVEN_FRACTION < break_even <= volume
    ):
        risks.append(
            RiskFinding(
                code="near_break_even",
                title="Operating close to break-even",
                description=(
                    "Your projected sales are only slightly above the break-even "
                    "point. A small drop in sales could lead to losses."
                ),
                severity=Severity.MEDIUM,
            )
        )

    if margin <= 0:
        risks.append(
            RiskFinding(
                code="negative_margin",
                title="Negative profit margin",
                description=(
                    "Your costs exceed your revenue. The business model needs to be "
                    "restructured to become viable."
                ),
                severity=Severity.HIGH,
            )
        )

    if results.net_profit <= 0:
        risks.append(
            RiskFinding(
                code="unrecoverable_investment",
                title="Investment not recoverable",
                description=(
                    f"With a net profit of {format_currency(results.net_profit)}, "
                    f"the initial investment of "
                    f"{format_currency(inputs.initial_investment)} will never be "
                    "recovered. The business model needs restructuring."
                ),
                severity=Severity.HIGH,
            )
        )

    # Not viable always trips the net profit rule above, so an empty list here
    # means a viable business with no warnings.
    if not risks and results.is_viable:
        risks.append(
            RiskFinding(
                code="solid_position",
                title="Solid financial position",
                description=(
                    "Your business shows healthy margins, a reasonable payback and "
                    "manageable costs. Keep monitoring performance."
                ),
                severity=Severity.LOW,
            )
        )

    return risks
