# src/core/verdict.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from src.core.business_models import BusinessInputs, CalculatedResults
from src.core.number_format import format_currency, format_number

RESTRUCTURING_RECOMMENDATIONS = [
    "Raise your selling price to improve margins.",
    "Cut fixed costs by renegotiating contracts or finding cheaper alternatives.",
    "Lower variable cost per unit through bulk purchasing or process improvements.",
    "Grow sales volume through marketing or by expanding your market.",
]


@dataclass(frozen=True)
class Verdict:
    is_viable: bool
    headline: str
    summary: str


def build_verdict(results: CalculatedResults, inputs: BusinessInputs) -> Verdict:
    """Plain-English headline and summary for the executive analysis."""
    investment = format_currency(inputs.initial_investment)

    if results.is_viable:
        months = results.payback_months.value
        return Verdict(
            is_viable=True,
            headline="This business is financially viable",
            summary=(
                f"Based on your figures, the {investment} investment is recovered "
                f"in about {format_number(months)} months. Your monthly net profit of "
                f"{format_currency(results.net_profit)} (after {inputs.tax_rate:g}% "
                f"tax) is a {results.margin_percent:,.1f}% margin."
            ),
        )

    return Verdict(
        is_viable=False,
        headline="This business is not viable under current conditions",
        summary=(
            "Your costs exceed your revenue, giving a monthly net loss of "
            f"{format_currency(abs(results.net_profit))}. The {investment} "
            "investment will not be recovered while net profit stays at or below "
            "zero. Raise prices, cut costs or sell more to reach profitability."
        ),
    )


def recommendations(results: CalculatedResults) -> List[str]:
    """Restructuring suggestions, only offered when the business is not viable."""
    if results.is_viable:
        return []
    return list(RESTRUCTURING_RECOMMENDATIONS)
