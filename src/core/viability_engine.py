# src/core/viability_engine.py
from __future__ import annotations

from typing import Dict

from src.core.business_models import (
    BreakEven,
    BreakEvenPoint,
    BusinessInputs,
    CalculatedResults,
    NeverRecovers,
    NoBreakEven,
    PaybackPeriod,
    Recoverable,
    Scenario,
)
from src.core.scenario_config import apply_scenario


def calculate_net_profit(operating_profit: float, tax_rate: float) -> float:
    """Tax applies to positive operating profit only; losses pass through."""
    if operating_profit > 0:
        return operating_profit * (1.0 - tax_rate / 100.0)
    return operating_profit


def calculate_payback(initial_investment: float, net_profit: float) -> PaybackPeriod:
    if net_profit > 0:
        return Recoverable(months=initial_investment / net_profit)
    return NeverRecovers()


def calculate_break_even(fixed_cost: float, contribution_margin: float) -> BreakEven:
    if contribution_margin > 0:
        return BreakEvenPoint(units=fixed_cost / contribution_margin)
    return NoBreakEven()


def compute(
    inputs: BusinessInputs,
    scenario: Scenario = Scenario.REALISTIC,
) -> CalculatedResults:
    """
    Turn a set of business inputs into monthly viability metrics.

    Parameters
    ----------
    inputs:
        Caller-validated BusinessInputs (every field > 0 and finite).
        Behaviour for anything else is undefined.
    scenario:
        Which volume/cost adjustment to apply before computing.

    No rounding happens here; formatting is left to the presentation layer.
    """
    adjusted = apply_scenario(inputs, scenario)

    # Price is not shocked: only the seller's own volume/cost assumptions move
    monthly_revenue = inputs.selling_price_per_unit * adjusted.monthly_sales_volume
    total_monthly_cost = (
        adjusted.monthly_fixed_cost
        + adjusted.variable_cost_per_unit * adjusted.monthly_sales_volume
    )
    operating_profit = monthly_revenue - total_monthly_cost
    net_profit = calculate_net_profit(operating_profit, inputs.tax_rate)

    margin_percent = (
        net_profit / monthly_revenue * 100.0 if monthly_revenue > 0 else 0.0
    )

    # Unadjusted price against the adjusted variable cost
    contribution_margin = inputs.selling_price_per_unit - adjusted.variable_cost_per_unit

    return CalculatedResults(
        scenario=scenario,
        assumptions=adjusted,
        monthly_revenue=monthly_revenue,
        total_monthly_cost=total_monthly_cost,
        operating_profit=operating_profit,
        net_profit=net_profit,
        margin_percent=margin_percent,
        contribution_margin=contribution_margin,
        payback_months=calculate_payback(inputs.initial_investment, net_profit),
        break_even_units=calculate_break_even(
            adjusted.monthly_fixed_cost, contribution_margin
        ),
        is_viable=net_profit > 0,
    )


def compute_all_scenarios(inputs: BusinessInputs) -> Dict[Scenario, CalculatedResults]:
    """Run compute() for every scenario, in pessimistic → optimistic order."""
    return {scenario: compute(inputs, scenario) for scenario in Scenario}
