# src/core/scenario_config.py
from __future__ import annotations

from typing import Dict

from src.config import settings
from src.core.business_models import (
    AdjustedAssumptions,
    BusinessInputs,
    Scenario,
    ScenarioAdjustment,
    scenario_from_value,
)


def build_default_scenarios() -> Dict[Scenario, ScenarioAdjustment]:
    """
    Factory that builds the pessimistic / realistic / optimistic adjustments
    using the centralised constants from settings.py.

    UI and engine code should call this instead of hard-coding any of the
    multipliers.
    """

    return {
        Scenario.PESSIMISTIC: ScenarioAdjustment(
            volume_multiplier=settings.SCENARIO_PESSIMISTIC_VOLUME_MULT,
            fixed_cost_multiplier=settings.SCENARIO_PESSIMISTIC_FIXED_COST_MULT,
            variable_cost_multiplier=settings.SCENARIO_PESSIMISTIC_VARIABLE_COST_MULT,
        ),
        Scenario.REALISTIC: ScenarioAdjustment(
            volume_multiplier=settings.SCENARIO_REALISTIC_VOLUME_MULT,
            fixed_cost_multiplier=settings.SCENARIO_REALISTIC_FIXED_COST_MULT,
            variable_cost_multiplier=settings.SCENARIO_REALISTIC_VARIABLE_COST_MULT,
        ),
        Scenario.OPTIMISTIC: ScenarioAdjustment(
            volume_multiplier=settings.SCENARIO_OPTIMISTIC_VOLUME_MULT,
            fixed_cost_multiplier=settings.SCENARIO_OPTIMISTIC_FIXED_COST_MULT,
            variable_cost_multiplier=settings.SCENARIO_OPTIMISTIC_VARIABLE_COST_MULT,
        ),
    }


_ADJUSTMENTS = build_default_scenarios()


def default_scenario() -> Scenario:
    """The scenario a fresh session starts on (DEFAULT_SCENARIO setting)."""
    return scenario_from_value(settings.DEFAULT_SCENARIO)


def scenario_adjustment(scenario: Scenario) -> ScenarioAdjustment:
    return _ADJUSTMENTS[scenario]


def apply_scenario(inputs: BusinessInputs, scenario: Scenario) -> AdjustedAssumptions:
    """
    Shift volume, fixed cost and variable cost by the scenario multipliers.

    Each multiplier is applied independently; selling price, tax rate and
    initial investment are left untouched.
    """
    adj = scenario_adjustment(scenario)
    return AdjustedAssumptions(
        scenario=scenario,
        monthly_sales_volume=inputs.monthly_sales_volume * adj.volume_multiplier,
        monthly_fixed_cost=inputs.monthly_fixed_cost * adj.fixed_cost_multiplier,
        variable_cost_per_unit=(
            inputs.variable_cost_per_unit * adj.variable_cost_multiplier
        ),
    )
