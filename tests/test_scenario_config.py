import pytest

from src.config import settings
from src.core.business_models import BusinessInputs, Scenario, scenario_from_value
from src.core.scenario_config import (
    apply_scenario,
    build_default_scenarios,
    default_scenario,
    scenario_adjustment,
)


@pytest.fixture()
def inputs() -> BusinessInputs:
    return BusinessInputs(
        initial_investment=50_000.0,
        monthly_fixed_cost=5_000.0,
        variable_cost_per_unit=15.0,
        selling_price_per_unit=50.0,
        monthly_sales_volume=200.0,
        tax_rate=15.0,
    )


def test_every_scenario_has_an_adjustment():
    adjustments = build_default_scenarios()
    assert set(adjustments) == set(Scenario)


def test_default_multipliers():
    adjustments = build_default_scenarios()

    pessimistic = adjustments[Scenario.PESSIMISTIC]
    assert pessimistic.volume_multiplier == pytest.approx(0.8)
    assert pessimistic.fixed_cost_multiplier == pytest.approx(1.1)
    assert pessimistic.variable_cost_multiplier == pytest.approx(1.1)

    realistic = adjustments[Scenario.REALISTIC]
    assert realistic.volume_multiplier == 1.0
    assert realistic.fixed_cost_multiplier == 1.0
    assert realistic.variable_cost_multiplier == 1.0

    optimistic = adjustments[Scenario.OPTIMISTIC]
    assert optimistic.volume_multiplier == pytest.approx(1.2)
    assert optimistic.fixed_cost_multiplier == pytest.approx(0.9)
    assert optimistic.variable_cost_multiplier == pytest.approx(0.9)


def test_multipliers_come_from_settings():
    adj = scenario_adjustment(Scenario.OPTIMISTIC)
    assert adj.volume_multiplier == settings.SCENARIO_OPTIMISTIC_VOLUME_MULT


def test_realistic_leaves_inputs_unchanged(inputs: BusinessInputs):
    adjusted = apply_scenario(inputs, Scenario.REALISTIC)

    assert adjusted.scenario is Scenario.REALISTIC
    assert adjusted.monthly_sales_volume == inputs.monthly_sales_volume
    assert adjusted.monthly_fixed_cost == inputs.monthly_fixed_cost
    assert adjusted.variable_cost_per_unit == inputs.variable_cost_per_unit


def test_pessimistic_adjusts_each_field_independently(inputs: BusinessInputs):
    adjusted = apply_scenario(inputs, Scenario.PESSIMISTIC)

    assert adjusted.monthly_sales_volume == pytest.approx(160.0)
    assert adjusted.monthly_fixed_cost == pytest.approx(5_500.0)
    assert adjusted.variable_cost_per_unit == pytest.approx(16.5)


def test_apply_scenario_leaves_price_tax_and_investment_alone(inputs: BusinessInputs):
    for scenario in Scenario:
        apply_scenario(inputs, scenario)
    assert inputs.selling_price_per_unit == 50.0
    assert inputs.tax_rate == 15.0
    assert inputs.initial_investment == 50_000.0
    assert inputs.monthly_sales_volume == 200.0


def test_scenario_labels_and_descriptions():
    assert [s.label for s in Scenario] == ["Pessimistic", "Realistic", "Optimistic"]
    for scenario in Scenario:
        assert scenario.description


@pytest.mark.parametrize(
    "value, expected",
    [
        ("pessimistic", Scenario.PESSIMISTIC),
        ("realistic", Scenario.REALISTIC),
        ("optimistic", Scenario.OPTIMISTIC),
        (Scenario.OPTIMISTIC, Scenario.OPTIMISTIC),
    ],
)
def test_scenario_from_value(value, expected):
    assert scenario_from_value(value) is expected


def test_scenario_from_value_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown scenario"):
        scenario_from_value("catastrophic")


def test_default_scenario_is_realistic():
    assert default_scenario() is Scenario.REALISTIC


def test_default_scenario_reads_the_setting(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_SCENARIO", "Optimistic")
    assert default_scenario() is Scenario.OPTIMISTIC


def test_default_scenario_rejects_unknown_setting(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_SCENARIO", "best-case")
    with pytest.raises(ValueError, match="Unknown scenario"):
        default_scenario()
