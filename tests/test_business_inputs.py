import math
from dataclasses import replace

import pytest

from src.config import settings
from src.core.business_models import BusinessInputs
from src.ui.business_inputs import (
    FIELD_LABELS,
    default_inputs,
    inputs_from_widget_state,
    validate_business_inputs,
)


def test_default_inputs_come_from_settings():
    inputs = default_inputs()

    assert inputs.initial_investment == settings.DEFAULT_INITIAL_INVESTMENT
    assert inputs.monthly_fixed_cost == settings.DEFAULT_MONTHLY_FIXED_COST
    assert inputs.tax_rate == settings.DEFAULT_TAX_RATE_PCT


def test_default_inputs_are_valid():
    assert validate_business_inputs(default_inputs()) == []


def test_every_field_has_a_label():
    assert set(FIELD_LABELS) == set(vars(default_inputs()))


@pytest.mark.parametrize(
    "field",
    [
        "initial_investment",
        "monthly_fixed_cost",
        "variable_cost_per_unit",
        "selling_price_per_unit",
        "monthly_sales_volume",
        "tax_rate",
    ],
)
@pytest.mark.parametrize("value", [0.0, -10.0])
def test_non_positive_values_are_rejected(field: str, value: float):
    inputs = replace(default_inputs(), **{field: value})
    errors = validate_business_inputs(inputs)

    assert errors == [f"{FIELD_LABELS[field]} must be greater than zero."]


@pytest.mark.parametrize("value", [math.inf, math.nan])
def test_non_finite_values_are_rejected(value: float):
    inputs = replace(default_inputs(), monthly_sales_volume=value)
    errors = validate_business_inputs(inputs)

    assert errors == [f"{FIELD_LABELS['monthly_sales_volume']} must be a finite number."]


def test_non_numeric_value_is_rejected():
    inputs = replace(default_inputs(), selling_price_per_unit="fifty")
    assert validate_business_inputs(inputs) == [
        f"{FIELD_LABELS['selling_price_per_unit']} must be a number."
    ]


def test_tax_rate_above_hundred_percent_is_rejected():
    inputs = replace(default_inputs(), tax_rate=120.0)
    errors = validate_business_inputs(inputs)

    assert len(errors) == 1
    assert "cannot exceed 100%" in errors[0]


def test_multiple_problems_are_all_reported():
    inputs = BusinessInputs(
        initial_investment=0.0,
        monthly_fixed_cost=1_000.0,
        variable_cost_per_unit=-1.0,
        selling_price_per_unit=20.0,
        monthly_sales_volume=0.0,
        tax_rate=10.0,
    )
    assert len(validate_business_inputs(inputs)) == 3


def test_inputs_from_widget_state_uses_current_widget_values():
    state = {
        "input_initial_investment": 80_000.0,
        "input_monthly_fixed_cost": 4_000.0,
        "input_variable_cost_per_unit": 12.0,
        "input_selling_price_per_unit": 45.0,
        "input_monthly_sales_volume": 300.0,
        "input_tax_rate": 20.0,
        "business_inputs": default_inputs(),
    }
    inputs = inputs_from_widget_state(state, fallback=default_inputs())

    assert inputs == BusinessInputs(
        initial_investment=80_000.0,
        monthly_fixed_cost=4_000.0,
        variable_cost_per_unit=12.0,
        selling_price_per_unit=45.0,
        monthly_sales_volume=300.0,
        tax_rate=20.0,
    )


def test_inputs_from_widget_state_falls_back_for_missing_widgets():
    stored = replace(default_inputs(), tax_rate=25.0)
    inputs = inputs_from_widget_state(
        {"input_selling_price_per_unit": 60.0}, fallback=stored
    )

    assert inputs.selling_price_per_unit == 60.0
    assert inputs.tax_rate == 25.0
    assert inputs.initial_investment == stored.initial_investment


def test_inputs_from_widget_state_defaults_without_fallback():
    assert inputs_from_widget_state({}) == default_inputs()


def test_edited_widget_values_are_validated():
    state = {"input_monthly_sales_volume": 0.0}
    errors = validate_business_inputs(inputs_from_widget_state(state))
    assert errors == [f"{FIELD_LABELS['monthly_sales_volume']} must be greater than zero."]
