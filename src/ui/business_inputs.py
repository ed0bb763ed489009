# src/ui/business_inputs.py
from __future__ import annotations

import logging
import math
from dataclasses import asdict, fields
from typing import List, Mapping, Optional

import streamlit as st

from src.config import settings
from src.core.business_models import BusinessInputs

logger = logging.getLogger(__name__)

# Last submitted inputs; widget keys are per field and dropped off-page
INPUTS_STATE_KEY = "business_inputs"
_WIDGET_PREFIX = "input_"

FIELD_LABELS = {
    "initial_investment": "Initial investment",
    "monthly_fixed_cost": "Monthly fixed cost",
    "variable_cost_per_unit": "Variable cost per unit",
    "selling_price_per_unit": "Selling price per unit",
    "monthly_sales_volume": "Monthly sales volume",
    "tax_rate": "Tax rate (%)",
}

FIELD_HELP = {
    "initial_investment": (
        "The total amount you need to invest up front to start the business."
    ),
    "monthly_fixed_cost": (
        "Costs that stay the same regardless of sales volume: rent, salaries, "
        "insurance, etc."
    ),
    "variable_cost_per_unit": (
        "The cost to produce or buy each unit sold: materials, packaging, shipping."
    ),
    "selling_price_per_unit": "The price you charge customers for each unit.",
    "monthly_sales_volume": "The number of units you expect to sell each month.",
    "tax_rate": "Percentage of tax charged on operating profit.",
}


def default_inputs() -> BusinessInputs:
    return BusinessInputs(
        initial_investment=settings.DEFAULT_INITIAL_INVESTMENT,
        monthly_fixed_cost=settings.DEFAULT_MONTHLY_FIXED_COST,
        variable_cost_per_unit=settings.DEFAULT_VARIABLE_COST_PER_UNIT,
        selling_price_per_unit=settings.DEFAULT_SELLING_PRICE_PER_UNIT,
        monthly_sales_volume=settings.DEFAULT_MONTHLY_SALES_VOLUME,
        tax_rate=settings.DEFAULT_TAX_RATE_PCT,
    )


def validate_business_inputs(inputs: BusinessInputs) -> List[str]:
    """
    Check the engine's preconditions before calling it.

    Returns a list of human-readable problems; empty means the inputs are
    safe to pass to the calculation engine.
    """
    errors: List[str] = []
    for name, value in asdict(inputs).items():
        label = FIELD_LABELS[name]
        try:
            numeric = float(value)
        except (TypeError, ValueError):
            errors.append(f"{label} must be a number.")
            continue
        if not math.isfinite(numeric):
            errors.append(f"{label} must be a finite number.")
        elif numeric <= 0:
            errors.append(f"{label} must be greater than zero.")

    tax_rate = inputs.tax_rate
    if (
        isinstance(tax_rate, (int, float))
        and math.isfinite(tax_rate)
        and tax_rate > settings.MAX_TAX_RATE_PCT
    ):
        errors.append(
            f"{FIELD_LABELS['tax_rate']} cannot exceed "
            f"{settings.MAX_TAX_RATE_PCT:.0f}%."
        )
    return errors


def inputs_from_widget_state(
    state: Mapping[str, object],
    fallback: Optional[BusinessInputs] = None,
) -> BusinessInputs:
    """
    Rebuild BusinessInputs from the form widget keys.

    Fields whose widget has not been rendered yet keep the fallback value
    (the defaults when no fallback is given).
    """
    base = fallback if fallback is not None else default_inputs()
    values = {}
    for field in fields(BusinessInputs):
        key = _WIDGET_PREFIX + field.name
        values[field.name] = state.get(key, getattr(base, field.name))
    return BusinessInputs(**values)


def get_business_inputs() -> BusinessInputs:
    return st.session_state.get(INPUTS_STATE_KEY) or default_inputs()


def store_business_inputs(inputs: BusinessInputs) -> None:
    st.session_state[INPUTS_STATE_KEY] = inputs


def submit_business_inputs() -> List[str]:
    """
    Store the figures currently in the form widgets if they are valid.

    Runs as a button callback, so it reads the widget state at click time
    rather than the values captured on the previous script run. Returns the
    validation errors; nothing is stored when there are any.
    """
    inputs = inputs_from_widget_state(st.session_state, get_business_inputs())
    errors = validate_business_inputs(inputs)
    if errors:
        logger.warning("Inputs rejected on submit: %s", "; ".join(errors))
        return errors
    store_business_inputs(inputs)
    return []


def reset_business_inputs() -> None:
    """Go back to the default figures and forget any half-edited form values."""
    store_business_inputs(default_inputs())
    for field in fields(BusinessInputs):
        st.session_state.pop(_WIDGET_PREFIX + field.name, None)


def render_business_inputs() -> BusinessInputs:
    """Render the inputs form and return whatever the user typed in.

    Returns
    -------
    BusinessInputs
        Raw form values; run validate_business_inputs before computing.
    """

    st.markdown("Enter your business figures to calculate viability.")

    current = get_business_inputs()

    col_left, col_right = st.columns(2)
    values = {}
    for idx, field in enumerate(fields(BusinessInputs)):
        column = col_left if idx % 2 == 0 else col_right
        with column:
            values[field.name] = st.number_input(
                FIELD_LABELS[field.name],
                min_value=0.0,
                value=float(getattr(current, field.name)),
                step=1.0,
                format="%.2f",
                key=_WIDGET_PREFIX + field.name,
                help=FIELD_HELP[field.name],
            )

    inputs = BusinessInputs(**values)
    logger.debug("Business inputs from form: %s", inputs)
    return inputs
