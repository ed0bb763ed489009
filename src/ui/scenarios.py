# src/ui/scenarios.py
from __future__ import annotations

import logging
from typing import Mapping, Union

import pandas as pd
import streamlit as st

from src.config import settings
from src.core.business_models import (
    BusinessInputs,
    CalculatedResults,
    Scenario,
    scenario_from_value,
)
from src.core.cashflow_projection import project_scenarios
from src.core.scenario_comparison import build_comparison_table
from src.core.scenario_config import default_scenario
from src.ui.charts import render_scenario_cashflow_chart
from src.ui.formatting import (
    format_break_even,
    format_currency,
    format_payback,
    format_percentage,
)

logger = logging.getLogger(__name__)

# Widget keys are dropped when the widget is not rendered, so the active
# scenario lives under its own key and the radio syncs into it. It is stored
# as its string value; enum members in session_state go stale on hot reload.
SCENARIO_STATE_KEY = "active_scenario"
_SCENARIO_WIDGET_KEY = "scenario_radio"


def get_active_scenario() -> Scenario:
    stored = st.session_state.get(SCENARIO_STATE_KEY)
    if stored is None:
        return default_scenario()
    return scenario_from_value(stored)


def set_active_scenario(scenario: Union[str, Scenario]) -> None:
    st.session_state[SCENARIO_STATE_KEY] = scenario_from_value(scenario).value


def _sync_scenario() -> None:
    set_active_scenario(st.session_state[_SCENARIO_WIDGET_KEY])


def _scenario_option_label(value: str) -> str:
    scenario = scenario_from_value(value)
    return f"{scenario.label} ({scenario.description})"


def render_scenario_selector() -> Scenario:
    """
    Radio buttons for the active scenario; the choice is kept in
    session_state so every step reads the same scenario.
    """
    active = get_active_scenario()
    st.session_state[_SCENARIO_WIDGET_KEY] = active.value
    selected = st.radio(
        "Scenario",
        options=[scenario.value for scenario in Scenario],
        format_func=_scenario_option_label,
        key=_SCENARIO_WIDGET_KEY,
        on_change=_sync_scenario,
        horizontal=True,
    )
    logger.debug("Scenario selected: %s", selected)
    return scenario_from_value(selected)


def _render_selected_metrics(results: CalculatedResults) -> None:
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric(label="Net profit", value=format_currency(results.net_profit))

    with col2:
        st.metric(label="Margin", value=format_percentage(results.margin_percent))

    with col3:
        st.metric(label="Payback", value=format_payback(results.payback_months))

    with col4:
        st.metric(
            label="Status",
            value="Viable" if results.is_viable else "Not viable",
        )


def build_comparison_display(
    scenario_results: Mapping[Scenario, CalculatedResults],
) -> pd.DataFrame:
    """
    Metric-by-scenario table for display (metrics as rows, scenarios as
    columns), with every value already formatted.
    """
    raw = build_comparison_table(scenario_results).set_index("Scenario")

    display = {}
    for scenario in Scenario:
        result = scenario_results.get(scenario)
        if result is None:
            continue
        display[scenario.label] = {
            "Net profit": format_currency(raw.loc[scenario.label, "Net profit"]),
            "Margin": format_percentage(raw.loc[scenario.label, "Margin (%)"]),
            "Payback": format_payback(result.payback_months),
            "Break-even": format_break_even(result.break_even_units, unit="units"),
            "Status": "Viable" if raw.loc[scenario.label, "Viable"] else "Not viable",
        }

    df = pd.DataFrame(display)
    df.index.name = "Metric"
    return df


def render_scenarios_step(
    inputs: BusinessInputs,
    scenario_results: Mapping[Scenario, CalculatedResults],
) -> Scenario:
    """
    Top-level renderer for the scenario analysis step.

    Returns the scenario picked by the user so the analysis step can use it.
    """

    st.header("Scenario analysis")
    st.caption("See how your business performs under different conditions.")

    selected = render_scenario_selector()
    _render_selected_metrics(scenario_results[selected])

    st.markdown("### Cash flow comparison")
    st.caption(f"All scenarios over {settings.CASHFLOW_PROJECTION_MONTHS} months")
    projection = project_scenarios(inputs, scenario_results=scenario_results)
    render_scenario_cashflow_chart(projection, selected)

    st.markdown("### Scenario comparison")
    st.dataframe(build_comparison_display(scenario_results), width="stretch")

    return selected
