# src/ui/results.py

from __future__ import annotations

import streamlit as st

from src.config import settings
from src.core.business_models import BusinessInputs, CalculatedResults
from src.core.cashflow_projection import project_cumulative_cashflow
from src.core.kpi_signals import (
    break_even_signal,
    margin_signal,
    payback_signal,
    profit_signal,
)
from src.ui.charts import render_cumulative_cashflow_chart, render_revenue_cost_chart
from src.ui.formatting import (
    format_break_even,
    format_currency,
    format_number,
    format_payback,
    format_percentage,
)
from src.ui.style import trend_delta


def _metric(label: str, value: str, signal=None) -> None:
    if signal is None:
        st.metric(label=label, value=value)
        return
    delta, delta_color = trend_delta(signal)
    st.metric(label=label, value=value, delta=delta, delta_color=delta_color)


def render_viability_badge(results: CalculatedResults) -> None:
    if results.is_viable:
        st.success("Viable")
    else:
        st.error("Not viable")


def _render_headline_metrics(
    results: CalculatedResults,
    inputs: BusinessInputs,
) -> None:
    """
    The six KPIs shown on the results step, three per row.
    """

    row1 = st.columns(3)
    with row1[0]:
        _metric("Monthly revenue", format_currency(results.monthly_revenue))
    with row1[1]:
        _metric(
            "Operating profit",
            format_currency(results.operating_profit),
            profit_signal(results.operating_profit, "Before tax", "Before tax"),
        )
    with row1[2]:
        _metric(
            "Net profit",
            format_currency(results.net_profit),
            profit_signal(results.net_profit, "After tax", "Costs exceed revenue"),
        )

    row2 = st.columns(3)
    with row2[0]:
        _metric(
            "Net margin",
            format_percentage(results.margin_percent),
            margin_signal(results),
        )
    with row2[1]:
        _metric(
            "Payback period",
            format_payback(results.payback_months),
            payback_signal(results),
        )
    with row2[2]:
        _metric(
            "Break-even point",
            format_break_even(results.break_even_units),
            break_even_signal(results, inputs),
        )


def _render_break_even_message(
    results: CalculatedResults,
    inputs: BusinessInputs,
) -> None:
    units = results.break_even_units.value
    if units is None:
        return

    volume = format_number(inputs.monthly_sales_volume)
    message = (
        f"You need to sell **{format_number(units)} units** per month to break even."
    )
    if units <= inputs.monthly_sales_volume:
        st.success(f"{message} Your projected volume of {volume} units is above that.")
    else:
        st.warning(f"{message} Your projected volume of {volume} units is below that.")


def render_results_step(results: CalculatedResults, inputs: BusinessInputs) -> None:
    st.header("Financial results")
    render_viability_badge(results)
    st.caption("Your financial metrics, calculated from the figures you entered.")

    _render_headline_metrics(results, inputs)
    _render_break_even_message(results, inputs)

    col_cash, col_split = st.columns(2)
    with col_cash:
        st.markdown("#### Cumulative cash flow")
        st.caption(f"{settings.CASHFLOW_PROJECTION_MONTHS}-month projection")
        render_cumulative_cashflow_chart(project_cumulative_cashflow(results, inputs))
    with col_split:
        st.markdown("#### Revenue vs costs")
        st.caption("Monthly comparison")
        render_revenue_cost_chart(results)
