# src/ui/charts.py
from __future__ import annotations

import altair as alt
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.config import settings
from src.core.business_models import CalculatedResults, Scenario
from src.ui import style


def _cashflow_layout(fig: go.Figure, title: str, df: pd.DataFrame) -> None:
    tick_every = settings.CASHFLOW_TICK_EVERY_MONTHS
    fig.add_hline(
        y=0,
        line_width=0.75,
        line_dash="dash",
        line_color=style.COLOR_ZERO_LINE,
        opacity=1.0,
    )
    fig.update_layout(
        title=title,
        xaxis=dict(
            title=None,
            tickmode="array",
            tickvals=df["label"].iloc[::tick_every].tolist(),
        ),
        yaxis=dict(title=None, tickprefix=settings.CURRENCY_SYMBOL, tickformat=",.0s"),
        hovermode="x unified",
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=-0.25,
            xanchor="center",
            x=0.5,
        ),
        margin=dict(l=40, r=20, t=60, b=60),
    )


def build_cumulative_cashflow_figure(
    df: pd.DataFrame,
    title: str = "Cumulative cash flow",
) -> go.Figure:
    """
    Plot the linear cumulative cash flow projection.

    Expects the frame from project_cumulative_cashflow:
      - label (str, "M1".."MN")
      - cumulative_cashflow (float)
    """
    if "label" not in df.columns or "cumulative_cashflow" not in df.columns:
        raise ValueError(
            "DataFrame must contain 'label' and 'cumulative_cashflow' columns"
        )

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=df["label"],
            y=df["cumulative_cashflow"],
            mode="lines",
            name="Cumulative cash flow",
            line=dict(color=style.COLOR_CASHFLOW, width=2),
            hovertemplate=(
                f"Cash flow: {settings.CURRENCY_SYMBOL}%{{y:,.0f}}<extra></extra>"
            ),
        )
    )
    _cashflow_layout(fig, title, df)
    return fig


def build_scenario_cashflow_figure(
    df: pd.DataFrame,
    selected: Scenario,
    title: str = "Cash flow comparison",
) -> go.Figure:
    """
    One line per scenario from project_scenarios; the selected scenario is
    drawn solid and thicker, the others dashed.
    """
    fig = go.Figure()
    for scenario in Scenario:
        if scenario.label not in df.columns:
            continue
        is_selected = scenario is selected
        fig.add_trace(
            go.Scatter(
                x=df["label"],
                y=df[scenario.label],
                mode="lines",
                name=scenario.label,
                line=dict(
                    color=style.SCENARIO_COLORS[scenario],
                    width=(
                        settings.SCENARIO_SELECTED_LINE_WIDTH
                        if is_selected
                        else settings.SCENARIO_OTHER_LINE_WIDTH
                    ),
                    dash=None if is_selected else "dash",
                ),
                hovertemplate=(
                    f"{scenario.label}: {settings.CURRENCY_SYMBOL}"
                    "%{y:,.0f}<extra></extra>"
                ),
            )
        )
    _cashflow_layout(fig, title, df)
    return fig


def build_revenue_cost_chart(results: CalculatedResults) -> alt.Chart:
    """Horizontal bars comparing monthly revenue and total cost."""
    df = pd.DataFrame(
        [
            {"Metric": "Revenue", "Amount": results.monthly_revenue},
            {"Metric": "Costs", "Amount": results.total_monthly_cost},
        ]
    )
    return (
        alt.Chart(df)
        .mark_bar(cornerRadiusEnd=4)
        .encode(
            x=alt.X("Amount:Q", title=f"Monthly amount ({settings.CURRENCY_SYMBOL})"),
            y=alt.Y("Metric:N", title=None, sort=["Revenue", "Costs"]),
            color=alt.Color(
                "Metric:N",
                scale=alt.Scale(
                    domain=["Revenue", "Costs"],
                    range=[style.COLOR_REVENUE, style.COLOR_COST],
                ),
                legend=alt.Legend(orient="bottom", title=None),
            ),
            tooltip=[
                alt.Tooltip("Metric:N"),
                alt.Tooltip("Amount:Q", format=",.0f"),
            ],
        )
        .properties(height=180)
    )


def render_cumulative_cashflow_chart(df: pd.DataFrame) -> None:
    st.plotly_chart(build_cumulative_cashflow_figure(df), width="stretch")


def render_scenario_cashflow_chart(df: pd.DataFrame, selected: Scenario) -> None:
    st.plotly_chart(build_scenario_cashflow_figure(df, selected), width="stretch")


def render_revenue_cost_chart(results: CalculatedResults) -> None:
    st.altair_chart(build_revenue_cost_chart(results), width="stretch")
