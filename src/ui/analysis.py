# src/ui/analysis.py
from __future__ import annotations

from typing import List

import streamlit as st

from src.core.business_models import BusinessInputs, CalculatedResults, Scenario
from src.core.risk_classifier import RiskFinding
from src.core.verdict import build_verdict, recommendations
from src.ui.formatting import format_currency, format_payback, format_percentage
from src.ui.style import SEVERITY_ICONS


def _render_verdict(results: CalculatedResults, inputs: BusinessInputs) -> None:
    verdict = build_verdict(results, inputs)
    box = st.success if verdict.is_viable else st.error
    box(f"**{verdict.headline}**\n\n{verdict.summary}")


def _render_key_metrics(results: CalculatedResults, inputs: BusinessInputs) -> None:
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Investment", format_currency(inputs.initial_investment))

    with col2:
        st.metric("Net profit", format_currency(results.net_profit))

    with col3:
        st.metric("Net margin", format_percentage(results.margin_percent))

    with col4:
        st.metric("Payback", format_payback(results.payback_months))


def _render_risks(risks: List[RiskFinding]) -> None:
    st.markdown("### Risk assessment")
    for risk in risks:
        with st.container(border=True):
            st.markdown(
                f"{SEVERITY_ICONS[risk.severity]} **{risk.title}** · "
                f"_{risk.severity.label} risk_"
            )
            st.caption(risk.description)


def _render_recommendations(results: CalculatedResults) -> None:
    items = recommendations(results)
    if not items:
        return
    st.markdown("### Recommendations")
    st.markdown("\n".join(f"{idx}. {text}" for idx, text in enumerate(items, 1)))


def render_analysis_step(
    results: CalculatedResults,
    inputs: BusinessInputs,
    scenario: Scenario,
    risks: List[RiskFinding],
) -> None:
    """
    Executive summary: verdict, key numbers, risks and (when the business is
    not viable) what to change.
    """

    st.caption(f"{scenario.label} scenario")
    st.header("Executive analysis")
    st.caption("A summary of your business viability with insights and risks.")

    _render_verdict(results, inputs)
    _render_key_metrics(results, inputs)
    _render_risks(risks)
    _render_recommendations(results)

    st.caption(
        f"This analysis is based on the {scenario.label.lower()} scenario. "
        "Results may vary with real market conditions."
    )
