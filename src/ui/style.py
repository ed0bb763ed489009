# src/ui/style.py

from __future__ import annotations

"""
UI / visual style constants for the simulator.

Keep anything purely presentational in here (colours, line widths, badges),
and keep domain / modelling constants in src/config/settings.py.
"""

import streamlit as st

from src.config import settings
from src.core.business_models import Scenario
from src.core.kpi_signals import KpiSignal, Trend
from src.core.risk_classifier import Severity

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

COLOR_REVENUE = "#1f77b4"  # soft blue
COLOR_COST = "#d62728"  # modern red
COLOR_CASHFLOW = "#2ca02c"  # green (money)
COLOR_ZERO_LINE = "rgba(0,0,0,0.2)"

SCENARIO_COLORS = {
    Scenario.PESSIMISTIC: settings.SCENARIO_PESSIMISTIC_COLOR,
    Scenario.REALISTIC: settings.SCENARIO_REALISTIC_COLOR,
    Scenario.OPTIMISTIC: settings.SCENARIO_OPTIMISTIC_COLOR,
}

SEVERITY_ICONS = {
    Severity.HIGH: "🔴",
    Severity.MEDIUM: "🟠",
    Severity.LOW: "🟢",
}


# st.metric decides the arrow from a leading "-"; "off" renders the delta in grey
def trend_delta(signal: KpiSignal) -> tuple[str, str]:
    """Return (delta, delta_color) arguments for st.metric."""
    if signal.trend is Trend.UP:
        return signal.caption, "normal"
    if signal.trend is Trend.DOWN:
        return f"-{signal.caption}", "normal"
    return signal.caption, "off"


def inject_metric_styles() -> None:
    st.markdown(
        f"""
        <style>
        [data-testid="stMetricValue"] {{
            font-family: {settings.METRIC_FONT_FAMILY};
            font-weight: {settings.METRIC_FONT_WEIGHT};
            font-size: {settings.METRIC_FONT_SIZE_REM}rem;
        }}
        </style>
        """,
        unsafe_allow_html=True,
    )
