# src/core/scenario_comparison.py
from __future__ import annotations

import math
from typing import Mapping, Optional

import pandas as pd

from src.core.business_models import CalculatedResults, Scenario

COMPARISON_COLUMNS = [
    "Scenario",
    "Net profit",
    "Margin (%)",
    "Payback (months)",
    "Break-even (units)",
    "Viable",
]


def _or_nan(value: Optional[float]) -> float:
    return math.nan if value is None else value


def build_comparison_table(
    scenario_results: Mapping[Scenario, CalculatedResults],
) -> pd.DataFrame:
    """
    One row per scenario with the raw headline metrics.

    Payback / break-even are NaN when never reached (never inf, never None),
    and both columns are always float even when no scenario reaches them.
    Formatting is left to the caller.
    """
    rows = []
    for scenario in Scenario:
        result = scenario_results.get(scenario)
        if result is None:
            continue
        rows.append(
            {
                "Scenario": scenario.label,
                "Net profit": result.net_profit,
                "Margin (%)": result.margin_percent,
                "Payback (months)": _or_nan(result.payback_months.value),
                "Break-even (units)": _or_nan(result.break_even_units.value),
                "Viable": result.is_viable,
            }
        )
    return pd.DataFrame(rows, columns=COMPARISON_COLUMNS).astype(
        {"Payback (months)": float, "Break-even (units)": float}
    )
