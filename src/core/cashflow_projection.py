# src/core/cashflow_projection.py
from __future__ import annotations

from typing import Mapping, Optional

import numpy as np
import pandas as pd

from src.config import settings
from src.core.business_models import BusinessInputs, CalculatedResults, Scenario
from src.core.viability_engine import compute_all_scenarios


def _month_index(months: int) -> np.ndarray:
    if months <= 0:
        raise ValueError("months must be a positive number of months")
    return np.arange(1, months + 1)


def project_cumulative_cashflow(
    results: CalculatedResults,
    inputs: BusinessInputs,
    months: Optional[int] = None,
) -> pd.DataFrame:
    """
    Linear cumulative cash-flow projection for display.

    The initial investment is an outflow at month 0, then every month adds
    the same net profit. Columns:
      - month: int (1..N)
      - label: str ("M1".."MN")
      - cumulative_cashflow: float
    """
    if months is None:
        months = settings.CASHFLOW_PROJECTION_MONTHS
    month = _month_index(months)

    return pd.DataFrame(
        {
            "month": month,
            "label": [f"M{m}" for m in month],
            "cumulative_cashflow": -float(inputs.initial_investment)
            + results.net_profit * month,
        }
    )


def project_scenarios(
    inputs: BusinessInputs,
    months: Optional[int] = None,
    scenario_results: Optional[Mapping[Scenario, CalculatedResults]] = None,
) -> pd.DataFrame:
    """
    Wide table of cumulative cash flow per scenario, one column per scenario
    label ("Pessimistic", "Realistic", "Optimistic") next to month/label.
    """
    if months is None:
        months = settings.CASHFLOW_PROJECTION_MONTHS
    if scenario_results is None:
        scenario_results = compute_all_scenarios(inputs)

    month = _month_index(months)
    df = pd.DataFrame({"month": month, "label": [f"M{m}" for m in month]})
    for scenario in Scenario:
        result = scenario_results[scenario]
        df[scenario.label] = -float(inputs.initial_investment) + result.net_profit * month
    return df
