# src/core/kpi_signals.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.config import settings
from src.core.business_models import BusinessInputs, CalculatedResults


class Trend(Enum):
    UP = "up"
    NEUTRAL = "neutral"
    DOWN = "down"


@dataclass(frozen=True)
class KpiSignal:
    trend: Trend
    caption: str


def margin_signal(results: CalculatedResults) -> KpiSignal:
    if results.margin_percent > settings.KPI_HEALTHY_MARGIN_PCT:
        return KpiSignal(Trend.UP, "Healthy margin")
    if results.margin_percent > 0:
        return KpiSignal(Trend.NEUTRAL, "Low margin")
    return KpiSignal(Trend.DOWN, "Negative margin")


def payback_signal(results: CalculatedResults) -> KpiSignal:
    months = results.payback_months.value
    if months is None:
        return KpiSignal(Trend.DOWN, "Net profit is zero or negative")
    if months <= settings.KPI_FAST_PAYBACK_MONTHS:
        return KpiSignal(Trend.UP, "Fast recovery")
    if months <= settings.KPI_MODERATE_PAYBACK_MONTHS:
        return KpiSignal(Trend.NEUTRAL, "Moderate recovery")
    return KpiSignal(Trend.DOWN, "Long recovery")


def break_even_signal(
    results: CalculatedResults,
    inputs: BusinessInputs,
) -> KpiSignal:
    units = results.break_even_units.value
    if units is not None and units <= inputs.monthly_sales_volume:
        return KpiSignal(Trend.UP, "Above break-even")
    return KpiSignal(Trend.DOWN, "Below break-even")


def profit_signal(value: float, positive_caption: str, negative_caption: str) -> KpiSignal:
    if value > 0:
        return KpiSignal(Trend.UP, positive_caption)
    return KpiSignal(Trend.DOWN, negative_caption)
