# src/ui/formatting.py
from __future__ import annotations

from src.config import settings
from src.core.business_models import BreakEven, PaybackPeriod
from src.core.number_format import format_currency, format_number

__all__ = [
    "format_break_even",
    "format_currency",
    "format_number",
    "format_payback",
    "format_percentage",
]


def format_percentage(value: float) -> str:
    return f"{format_number(value)}%"


def format_payback(payback: PaybackPeriod) -> str:
    months = payback.value
    if months is None:
        return settings.NOT_RECOVERABLE_LABEL
    return f"{format_number(months)} months"


def format_break_even(break_even: BreakEven, unit: str = "units") -> str:
    units = break_even.value
    if units is None:
        return settings.NOT_APPLICABLE_LABEL
    return f"{format_number(units)} {unit}"
