# src/core/number_format.py
from __future__ import annotations

import math
from typing import Optional

from src.config import settings


def _is_missing(value: Optional[float]) -> bool:
    return value is None or not math.isfinite(value)


def format_number(value: Optional[float]) -> str:
    """One decimal with thousands separators; "N/A" when missing or unbounded."""
    if _is_missing(value):
        return settings.NOT_APPLICABLE_LABEL
    return f"{value:,.1f}"


def format_currency(value: Optional[float]) -> str:
    """Whole currency units, sign before the symbol ("-$140")."""
    if _is_missing(value):
        return settings.NOT_APPLICABLE_LABEL
    sign = "-" if value < 0 else ""
    return f"{sign}{settings.CURRENCY_SYMBOL}{abs(value):,.0f}"
