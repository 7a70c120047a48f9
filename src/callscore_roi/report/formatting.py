"""Display formatting for ROI figures.

Currency is a label only: values are shown in whatever currency the
assumptions are expressed in, never converted.
"""

from __future__ import annotations

import math

CURRENCY_SYMBOLS: dict[str, str] = {"GBP": "£", "USD": "$", "EUR": "€"}


def _finite(value: float | None) -> float:
    return value if value is not None and math.isfinite(value) else 0.0


def currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, "$")


def money(value: float | None, currency: str) -> str:
    """Whole currency units with thousands separators, e.g. ``-£1,234``."""
    v = _finite(value)
    sign = "-" if round(v) < 0 else ""
    return f"{sign}{currency_symbol(currency)}{abs(v):,.0f}"


def number(value: float | None) -> str:
    v = _finite(value)
    if float(v).is_integer():
        return f"{v:,.0f}"
    return f"{v:,.2f}"


def percent(value: float | None) -> str:
    """Fraction → percentage with one decimal (0.05 → ``5.0%``)."""
    return f"{_finite(value) * 100:.1f}%"


def payback_months(value: float | None) -> str:
    if value is None or not math.isfinite(value):
        return "N/A"
    return f"{value:.1f}"
