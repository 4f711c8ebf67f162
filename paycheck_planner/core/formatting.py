from __future__ import annotations

from typing import Optional

CURRENCY_SYMBOL = "₱"


def format_currency(value: Optional[float]) -> str:
    """Peso amount with thousands separators and two decimals, e.g. '₱ 26,670.00'."""
    amount = float(value or 0.0)
    if amount == 0:
        amount = 0.0  # drop negative zero
    return f"{CURRENCY_SYMBOL} {amount:,.2f}"


def format_percent(value: float) -> str:
    return f"{value * 100:.1f}%"
