from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .inputs import DEFAULT_RULES, PayrollRules


@dataclass(frozen=True)
class TaxBracket:
    lower: float
    upper: float
    rate: float
    base: float  # tax owed on all lower brackets

    def contains(self, annual_income: float) -> bool:
        return self.lower < annual_income <= self.upper

    def tax(self, annual_income: float) -> float:
        return self.base + (annual_income - self.lower) * self.rate


# Annual brackets under the TRAIN law (2023 onward).
TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(0.0, 250_000.0, 0.0, 0.0),
    TaxBracket(250_000.0, 400_000.0, 0.15, 0.0),
    TaxBracket(400_000.0, 800_000.0, 0.20, 22_500.0),
    TaxBracket(800_000.0, 2_000_000.0, 0.25, 102_500.0),
    TaxBracket(2_000_000.0, 8_000_000.0, 0.30, 402_500.0),
    TaxBracket(8_000_000.0, math.inf, 0.35, 2_202_500.0),
)

_UPPER_BOUNDS = np.array([bracket.upper for bracket in TAX_BRACKETS])


def find_bracket(
    annual_income: float, brackets: tuple[TaxBracket, ...] = TAX_BRACKETS
) -> Optional[TaxBracket]:
    """Return the bracket with lower < income <= upper, or None when no bracket applies."""
    uppers = _UPPER_BOUNDS if brackets is TAX_BRACKETS else np.array([b.upper for b in brackets])
    idx = int(np.searchsorted(uppers, annual_income, side="left"))
    if idx >= len(brackets):
        return None
    bracket = brackets[idx]
    return bracket if bracket.contains(annual_income) else None


def annual_income_tax(
    annual_income: float,
    rules: PayrollRules = DEFAULT_RULES,
    brackets: tuple[TaxBracket, ...] = TAX_BRACKETS,
) -> float:
    """Progressive annual tax. Income at or below the exempt threshold pays nothing."""
    if annual_income <= rules.tax_exempt_threshold:
        return 0.0
    bracket = find_bracket(annual_income, brackets)
    if bracket is None:
        return 0.0
    return bracket.tax(annual_income)
