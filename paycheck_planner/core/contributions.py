from __future__ import annotations

import numpy as np

from .inputs import DEFAULT_RULES, PayrollRules


def sss_contribution(monthly_salary: float, rules: PayrollRules = DEFAULT_RULES) -> float:
    """Employee SSS share on basic salary, capped at the maximum salary credit."""
    if monthly_salary <= 0:
        return 0.0
    return min(monthly_salary, rules.sss_max_salary_credit) * rules.sss_rate


def philhealth_contribution(monthly_salary: float, rules: PayrollRules = DEFAULT_RULES) -> float:
    """Employee half of the PhilHealth premium on a floored/capped salary base."""
    if monthly_salary <= 0:
        return 0.0
    base = float(np.clip(monthly_salary, rules.philhealth_min_salary, rules.philhealth_max_salary))
    return base * rules.philhealth_rate / 2.0


def pagibig_contribution(monthly_salary: float, rules: PayrollRules = DEFAULT_RULES) -> float:
    if monthly_salary <= 0:
        return 0.0
    return min(monthly_salary, rules.pagibig_max_salary) * rules.pagibig_rate


def statutory_contributions(
    monthly_salary: float, rules: PayrollRules = DEFAULT_RULES
) -> tuple[float, float, float]:
    """Return (sss, philhealth, pagibig) for a monthly basic salary."""
    return (
        sss_contribution(monthly_salary, rules),
        philhealth_contribution(monthly_salary, rules),
        pagibig_contribution(monthly_salary, rules),
    )
