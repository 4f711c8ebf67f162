from __future__ import annotations

import logging

from .contributions import statutory_contributions
from .inputs import DEFAULT_RULES, PayrollRules, PersonFinancials, PersonInputs
from .taxes import annual_income_tax

logger = logging.getLogger(__name__)


def night_differential_pay(
    monthly_gross: float, hours_per_day: float, rate_pct: float, rules: PayrollRules = DEFAULT_RULES
) -> float:
    """Percentage markup on the hourly-equivalent wage for night hours over a standard month."""
    hourly_rate = monthly_gross / rules.working_days_per_month / rules.hours_per_day
    night_hours = hours_per_day * rules.working_days_per_month
    return hourly_rate * (rate_pct / 100.0) * night_hours


def compute_financials(person: PersonInputs, rules: PayrollRules = DEFAULT_RULES) -> PersonFinancials:
    """Gross pay, statutory deductions, withholding tax and net pay for one earner (monthly)."""
    monthly_gross = person.monthly_gross()

    night_diff = 0.0
    if person.apply_night_diff:
        night_diff = night_differential_pay(
            monthly_gross, person.night_diff_hours_per_day, person.night_diff_rate, rules
        )

    total_gross = monthly_gross + night_diff + person.taxable_allowance + person.non_taxable_allowance

    # Contributions are computed on basic salary only
    if person.apply_gov_benefits:
        sss, philhealth, pagibig = statutory_contributions(monthly_gross, rules)
    else:
        sss = philhealth = pagibig = 0.0
    total_contributions = sss + philhealth + pagibig

    # Non-taxable allowance stays out of the tax base
    gross_taxable = monthly_gross + night_diff + person.taxable_allowance
    taxable_income = gross_taxable - total_contributions
    annual_taxable = taxable_income * 12.0
    annual_tax = annual_income_tax(annual_taxable, rules)
    # Nothing is withheld without a basic salary, even if allowances are taxable
    withholding_tax = annual_tax / 12.0 if person.apply_gov_benefits and monthly_gross > 0 else 0.0

    total_deductions = total_contributions + withholding_tax
    net_income = total_gross - total_deductions

    logger.debug(
        "Computed financials for %s: gross=%.2f annual_taxable=%.2f tax=%.2f net=%.2f",
        person.name,
        total_gross,
        annual_taxable,
        withholding_tax,
        net_income,
    )

    return PersonFinancials(
        monthly_gross=monthly_gross,
        night_diff_pay=night_diff,
        taxable_allowance=person.taxable_allowance,
        non_taxable_allowance=person.non_taxable_allowance,
        total_gross=total_gross,
        sss=sss,
        philhealth=philhealth,
        pagibig=pagibig,
        total_contributions=total_contributions,
        taxable_income=taxable_income,
        annual_taxable_income=annual_taxable,
        withholding_tax=withholding_tax,
        total_deductions=total_deductions,
        net_income=net_income,
    )
