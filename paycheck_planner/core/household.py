from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

import pandas as pd

from .budget import apportion_expenses, budget_allocation, emergency_fund, total_expenses
from .engine import compute_financials
from .inputs import (
    DEFAULT_RULES,
    ApportionmentResult,
    BudgetAllocation,
    BudgetRule,
    EmergencyFund,
    Expense,
    HouseholdMode,
    PayrollRules,
    PersonFinancials,
    PersonInputs,
)

logger = logging.getLogger(__name__)

FINANCIAL_LINE_ITEMS = (
    ("Gross monthly income", "monthly_gross"),
    ("Night differential pay", "night_diff_pay"),
    ("Taxable allowance", "taxable_allowance"),
    ("Non-taxable allowance", "non_taxable_allowance"),
    ("Total gross income", "total_gross"),
    ("SSS contribution", "sss"),
    ("PhilHealth contribution", "philhealth"),
    ("Pag-IBIG contribution", "pagibig"),
    ("Withholding tax", "withholding_tax"),
    ("Total deductions", "total_deductions"),
    ("Net take-home pay", "net_income"),
)


@dataclass(frozen=True)
class HouseholdSummary:
    mode: HouseholdMode
    person1: PersonFinancials
    person2: Optional[PersonFinancials]
    household_net_income: float
    total_expenses: float
    budget: BudgetAllocation
    emergency_fund: EmergencyFund
    apportionment: Optional[ApportionmentResult] = None

    @property
    def remaining_balance(self) -> float:
        return self.household_net_income - self.total_expenses


def summarize_household(
    person1: PersonInputs,
    expenses: Iterable[Expense] = (),
    person2: Optional[PersonInputs] = None,
    mode: HouseholdMode = HouseholdMode.INDIVIDUAL,
    rules: PayrollRules = DEFAULT_RULES,
    budget_rule: BudgetRule = BudgetRule(),
) -> HouseholdSummary:
    """Recompute every derived figure for the current inputs."""
    expenses = tuple(expenses)
    first = compute_financials(person1, rules)
    second = None
    apportionment = None

    if mode is HouseholdMode.COUPLE:
        if person2 is None:
            raise ValueError("Couple mode requires a second earner.")
        second = compute_financials(person2, rules)
        household_net = first.net_income + second.net_income
        apportionment = apportion_expenses(expenses, first.net_income, second.net_income)
    else:
        household_net = first.net_income

    spent = total_expenses(expenses)
    logger.debug("Household (%s): net=%.2f expenses=%.2f", mode.value, household_net, spent)

    return HouseholdSummary(
        mode=mode,
        person1=first,
        person2=second,
        household_net_income=household_net,
        total_expenses=spent,
        budget=budget_allocation(household_net, budget_rule),
        emergency_fund=emergency_fund(spent, household_net, rule=budget_rule),
        apportionment=apportionment,
    )


def financials_table(financials_by_name: Dict[str, PersonFinancials]) -> pd.DataFrame:
    """Line items as rows, one column per earner."""
    data = {
        name: [getattr(financials, attr) for _, attr in FINANCIAL_LINE_ITEMS]
        for name, financials in financials_by_name.items()
    }
    index = pd.Index([label for label, _ in FINANCIAL_LINE_ITEMS], name="Line item")
    return pd.DataFrame(data, index=index)


def apportionment_table(result: ApportionmentResult, names: Sequence[str] = ("Person 1", "Person 2")) -> pd.DataFrame:
    rows = []
    for name, share in zip(names, (result.person1, result.person2)):
        rows.append(
            {
                "Earner": name,
                "Income share": share.weight,
                "Individual expenses": share.individual_expenses,
                "Shared contribution": share.shared_contribution,
                "Total responsibility": share.total_responsibility,
                "Remaining": share.remaining,
            }
        )
    return pd.DataFrame(rows).set_index("Earner")
