from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable

from .inputs import (
    ApportionmentResult,
    AssignedTo,
    BudgetAllocation,
    BudgetRule,
    EmergencyFund,
    Expense,
    PersonShare,
)

logger = logging.getLogger(__name__)


def total_expenses(expenses: Iterable[Expense]) -> float:
    return sum((expense.amount for expense in expenses), 0.0)


def income_weights(net1: float, net2: float) -> tuple[float, float]:
    """Each earner's share of household net income; both zero when the household has none."""
    household_net = net1 + net2
    if household_net <= 0:
        return 0.0, 0.0
    return net1 / household_net, net2 / household_net


def apportion_expenses(expenses: Iterable[Expense], net1: float, net2: float) -> ApportionmentResult:
    """Split expenses between two earners according to each expense's assignment."""
    w1, w2 = income_weights(net1, net2)
    individual = [0.0, 0.0]
    shared = [0.0, 0.0]
    total = 0.0

    for expense in expenses:
        amount = expense.amount
        total += amount
        policy = expense.assigned_to
        if policy is AssignedTo.PERSON1 or policy is AssignedTo.PERSON2:
            individual[policy.person - 1] += amount
        elif policy is AssignedTo.EQUAL:
            shared[0] += amount / 2
            shared[1] += amount / 2
        elif policy is AssignedTo.EQUITABLE:
            shared[0] += amount * w1
            shared[1] += amount * w2
        else:
            raise ValueError(f"Unhandled expense assignment: {policy!r}")

    logger.debug("Apportioned %.2f across earners with weights %.4f/%.4f", total, w1, w2)

    return ApportionmentResult(
        person1=PersonShare(net_income=net1, weight=w1, individual_expenses=individual[0], shared_contribution=shared[0]),
        person2=PersonShare(net_income=net2, weight=w2, individual_expenses=individual[1], shared_contribution=shared[1]),
        total_expenses=total,
    )


def budget_allocation(household_net: float, rule: BudgetRule = BudgetRule()) -> BudgetAllocation:
    """50/30/20 split of household net income into needs, wants and savings."""
    return BudgetAllocation(
        needs=household_net * rule.needs,
        wants=household_net * rule.wants,
        savings=household_net * rule.savings,
    )


def emergency_fund(
    monthly_expenses: float, household_net: float, months: int = 6, rule: BudgetRule = BudgetRule()
) -> EmergencyFund:
    """Target of `months` times monthly expenses, funded from the savings allocation."""
    return EmergencyFund(
        months=months,
        target=monthly_expenses * months,
        suggested_contribution=household_net * rule.savings,
    )


def add_expense(
    expenses: Iterable[Expense], name: str = "", amount: float = 0.0, assigned_to: AssignedTo = AssignedTo.EQUAL
) -> tuple[Expense, ...]:
    return (*expenses, Expense(name=name, amount=amount, assigned_to=assigned_to))


def remove_expense(expenses: Iterable[Expense], expense_id: str) -> tuple[Expense, ...]:
    return tuple(expense for expense in expenses if expense.id != expense_id)


def update_expense(expenses: Iterable[Expense], expense_id: str, **changes: Any) -> tuple[Expense, ...]:
    """Return a new list with the matching expense rebuilt from `changes`."""
    if "id" in changes:
        raise ValueError("Expense id cannot be changed.")
    return tuple(replace(expense, **changes) if expense.id == expense_id else expense for expense in expenses)
