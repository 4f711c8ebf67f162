"""Tests for household orchestration and display tables."""

import pytest

from paycheck_planner.core.household import (
    FINANCIAL_LINE_ITEMS,
    apportionment_table,
    financials_table,
    summarize_household,
)
from paycheck_planner.core.inputs import AssignedTo, Expense, HouseholdMode
from paycheck_planner.core.scenarios import default_expenses, default_partner, default_person


class TestIndividualMode:
    def test_household_net_is_single_earner(self, reference_earner):
        expenses = [Expense(amount=10_000, assigned_to=AssignedTo.PERSON2)]
        summary = summarize_household(reference_earner, expenses)

        assert summary.person2 is None
        assert summary.apportionment is None
        assert summary.household_net_income == pytest.approx(26_670.0)
        assert summary.remaining_balance == pytest.approx(16_670.0)

    def test_no_expenses_leaves_full_net(self, reference_earner):
        summary = summarize_household(reference_earner)

        assert summary.total_expenses == 0
        assert summary.remaining_balance == summary.household_net_income

    def test_budget_and_emergency_fund(self, reference_earner):
        summary = summarize_household(reference_earner, [Expense(amount=5_000)])

        assert summary.budget.needs == pytest.approx(13_335.0)
        assert summary.emergency_fund.target == pytest.approx(30_000.0)
        assert summary.emergency_fund.suggested_contribution == pytest.approx(5_334.0)


class TestCoupleMode:
    def test_requires_second_earner(self, reference_earner):
        with pytest.raises(ValueError):
            summarize_household(reference_earner, mode=HouseholdMode.COUPLE)

    def test_combined_net_and_split(self, reference_earner, partner_earner):
        expenses = [
            Expense(amount=20_000, assigned_to=AssignedTo.EQUITABLE),
            Expense(amount=4_000, assigned_to=AssignedTo.EQUAL),
        ]
        summary = summarize_household(reference_earner, expenses, person2=partner_earner, mode=HouseholdMode.COUPLE)

        assert summary.person2.net_income == pytest.approx(22_717.5)
        assert summary.household_net_income == pytest.approx(49_387.5)
        assert summary.remaining_balance == pytest.approx(25_387.5)

        share = summary.apportionment
        assert share.person1.total_responsibility + share.person2.total_responsibility == pytest.approx(24_000)
        assert share.person1.shared_contribution == pytest.approx(2_000 + 20_000 * 26_670.0 / 49_387.5)

    def test_defaults(self):
        summary = summarize_household(
            default_person(), default_expenses(), person2=default_partner(), mode=HouseholdMode.COUPLE
        )

        assert summary.total_expenses == 0
        assert summary.apportionment.person1.remaining == pytest.approx(summary.person1.net_income)


class TestTables:
    def test_financials_table(self, reference_earner, partner_earner):
        summary = summarize_household(reference_earner, person2=partner_earner, mode=HouseholdMode.COUPLE)
        table = financials_table({"Alex": summary.person1, "Sam": summary.person2})

        assert list(table.columns) == ["Alex", "Sam"]
        assert len(table) == len(FINANCIAL_LINE_ITEMS)
        assert table.loc["Net take-home pay", "Alex"] == pytest.approx(26_670.0)
        assert table.loc["Withholding tax", "Sam"] == pytest.approx(332.5)

    def test_apportionment_table(self, reference_earner, partner_earner):
        expenses = [Expense(amount=1_000, assigned_to=AssignedTo.PERSON1)]
        summary = summarize_household(reference_earner, expenses, person2=partner_earner, mode=HouseholdMode.COUPLE)
        table = apportionment_table(summary.apportionment, ("Alex", "Sam"))

        assert list(table.index) == ["Alex", "Sam"]
        assert table.loc["Alex", "Individual expenses"] == 1_000
        assert table.loc["Sam", "Remaining"] == pytest.approx(22_717.5)
