from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


import pandas as pd
import streamlit as st

from paycheck_planner.core.budget import add_expense, remove_expense, update_expense
from paycheck_planner.core.formatting import format_currency, format_percent
from paycheck_planner.core.household import (
    HouseholdSummary,
    apportionment_table,
    financials_table,
    summarize_household,
)
from paycheck_planner.core.inputs import AssignedTo, Expense, HouseholdMode, IncomeType, PersonInputs
from paycheck_planner.core.scenarios import default_expenses, default_partner, default_person
from paycheck_planner.validation.checks import expense_from_record, person_from_record

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Philippine Financial Forecaster", layout="wide")

ASSIGNMENT_LABELS = {
    AssignedTo.EQUITABLE: "Shared (Equitable)",
    AssignedTo.EQUAL: "Shared (Equal)",
}


def _ensure_state() -> None:
    if "expenses" not in st.session_state:
        st.session_state.expenses = default_expenses()


def person_inputs(key: str, defaults: PersonInputs) -> PersonInputs:
    name = st.text_input("Name", value=defaults.name, key=f"{key}_name")
    income_col, type_col = st.columns([3, 1])
    gross_income = income_col.number_input(
        "Gross income", min_value=0.0, value=float(defaults.gross_income), step=1_000.0, key=f"{key}_gross"
    )
    income_type = type_col.selectbox(
        "Period",
        options=list(IncomeType),
        index=list(IncomeType).index(defaults.income_type),
        format_func=lambda t: t.value.title(),
        key=f"{key}_income_type",
    )
    taxable_allowance = st.number_input(
        "Taxable allowance (monthly)", min_value=0.0, value=float(defaults.taxable_allowance), step=500.0, key=f"{key}_tax_allow"
    )
    non_taxable_allowance = st.number_input(
        "Non-taxable allowance (monthly)",
        min_value=0.0,
        value=float(defaults.non_taxable_allowance),
        step=500.0,
        key=f"{key}_nontax_allow",
    )
    apply_gov_benefits = st.toggle(
        "Apply government benefits/taxes?", value=defaults.apply_gov_benefits, key=f"{key}_gov"
    )
    apply_night_diff = st.toggle("Night differential?", value=defaults.apply_night_diff, key=f"{key}_nd")
    nd_hours = defaults.night_diff_hours_per_day
    nd_rate = defaults.night_diff_rate
    if apply_night_diff:
        hours_col, rate_col = st.columns(2)
        nd_hours = hours_col.number_input(
            "Hours per day", min_value=0.0, max_value=24.0, value=float(nd_hours), step=0.5, key=f"{key}_nd_hours"
        )
        nd_rate = rate_col.number_input("Rate (%)", min_value=0.0, value=float(nd_rate), step=1.0, key=f"{key}_nd_rate")

    return person_from_record(
        {
            "name": name or defaults.name,
            "gross_income": gross_income,
            "income_type": income_type,
            "taxable_allowance": taxable_allowance,
            "non_taxable_allowance": non_taxable_allowance,
            "apply_gov_benefits": apply_gov_benefits,
            "apply_night_diff": apply_night_diff,
            "night_diff_hours_per_day": nd_hours,
            "night_diff_rate": nd_rate,
        }
    )


def expense_editor(mode: HouseholdMode, names: tuple[str, str]) -> tuple[Expense, ...]:
    labels = {**ASSIGNMENT_LABELS, AssignedTo.PERSON1: names[0], AssignedTo.PERSON2: names[1]}
    for expense in st.session_state.expenses:
        name_col, amount_col, assign_col, remove_col = st.columns([4, 2, 3, 1])
        name = name_col.text_input(
            "Expense", value=expense.name, key=f"exp_name_{expense.id}", label_visibility="collapsed", placeholder="Expense name"
        )
        amount = amount_col.number_input(
            "Amount", min_value=0.0, value=float(expense.amount), step=100.0, key=f"exp_amt_{expense.id}", label_visibility="collapsed"
        )
        assigned_to = expense.assigned_to
        if mode is HouseholdMode.COUPLE:
            options = list(labels)
            assigned_to = assign_col.selectbox(
                "Assigned to",
                options=options,
                index=options.index(expense.assigned_to),
                format_func=labels.get,
                key=f"exp_assign_{expense.id}",
                label_visibility="collapsed",
            )
        if remove_col.button("✕", key=f"exp_rm_{expense.id}"):
            st.session_state.expenses = remove_expense(st.session_state.expenses, expense.id)
            st.rerun()
        edited = expense_from_record({"id": expense.id, "name": name, "amount": amount, "assigned_to": assigned_to})
        if edited != expense:
            st.session_state.expenses = update_expense(
                st.session_state.expenses,
                expense.id,
                name=edited.name,
                amount=edited.amount,
                assigned_to=edited.assigned_to,
            )

    if st.button("Add expense"):
        st.session_state.expenses = add_expense(st.session_state.expenses)
        st.rerun()
    return st.session_state.expenses


def _styled_money(df: pd.DataFrame) -> pd.DataFrame:
    return df.apply(lambda col: col.map(format_currency))


def render_summary(summary: HouseholdSummary, names: tuple[str, str]) -> None:
    st.subheader("Financial summary")
    if summary.mode is HouseholdMode.INDIVIDUAL:
        st.table(_styled_money(financials_table({names[0]: summary.person1})))
    else:
        st.table(_styled_money(financials_table({names[0]: summary.person1, names[1]: summary.person2})))
    st.metric("Household net income (monthly)", format_currency(summary.household_net_income))


def render_budget(summary: HouseholdSummary) -> None:
    st.subheader("50/30/20 budget rule")
    cols = st.columns(3)
    cols[0].metric("50% Needs", format_currency(summary.budget.needs), help="Housing, bills, groceries")
    cols[1].metric("30% Wants", format_currency(summary.budget.wants), help="Hobbies, dining, shopping")
    cols[2].metric("20% Savings", format_currency(summary.budget.savings), help="Investments, debt, savings")

    st.subheader(f"{summary.emergency_fund.months}-month emergency fund")
    fund_cols = st.columns(2)
    fund_cols[0].metric("Target goal", format_currency(summary.emergency_fund.target))
    fund_cols[1].metric("Suggested contribution", format_currency(summary.emergency_fund.suggested_contribution))


def render_spending(summary: HouseholdSummary, names: tuple[str, str]) -> None:
    cols = st.columns(2)
    cols[0].metric("Total expenses", format_currency(summary.total_expenses))
    cols[1].metric("Remaining balance", format_currency(summary.remaining_balance))
    if summary.apportionment is None:
        return

    table = apportionment_table(summary.apportionment, names)
    display = _styled_money(table.drop(columns=["Income share"]))
    display.insert(0, "Income share", table["Income share"].map(format_percent))
    st.table(display)


def main():
    _ensure_state()
    st.title("Philippine Financial Forecaster")
    st.write("Plan your income, deductions, and budget with ease.")

    mode = st.radio(
        "Mode", options=list(HouseholdMode), format_func=lambda m: m.value.title(), horizontal=True
    )

    with st.sidebar.expander("Income & Deductions", expanded=True):
        person1 = person_inputs("p1", default_person())
        person2 = None
        if mode is HouseholdMode.COUPLE:
            st.divider()
            person2 = person_inputs("p2", default_partner())

    names = (person1.name, person2.name if person2 else "Person 2")

    tab_summary, tab_budget, tab_spending = st.tabs(["Financial summary", "Budget", "Bills & spending"])

    with tab_spending:
        st.subheader("Monthly bills & spending tracker")
        expenses = expense_editor(mode, names)

    try:
        summary = summarize_household(person1, expenses, person2=person2, mode=mode)
    except ValueError as exc:  # Streamlit friendly error surface
        logger.warning("Household computation failed: %s", exc)
        st.error(f"Unable to compute household finances: {exc}")
        return

    with tab_summary:
        render_summary(summary, names)

    with tab_budget:
        render_budget(summary)

    with tab_spending:
        render_spending(summary, names)


if __name__ == "__main__":
    main()
