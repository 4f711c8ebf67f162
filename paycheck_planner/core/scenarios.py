from __future__ import annotations

from .inputs import AssignedTo, Expense, IncomeType, PersonInputs


def default_person(name: str = "Person 1", gross_income: float = 30_000) -> PersonInputs:
    """Provide a reasonable starting point for the UI."""
    return PersonInputs(
        name=name,
        gross_income=gross_income,
        income_type=IncomeType.MONTHLY,
        taxable_allowance=0.0,
        non_taxable_allowance=0.0,
        apply_gov_benefits=True,
        apply_night_diff=False,
        night_diff_hours_per_day=2,
        night_diff_rate=10,
    )


def default_partner() -> PersonInputs:
    return default_person(name="Person 2", gross_income=25_000)


def default_expenses() -> tuple[Expense, ...]:
    return (
        Expense(id="1", name="Rent / Mortgage", amount=0.0, assigned_to=AssignedTo.EQUITABLE),
        Expense(id="2", name="Utilities (Water, Elec.)", amount=0.0, assigned_to=AssignedTo.EQUAL),
    )
