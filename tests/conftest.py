"""Shared fixtures for the paycheck planner test suite."""

import pytest

from paycheck_planner.core.inputs import IncomeType, PersonInputs


@pytest.fixture
def reference_earner() -> PersonInputs:
    """30,000/month earner with statutory deductions and no extras."""
    return PersonInputs(
        name="Alex",
        gross_income=30_000,
        income_type=IncomeType.MONTHLY,
        apply_gov_benefits=True,
        apply_night_diff=False,
    )


@pytest.fixture
def partner_earner() -> PersonInputs:
    return PersonInputs(name="Sam", gross_income=25_000)
