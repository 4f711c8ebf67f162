from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from uuid import uuid4


class IncomeType(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class AssignedTo(str, Enum):
    """Who carries an expense: split equally, split by net income, or one earner."""

    EQUAL = "equal"
    EQUITABLE = "equitable"
    PERSON1 = "person1"
    PERSON2 = "person2"

    @property
    def person(self) -> Optional[int]:
        """Earner index for fixed assignments, None for shared ones."""
        if self is AssignedTo.PERSON1:
            return 1
        if self is AssignedTo.PERSON2:
            return 2
        return None


class HouseholdMode(str, Enum):
    INDIVIDUAL = "individual"
    COUPLE = "couple"


@dataclass(frozen=True)
class PayrollRules:
    """Statutory rates (Philippines, 2024). Brackets live in taxes.TAX_BRACKETS."""

    sss_rate: float = 0.045
    sss_max_salary_credit: float = 30_000.0
    philhealth_rate: float = 0.05  # total premium, employee pays half
    philhealth_min_salary: float = 10_000.0
    philhealth_max_salary: float = 100_000.0
    pagibig_rate: float = 0.02
    pagibig_max_salary: float = 10_000.0
    working_days_per_month: int = 22
    hours_per_day: int = 8
    tax_exempt_threshold: float = 250_000.0


DEFAULT_RULES = PayrollRules()


@dataclass(frozen=True)
class BudgetRule:
    needs: float = 0.5
    wants: float = 0.3
    savings: float = 0.2


@dataclass(frozen=True)
class PersonInputs:
    gross_income: float
    income_type: IncomeType = IncomeType.MONTHLY
    name: str = "Person 1"
    taxable_allowance: float = 0.0
    non_taxable_allowance: float = 0.0
    apply_gov_benefits: bool = True
    apply_night_diff: bool = False
    night_diff_hours_per_day: float = 2.0
    night_diff_rate: float = 10.0  # percent markup on the hourly wage

    def __post_init__(self) -> None:
        object.__setattr__(self, "income_type", IncomeType(self.income_type))

    def monthly_gross(self) -> float:
        if self.income_type is IncomeType.YEARLY:
            return self.gross_income / 12.0
        return self.gross_income


@dataclass(frozen=True)
class PersonFinancials:
    monthly_gross: float
    night_diff_pay: float
    taxable_allowance: float
    non_taxable_allowance: float
    total_gross: float
    sss: float
    philhealth: float
    pagibig: float
    total_contributions: float
    taxable_income: float
    annual_taxable_income: float
    withholding_tax: float
    total_deductions: float
    net_income: float


@dataclass(frozen=True)
class Expense:
    name: str = ""
    amount: float = 0.0
    assigned_to: AssignedTo = AssignedTo.EQUAL
    id: str = field(default_factory=lambda: uuid4().hex)

    def __post_init__(self) -> None:
        object.__setattr__(self, "assigned_to", AssignedTo(self.assigned_to))


@dataclass(frozen=True)
class PersonShare:
    net_income: float
    weight: float
    individual_expenses: float
    shared_contribution: float

    @property
    def total_responsibility(self) -> float:
        return self.individual_expenses + self.shared_contribution

    @property
    def remaining(self) -> float:
        return self.net_income - self.total_responsibility


@dataclass(frozen=True)
class ApportionmentResult:
    person1: PersonShare
    person2: PersonShare
    total_expenses: float


@dataclass(frozen=True)
class BudgetAllocation:
    needs: float
    wants: float
    savings: float


@dataclass(frozen=True)
class EmergencyFund:
    months: int
    target: float
    suggested_contribution: float
