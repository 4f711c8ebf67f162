from __future__ import annotations

import math
from typing import Any, Mapping

from paycheck_planner.core.inputs import AssignedTo, Expense, IncomeType, PersonInputs


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def to_number(value: Any) -> float:
    """Coerce raw form input to a float; blanks, junk and NaN become 0."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


def to_flag(value: Any, default: bool = False) -> bool:
    """Coerce a raw checkbox value; strings like 'false' or 'off' are False."""
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        _require(text in _TRUE_STRINGS | _FALSE_STRINGS, f"Cannot read {value!r} as a yes/no value.")
        return text in _TRUE_STRINGS
    return bool(value)


def parse_income_type(value: Any) -> IncomeType:
    if isinstance(value, IncomeType):
        return value
    options = {member.value for member in IncomeType}
    _require(str(value).lower() in options, f"Income type must be one of {sorted(options)}.")
    return IncomeType(str(value).lower())


def parse_assigned_to(value: Any) -> AssignedTo:
    if isinstance(value, AssignedTo):
        return value
    options = {member.value for member in AssignedTo}
    _require(str(value).lower() in options, f"Expense assignment must be one of {sorted(options)}.")
    return AssignedTo(str(value).lower())


def _pick(record: Mapping[str, Any], snake: str, camel: str, default: Any) -> Any:
    if snake in record:
        return record[snake]
    return record.get(camel, default)


def person_from_record(record: Mapping[str, Any]) -> PersonInputs:
    """Build PersonInputs from a raw UI record (snake_case or camelCase keys)."""
    return PersonInputs(
        name=str(_pick(record, "name", "name", "Person 1")),
        gross_income=to_number(_pick(record, "gross_income", "grossIncome", 0)),
        income_type=parse_income_type(_pick(record, "income_type", "incomeType", IncomeType.MONTHLY)),
        taxable_allowance=to_number(_pick(record, "taxable_allowance", "taxableAllowance", 0)),
        non_taxable_allowance=to_number(_pick(record, "non_taxable_allowance", "nonTaxableAllowance", 0)),
        apply_gov_benefits=to_flag(_pick(record, "apply_gov_benefits", "applyGovBenefits", True), default=True),
        apply_night_diff=to_flag(_pick(record, "apply_night_diff", "applyNightDiff", False)),
        night_diff_hours_per_day=to_number(_pick(record, "night_diff_hours_per_day", "nightDiffHoursPerDay", 0)),
        night_diff_rate=to_number(_pick(record, "night_diff_rate", "nightDiffRate", 0)),
    )


def expense_from_record(record: Mapping[str, Any]) -> Expense:
    fields = {
        "name": str(record.get("name") or ""),
        "amount": to_number(record.get("amount", 0)),
        "assigned_to": parse_assigned_to(_pick(record, "assigned_to", "assignedTo", AssignedTo.EQUAL)),
    }
    if record.get("id") is not None:
        fields["id"] = str(record["id"])
    return Expense(**fields)
