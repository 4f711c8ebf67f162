"""Tests for the annual income tax table."""

import math

import pytest

from paycheck_planner.core.taxes import TAX_BRACKETS, annual_income_tax, find_bracket


class TestExemptThreshold:
    def test_exactly_threshold_is_exempt(self):
        assert annual_income_tax(250_000) == 0

    def test_just_above_threshold(self):
        assert annual_income_tax(250_000.01) == pytest.approx(0.15 * 0.01, abs=1e-9)

    @pytest.mark.parametrize("income", [-10_000, 0, 120_000])
    def test_low_or_negative_income(self, income):
        assert annual_income_tax(income) == 0


class TestBracketLookup:
    @pytest.mark.parametrize(
        "income, rate",
        [
            (1, 0.0),
            (250_000, 0.0),
            (250_000.01, 0.15),
            (400_000, 0.15),
            (400_000.01, 0.20),
            (800_000, 0.20),
            (2_000_000, 0.25),
            (8_000_000, 0.30),
            (8_000_000.01, 0.35),
            (1e12, 0.35),
        ],
    )
    def test_upper_bound_is_inclusive(self, income, rate):
        assert find_bracket(income).rate == rate

    @pytest.mark.parametrize("income", [0, -1])
    def test_no_bracket_below_zero(self, income):
        assert find_bracket(income) is None

    def test_table_is_ordered(self):
        lowers = [b.lower for b in TAX_BRACKETS]
        assert lowers == sorted(lowers)
        for current, following in zip(TAX_BRACKETS, TAX_BRACKETS[1:]):
            assert current.upper == following.lower
        assert math.isinf(TAX_BRACKETS[-1].upper)


class TestContinuity:
    @pytest.mark.parametrize("idx", range(len(TAX_BRACKETS) - 1))
    def test_no_jump_between_brackets(self, idx):
        current, following = TAX_BRACKETS[idx], TAX_BRACKETS[idx + 1]

        assert current.tax(current.upper) == pytest.approx(following.tax(following.lower))

    def test_worked_example(self):
        assert annual_income_tax(332_400) == pytest.approx(12_360.0)
