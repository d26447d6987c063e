from decimal import Decimal as D

import pytest

from taxplanner.core.provinces._progressive import (
    apply_credits,
    bracket_table,
    calculate_progressive_tax,
)
from taxplanner.core.provinces.bc import BC_BRACKETS_2025, bc_tax_on_taxable_income_2025
from taxplanner.core.tax_years.y2025.federal import BRACKETS_2025, federal_tax_2025


@pytest.mark.parametrize("table", [BRACKETS_2025, BC_BRACKETS_2025])
def test_zero_income_owes_nothing(table):
    assert calculate_progressive_tax(table, D("0")) == D("0.00")


def test_federal_bracket_edges_2025():
    assert federal_tax_2025(D("57375")) == D("8319.38")
    assert federal_tax_2025(D("57376")) > D("8319.38")
    assert federal_tax_2025(D("114750")) > federal_tax_2025(D("114749"))
    assert federal_tax_2025(D("253414")) > federal_tax_2025(D("253413"))


def test_bc_first_bracket_is_flat_rate():
    assert bc_tax_on_taxable_income_2025(D("49279")) == (D("49279") * D("0.0506")).quantize(D("0.01"))
    assert bc_tax_on_taxable_income_2025(D("10000")) == D("506.00")


def test_top_bracket_covers_income_past_last_bound():
    below = bc_tax_on_taxable_income_2025(D("259829"))
    above = bc_tax_on_taxable_income_2025(D("269829"))
    assert above - below == D("2050.00")


@pytest.mark.parametrize("table", [BRACKETS_2025, BC_BRACKETS_2025])
def test_no_jump_at_bracket_boundaries(table):
    for bracket in table:
        if bracket.up_to is None:
            continue
        at = calculate_progressive_tax(table, bracket.up_to)
        just_above = calculate_progressive_tax(table, bracket.up_to + D("0.01"))
        assert D("0") <= just_above - at <= D("0.02")


@pytest.mark.parametrize("table", [BRACKETS_2025, BC_BRACKETS_2025])
def test_progressive_tax_is_non_decreasing(table):
    previous = D("-1")
    for step in range(0, 400_001, 2_500):
        tax = calculate_progressive_tax(table, D(step))
        assert tax >= previous
        previous = tax


def test_negative_income_is_treated_as_zero():
    assert federal_tax_2025(D("-5000")) == D("0.00")


def test_bracket_table_rejects_bad_ordering():
    with pytest.raises(ValueError):
        bracket_table([(D("100"), D("0.1")), (D("50"), D("0.2")), (None, D("0.3"))])
    with pytest.raises(ValueError):
        bracket_table([(D("100"), D("0.1")), (D("200"), D("0.2"))])
    with pytest.raises(ValueError):
        bracket_table([(None, D("0.1")), (D("200"), D("0.2"))])


def test_apply_credits_floors_at_zero():
    assert apply_credits(D("1000.00"), D("250.00")) == D("750.00")
    assert apply_credits(D("100.00"), D("250.00")) == D("0")
    assert apply_credits(D("100.00"), D("-50.00")) == D("100.00")
