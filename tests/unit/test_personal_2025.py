from decimal import Decimal as D

from taxplanner.core.provinces.bc import bc_credits_2025, bc_tax_on_taxable_income_2025
from taxplanner.core.tax_years.y2025.calc import compute_personal_2025
from taxplanner.core.tax_years.y2025.dividends import DividendClass, dividend_tax_credits, grossed_up
from taxplanner.core.tax_years.y2025.federal import federal_nrtcs_2025, federal_tax_2025


def test_zero_income_has_no_tax():
    r = compute_personal_2025()
    assert r.taxable_income == D("0.00")
    assert r.federal_tax == D("0")
    assert r.provincial_tax == D("0")
    assert r.total_payable == D("0")


def test_self_employed_150k_breakdown():
    r = compute_personal_2025(
        D("150000"),
        deductions=D("5504.10"),
        creditable_cpp=D("3356.10"),
    )
    assert r.taxable_income == D("144495.90")
    assert r.federal_before_credits == D("27815.18")
    assert r.federal_credits == D("2825.34")
    assert r.federal_tax == D("24989.84")
    assert r.provincial_before_credits == D("11843.21")
    assert r.provincial_credits == D("824.18")
    assert r.provincial_tax == D("11019.03")
    assert r.total_payable == D("36008.87")


def test_credits_are_subtracted_once_per_jurisdiction():
    taxable = D("80000")
    r = compute_personal_2025(taxable, creditable_cpp=D("3000"))
    assert r.federal_tax == max(D("0"), federal_tax_2025(taxable) - federal_nrtcs_2025(D("3000")))
    assert r.provincial_tax == max(D("0"), bc_tax_on_taxable_income_2025(taxable) - bc_credits_2025(D("3000")))


def test_low_income_floors_at_zero():
    r = compute_personal_2025(D("9000"))
    assert r.federal_before_credits > D("0")
    assert r.federal_tax == D("0")
    assert r.provincial_tax == D("0")


def test_dividends_are_grossed_up_before_tax_and_credit():
    assert grossed_up(D("50000"), DividendClass.ELIGIBLE) == D("69000.00")
    assert grossed_up(D("50000"), DividendClass.NON_ELIGIBLE) == D("57500.00")
    fed, bc = dividend_tax_credits(D("69000"), DividendClass.ELIGIBLE)
    assert fed == D("10363.66")
    assert bc == D("8280.00")

    r = compute_personal_2025(eligible_dividends=D("50000"))
    assert r.taxable_income == D("69000.00")
    assert r.federal_before_credits == federal_tax_2025(D("69000"))
    assert r.federal_credits == federal_nrtcs_2025() + fed
    # Credits exceed bracket tax at this level, so nothing is owed.
    assert r.total_payable == D("0")


def test_eligible_dividends_taxed_less_than_non_eligible():
    cash = D("150000")
    eligible = compute_personal_2025(eligible_dividends=cash)
    non_eligible = compute_personal_2025(non_eligible_dividends=cash)
    assert D("0") < eligible.total_payable < non_eligible.total_payable


def test_mixed_dividends_share_one_bracket_stack():
    both = compute_personal_2025(eligible_dividends=D("60000"), non_eligible_dividends=D("60000"))
    assert both.taxable_income == D("151800.00")
    assert both.federal_before_credits == federal_tax_2025(D("151800"))
