from decimal import Decimal as D

import pytest

from taxplanner.core.corporate import compute_corporate_taxes_bc, dividend_capacity_bc


def test_profit_above_small_business_limit_splits_rates():
    r = compute_corporate_taxes_bc(D("600000"))
    assert r.sbd_portion == D("500000")
    assert r.general_portion == D("100000")
    assert r.tax_on_sbd == D("55000.00")
    assert r.tax_on_general == D("27000.00")
    assert r.corporate_taxes == D("82000.00")
    assert r.effective_rate == D("0.136667")


def test_profit_under_limit_uses_small_business_rate_only():
    r = compute_corporate_taxes_bc(300_000)
    assert r.general_portion == D("0")
    assert r.corporate_taxes == D("33000.00")
    assert r.effective_rate == D("0.110000")


@pytest.mark.parametrize("profit", [0, -1000])
def test_zero_or_negative_profit(profit):
    r = compute_corporate_taxes_bc(profit)
    assert r.profit_before_tax == D("0")
    assert r.corporate_taxes == D("0.00")
    assert r.effective_rate == D("0")


def test_dividend_capacity_follows_rate_pools():
    cap = dividend_capacity_bc(D("800000"))
    assert cap.non_eligible == D("445000.00")
    assert cap.eligible == D("219000.00")
    assert cap.total == D("664000.00")
    assert cap.corporate.corporate_taxes == D("136000.00")

    small = dividend_capacity_bc(D("150000"))
    assert small.non_eligible == D("133500.00")
    assert small.eligible == D("0")
