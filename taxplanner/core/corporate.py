from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from taxplanner.core.models import CorpTaxResult
from taxplanner.core.money import ZERO, cents, non_negative, rate

D = Decimal

SBD_LIMIT_BC = D("500000")

# 2025 combined CCPC rates (federal + BC)
SBD_COMBINED_RATE_2025 = D("0.11")  # 9% + 2%
GENERAL_COMBINED_RATE_2025 = D("0.27")  # 15% + 12%


@dataclass(frozen=True)
class DividendCapacity:
    """After-tax profit available to pay each dividend class.

    Income taxed at the small-business rate can only fund non-eligible
    dividends; income taxed at the general rate funds eligible dividends.
    """

    corporate: CorpTaxResult
    non_eligible: D
    eligible: D

    @property
    def total(self) -> D:
        return self.non_eligible + self.eligible


def compute_corporate_taxes_bc(profit_before_tax: D | float | int) -> CorpTaxResult:
    p = non_negative(profit_before_tax)
    sbd_portion = min(p, SBD_LIMIT_BC)
    general_portion = max(ZERO, p - SBD_LIMIT_BC)

    tax_on_sbd = cents(sbd_portion * SBD_COMBINED_RATE_2025)
    tax_on_general = cents(general_portion * GENERAL_COMBINED_RATE_2025)
    corporate_taxes = tax_on_sbd + tax_on_general

    return CorpTaxResult(
        profit_before_tax=p,
        sbd_portion=sbd_portion,
        general_portion=general_portion,
        tax_on_sbd=tax_on_sbd,
        tax_on_general=tax_on_general,
        corporate_taxes=corporate_taxes,
        effective_rate=rate(corporate_taxes, p),
    )


def dividend_capacity_bc(profit_before_tax: D | float | int) -> DividendCapacity:
    corp = compute_corporate_taxes_bc(profit_before_tax)
    return DividendCapacity(
        corporate=corp,
        non_eligible=corp.sbd_portion - corp.tax_on_sbd,
        eligible=corp.general_portion - corp.tax_on_general,
    )


__all__ = [
    "DividendCapacity",
    "GENERAL_COMBINED_RATE_2025",
    "SBD_COMBINED_RATE_2025",
    "SBD_LIMIT_BC",
    "compute_corporate_taxes_bc",
    "dividend_capacity_bc",
]
