from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from taxplanner.core.money import ZERO, cents
from taxplanner.core.provinces._progressive import apply_credits
from taxplanner.core.provinces.bc import bc_credits_2025, bc_tax_on_taxable_income_2025
from taxplanner.core.tax_years.y2025.dividends import (
    DividendClass,
    dividend_tax_credits,
    grossed_up,
)
from taxplanner.core.tax_years.y2025.federal import federal_nrtcs_2025, federal_tax_2025

D = Decimal


@dataclass(frozen=True)
class PersonalTax2025:
    taxable_income: D
    federal_before_credits: D
    federal_credits: D
    federal_tax: D
    provincial_before_credits: D
    provincial_credits: D
    provincial_tax: D
    total_payable: D


def compute_personal_2025(
    earned_income: D = ZERO,
    *,
    deductions: D = ZERO,
    creditable_cpp: D = ZERO,
    eligible_dividends: D = ZERO,
    non_eligible_dividends: D = ZERO,
) -> PersonalTax2025:
    """Federal and BC tax for one individual, net of non-refundable credits.

    Deductions reduce earned income before the bracket tax. Dividends enter
    taxable income at their grossed-up amount and earn dividend tax credits on
    that same amount. Each jurisdiction sums the basic personal amount credit,
    the CPP base credit and the dividend credits, then subtracts them once.
    """
    eligible_taxable = grossed_up(eligible_dividends, DividendClass.ELIGIBLE)
    non_eligible_taxable = grossed_up(non_eligible_dividends, DividendClass.NON_ELIGIBLE)
    taxable_income = (
        max(ZERO, earned_income - max(ZERO, deductions)) + eligible_taxable + non_eligible_taxable
    )

    fed_dtc_elig, bc_dtc_elig = dividend_tax_credits(eligible_taxable, DividendClass.ELIGIBLE)
    fed_dtc_non, bc_dtc_non = dividend_tax_credits(non_eligible_taxable, DividendClass.NON_ELIGIBLE)

    f_tax = federal_tax_2025(taxable_income)
    f_credits = federal_nrtcs_2025(creditable_cpp) + fed_dtc_elig + fed_dtc_non
    bc_tax = bc_tax_on_taxable_income_2025(taxable_income)
    bc_creds = bc_credits_2025(creditable_cpp) + bc_dtc_elig + bc_dtc_non

    f_net = apply_credits(f_tax, f_credits)
    bc_net = apply_credits(bc_tax, bc_creds)
    return PersonalTax2025(
        taxable_income=cents(taxable_income),
        federal_before_credits=f_tax,
        federal_credits=f_credits,
        federal_tax=f_net,
        provincial_before_credits=bc_tax,
        provincial_credits=bc_creds,
        provincial_tax=bc_net,
        total_payable=f_net + bc_net,
    )


__all__ = ["PersonalTax2025", "compute_personal_2025"]
