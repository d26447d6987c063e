from __future__ import annotations

from decimal import Decimal

from taxplanner.core.provinces._progressive import (
    bracket_table,
    calculate_progressive_tax,
    non_refundable_credit,
)

D = Decimal

# 2025 British Columbia personal income tax brackets and rates (TD1BC 2025)
BC_BRACKETS_2025 = bracket_table(
    [
        (D("49279"), D("0.0506")),
        (D("98560"), D("0.0770")),
        (D("113158"), D("0.1050")),
        (D("137407"), D("0.1229")),
        (D("186306"), D("0.1470")),
        (D("259829"), D("0.1680")),
        (None, D("0.2050")),
    ]
)

BC_NRTC_RATE_2025 = D("0.0506")
BC_BPA_2025 = D("12932")

# Percent of the grossed-up (taxable) dividend amount
BC_DTC_ELIGIBLE_2025 = D("0.12")
BC_DTC_NON_ELIGIBLE_2025 = D("0.0196")


def bc_tax_on_taxable_income_2025(taxable_income: D) -> D:
    return calculate_progressive_tax(BC_BRACKETS_2025, taxable_income)


def bc_credits_2025(creditable_cpp: D = D("0")) -> D:
    return non_refundable_credit(BC_BPA_2025 + creditable_cpp, BC_NRTC_RATE_2025)


__all__ = [
    "BC_BPA_2025",
    "BC_BRACKETS_2025",
    "BC_DTC_ELIGIBLE_2025",
    "BC_DTC_NON_ELIGIBLE_2025",
    "BC_NRTC_RATE_2025",
    "bc_credits_2025",
    "bc_tax_on_taxable_income_2025",
]
