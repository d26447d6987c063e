from __future__ import annotations

from decimal import Decimal

from taxplanner.core.provinces._progressive import (
    bracket_table,
    calculate_progressive_tax,
    non_refundable_credit,
)

D = Decimal

BRACKETS_2025 = bracket_table(
    [
        (D("57375"),  D("0.145")),
        (D("114750"), D("0.205")),
        (D("177882"), D("0.26")),
        (D("253414"), D("0.29")),
        (None,        D("0.33")),
    ]
)

# Lowest rate is blended for 2025 (15% to June, 14% from July); credits follow it.
NRTC_RATE_2025 = D("0.145")
BPA_2025 = D("16129")

# CRA line 40425: percent of the grossed-up (taxable) dividend amount
DTC_ELIGIBLE_2025 = D("0.150198")
DTC_NON_ELIGIBLE_2025 = D("0.090301")


def federal_tax_2025(taxable_income: D) -> D:
    return calculate_progressive_tax(BRACKETS_2025, taxable_income)


def federal_nrtcs_2025(creditable_cpp: D = D("0")) -> D:
    return non_refundable_credit(BPA_2025 + creditable_cpp, NRTC_RATE_2025)


__all__ = [
    "BPA_2025",
    "BRACKETS_2025",
    "DTC_ELIGIBLE_2025",
    "DTC_NON_ELIGIBLE_2025",
    "NRTC_RATE_2025",
    "federal_nrtcs_2025",
    "federal_tax_2025",
]
