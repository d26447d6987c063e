from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from taxplanner.core.money import ZERO, cents
from taxplanner.core.provinces.bc import BC_DTC_ELIGIBLE_2025, BC_DTC_NON_ELIGIBLE_2025
from taxplanner.core.tax_years.y2025.federal import DTC_ELIGIBLE_2025, DTC_NON_ELIGIBLE_2025

D = Decimal


class DividendClass(str, Enum):
    ELIGIBLE = "eligible"
    NON_ELIGIBLE = "non_eligible"


@dataclass(frozen=True)
class DividendRates:
    gross_up: D
    federal_dtc: D
    provincial_dtc: D


DIVIDEND_RATES_2025: dict[DividendClass, DividendRates] = {
    DividendClass.ELIGIBLE: DividendRates(
        gross_up=D("1.38"),
        federal_dtc=DTC_ELIGIBLE_2025,
        provincial_dtc=BC_DTC_ELIGIBLE_2025,
    ),
    DividendClass.NON_ELIGIBLE: DividendRates(
        gross_up=D("1.15"),
        federal_dtc=DTC_NON_ELIGIBLE_2025,
        provincial_dtc=BC_DTC_NON_ELIGIBLE_2025,
    ),
}


def grossed_up(cash: D, kind: DividendClass) -> D:
    """Taxable amount added to income for a cash dividend."""
    return max(ZERO, cash) * DIVIDEND_RATES_2025[kind].gross_up


def dividend_tax_credits(taxable_amount: D, kind: DividendClass) -> tuple[D, D]:
    rates = DIVIDEND_RATES_2025[kind]
    return cents(taxable_amount * rates.federal_dtc), cents(taxable_amount * rates.provincial_dtc)


__all__ = [
    "DIVIDEND_RATES_2025",
    "DividendClass",
    "DividendRates",
    "dividend_tax_credits",
    "grossed_up",
]
