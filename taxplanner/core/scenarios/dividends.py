"""Incorporated owner paid through dividends only.

Corporate profit splits into a small-business pool and a general-rate pool.
What is left of each pool after corporate tax can fund non-eligible and
eligible dividends respectively. Eligible dividends are drawn first (they
carry the richer credit) and non-eligible dividends top up the rest. When
both pools run dry before the target is reached the result is flagged as
capped instead of pretending the target was met.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from taxplanner.core.corporate import DividendCapacity, dividend_capacity_bc
from taxplanner.core.models import (
    DividendInput,
    DividendPreference,
    ScenarioKind,
    ScenarioResult,
)
from taxplanner.core.money import ZERO, cents, rate
from taxplanner.core.solver import DEFAULT_SOLVER_OPTIONS, NetFunction, SolverOptions, solve_for_target
from taxplanner.core.tax_years.y2025.calc import PersonalTax2025, compute_personal_2025
from taxplanner.core.tax_years.y2025.dividends import DividendClass

D = Decimal

logger = logging.getLogger("taxplanner.scenarios")

_DRAW_ORDER: dict[DividendPreference, tuple[DividendClass, ...]] = {
    DividendPreference.MIXED: (DividendClass.ELIGIBLE, DividendClass.NON_ELIGIBLE),
    DividendPreference.ELIGIBLE_ONLY: (DividendClass.ELIGIBLE,),
    DividendPreference.NON_ELIGIBLE_ONLY: (DividendClass.NON_ELIGIBLE,),
}


@dataclass(frozen=True)
class DividendMix:
    eligible: D
    non_eligible: D
    required: D
    capped: bool

    @property
    def total(self) -> D:
        return self.eligible + self.non_eligible


def personal_dividend_tax(eligible: D, non_eligible: D) -> PersonalTax2025:
    return compute_personal_2025(eligible_dividends=eligible, non_eligible_dividends=non_eligible)


def net_from_dividends(eligible: D, non_eligible: D) -> D:
    return eligible + non_eligible - personal_dividend_tax(eligible, non_eligible).total_payable


def _net_for(kind: DividendClass, paid: dict[DividendClass, D]) -> NetFunction:
    def net(cash: D) -> D:
        amounts = {**paid, kind: cash}
        return net_from_dividends(amounts[DividendClass.ELIGIBLE], amounts[DividendClass.NON_ELIGIBLE])

    return net


def solve_dividend_mix(
    target: D,
    capacity: DividendCapacity,
    preference: DividendPreference = DividendPreference.MIXED,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> DividendMix:
    paid = {DividendClass.ELIGIBLE: ZERO, DividendClass.NON_ELIGIBLE: ZERO}
    if target <= 0:
        return DividendMix(eligible=ZERO, non_eligible=ZERO, required=ZERO, capped=False)

    pools = {
        DividendClass.ELIGIBLE: capacity.eligible,
        DividendClass.NON_ELIGIBLE: capacity.non_eligible,
    }
    required = ZERO
    for kind in _DRAW_ORDER[preference]:
        already_paid = sum(paid.values(), ZERO)
        # Earlier draws already contribute net cash, so max(0, target) is no lower bound.
        low = ZERO if already_paid > 0 else None
        solved = solve_for_target(_net_for(kind, paid), target, low=low, options=options)
        needed = cents(solved.value)
        required = already_paid + needed
        if needed <= pools[kind]:
            paid[kind] = needed
            return DividendMix(
                eligible=paid[DividendClass.ELIGIBLE],
                non_eligible=paid[DividendClass.NON_ELIGIBLE],
                required=required,
                capped=False,
            )
        paid[kind] = pools[kind]
        # A full pool within tolerance of the target meets it.
        if _net_for(kind, paid)(pools[kind]) >= target - options.tolerance:
            return DividendMix(
                eligible=paid[DividendClass.ELIGIBLE],
                non_eligible=paid[DividendClass.NON_ELIGIBLE],
                required=sum(paid.values(), ZERO),
                capped=False,
            )

    return DividendMix(
        eligible=paid[DividendClass.ELIGIBLE],
        non_eligible=paid[DividendClass.NON_ELIGIBLE],
        required=required,
        capped=True,
    )


def calculate_incorporated_dividends(
    params: DividendInput,
    *,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> ScenarioResult:
    # No salary, so no CPP on either side.
    profit_before_tax = max(ZERO, params.business_income - params.other_expenses)
    capacity = dividend_capacity_bc(profit_before_tax)
    corporate_taxes = capacity.corporate.corporate_taxes

    target = params.personal_cash_needed
    mix = solve_dividend_mix(target, capacity, params.dividend_preference, options)
    if mix.capped:
        logger.info(
            "Dividend target %s capped by after-tax capacity %s (required %s)",
            target,
            capacity.total,
            mix.required,
        )

    personal = personal_dividend_tax(mix.eligible, mix.non_eligible)
    personal_taxes = personal.total_payable
    personal_cash = mix.total - personal_taxes
    corporate_cash = capacity.total - mix.total
    total_taxes = personal_taxes + corporate_taxes
    total_cpp = ZERO

    return ScenarioResult(
        scenario=ScenarioKind.INCORPORATED_DIVIDENDS,
        eligible_dividends=mix.eligible,
        non_eligible_dividends=mix.non_eligible,
        corporate_taxes=corporate_taxes,
        personal_taxes=personal_taxes,
        total_taxes=total_taxes,
        total_cpp=total_cpp,
        corporate_cash=corporate_cash,
        personal_cash=personal_cash,
        total_cash=personal_cash + corporate_cash,
        effective_tax_rate=rate(total_taxes + total_cpp, params.business_income),
        federal_tax=personal.federal_tax,
        provincial_tax=personal.provincial_tax,
        taxable_income=personal.taxable_income,
        capped=mix.capped,
        required_dividends=mix.required,
        target_shortfall=max(ZERO, target - personal_cash) if mix.capped else ZERO,
    )


__all__ = [
    "DividendMix",
    "calculate_incorporated_dividends",
    "net_from_dividends",
    "personal_dividend_tax",
    "solve_dividend_mix",
]
