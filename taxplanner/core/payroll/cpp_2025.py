"""CPP tier 1 / tier 2 contributions and their tax treatment.

Each side (employee, employer) contributes on two bands:

* tier 1 between the basic exemption and the YMPE, at the base rate plus the
  enhanced (first additional) rate;
* tier 2 between the YMPE and the YAMPE, at the CPP2 rate.

Only the employee base amount earns a non-refundable credit. Every other
piece is deducted from income, personally or corporately depending on who
pays it.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from taxplanner.core.money import ZERO, cents, non_negative

D = Decimal


class ContributionTreatment(str, Enum):
    SELF_EMPLOYED = "self_employed"
    EMPLOYEE = "employee"
    DIVIDEND_ONLY = "dividend_only"


@dataclass(frozen=True)
class ContributionTierConfig:
    basic_exemption: D
    tier1_ceiling: D
    tier2_ceiling: D
    employee_base_rate: D
    employee_enhanced_rate: D
    employee_tier2_rate: D
    employer_base_rate: D
    employer_enhanced_rate: D
    employer_tier2_rate: D

    def __post_init__(self) -> None:
        if self.tier1_ceiling <= self.basic_exemption:
            raise ValueError("Tier 1 ceiling must exceed the basic exemption")
        if self.tier2_ceiling < self.tier1_ceiling:
            raise ValueError("Tier 2 ceiling cannot be below the tier 1 ceiling")


CPP_2025 = ContributionTierConfig(
    basic_exemption=D("3500"),
    tier1_ceiling=D("71300"),   # YMPE
    tier2_ceiling=D("81200"),   # YAMPE
    employee_base_rate=D("0.0495"),
    employee_enhanced_rate=D("0.0100"),
    employee_tier2_rate=D("0.0400"),
    employer_base_rate=D("0.0495"),
    employer_enhanced_rate=D("0.0100"),
    employer_tier2_rate=D("0.0400"),
)


@dataclass(frozen=True)
class ContributionBreakdown:
    tier1_base: D
    tier2_base: D
    employee_base: D
    employee_enhanced: D
    employee_tier2: D
    employer_base: D
    employer_enhanced: D
    employer_tier2: D

    @property
    def employee_total(self) -> D:
        return self.employee_base + self.employee_enhanced + self.employee_tier2

    @property
    def employer_total(self) -> D:
        return self.employer_base + self.employer_enhanced + self.employer_tier2

    @property
    def total(self) -> D:
        return self.employee_total + self.employer_total


NO_CONTRIBUTIONS = ContributionBreakdown(ZERO, ZERO, ZERO, ZERO, ZERO, ZERO, ZERO, ZERO)


@dataclass(frozen=True)
class CppTreatment:
    treatment: ContributionTreatment
    parts: ContributionBreakdown
    creditable: D
    personal_deduction: D
    corporate_deduction: D
    personal_paid: D
    corporate_paid: D


def split_contribution_bases(
    gross: D, config: ContributionTierConfig = CPP_2025
) -> tuple[D, D]:
    earnings = non_negative(gross)
    tier1 = max(ZERO, min(earnings, config.tier1_ceiling) - config.basic_exemption)
    tier2 = max(ZERO, min(earnings, config.tier2_ceiling) - config.tier1_ceiling)
    return tier1, tier2


def compute_contributions(
    gross: D, config: ContributionTierConfig = CPP_2025
) -> ContributionBreakdown:
    tier1, tier2 = split_contribution_bases(gross, config)
    return ContributionBreakdown(
        tier1_base=tier1,
        tier2_base=tier2,
        employee_base=cents(tier1 * config.employee_base_rate),
        employee_enhanced=cents(tier1 * config.employee_enhanced_rate),
        employee_tier2=cents(tier2 * config.employee_tier2_rate),
        employer_base=cents(tier1 * config.employer_base_rate),
        employer_enhanced=cents(tier1 * config.employer_enhanced_rate),
        employer_tier2=cents(tier2 * config.employer_tier2_rate),
    )


def cpp_treatment(
    gross: D,
    treatment: ContributionTreatment,
    config: ContributionTierConfig = CPP_2025,
) -> CppTreatment:
    if treatment is ContributionTreatment.DIVIDEND_ONLY:
        return CppTreatment(
            treatment=treatment,
            parts=NO_CONTRIBUTIONS,
            creditable=ZERO,
            personal_deduction=ZERO,
            corporate_deduction=ZERO,
            personal_paid=ZERO,
            corporate_paid=ZERO,
        )

    p = compute_contributions(gross, config)
    if treatment is ContributionTreatment.SELF_EMPLOYED:
        # The individual pays both sides; all but the employee base is deductible.
        return CppTreatment(
            treatment=treatment,
            parts=p,
            creditable=p.employee_base,
            personal_deduction=(
                p.employer_base
                + p.employee_enhanced
                + p.employer_enhanced
                + p.employee_tier2
                + p.employer_tier2
            ),
            corporate_deduction=ZERO,
            personal_paid=p.total,
            corporate_paid=ZERO,
        )

    return CppTreatment(
        treatment=treatment,
        parts=p,
        creditable=p.employee_base,
        personal_deduction=p.employee_enhanced + p.employee_tier2,
        corporate_deduction=p.employer_total,
        personal_paid=p.employee_total,
        corporate_paid=p.employer_total,
    )


__all__ = [
    "CPP_2025",
    "ContributionBreakdown",
    "ContributionTierConfig",
    "ContributionTreatment",
    "CppTreatment",
    "NO_CONTRIBUTIONS",
    "compute_contributions",
    "cpp_treatment",
    "split_contribution_bases",
]
