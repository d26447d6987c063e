from __future__ import annotations

from taxplanner.core.models import ScenarioKind, ScenarioResult, UnincorporatedInput
from taxplanner.core.money import rate
from taxplanner.core.payroll.cpp_2025 import ContributionTreatment, cpp_treatment
from taxplanner.core.payroll.limits_2025 import rrsp_room_2025
from taxplanner.core.tax_years.y2025.calc import compute_personal_2025


def calculate_unincorporated(params: UnincorporatedInput) -> ScenarioResult:
    # All business income is the individual's own earnings; no corporation.
    gross = params.business_income

    cpp = cpp_treatment(gross, ContributionTreatment.SELF_EMPLOYED)
    personal = compute_personal_2025(
        gross,
        deductions=cpp.personal_deduction,
        creditable_cpp=cpp.creditable,
    )

    personal_taxes = personal.total_payable
    personal_cpp = cpp.personal_paid
    personal_cash = gross - personal_taxes - personal_cpp

    return ScenarioResult(
        scenario=ScenarioKind.UNINCORPORATED,
        gross_salary=gross,
        personal_taxes=personal_taxes,
        total_taxes=personal_taxes,
        total_cpp=personal_cpp,
        personal_cpp=personal_cpp,
        personal_cash=personal_cash,
        total_cash=personal_cash,
        effective_tax_rate=rate(personal_taxes + personal_cpp, gross),
        rrsp_room=rrsp_room_2025(gross),
        federal_tax=personal.federal_tax,
        provincial_tax=personal.provincial_tax,
        taxable_income=personal.taxable_income,
    )


__all__ = ["calculate_unincorporated"]
