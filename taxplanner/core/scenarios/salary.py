from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from taxplanner.core.corporate import compute_corporate_taxes_bc
from taxplanner.core.models import SalaryInput, ScenarioKind, ScenarioResult
from taxplanner.core.money import ZERO, cents, rate
from taxplanner.core.payroll.cpp_2025 import ContributionTreatment, CppTreatment, cpp_treatment
from taxplanner.core.payroll.limits_2025 import rrsp_room_2025
from taxplanner.core.solver import (
    DEFAULT_SOLVER_OPTIONS,
    SolveResult,
    SolverOptions,
    solve_for_target,
)
from taxplanner.core.tax_years.y2025.calc import PersonalTax2025, compute_personal_2025

D = Decimal

logger = logging.getLogger("taxplanner.scenarios")


@dataclass(frozen=True)
class SalaryOutcome:
    gross_salary: D
    net: D
    personal: PersonalTax2025
    cpp: CppTreatment


def net_from_gross(gross_salary: D) -> SalaryOutcome:
    cpp = cpp_treatment(gross_salary, ContributionTreatment.EMPLOYEE)
    personal = compute_personal_2025(
        gross_salary,
        deductions=cpp.personal_deduction,
        creditable_cpp=cpp.creditable,
    )
    net = gross_salary - personal.total_payable - cpp.personal_paid
    return SalaryOutcome(gross_salary=gross_salary, net=net, personal=personal, cpp=cpp)


def solve_gross_for_net(
    personal_cash_needed: D,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> tuple[SalaryOutcome, SolveResult]:
    solved = solve_for_target(lambda gross: net_from_gross(gross).net, personal_cash_needed, options=options)
    return net_from_gross(cents(solved.value)), solved


def calculate_incorporated_salary(
    params: SalaryInput,
    *,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> ScenarioResult:
    outcome, _ = solve_gross_for_net(params.personal_cash_needed, options)
    gross_salary = outcome.gross_salary
    personal_taxes = outcome.personal.total_payable
    personal_cpp = outcome.cpp.personal_paid

    # Employer CPP is a corporate cash outflow and a corporate deduction.
    corporate_cpp = outcome.cpp.corporate_paid
    costs = gross_salary + corporate_cpp + params.other_expenses
    underfunded = costs > params.business_income
    if underfunded:
        logger.info(
            "Salary %s plus employer CPP and expenses exceed business income %s",
            gross_salary,
            params.business_income,
        )
    profit_before_tax = max(ZERO, params.business_income - costs)

    corp = compute_corporate_taxes_bc(profit_before_tax)
    corporate_cash = profit_before_tax - corp.corporate_taxes

    personal_cash = outcome.net
    total_taxes = personal_taxes + corp.corporate_taxes
    total_cpp = personal_cpp + corporate_cpp

    return ScenarioResult(
        scenario=ScenarioKind.INCORPORATED_SALARY,
        gross_salary=gross_salary,
        corporate_taxes=corp.corporate_taxes,
        corporate_cpp=corporate_cpp,
        personal_taxes=personal_taxes,
        total_taxes=total_taxes,
        total_cpp=total_cpp,
        personal_cpp=personal_cpp,
        corporate_cash=corporate_cash,
        personal_cash=personal_cash,
        total_cash=personal_cash + corporate_cash,
        effective_tax_rate=rate(total_taxes + total_cpp, params.business_income),
        rrsp_room=rrsp_room_2025(gross_salary),
        federal_tax=outcome.personal.federal_tax,
        provincial_tax=outcome.personal.provincial_tax,
        taxable_income=outcome.personal.taxable_income,
        capped=underfunded,
    )


__all__ = [
    "SalaryOutcome",
    "calculate_incorporated_salary",
    "net_from_gross",
    "solve_gross_for_net",
]
