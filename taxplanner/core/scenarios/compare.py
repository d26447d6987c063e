from __future__ import annotations

from taxplanner.core.models import ComparisonResult, ScenarioRequest
from taxplanner.core.scenarios.dividends import calculate_incorporated_dividends
from taxplanner.core.scenarios.salary import calculate_incorporated_salary
from taxplanner.core.scenarios.unincorporated import calculate_unincorporated
from taxplanner.core.solver import DEFAULT_SOLVER_OPTIONS, SolverOptions


def compare_scenarios(
    request: ScenarioRequest,
    *,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> ComparisonResult:
    uninc = calculate_unincorporated(request.unincorporated())
    salary = calculate_incorporated_salary(request.salary(), options=options)
    dividends = calculate_incorporated_dividends(request.dividends(), options=options)

    results = (uninc, salary, dividends)
    return ComparisonResult(
        unincorporated=uninc,
        incorporated_salary=salary,
        incorporated_dividends=dividends,
        lowest_taxes_and_cpp=min(results, key=lambda r: r.taxes_and_cpp).scenario,
        highest_total_cash=max(results, key=lambda r: r.total_cash).scenario,
    )


__all__ = ["compare_scenarios"]
