from __future__ import annotations

from typing import Callable, Mapping

from taxplanner.core.models import ScenarioKind, ScenarioRequest, ScenarioResult
from taxplanner.core.scenarios.compare import compare_scenarios
from taxplanner.core.scenarios.dividends import calculate_incorporated_dividends
from taxplanner.core.scenarios.salary import calculate_incorporated_salary
from taxplanner.core.scenarios.unincorporated import calculate_unincorporated
from taxplanner.core.solver import DEFAULT_SOLVER_OPTIONS, SolverOptions

ScenarioHandler = Callable[[ScenarioRequest, SolverOptions], ScenarioResult]

_HANDLERS: Mapping[ScenarioKind, ScenarioHandler] = {
    ScenarioKind.UNINCORPORATED: lambda req, _opts: calculate_unincorporated(req.unincorporated()),
    ScenarioKind.INCORPORATED_SALARY: lambda req, opts: calculate_incorporated_salary(
        req.salary(), options=opts
    ),
    ScenarioKind.INCORPORATED_DIVIDENDS: lambda req, opts: calculate_incorporated_dividends(
        req.dividends(), options=opts
    ),
}


def calculate_scenario(
    kind: ScenarioKind | str,
    request: ScenarioRequest,
    *,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> ScenarioResult:
    try:
        handler = _HANDLERS[ScenarioKind(kind)]
    except ValueError as exc:
        raise KeyError(f"Unknown scenario '{kind}'") from exc
    return handler(request, options)


__all__ = [
    "calculate_incorporated_dividends",
    "calculate_incorporated_salary",
    "calculate_scenario",
    "calculate_unincorporated",
    "compare_scenarios",
]
