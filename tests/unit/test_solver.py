from decimal import Decimal as D

import pytest

from taxplanner.core.scenarios.salary import net_from_gross, solve_gross_for_net
from taxplanner.core.solver import SolverOptions, solve_for_target


def test_linear_net_function_converges():
    result = solve_for_target(lambda x: x / 2, D("100"))
    assert result.converged
    assert result.bracketed
    assert abs(result.achieved - D("100")) <= D("0.01")
    assert abs(result.value - D("200")) <= D("0.03")


def test_non_positive_target_returns_zero():
    result = solve_for_target(lambda x: x, D("0"))
    assert result.value == D("0")
    assert result.iterations == 0


def test_upper_bound_is_expanded_until_bracketed():
    result = solve_for_target(lambda x: x / 100, D("20000"))
    assert result.bracketed
    assert abs(result.achieved - D("20000")) <= D("0.01")


def test_unreachable_target_returns_estimate_instead_of_raising():
    result = solve_for_target(lambda x: min(x, D("1000")), D("5000"))
    assert not result.bracketed
    assert not result.converged
    assert result.achieved == D("1000")


def test_iteration_cap_reports_non_convergence():
    result = solve_for_target(lambda x: x / 2, D("100"), options=SolverOptions(max_iterations=1))
    assert result.iterations == 1
    assert not result.converged


def test_explicit_lower_bound_for_offset_functions():
    # net(x) = 5000 + x / 2 exceeds x for small x, so max(0, target) is not a lower bound.
    result = solve_for_target(lambda x: D("5000") + x / 2, D("6000"), low=D("0"))
    assert abs(result.value - D("2000")) <= D("0.03")


@pytest.mark.parametrize("target", ["25000", "50000", "100000", "250000"])
def test_salary_solver_round_trips_target(target):
    outcome, solved = solve_gross_for_net(D(target))
    assert solved.converged
    assert abs(outcome.net - D(target)) <= D("0.10")
    assert outcome.gross_salary > D(target)


def test_salary_net_is_non_decreasing():
    previous = D("-1")
    for gross in range(0, 300_001, 5_000):
        net = net_from_gross(D(gross)).net
        assert net >= previous
        assert net <= D(gross)
        previous = net
