"""Bisection search that backs an input out of a target net cash figure.

Net cash as a function of gross salary or dividend cash has no closed form
(stepped brackets, tiered CPP bases), but it is non-decreasing, so a bracketed
bisection converges. The solver never raises: when it cannot bracket the
target or runs out of iterations it returns its best estimate and says so.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from taxplanner.core.money import ZERO

D = Decimal

NetFunction = Callable[[D], D]

logger = logging.getLogger("taxplanner.solver")


@dataclass(frozen=True)
class SolverOptions:
    tolerance: D = D("0.01")
    max_iterations: int = 100
    max_expansions: int = 20
    initial_high: D = D("500000")


DEFAULT_SOLVER_OPTIONS = SolverOptions()


@dataclass(frozen=True)
class SolveResult:
    value: D
    achieved: D
    iterations: int
    bracketed: bool
    converged: bool


def solve_for_target(
    net: NetFunction,
    target: D,
    *,
    low: D | None = None,
    options: SolverOptions = DEFAULT_SOLVER_OPTIONS,
) -> SolveResult:
    """Find ``x`` with ``net(x)`` within tolerance of ``target``.

    ``low`` defaults to ``max(0, target)``, valid whenever ``net(x) <= x``.
    Callers whose net function includes a fixed amount on top of ``x`` must
    pass an explicit lower bound.
    """
    if target <= 0:
        return SolveResult(value=ZERO, achieved=net(ZERO), iterations=0, bracketed=True, converged=True)

    tolerance = options.tolerance
    lo = max(ZERO, target) if low is None else max(ZERO, low)
    hi = max(options.initial_high, target * 2, lo)

    bracketed = net(hi) >= target
    expansions = 0
    while not bracketed and expansions < options.max_expansions:
        hi *= 2
        expansions += 1
        bracketed = net(hi) >= target
    if not bracketed:
        logger.warning("Solver could not bracket target=%s up to high=%s", target, hi)

    last_mid = hi
    for iteration in range(options.max_iterations):
        mid = (lo + hi) / 2
        achieved = net(mid)
        if abs(achieved - target) <= tolerance or abs(mid - last_mid) <= tolerance:
            return SolveResult(
                value=mid,
                achieved=achieved,
                iterations=iteration + 1,
                bracketed=bracketed,
                converged=bracketed,
            )
        if achieved < target:
            lo = mid
        else:
            hi = mid
        last_mid = mid

    logger.warning(
        "Solver stopped after %s iterations; target=%s estimate=%s",
        options.max_iterations,
        target,
        last_mid,
    )
    return SolveResult(
        value=last_mid,
        achieved=net(last_mid),
        iterations=options.max_iterations,
        bracketed=bracketed,
        converged=False,
    )


__all__ = [
    "DEFAULT_SOLVER_OPTIONS",
    "NetFunction",
    "SolveResult",
    "SolverOptions",
    "solve_for_target",
]
