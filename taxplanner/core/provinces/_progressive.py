from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from taxplanner.core.money import ZERO, cents

D = Decimal


@dataclass(frozen=True)
class Bracket:
    up_to: D | None
    rate: D


BracketTable = tuple[Bracket, ...]


def bracket_table(pairs: Iterable[tuple[D | None, D]]) -> BracketTable:
    """Build a validated table from ``(upper bound, marginal rate)`` pairs.

    Bounds must strictly increase and only the last entry may be unbounded.
    """
    table = tuple(Bracket(up_to, rate) for up_to, rate in pairs)
    if not table:
        raise ValueError("A bracket table needs at least one bracket")
    previous = ZERO
    for index, bracket in enumerate(table):
        last = index == len(table) - 1
        if bracket.up_to is None:
            if not last:
                raise ValueError("Only the final bracket may be unbounded")
            continue
        if bracket.up_to <= previous:
            raise ValueError(f"Bracket bounds must increase, got {bracket.up_to} after {previous}")
        previous = bracket.up_to
    if table[-1].up_to is not None:
        raise ValueError("The final bracket must be unbounded")
    return table


def calculate_progressive_tax(brackets: Sequence[Bracket], taxable_income: D) -> D:
    ti = max(ZERO, taxable_income)
    tax = ZERO
    prev = ZERO
    for bracket in brackets:
        cap = ti if bracket.up_to is None else min(ti, bracket.up_to)
        span = cap - prev
        if span > 0:
            tax += span * bracket.rate
        if bracket.up_to is None or ti <= bracket.up_to:
            break
        prev = bracket.up_to
    return cents(tax)


def non_refundable_credit(amount: D, rate: D) -> D:
    return cents(max(ZERO, amount) * rate)


def apply_credits(gross_tax: D, credits: D) -> D:
    """Subtract the combined credits once, floored at zero."""
    return max(ZERO, gross_tax - max(ZERO, credits))


__all__ = [
    "Bracket",
    "BracketTable",
    "apply_credits",
    "bracket_table",
    "calculate_progressive_tax",
    "non_refundable_credit",
]
