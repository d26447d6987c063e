from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

D = Decimal

ZERO = D("0")
_CENT = D("0.01")
_RATE = D("0.000001")


def to_decimal(value: float | int | str | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def non_negative(value: float | int | str | Decimal) -> Decimal:
    return max(ZERO, to_decimal(value))


def cents(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def rate(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator <= 0:
        return ZERO.quantize(_RATE)
    return (numerator / denominator).quantize(_RATE, rounding=ROUND_HALF_UP)


__all__ = ["D", "ZERO", "cents", "non_negative", "rate", "to_decimal"]
