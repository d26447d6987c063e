from decimal import Decimal

from taxplanner.core.money import ZERO, cents

D = Decimal

RRSP_RATE = D("0.18")
RRSP_DOLLAR_LIMIT_2025 = D("32490")


def rrsp_room_2025(earned_income: D) -> D:
    return cents(min(RRSP_DOLLAR_LIMIT_2025, max(ZERO, earned_income) * RRSP_RATE))
