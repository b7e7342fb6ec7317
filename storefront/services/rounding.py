"""Decimal rounding helpers shared by the pricing core"""

from decimal import Decimal, ROUND_HALF_UP, localcontext


def round_half_up(value: float, places: int) -> float:
    """Round to `places` decimals, halves away from zero, on the shortest decimal repr"""
    amount = Decimal(str(value))
    if not amount.is_finite():
        return value
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # enough digits for the integer part plus the kept decimals
        ctx.prec = max(ctx.prec, amount.adjusted() + places + 2)
        return float(amount.quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_currency(value: float) -> float:
    return round_half_up(value, 2)
