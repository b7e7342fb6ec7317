"""Distance-based delivery fee curve"""

from typing import Optional

from .rounding import round_to_currency


def raw_fee(distance_km: float, base_fee: float, per_km_rate: float) -> float:
    return base_fee + distance_km * per_km_rate


def quote_fee(
    distance_km: float,
    base_fee: float,
    per_km_rate: float,
    min_fee: Optional[float] = None,
    max_fee: Optional[float] = None,
) -> float:
    """
    Delivery fee for a distance: base + distance * rate, clamped and rounded.

    The minimum is applied before the maximum, so a maximum configured
    below the minimum wins. Negative inputs are passed through unchecked.
    """
    fee = raw_fee(distance_km, base_fee, per_km_rate)

    if min_fee is not None:
        fee = max(fee, min_fee)
    if max_fee is not None:
        fee = min(fee, max_fee)

    return round_to_currency(fee)
