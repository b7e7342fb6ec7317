"""Great-circle distance between coordinates"""

import math

from .rounding import round_half_up

EARTH_RADIUS_KM = 6371.0
DISTANCE_PRECISION = 3


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance in kilometers, rounded to the meter.

    Ranges are not validated; identical points return exactly 0.
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    # float error can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return round_half_up(EARTH_RADIUS_KM * c, DISTANCE_PRECISION)
