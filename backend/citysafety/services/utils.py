import math
from typing import List, Tuple

EARTH_RADIUS_KM = 6371.0


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positive values (2.5 -> 3, 0.125 -> 0.13)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Calculate Haversine distance between two points in kilometers."""
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def interpolate_path(
    start: Tuple[float, float],
    end: Tuple[float, float],
    steps: int,
) -> List[Tuple[float, float]]:
    """
    Straight-line path from start to end.

    Returns start, ``steps - 1`` evenly spaced intermediate points and end,
    i.e. ``steps + 1`` coordinates. Latitude and longitude are interpolated
    independently.
    """
    lat_step = (end[0] - start[0]) / steps
    lng_step = (end[1] - start[1]) / steps

    path = [start]
    for i in range(1, steps):
        path.append((start[0] + lat_step * i, start[1] + lng_step * i))
    path.append(end)
    return path
