"""Great-circle distance on a spherical earth."""

from __future__ import annotations

import math

from geodisk.common.constants import EARTH_RADIUS_KM
from geodisk.common.geometry import to_degrees, to_radians

__all__ = ["great_circle_distance", "to_degrees", "to_radians"]


def great_circle_distance(
    lat1: float,
    long1: float,
    lat2: float,
    long2: float,
    radius: float = EARTH_RADIUS_KM,
) -> float:
    """Haversine distance between two points given in radians.

    The result is in the unit of ``radius`` (kilometers by default) and never
    exceeds ``pi * radius``.
    """
    lat_mid_sin = math.sin((lat2 - lat1) / 2)
    long_mid_sin = math.sin((long2 - long1) / 2)

    a = (lat_mid_sin * lat_mid_sin) + (math.cos(lat1) * math.cos(lat2)) * (long_mid_sin * long_mid_sin)
    # rounding can push a just past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c
