"""Great-circle distance on a spherical Earth."""

import math
from typing import NamedTuple

EARTH_RADIUS_M = 6378100.0


class GeoPoint(NamedTuple):
    lat: float
    lon: float


def hsin(theta: float) -> float:
    """haversin(theta) = sin^2(theta / 2)"""
    return math.sin(theta / 2) ** 2


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in METERS between two points given in degrees.

    Haversine formula, accurate for small distances; no ellipsoidal
    correction. Inputs are not validated: NaN or infinite coordinates
    give NaN.

        >>> round(distance(13.7665217, 100.6068431, 13.7199345, 100.5197898), 3)
        10747.271
    """
    if not all(map(math.isfinite, (lat1, lon1, lat2, lon2))):
        return math.nan

    la1 = lat1 * math.pi / 180
    lo1 = lon1 * math.pi / 180
    la2 = lat2 * math.pi / 180
    lo2 = lon2 * math.pi / 180

    h = hsin(la2 - la1) + math.cos(la1) * math.cos(la2) * hsin(lo2 - lo1)
    # rounding can push h just above 1 for antipodal points
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(min(h, 1.0)))


def distance_between(a: GeoPoint, b: GeoPoint) -> float:
    return distance(a.lat, a.lon, b.lat, b.lon)
