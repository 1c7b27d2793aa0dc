from __future__ import annotations

import math
from typing import Optional

from .models import EventRecord, GeoPoint

EARTH_RADIUS_MI = 3959.0


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # rounding can push a just above 1 for antipodal points
    return 2 * EARTH_RADIUS_MI * math.asin(math.sqrt(min(1.0, a)))


def distance_miles(origin: Optional[GeoPoint], event: EventRecord) -> Optional[float]:
    if origin is None or not event.has_location:
        return None
    return haversine_miles(origin.lat, origin.lon, event.lat, event.lon)


def format_distance(miles: Optional[float]) -> str:
    if miles is None:
        return ""
    if miles < 0.1:
        return "< 0.1 mi"
    if miles < 1:
        return f"{miles:.1f} mi"
    # half up, not banker's rounding
    return f"{int(miles + 0.5)} mi"
