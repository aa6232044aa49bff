"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..models.domain import Coordinate

EARTH_RADIUS_KM = 6371.0
MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


def haversine_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    *,
    radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push near-antipodal pairs just past 1.0.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius_km * c


def coordinate_distance_km(a: Coordinate, b: Coordinate, *, radius_km: float = EARTH_RADIUS_KM) -> float:
    """Great-circle distance between two coordinates, symmetric in its arguments."""

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude, radius_km=radius_km)


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Return True if both values are finite and inside the WGS84 degree ranges."""

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -MAX_LATITUDE <= latitude <= MAX_LATITUDE and -MAX_LONGITUDE <= longitude <= MAX_LONGITUDE
