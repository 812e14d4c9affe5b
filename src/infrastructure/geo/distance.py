"""Great-circle distance helpers."""
from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt

from src.core.entities import Coordinate
from src.core.errors import InvalidCoordinate

EARTH_RADIUS_KM = 6371.0


def is_valid_coordinate(coordinate: Coordinate) -> bool:
    return -90.0 <= coordinate.latitude <= 90.0 and -180.0 <= coordinate.longitude <= 180.0


def ensure_valid_coordinate(coordinate: Coordinate) -> Coordinate:
    if not is_valid_coordinate(coordinate):
        raise InvalidCoordinate(
            f"Coordinate out of range: latitude={coordinate.latitude}, longitude={coordinate.longitude}"
        )
    return coordinate


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance between two coordinates in kilometres."""

    ensure_valid_coordinate(a)
    ensure_valid_coordinate(b)

    d_lat = radians(b.latitude - a.latitude)
    d_lon = radians(b.longitude - a.longitude)
    h = sin(d_lat / 2) ** 2 + cos(radians(a.latitude)) * cos(radians(b.latitude)) * sin(d_lon / 2) ** 2
    # rounding can push h marginally above 1 for antipodal points
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * atan2(sqrt(h), sqrt(1 - h))


__all__ = ["EARTH_RADIUS_KM", "distance_km", "ensure_valid_coordinate", "is_valid_coordinate"]
