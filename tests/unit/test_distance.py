"""Unit tests for the haversine distance helpers."""
from __future__ import annotations

import pytest

from src.core.entities import Coordinate
from src.core.errors import InvalidCoordinate
from src.infrastructure.geo.distance import distance_km, is_valid_coordinate

DELHI = Coordinate(latitude=28.6139, longitude=77.2090)
MUMBAI = Coordinate(latitude=19.0760, longitude=72.8777)


def test_distance_to_itself_is_zero() -> None:
    assert distance_km(DELHI, DELHI) == 0.0


def test_distance_is_symmetric_and_positive() -> None:
    forward = distance_km(DELHI, MUMBAI)

    assert forward == pytest.approx(distance_km(MUMBAI, DELHI))
    assert 1100 < forward < 1200


def test_one_degree_of_latitude() -> None:
    origin = Coordinate(latitude=0.0, longitude=0.0)
    north = Coordinate(latitude=1.0, longitude=0.0)

    assert distance_km(origin, north) == pytest.approx(111.195, rel=1e-4)


def test_distance_grows_with_separation() -> None:
    origin = Coordinate(latitude=0.0, longitude=0.0)
    distances = [distance_km(origin, Coordinate(latitude=0.0, longitude=lon)) for lon in (1, 10, 90, 179)]

    assert distances == sorted(distances)


def test_antipodal_points_are_half_the_circumference() -> None:
    a = Coordinate(latitude=0.0, longitude=0.0)
    b = Coordinate(latitude=0.0, longitude=180.0)

    assert distance_km(a, b) == pytest.approx(6371.0 * 3.141592653589793)


@pytest.mark.parametrize(
    "coordinate",
    [
        Coordinate(latitude=90.5, longitude=0.0),
        Coordinate(latitude=-91.0, longitude=0.0),
        Coordinate(latitude=0.0, longitude=180.1),
        Coordinate(latitude=0.0, longitude=-200.0),
    ],
)
def test_out_of_range_coordinates_are_rejected(coordinate: Coordinate) -> None:
    assert not is_valid_coordinate(coordinate)
    with pytest.raises(InvalidCoordinate):
        distance_km(DELHI, coordinate)
    with pytest.raises(InvalidCoordinate):
        distance_km(coordinate, DELHI)


def test_boundary_values_are_valid() -> None:
    assert is_valid_coordinate(Coordinate(latitude=90.0, longitude=-180.0))
    assert is_valid_coordinate(Coordinate(latitude=-90.0, longitude=180.0))


def test_geojson_pairs_are_longitude_first() -> None:
    coordinate = Coordinate.from_geojson([77.2090, 28.6139])

    assert coordinate == DELHI
    assert coordinate.to_geojson() == [77.2090, 28.6139]
