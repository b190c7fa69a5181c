"""Pytest configuration for geodesy domain tests.

Sample positions used across the vector, great-circle and intersection
tests. Domain tests build value objects directly; no formatting layer.
"""

import pytest

from domain.geodesy.value_objects import Position

SAMPLE_POSITIONS = [
    (0.0, 0.0),
    (-180.0, 0.0),
    (179.999, 0.5),
    (-45.5, -20.25),
    (126.978, 37.5665),
    (-0.1276, 51.5072),
    (151.2093, -33.8688),
    (12.0, 89.5),
    (-100.0, -89.5),
]


@pytest.fixture(params=SAMPLE_POSITIONS, ids=lambda p: f"{p[0]},{p[1]}")
def sample_position(request: pytest.FixtureRequest) -> Position:
    lon, lat = request.param
    return Position(longitude=lon, latitude=lat)
