"""Root pytest configuration for all tests.

Import roots (`domain`, `infrastructure`, `shared`) are put on sys.path by
the `pythonpath` setting in pyproject.toml; no path manipulation here.
"""

import pytest

from domain.geodesy.value_objects import Position


@pytest.fixture
def origin() -> Position:
    """(0°E, 0°N): where the equator meets the prime meridian."""
    return Position(longitude=0.0, latitude=0.0)


@pytest.fixture
def compass_points() -> dict[str, Position]:
    """Targets one step away from the origin in each compass direction."""
    return {
        "north": Position(longitude=0.0, latitude=1.0),
        "north_east": Position(longitude=0.1, latitude=0.1),
        "east": Position(longitude=1.0, latitude=0.0),
        "south_east": Position(longitude=1.0, latitude=-1.0),
        "south": Position(longitude=0.0, latitude=-1.0),
        "south_west": Position(longitude=-1.0, latitude=-1.0),
        "west": Position(longitude=-1.0, latitude=0.0),
        "north_west": Position(longitude=-1.0, latitude=1.0),
    }
