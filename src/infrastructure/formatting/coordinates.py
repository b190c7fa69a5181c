"""Coordinate validation and precision rounding.

Boundary between raw coordinate sequences (GeoJSON order: lon, lat[, elev])
and the geometry core. Out-of-range coordinates are rejected here so that
domain services only ever see valid Position values.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from typing import Any

from domain.geodesy.errors import InvalidCoordinateError
from domain.geodesy.value_objects import Position
from shared.constants import DEFAULT_COORDINATE_PRECISION, WGS84_MAX_BOUNDS

logger = logging.getLogger(__name__)


def validate_position(position: Sequence[float]) -> bool:
    """Check a (lon, lat[, elev]) sequence against the WGS84 bounds.

    Returns:
        True if both axes are in range

    Raises:
        InvalidCoordinateError: If longitude or latitude is out of range
        ValueError: If fewer than two values are given
    """
    if len(position) < 2:
        raise ValueError(f"Position needs at least 2 values, got {len(position)}")

    min_lon, min_lat, max_lon, max_lat = WGS84_MAX_BOUNDS
    lon, lat = position[0], position[1]

    if not (min_lon <= lon <= max_lon):
        logger.warning("Rejected longitude %s outside [%s, %s]", lon, min_lon, max_lon)
        raise InvalidCoordinateError(position, "longitude", (min_lon, max_lon))
    if not (min_lat <= lat <= max_lat):
        logger.warning("Rejected latitude %s outside [%s, %s]", lat, min_lat, max_lat)
        raise InvalidCoordinateError(position, "latitude", (min_lat, max_lat))

    return True


def position_precision(value: Any, precision: int) -> Any:
    """Round every number in a (nested) coordinate sequence.

    Sequences come back as lists, matching GeoJSON's JSON arrays. None
    entries (e.g. a missing elevation) pass through unchanged.
    """
    if value is None:
        return None
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return round(float(value), precision)
    if isinstance(value, Sequence) and not isinstance(value, str):
        return [position_precision(v, precision) for v in value]
    raise TypeError(f"Cannot round coordinate value of type {type(value).__name__}")


def to_position(values: Sequence[float]) -> Position:
    """Validate a coordinate sequence and wrap it as a Position."""
    validate_position(values)
    return Position.from_sequence(values)


def get_position(
    longitude: float,
    latitude: float,
    elevation: float | None = None,
    precision: int = DEFAULT_COORDINATE_PRECISION,
) -> Position:
    """Build a validated Position with every coordinate rounded to `precision`."""
    rounded = position_precision([longitude, latitude, elevation], precision)
    validate_position(rounded)
    return Position(longitude=rounded[0], latitude=rounded[1], elevation=rounded[2])
