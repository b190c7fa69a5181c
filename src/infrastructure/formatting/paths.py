"""Sequence-based entry points to the geometry core.

Callers that hold raw (lon, lat) sequences and bare numbers use these
functions; each validates its inputs, builds explicit domain values and
delegates. The kind of a path (bearing or endpoint) is decided here, once,
from the argument type; the core never inspects value shapes.
"""

from __future__ import annotations

import numbers
from collections.abc import Sequence

from domain.geodesy.bearings import Precision, bearing_to, rhumb_bearing_to
from domain.geodesy.destination import destination_position as _destination
from domain.geodesy.intersection import intersection_position as _intersection
from domain.geodesy.value_objects import Path
from infrastructure.formatting.coordinates import to_position
from shared.constants import DEFAULT_BEARING_PRECISION

BearingOrEnd = float | Sequence[float]


def path_from_arguments(start: Sequence[float], bearing_or_end: BearingOrEnd) -> Path:
    """Build a Path: a number is an initial bearing, a sequence an endpoint."""
    origin = to_position(start)
    if isinstance(bearing_or_end, numbers.Real) and not isinstance(bearing_or_end, bool):
        return Path.by_bearing(origin, float(bearing_or_end))
    if isinstance(bearing_or_end, Sequence) and not isinstance(bearing_or_end, str):
        return Path.by_endpoint(origin, to_position(bearing_or_end))
    raise TypeError(
        "Path needs a bearing (number) or an endpoint (sequence), "
        f"got {type(bearing_or_end).__name__}"
    )


def intersection_position(
    path1_start: Sequence[float],
    path1_bearing_or_end: BearingOrEnd,
    path2_start: Sequence[float],
    path2_bearing_or_end: BearingOrEnd,
) -> tuple[float, float]:
    """Intersection of two paths given as raw sequences, as (lon, lat)."""
    point = _intersection(
        path_from_arguments(path1_start, path1_bearing_or_end),
        path_from_arguments(path2_start, path2_bearing_or_end),
    )
    return (point.longitude, point.latitude)


def destination_position(
    point: Sequence[float], bearing: float, distance_m: float
) -> tuple[float, float]:
    """Destination from a raw (lon, lat) sequence, as (lon, lat)."""
    result = _destination(to_position(point), bearing, distance_m)
    return (result.longitude, result.latitude)


def bearing(
    start: Sequence[float],
    end: Sequence[float],
    precision: Precision = DEFAULT_BEARING_PRECISION,
) -> float:
    return bearing_to(to_position(start), to_position(end), precision)


def rhumb_bearing(
    start: Sequence[float],
    end: Sequence[float],
    precision: Precision = DEFAULT_BEARING_PRECISION,
) -> float:
    return rhumb_bearing_to(to_position(start), to_position(end), precision)
