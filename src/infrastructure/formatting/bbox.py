"""Bounding-box builders.

A bbox is a 4-tuple (min lon, min lat, max lon, max lat) in degrees, the
GeoJSON "bbox" member order. Functions return new tuples and never mutate
their inputs.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator, Sequence
from typing import Any

from domain.geodesy.destination import geodesic_distance
from domain.geodesy.value_objects import Position
from infrastructure.formatting.coordinates import position_precision

BBox = tuple[float, float, float, float]

# Positions are snapped to this many decimals before entering a bbox
BBOX_PRECISION = 4

DEFAULT_PIXELS = 900


def iter_positions(coordinates: Any) -> Iterator[Sequence[float]]:
    """Yield every position in a (nested) GeoJSON coordinates array.

    Handles a single position, a LineString array and Polygon rings alike.
    """
    if (
        isinstance(coordinates, Sequence)
        and coordinates
        and isinstance(coordinates[0], numbers.Real)
    ):
        yield coordinates
        return
    for item in coordinates:
        yield from iter_positions(item)


def extend_bbox_with_position(bbox: Sequence[float], position: Sequence[float]) -> BBox:
    """Grow `bbox` so it contains `position`."""
    lon, lat = position_precision(list(position[:2]), BBOX_PRECISION)
    return (
        min(bbox[0], lon),
        min(bbox[1], lat),
        max(bbox[2], lon),
        max(bbox[3], lat),
    )


def get_bbox_from_vertices(vertices: Any) -> BBox:
    """Smallest bbox containing all positions in `vertices`.

    Raises:
        ValueError: If `vertices` holds no positions
    """
    # Start inverted so the first vertex sets every edge
    bbox: BBox = (180.0, 90.0, -180.0, -90.0)
    seen = False
    for position in iter_positions(vertices):
        bbox = extend_bbox_with_position(bbox, position)
        seen = True
    if not seen:
        raise ValueError("Cannot build a bbox from zero vertices")
    return bbox


def get_bbox_center(bbox: Sequence[float]) -> dict[str, Any]:
    """GeoJSON Point at the arithmetic centre of `bbox`."""
    lon = bbox[0] + (bbox[2] - bbox[0]) / 2
    lat = bbox[1] + (bbox[3] - bbox[1]) / 2
    return {"type": "Point", "coordinates": [lon, lat]}


def bbox_to_polygon(bbox: Sequence[float]) -> dict[str, Any]:
    """Closed GeoJSON Polygon tracing `bbox` (SW, NW, NE, SE, SW)."""
    min_x, min_y, max_x, max_y = bbox
    ring = [
        [min_x, min_y],
        [min_x, max_y],
        [max_x, max_y],
        [max_x, min_y],
        [min_x, min_y],
    ]
    return {
        "type": "Polygon",
        "bbox": list(bbox),
        "coordinates": position_precision([ring], BBOX_PRECISION),
    }


def bbox_to_resolution(bbox: Sequence[float], pixels: int = DEFAULT_PIXELS) -> int:
    """Ground meters per pixel across the bbox diagonal.

    Args:
        bbox: (min lon, min lat, max lon, max lat)
        pixels: Number of pixels the diagonal is rendered on

    Returns:
        Whole meters per pixel, rounded half up
    """
    if pixels <= 0:
        raise ValueError(f"pixels must be positive, got {pixels}")

    meters = geodesic_distance(
        Position(longitude=bbox[0], latitude=bbox[1]),
        Position(longitude=bbox[2], latitude=bbox[3]),
    )
    meters = math.ceil(meters)

    return int(math.floor(meters / pixels + 0.5))
