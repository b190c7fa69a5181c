"""Formatting layer around the geodesy core.

Coordinate validation, precision rounding, bounding boxes and GeoJSON
envelopes, plus sequence-based wrappers over the domain services.
"""

from .bbox import (
    bbox_to_polygon,
    bbox_to_resolution,
    extend_bbox_with_position,
    get_bbox_center,
    get_bbox_from_vertices,
)
from .coordinates import get_position, position_precision, validate_position
from .geojson import get_geojson, get_line_string, get_point, get_polygon
from .paths import (
    bearing,
    destination_position,
    intersection_position,
    rhumb_bearing,
)

__all__ = [
    "bbox_to_polygon",
    "bbox_to_resolution",
    "bearing",
    "destination_position",
    "extend_bbox_with_position",
    "get_bbox_center",
    "get_bbox_from_vertices",
    "get_geojson",
    "get_line_string",
    "get_point",
    "get_polygon",
    "get_position",
    "intersection_position",
    "position_precision",
    "rhumb_bearing",
    "validate_position",
]
