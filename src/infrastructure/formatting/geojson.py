"""GeoJSON geometry envelopes.

Builds plain dict geometries (ready for json.dumps) for the types listed in
GEOJSON_TYPES, with coordinates rounded to a fixed precision.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from domain.geodesy.errors import UnsupportedGeometryTypeError
from infrastructure.formatting.bbox import get_bbox_from_vertices
from infrastructure.formatting.coordinates import position_precision
from shared.constants import DEFAULT_COORDINATE_PRECISION, GEOJSON_TYPES


def get_geojson(
    geometry_type: str,
    coordinates: Any,
    bbox: Sequence[float] | bool | None = None,
    precision: int = DEFAULT_COORDINATE_PRECISION,
) -> dict[str, Any]:
    """Assemble a GeoJSON geometry.

    Args:
        geometry_type: One of GEOJSON_TYPES
        coordinates: Position, LineString array or Polygon rings
        bbox: A 4-sequence is used verbatim; any other truthy value derives
            the bbox from `coordinates`; falsy omits it
        precision: Decimals kept on every coordinate

    Raises:
        UnsupportedGeometryTypeError: If `geometry_type` is not supported
    """
    if geometry_type not in GEOJSON_TYPES:
        raise UnsupportedGeometryTypeError(
            f"Valid GeoJSON types are: {', '.join(GEOJSON_TYPES)}"
        )

    geometry: dict[str, Any] = {
        "type": geometry_type,
        "coordinates": position_precision(coordinates, precision),
    }

    if bbox:
        if isinstance(bbox, Sequence) and len(bbox) == 4:
            geometry["bbox"] = list(bbox)
        else:
            geometry["bbox"] = list(get_bbox_from_vertices(coordinates))

    return geometry


def get_point(
    coordinates: Sequence[float],
    bbox: Sequence[float] | bool | None = None,
    precision: int = DEFAULT_COORDINATE_PRECISION,
) -> dict[str, Any]:
    return get_geojson("Point", coordinates, bbox, precision)


def get_line_string(
    coordinates: Sequence[Sequence[float]],
    bbox: Sequence[float] | bool | None = None,
    precision: int = DEFAULT_COORDINATE_PRECISION,
) -> dict[str, Any]:
    return get_geojson("LineString", coordinates, bbox, precision)


def get_polygon(
    coordinates: Sequence[Sequence[Sequence[float]]],
    bbox: Sequence[float] | bool | None = None,
    precision: int = DEFAULT_COORDINATE_PRECISION,
) -> dict[str, Any]:
    return get_geojson("Polygon", coordinates, bbox, precision)
