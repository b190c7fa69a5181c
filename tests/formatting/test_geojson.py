"""Tests for GeoJSON geometry envelopes."""

from __future__ import annotations

import json

import pytest

from domain.geodesy.errors import UnsupportedGeometryTypeError
from infrastructure.formatting.geojson import (
    get_geojson,
    get_line_string,
    get_point,
    get_polygon,
)


def test_point_rounds_coordinates():
    assert get_point([1.123456, 2.0]) == {"type": "Point", "coordinates": [1.1235, 2.0]}


def test_custom_precision():
    assert get_point([1.123456, 2.0], precision=1)["coordinates"] == [1.1, 2.0]


def test_line_string_with_derived_bbox():
    geometry = get_line_string([[0, 0], [10, 5], [-3, 2]], bbox=True)

    assert geometry["type"] == "LineString"
    assert geometry["bbox"] == [-3.0, 0.0, 10.0, 5.0]


def test_explicit_bbox_used_verbatim():
    geometry = get_line_string([[0, 0], [1, 1]], bbox=[-1, -1, 2, 2])

    assert geometry["bbox"] == [-1, -1, 2, 2]


def test_no_bbox_by_default():
    assert "bbox" not in get_line_string([[0, 0], [1, 1]])


def test_polygon_is_json_serializable():
    ring = [[0, 0], [0, 1], [1, 1], [0, 0]]

    geometry = get_polygon([ring], bbox=True)

    assert json.loads(json.dumps(geometry)) == geometry
    assert geometry["bbox"] == [0.0, 0.0, 1.0, 1.0]


def test_unsupported_type():
    with pytest.raises(UnsupportedGeometryTypeError, match="Point, LineString, Polygon"):
        get_geojson("MultiPoint", [[0, 0]])
