"""Tests for vector conversion (Position <-> unit Cartesian vector)."""

from __future__ import annotations

import math

import pytest

from domain.geodesy.value_objects import Position, Vector3
from domain.geodesy.vectors import (
    cross,
    dot,
    normalize_longitude,
    to_point,
    to_vector,
    unit,
    vector_sum,
)
from tests.conftest_utils import assert_position_close


# ===========================================================================
# TC-001: Unit length
# ===========================================================================
def test_to_vector_is_unit_length(sample_position: Position):
    assert to_vector(sample_position).norm() == pytest.approx(1.0, abs=1e-12)


# ===========================================================================
# TC-002: Round trip within 1e-9 degrees
# ===========================================================================
def test_round_trip(sample_position: Position):
    back = to_point(to_vector(sample_position))

    assert_position_close(back, (sample_position.longitude, sample_position.latitude))


# ===========================================================================
# TC-003: Axis orientation
# ===========================================================================
@pytest.mark.parametrize(
    "lon,lat,expected",
    [
        (0.0, 0.0, (1.0, 0.0, 0.0)),
        (90.0, 0.0, (0.0, 1.0, 0.0)),
        (0.0, 90.0, (0.0, 0.0, 1.0)),
        (-180.0, 0.0, (-1.0, 0.0, 0.0)),
    ],
)
def test_to_vector_axes(lon: float, lat: float, expected: tuple[float, float, float]):
    v = to_vector(Position(longitude=lon, latitude=lat))

    assert (v.x, v.y, v.z) == pytest.approx(expected, abs=1e-12)


def test_to_point_ignores_vector_length():
    p = to_point(Vector3(x=0.0, y=5.0, z=5.0))

    assert_position_close(p, (90.0, 45.0))


def test_to_point_antimeridian_is_minus_180():
    p = to_point(Vector3(x=-1.0, y=0.0, z=0.0))

    assert p.longitude == -180.0


@pytest.mark.parametrize(
    "raw,expected",
    [(180.0, -180.0), (-180.0, -180.0), (190.0, -170.0), (-190.0, 170.0), (10.0, 10.0)],
)
def test_normalize_longitude(raw: float, expected: float):
    assert normalize_longitude(raw) == pytest.approx(expected)


# ===========================================================================
# Vector algebra
# ===========================================================================
def test_cross_follows_right_hand_rule():
    x = Vector3(x=1.0, y=0.0, z=0.0)
    y = Vector3(x=0.0, y=1.0, z=0.0)

    assert cross(x, y) == Vector3(x=0.0, y=0.0, z=1.0)
    assert cross(y, x) == Vector3(x=0.0, y=0.0, z=-1.0)


def test_dot_and_sum():
    a = Vector3(x=1.0, y=2.0, z=3.0)
    b = Vector3(x=-1.0, y=0.5, z=2.0)

    assert dot(a, b) == pytest.approx(-1.0 + 1.0 + 6.0)
    assert vector_sum(a, b, a) == Vector3(x=1.0, y=4.5, z=8.0)


def test_vector_sum_needs_input():
    with pytest.raises(ValueError):
        vector_sum()


def test_antipodes_cancel():
    p = Position(longitude=30.0, latitude=45.0)
    antipode = Position(longitude=-150.0, latitude=-45.0)

    total = vector_sum(to_vector(p), to_vector(antipode))

    assert total.norm() == pytest.approx(0.0, abs=1e-12)
    assert math.isclose(dot(to_vector(p), to_vector(antipode)), -1.0)


def test_unit_rescales_short_normals():
    tiny = Vector3(x=0.0, y=-3e-7, z=4e-7)

    scaled = unit(tiny)

    assert scaled.norm() == pytest.approx(1.0)
    assert (scaled.y, scaled.z) == pytest.approx((-0.6, 0.8))


def test_unit_rejects_zero_vector():
    with pytest.raises(ValueError, match="zero vector"):
        unit(Vector3(x=0.0, y=0.0, z=0.0))
