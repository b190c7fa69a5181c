"""Tests for coordinate validation and precision rounding."""

from __future__ import annotations

import logging

import pytest

from domain.geodesy.errors import GeodesyError, InvalidCoordinateError
from domain.geodesy.value_objects import Position
from infrastructure.formatting.coordinates import (
    get_position,
    position_precision,
    to_position,
    validate_position,
)


# ===========================================================================
# TC-001: validate_position
# ===========================================================================
@pytest.mark.parametrize(
    "position",
    [[0.0, 0.0], [-180.0, -90.0], [180.0, 90.0], (12.5, -33.0, 250.0)],
)
def test_validate_accepts_in_range(position):
    assert validate_position(position) is True


@pytest.mark.parametrize(
    "position,axis",
    [
        ([180.1, 0.0], "longitude"),
        ([-181.0, 0.0], "longitude"),
        ([0.0, 90.5], "latitude"),
        ([0.0, -91.0], "latitude"),
    ],
)
def test_validate_rejects_out_of_range(position, axis):
    with pytest.raises(InvalidCoordinateError) as exc_info:
        validate_position(position)

    assert exc_info.value.axis == axis
    assert exc_info.value.position == tuple(position)
    assert isinstance(exc_info.value, GeodesyError)


def test_validate_error_message():
    with pytest.raises(InvalidCoordinateError, match=r"WGS84 Longitude \(181\.0\)"):
        validate_position([181.0, 0.0])


def test_validate_logs_rejection(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(InvalidCoordinateError):
            validate_position([0.0, 95.0])

    assert "Rejected latitude" in caplog.text


def test_validate_needs_two_values():
    with pytest.raises(ValueError, match="at least 2"):
        validate_position([1.0])


# ===========================================================================
# TC-002: position_precision
# ===========================================================================
def test_precision_rounds_nested_sequences():
    assert position_precision([1.123456, [2.98765, None]], 2) == [1.12, [2.99, None]]


def test_precision_on_scalar():
    assert position_precision(10.55555, 3) == 10.556


def test_precision_rejects_non_numeric():
    with pytest.raises(TypeError):
        position_precision(["a", 1.0], 2)


# ===========================================================================
# TC-003: Position builders
# ===========================================================================
def test_get_position_rounds_to_four_decimals():
    p = get_position(1.123456, 2.654321)

    assert p == Position(longitude=1.1235, latitude=2.6543)
    assert p.elevation is None


def test_get_position_keeps_elevation():
    p = get_position(1.0, 2.0, 123.456789, precision=2)

    assert p.as_tuple() == (1.0, 2.0, 123.46)


def test_get_position_out_of_range():
    with pytest.raises(InvalidCoordinateError):
        get_position(200.0, 0.0)


def test_to_position_validates_first():
    with pytest.raises(InvalidCoordinateError):
        to_position([0.0, -100.0])

    assert to_position([3.0, 4.0]) == Position(longitude=3.0, latitude=4.0)
