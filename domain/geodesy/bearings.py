"""Geodesy Bounded Context - Bearing Calculation.

Initial (orthodromic) bearing along a great circle and constant (rhumb line)
bearing between two positions, both normalized to [0, 360).

Precision modes:
    int     -> round half-to-even to that many decimals
    None    -> raw value, unrounded
    "auto"  -> legacy mode, digits inferred from the value's own decimal
               representation (kept for compatibility with older callers)
"""

from __future__ import annotations

import math
from typing import Literal

import numpy as np

from domain.geodesy.value_objects import Bearing, Position, normalize_bearing
from shared.constants import DEFAULT_BEARING_PRECISION, LEGACY_AUTO_PRECISION

Precision = int | Literal["auto"] | None


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------
def _legacy_digits(value: float) -> int:
    """Count the decimals in the shortest positional repr of `value`."""
    text = np.format_float_positional(value, unique=True, trim="-")
    if "." not in text:
        return 0
    return len(text.split(".", 1)[1])


def round_bearing(value: float, precision: Precision = DEFAULT_BEARING_PRECISION) -> float:
    """Normalize `value` to [0, 360) and apply the precision mode.

    Rounding happens after normalization, so a value such as 359.9999999 at
    precision 0 folds back to 0.0 rather than escaping the range as 360.0.

    Raises:
        ValueError: If precision is a negative int or an unknown mode
    """
    bearing = normalize_bearing(value)

    if precision is None:
        return bearing

    if precision == LEGACY_AUTO_PRECISION:
        if bearing == math.floor(bearing):
            return bearing
        precision = _legacy_digits(bearing)

    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(f"Unsupported precision: {precision!r}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    return normalize_bearing(round(bearing, precision))


def radians_to_bearing(angle_rad: float) -> float:
    """Convert an angle in radians to a compass bearing in [0, 360)."""
    return normalize_bearing(math.degrees(angle_rad))


# ---------------------------------------------------------------------------
# Bearings
# ---------------------------------------------------------------------------
def bearing_to(
    start: Position,
    end: Position,
    precision: Precision = DEFAULT_BEARING_PRECISION,
) -> Bearing:
    """Initial great-circle bearing from `start` towards `end`.

    See http://mathforum.org/library/drmath/view/55417.html

    Args:
        start: Origin position
        end: Target position
        precision: Rounding mode (see module docstring)

    Returns:
        Bearing in degrees, [0, 360). Coincident points yield 0.

    Example:
        >>> bearing_to(Position(longitude=0, latitude=0),
        ...            Position(longitude=1, latitude=0), 0)
        90.0
    """
    phi_start = math.radians(start.latitude)
    phi_end = math.radians(end.latitude)
    delta_lambda = math.radians(end.longitude - start.longitude)

    y = math.sin(delta_lambda) * math.cos(phi_end)
    x = math.cos(phi_start) * math.sin(phi_end) - math.sin(phi_start) * math.cos(
        phi_end
    ) * math.cos(delta_lambda)

    return round_bearing(math.degrees(math.atan2(y, x)), precision)


def rhumb_bearing_to(
    start: Position,
    end: Position,
    precision: Precision = DEFAULT_BEARING_PRECISION,
) -> Bearing:
    """Constant bearing of the rhumb line from `start` to `end`.

    When the longitude difference exceeds 180° the shorter rhumb line across
    the antimeridian is taken.

    A pole has infinite isometric latitude, so a rhumb line to a pole runs
    due north or south and one leaving a pole runs due south or north.

    Returns:
        Bearing in degrees, [0, 360)
    """
    delta_lambda = math.radians(end.longitude - start.longitude)

    if abs(delta_lambda) > math.pi:
        if delta_lambda > 0:
            delta_lambda -= 2 * math.pi
        else:
            delta_lambda += 2 * math.pi

    if start.latitude == end.latitude and abs(start.latitude) == 90.0:
        # Same pole: no displacement, north by convention
        return round_bearing(0.0, precision)

    # Difference in isometric latitude (Mercator projected latitude)
    delta_psi = _isometric_latitude(end.latitude) - _isometric_latitude(
        start.latitude
    )

    return round_bearing(math.degrees(math.atan2(delta_lambda, delta_psi)), precision)


def _isometric_latitude(latitude: float) -> float:
    """Mercator isometric latitude of `latitude` (degrees); ±inf at the poles."""
    if abs(latitude) >= 90.0:
        return math.copysign(math.inf, latitude)
    phi = math.radians(latitude)
    return math.log(math.tan(phi / 2 + math.pi / 4))
