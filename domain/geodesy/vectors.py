"""Geodesy Bounded Context - Vector Conversion.

n-vector representation of positions: a geodetic Position maps to the unit
vector from the Earth's centre through that point on the sphere. Vector
algebra is delegated to numpy.
"""

from __future__ import annotations

import math

import numpy as np

from domain.geodesy.value_objects import Position, Vector3


def to_vector(position: Position) -> Vector3:
    """Convert a Position to a unit Cartesian vector.

    Right-handed frame: x -> 0°E,0°N; y -> 90°E,0°N; z -> 90°N.
    Elevation is ignored (points are projected onto the sphere).
    """
    phi = math.radians(position.latitude)
    lam = math.radians(position.longitude)

    return Vector3(
        x=math.cos(phi) * math.cos(lam),
        y=math.cos(phi) * math.sin(lam),
        z=math.sin(phi),
    )


def to_point(vector: Vector3) -> Position:
    """Convert a Cartesian vector back to a Position.

    The vector need not be unit length; only its direction matters.
    Longitude is normalized to [-180, 180).
    """
    phi = math.atan2(vector.z, math.hypot(vector.x, vector.y))
    lam = math.atan2(vector.y, vector.x)

    return Position(
        longitude=normalize_longitude(math.degrees(lam)),
        latitude=math.degrees(phi),
    )


def normalize_longitude(degrees: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    wrapped = (degrees + 180.0) % 360.0 - 180.0
    # Float rounding can land exactly on the excluded upper bound
    if wrapped >= 180.0:
        return -180.0
    return wrapped


# ---------------------------------------------------------------------------
# Vector algebra
# ---------------------------------------------------------------------------
def cross(v1: Vector3, v2: Vector3) -> Vector3:
    return Vector3.from_array(np.cross(v1.as_array(), v2.as_array()))


def dot(v1: Vector3, v2: Vector3) -> float:
    return float(np.dot(v1.as_array(), v2.as_array()))


def vector_sum(*vectors: Vector3) -> Vector3:
    """Component-wise sum of one or more vectors."""
    if not vectors:
        raise ValueError("vector_sum needs at least one vector")
    return Vector3.from_array(np.sum([v.as_array() for v in vectors], axis=0))


def unit(vector: Vector3) -> Vector3:
    """Scale `vector` to length 1.

    Raises:
        ValueError: If `vector` is the zero vector
    """
    norm = vector.norm()
    if norm == 0.0:
        raise ValueError("Cannot normalize the zero vector")
    return Vector3.from_array(vector.as_array() / norm)
