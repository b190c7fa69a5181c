"""Geodesy Bounded Context - Intersection of two great-circle paths.

If c1 and c2 are the normals of the great circles through each path, the
circles meet at the two antipodal points c1 × c2 and c2 × c1. Most of the
work is choosing the right one, which depends on how each path is defined:

- bearing + bearing: follow both initial bearings; if they disagree, take
  the candidate farther from the midpoint of the two starts
- bearing + endpoint / endpoint + bearing: follow the bearing-defined path
- a bearing-defined path starting on the other circle: its start
- endpoint + endpoint: take the candidate nearer the centroid of all four
  defining points
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from itertools import product

from pydantic import BaseModel, ConfigDict

from domain.geodesy.errors import IndeterminateGeometryError
from domain.geodesy.great_circle import great_circle_normal
from domain.geodesy.value_objects import (
    EndpointDefinition,
    Path,
    PathKind,
    Position,
    Vector3,
)
from domain.geodesy.vectors import cross, dot, to_point, to_vector, unit, vector_sum
from shared.constants import ZERO_VECTOR_TOLERANCE

logger = logging.getLogger(__name__)


class _Candidates(BaseModel):
    """Intermediate vectors shared by every selection rule."""

    path1: Path
    path2: Path
    p1: Vector3  # start of path 1
    p2: Vector3  # start of path 2
    c1: Vector3  # normal of path 1
    c2: Vector3  # normal of path 2
    i1: Vector3  # c1 × c2
    i2: Vector3  # c2 × c1 (antipode of i1)

    model_config = ConfigDict(frozen=True)


def _heading_sign(normal: Vector3, start: Vector3, target: Vector3) -> int:
    """+1 if travel from `start` along `normal`'s circle heads to `target`.

    c × p is the initial direction of travel at p, so its dot product with
    the candidate tells whether the candidate lies ahead (+1) or behind (-1).
    With unit inputs the dot product is a cosine; below ZERO_VECTOR_TOLERANCE
    it is float noise and the candidate sits at the start itself (0).
    """
    alignment = dot(cross(normal, start), target)
    if abs(alignment) <= ZERO_VECTOR_TOLERANCE:
        return 0
    return 1 if alignment > 0 else -1


def _candidate_at(c: _Candidates, start: Vector3) -> Vector3:
    """The candidate coinciding with `start` (the other is its antipode)."""
    return c.i1 if dot(start, c.i1) > 0 else c.i2


# ---------------------------------------------------------------------------
# Selection rules, one per (kind, kind) pair
# ---------------------------------------------------------------------------
def _bearing_bearing(c: _Candidates) -> Vector3:
    dir1 = _heading_sign(c.c1, c.p1, c.i1)
    dir2 = _heading_sign(c.c2, c.p2, c.i1)

    if dir1 == 0:
        return _candidate_at(c, c.p1)
    if dir2 == 0:
        return _candidate_at(c, c.p2)
    if dir1 == 1 and dir2 == 1:
        return c.i1
    if dir1 == -1 and dir2 == -1:
        return c.i2
    # Bearings point at opposite candidates: the paths meet at the one
    # farther from the midpoint of the two starts
    return c.i2 if dot(vector_sum(c.p1, c.p2), c.i1) > 0 else c.i1


def _bearing_endpoint(c: _Candidates) -> Vector3:
    dir1 = _heading_sign(c.c1, c.p1, c.i1)
    if dir1 == 0:
        return _candidate_at(c, c.p1)
    return c.i1 if dir1 > 0 else c.i2


def _endpoint_bearing(c: _Candidates) -> Vector3:
    dir2 = _heading_sign(c.c2, c.p2, c.i1)
    if dir2 == 0:
        return _candidate_at(c, c.p2)
    return c.i1 if dir2 > 0 else c.i2


def _endpoint_endpoint(c: _Candidates) -> Vector3:
    # Both definitions are EndpointDefinition for this rule
    end1 = to_vector(_endpoint_of(c.path1))
    end2 = to_vector(_endpoint_of(c.path2))
    mid = vector_sum(c.p1, c.p2, end1, end2)
    return c.i1 if dot(mid, c.i1) > 0 else c.i2


def _endpoint_of(path: Path) -> Position:
    definition = path.definition
    if not isinstance(definition, EndpointDefinition):
        raise TypeError(f"Expected an endpoint-defined path, got {path.kind}")
    return definition.end


_RESOLVERS: dict[tuple[PathKind, PathKind], Callable[[_Candidates], Vector3]] = {
    (PathKind.BEARING, PathKind.BEARING): _bearing_bearing,
    (PathKind.BEARING, PathKind.ENDPOINT): _bearing_endpoint,
    (PathKind.ENDPOINT, PathKind.BEARING): _endpoint_bearing,
    (PathKind.ENDPOINT, PathKind.ENDPOINT): _endpoint_endpoint,
}

# Every (kind, kind) pair needs a rule; fail at import, not mid-computation
_missing = set(product(PathKind, PathKind)) - set(_RESOLVERS)
if _missing:
    raise RuntimeError(f"No intersection rule for path kinds: {sorted(_missing)}")


# ---------------------------------------------------------------------------
# Main Service: intersection_position
# ---------------------------------------------------------------------------
def intersection_position(path1: Path, path2: Path) -> Position:
    """Intersection point of two great-circle paths.

    Args:
        path1: First path, defined by initial bearing or endpoint
        path2: Second path, defined by initial bearing or endpoint

    Returns:
        The geometrically correct one of the two antipodal candidates.

    Raises:
        IndeterminateGeometryError: If a path's start equals its endpoint,
            or the two great circles coincide (same or antipodal circle)

    Example:
        >>> origin = Position(longitude=0, latitude=0)
        >>> north = Position(longitude=10, latitude=10)
        >>> intersection_position(
        ...     Path.by_bearing(origin, 90), Path.by_bearing(north, 180)
        ... )  # doctest: +SKIP
        Position(longitude=10.0, latitude=0.0, elevation=None)
    """
    c1 = great_circle_normal(path1)
    if c1.is_zero():
        raise IndeterminateGeometryError("path 1 start and end coincide")

    c2 = great_circle_normal(path2)
    if c2.is_zero():
        raise IndeterminateGeometryError("path 2 start and end coincide")

    # Endpoint normals have length sin(path length); scale them so the
    # coincidence test below measures the angle between the circles
    c1 = unit(c1)
    c2 = unit(c2)

    i1 = cross(c1, c2)
    if i1.is_zero():
        raise IndeterminateGeometryError("great circles coincide")
    i1 = unit(i1)
    i2 = -i1

    candidates = _Candidates(
        path1=path1,
        path2=path2,
        p1=to_vector(path1.start),
        p2=to_vector(path2.start),
        c1=c1,
        c2=c2,
        i1=i1,
        i2=i2,
    )
    chosen = _RESOLVERS[(path1.kind, path2.kind)](candidates)
    result = to_point(chosen)

    logger.debug(
        "Intersection %s+%s resolved to (%.6f, %.6f)",
        path1.kind.value,
        path2.kind.value,
        result.longitude,
        result.latitude,
    )
    return result
