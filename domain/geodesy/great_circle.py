"""Geodesy Bounded Context - Great Circle Definition.

A great circle is represented by the normal of the plane that contains it.
The normal's direction (not just its line) matters: it encodes the direction
of travel, which intersection resolution relies on.
"""

from __future__ import annotations

import math

from domain.geodesy.value_objects import (
    BearingDefinition,
    EndpointDefinition,
    Path,
    Position,
    Vector3,
)
from domain.geodesy.vectors import cross, to_vector


def normal_from_bearing(start: Position, bearing_deg: float) -> Vector3:
    """Normal of the great circle through `start` heading on `bearing_deg`.

    Equivalent to cross(p, d) where d is the unit direction of travel at p;
    written out to avoid building the local north-east frame explicitly.
    """
    phi = math.radians(start.latitude)
    lam = math.radians(start.longitude)
    theta = math.radians(bearing_deg)

    return Vector3(
        x=math.sin(lam) * math.cos(theta)
        - math.sin(phi) * math.cos(lam) * math.sin(theta),
        y=-math.cos(lam) * math.cos(theta)
        - math.sin(phi) * math.sin(lam) * math.sin(theta),
        z=math.cos(phi) * math.sin(theta),
    )


def normal_from_endpoint(start: Position, end: Position) -> Vector3:
    """Normal of the great circle from `start` to `end` (not unit length).

    Returns the zero vector when start and end coincide; callers decide
    whether that is an error.
    """
    return cross(to_vector(start), to_vector(end))


def great_circle_normal(path: Path) -> Vector3:
    """Return the (non-unit) normal vector of the great circle of `path`."""
    definition = path.definition
    if isinstance(definition, BearingDefinition):
        return normal_from_bearing(path.start, definition.degrees)
    if isinstance(definition, EndpointDefinition):
        return normal_from_endpoint(path.start, definition.end)
    raise TypeError(f"Unknown path definition: {definition!r}")
