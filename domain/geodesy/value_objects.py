"""Geodesy Bounded Context - Value Objects.

Immutable data structures for great-circle computations on a spherical Earth.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.constants import ZERO_VECTOR_TOLERANCE

# Compass direction in degrees, 0 = north, clockwise, normalized to [0, 360)
Bearing = Annotated[float, Field(ge=0.0, lt=360.0)]


def normalize_bearing(degrees: float) -> float:
    """Fold any finite angle into [0, 360)."""
    normalized = float(degrees) % 360.0
    # -1e-20 % 360 == 360.0 in IEEE arithmetic
    if normalized >= 360.0:
        return 0.0
    return normalized


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------
class Position(BaseModel):
    """Geographic coordinate in WGS84 degrees (Value Object).

    Invariants:
        longitude in [-180, 180]
        latitude in [-90, 90]
        both finite; elevation optional (meters)

    Frozen models compare by value, so Position(0, 1) == Position(0, 1).
    """

    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    elevation: float | None = Field(default=None, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Position":
        """Build from a GeoJSON-ordered sequence (lon, lat[, elevation])."""
        if len(values) not in (2, 3):
            raise ValueError(f"Position needs 2 or 3 values, got {len(values)}")
        elevation = values[2] if len(values) == 3 else None
        return cls(longitude=values[0], latitude=values[1], elevation=elevation)

    def as_tuple(self) -> tuple[float, ...]:
        """Return (lon, lat) or (lon, lat, elevation) in GeoJSON order."""
        if self.elevation is None:
            return (self.longitude, self.latitude)
        return (self.longitude, self.latitude, self.elevation)


# ---------------------------------------------------------------------------
# Vector3
# ---------------------------------------------------------------------------
class Vector3(BaseModel):
    """Cartesian vector in the Earth-centred frame (Value Object).

    Axes: x -> (0°E, 0°N), y -> (90°E, 0°N), z -> 90°N.
    Produced by vector conversion and great-circle construction; callers do
    not build these directly.
    """

    x: float
    y: float
    z: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_array(cls, values: ArrayLike) -> "Vector3":
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 needs shape (3,), got {arr.shape}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    def as_array(self) -> NDArray[np.float64]:
        """Return a read-only float64 array (x, y, z)."""
        arr = np.array((self.x, self.y, self.z), dtype=np.float64)
        arr.flags.writeable = False
        return arr

    def norm(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def is_zero(self, tolerance: float = ZERO_VECTOR_TOLERANCE) -> bool:
        return self.norm() <= tolerance

    def __neg__(self) -> "Vector3":
        return Vector3(x=-self.x, y=-self.y, z=-self.z)


# ---------------------------------------------------------------------------
# Path definitions (tagged union)
# ---------------------------------------------------------------------------
class PathKind(str, Enum):
    """How a great-circle path is pinned down besides its start point."""

    BEARING = "bearing"
    ENDPOINT = "endpoint"


class BearingDefinition(BaseModel):
    """Path continues from its start along an initial bearing."""

    kind: Literal["bearing"] = "bearing"
    degrees: Bearing

    model_config = ConfigDict(frozen=True)

    @field_validator("degrees", mode="before")
    @classmethod
    def fold_degrees(cls, value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Bearing must be finite, got {value}")
        return normalize_bearing(value)


class EndpointDefinition(BaseModel):
    """Path runs from its start towards a terminating point."""

    kind: Literal["endpoint"] = "endpoint"
    end: Position

    model_config = ConfigDict(frozen=True)


PathDefinition = Annotated[
    BearingDefinition | EndpointDefinition, Field(discriminator="kind")
]


class Path(BaseModel):
    """Great-circle path: a start Position plus its PathDefinition.

    The definition kind is fixed at construction, never inferred from the
    shape of a value.
    """

    start: Position
    definition: PathDefinition

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> PathKind:
        return PathKind(self.definition.kind)

    @classmethod
    def by_bearing(cls, start: Position, degrees: float) -> "Path":
        return cls(start=start, definition=BearingDefinition(degrees=degrees))

    @classmethod
    def by_endpoint(cls, start: Position, end: Position) -> "Path":
        return cls(start=start, definition=EndpointDefinition(end=end))
