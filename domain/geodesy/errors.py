"""Geodesy Bounded Context - Error Hierarchy.

Custom exceptions for great-circle computations and the formatting boundary.
"""

from __future__ import annotations

from collections.abc import Sequence


class GeodesyError(Exception):
    """Base error for geodesy operations."""


class IndeterminateGeometryError(GeodesyError):
    """Geometry has no unique answer.

    Raised when a path's great-circle normal is the zero vector (start equals
    end) or when both intersection candidates collapse to zero length
    (coincident or antipodal defining circles).

    Attributes:
        reason: Short description of the degenerate condition
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Indeterminate geometry: {reason}")


class InvalidCoordinateError(GeodesyError):
    """Coordinate is outside the WGS84 range.

    Raised by the formatting layer only; the geometry core assumes
    pre-validated inputs.

    Attributes:
        position: The offending coordinate sequence
        axis: "longitude" or "latitude"
        bounds: (min, max) range the axis must fall in
    """

    def __init__(
        self,
        position: Sequence[float],
        axis: str,
        bounds: tuple[float, float],
    ) -> None:
        self.position = tuple(position)
        self.axis = axis
        self.bounds = bounds
        value = position[0] if axis == "longitude" else position[1]
        super().__init__(
            f"WGS84 {axis.capitalize()} ({value}) should be in the range: "
            f"{bounds[0]} to {bounds[1]}"
        )


class UnsupportedGeometryTypeError(GeodesyError):
    """GeoJSON geometry type is not one the formatting layer emits."""
