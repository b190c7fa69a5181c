"""Geodesy Bounded Context - Destination and distance on the sphere.

Great-circle stepping is delegated to a GreatCircleStepper collaborator; the
default one drives pyproj.Geod configured as a sphere of mean Earth radius.
"""

from __future__ import annotations

import logging

from pyproj import Geod

from domain.geodesy.ports import GreatCircleStepper
from domain.geodesy.value_objects import Position
from domain.geodesy.vectors import normalize_longitude
from shared.constants import EARTH_MEAN_RADIUS_M

logger = logging.getLogger(__name__)


class SphericalGeodStepper:
    """GreatCircleStepper backed by pyproj on a sphere (a == b).

    Parameters
    ----------
    radius_m: float
        Sphere radius in meters. Defaults to the IUGG mean Earth radius.
    """

    def __init__(self, radius_m: float = EARTH_MEAN_RADIUS_M) -> None:
        if radius_m <= 0:
            raise ValueError(f"radius_m must be positive, got {radius_m}")
        self.radius_m = radius_m
        self._geod = Geod(a=radius_m, b=radius_m)

    def destination_point(
        self, origin: Position, bearing_deg: float, distance_m: float
    ) -> Position:
        lon, lat, _ = self._geod.fwd(
            origin.longitude, origin.latitude, bearing_deg, distance_m
        )
        return Position(longitude=float(lon), latitude=float(lat))

    def distance(self, start: Position, end: Position) -> float:
        """Great-circle distance in meters (always positive)."""
        _, _, distance = self._geod.inv(
            start.longitude, start.latitude, end.longitude, end.latitude
        )
        return float(abs(distance))


# Module-level default collaborator (stateless, safe to share)
_default_stepper = SphericalGeodStepper()


def destination_position(
    origin: Position,
    bearing_deg: float,
    distance_m: float,
    stepper: GreatCircleStepper | None = None,
) -> Position:
    """Point reached from `origin` along `bearing_deg` after `distance_m`.

    Args:
        origin: Starting position
        bearing_deg: Initial bearing in degrees (any finite value)
        distance_m: Distance along the great circle in meters
        stepper: Collaborator doing the stepping; pyproj sphere if None

    Returns:
        Destination position with longitude in [-180, 180)
    """
    stepper = stepper or _default_stepper
    raw = stepper.destination_point(origin, bearing_deg, distance_m)
    logger.debug(
        "Stepped %.3fm on bearing %.6f from (%.6f, %.6f)",
        distance_m,
        bearing_deg,
        origin.longitude,
        origin.latitude,
    )
    return Position(
        longitude=normalize_longitude(raw.longitude), latitude=raw.latitude
    )


def geodesic_distance(start: Position, end: Position) -> float:
    """Great-circle distance between two points in meters, on the sphere."""
    return _default_stepper.distance(start, end)
