"""Domain Port(s) for great-circle stepping.

Defines the collaborator interface the destination calculation delegates to.
No concrete geodesy library here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import Position


class GreatCircleStepper(Protocol):
    """Port for stepping along a great circle over a sphere.

    The default implementation wraps pyproj (see destination.py); tests and
    callers may inject any object with this method.
    """

    def destination_point(
        self, origin: Position, bearing_deg: float, distance_m: float
    ) -> Position:
        """Return the point `distance_m` from `origin` on initial `bearing_deg`."""
        ...
