"""Great-circle Tools Domain Layer.

This package contains the core geometry organized by bounded context:
- geodesy: positions, bearings, great-circle paths and their intersections
"""

from domain import geodesy

__all__ = ["geodesy"]
