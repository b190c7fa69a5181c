"""Process-wide immutable constants shared by the domain and infrastructure.

Location: shared/ (not domain/) so the formatting layer can read the same
bounds and precision defaults without importing domain internals.
"""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Sphere model
# ---------------------------------------------------------------------------
# IUGG mean Earth radius (R1), meters
EARTH_MEAN_RADIUS_M: Final[float] = 6_371_008.8

# Norm below which a cross product is treated as the zero vector
ZERO_VECTOR_TOLERANCE: Final[float] = 1e-12

# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------
DEFAULT_BEARING_PRECISION: Final[int] = 6
DEFAULT_COORDINATE_PRECISION: Final[int] = 4

# Opt-in compatibility mode: digits inferred from the value's own repr
LEGACY_AUTO_PRECISION: Final[str] = "auto"

# ---------------------------------------------------------------------------
# WGS84 coordinate bounds: (min lon, min lat, max lon, max lat)
# ---------------------------------------------------------------------------
WGS84_MAX_BOUNDS: Final[tuple[float, float, float, float]] = (
    -180.0,  # x/lon min/left
    -90.0,  # y/lat min/bottom
    180.0,  # x/lon max/right
    90.0,  # y/lat max/top
)

# GeoJSON geometry types the formatting layer can emit
GEOJSON_TYPES: Final[tuple[str, ...]] = ("Point", "LineString", "Polygon")
