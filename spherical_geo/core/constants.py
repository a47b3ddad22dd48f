"""Shared constants: single source of truth.

Centralises the sphere model, wire-format layout, and the named limits
used by the Point and Polygon models.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Sphere model
# ---------------------------------------------------------------------------

EARTH_RADIUS_KM: int = 6371
"""Mean Earth radius in kilometres.  Fixed sphere, not the WGS 84 ellipsoid."""

# ---------------------------------------------------------------------------
# Binary point layout
# ---------------------------------------------------------------------------

POINT_BINARY_FORMAT: str = "<dd"
"""``struct`` format: little-endian IEEE-754 double latitude, then longitude."""

COORDINATE_BINARY_SIZE: int = 8
"""Bytes per encoded coordinate."""

POINT_BINARY_SIZE: int = 2 * COORDINATE_BINARY_SIZE
"""Total bytes in an encoded point."""

# ---------------------------------------------------------------------------
# JSON point layout
# ---------------------------------------------------------------------------

JSON_LAT_KEY: str = "lat"
JSON_LON_KEY: str = "lon"

# ---------------------------------------------------------------------------
# Polygon
# ---------------------------------------------------------------------------

MIN_POLYGON_VERTICES: int = 3
"""Vertex count at which a polygon is treated as closed for containment."""
