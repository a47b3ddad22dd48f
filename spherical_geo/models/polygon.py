"""Data model for a planar polygon over latitude/longitude vertices.

A Polygon is an ordered ring of Points: consecutive points form edges and
the last point connects back to the first.  Containment is the PNPoly
ray-casting test under the even-odd rule, evaluated in the lat/lon plane
(no spherical correction).

Not implemented: validity checking (self-intersection, hole orientation).
A polygon with at least three vertices is treated as closed, nothing more.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from spherical_geo.core.constants import MIN_POLYGON_VERTICES
from spherical_geo.core.exceptions import ValidationError
from spherical_geo.models.point import Point

if TYPE_CHECKING:
    import shapely.geometry

    from spherical_geo.models.contracts import PolygonPayload

logger = logging.getLogger("spherical_geo.models.polygon")


class PolygonError(ValidationError):
    """Raised when an operation needs more vertices than the polygon has."""

    default_operation = "polygon"
    default_code = "POLYGON_INVALID"


@dataclass(frozen=True, slots=True, init=False)
class Polygon:
    """An ordered ring of Points.

    Attributes:
        vertices: The ring's points in order.  Stored as a tuple so neither
            the caller's original sequence nor any list handed out by
            ``points()`` can alter the polygon.
    """

    vertices: tuple[Point, ...]

    def __init__(self, points: Iterable[Point] = ()) -> None:
        object.__setattr__(self, "vertices", tuple(points))

    def __len__(self) -> int:
        return len(self.vertices)

    def points(self) -> list[Point]:
        """Return a copy of the vertices in ring order."""
        return list(self.vertices)

    def is_closed(self) -> bool:
        """Whether the polygon has enough vertices for containment tests.

        A vertex-count check only; the first and last points need not be
        equal and the ring may self-intersect.
        """
        return len(self.vertices) >= MIN_POLYGON_VERTICES

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield every edge, starting with the closing edge (last -> first).

        The remaining edges follow in ring order, ``(points[i-1], points[i])``.
        """
        if not self.vertices:
            return
        yield self.vertices[-1], self.vertices[0]
        for i in range(1, len(self.vertices)):
            yield self.vertices[i - 1], self.vertices[i]

    def contains(self, point: Point) -> bool:
        """Whether *point* lies inside the polygon (even-odd rule).

        Always ``False`` for a polygon that is not closed.  Points exactly
        on an edge or vertex get whichever answer the crossing count gives.
        """
        if not self.is_closed():
            logger.debug(
                "Containment on unclosed polygon | vertices=%d | point=(%s, %s)",
                len(self.vertices),
                point.lat,
                point.lon,
            )
            return False

        inside = False
        for a, b in self.edges():
            if edge_crosses(point, a, b):
                inside = not inside
        return inside

    def bbox(self) -> tuple[float, float, float, float]:
        """Tight bounding box ``(min_lon, min_lat, max_lon, max_lat)``.

        Raises:
            PolygonError: If the polygon has no vertices.
        """
        if not self.vertices:
            msg = "Empty polygon: no vertices for bbox computation"
            raise PolygonError(msg, operation="polygon.bbox")
        lons = [p.lon for p in self.vertices]
        lats = [p.lat for p in self.vertices]
        return (min(lons), min(lats), max(lons), max(lats))

    def to_dict(self) -> PolygonPayload:
        """Serialise to a plain dict."""
        return {"points": [p.to_dict() for p in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Polygon:
        """Deserialise from a plain dict.

        A missing ``points`` key yields an empty polygon.

        Raises:
            TypeError: If ``points`` is not a list of dicts or a coordinate
                is not a number.
        """
        points_raw = data.get("points", [])
        if not isinstance(points_raw, list):
            msg = f"points must be a list, got {type(points_raw).__name__}"
            raise TypeError(msg)
        for item in points_raw:
            if not isinstance(item, dict):
                msg = f"each point must be a dict, got {type(item).__name__}"
                raise TypeError(msg)
        return cls(Point.from_dict(item) for item in points_raw)

    def to_shapely(self) -> shapely.geometry.Polygon:
        """Build a Shapely polygon with ``(lon, lat)`` coordinates.

        Raises:
            PolygonError: If the polygon is not closed.
        """
        if not self.is_closed():
            msg = (
                f"Insufficient vertices for a Shapely polygon: "
                f"need at least {MIN_POLYGON_VERTICES}, got {len(self.vertices)}"
            )
            raise PolygonError(msg, operation="polygon.to_shapely")

        from shapely.geometry import Polygon as ShapelyPolygon

        return ShapelyPolygon([(p.lon, p.lat) for p in self.vertices])

    @classmethod
    def from_shapely(cls, shape: shapely.geometry.Polygon) -> Polygon:
        """Build a Polygon from a Shapely polygon's exterior ring.

        Interior rings are dropped.  Shapely repeats the first coordinate
        at the end of a ring; the repeat is removed.
        """
        coords = list(shape.exterior.coords)
        if len(coords) > 1 and coords[0] == coords[-1]:
            coords = coords[:-1]
        return cls(Point(lat=y, lon=x) for x, y, *_ in coords)


def edge_crosses(point: Point, a: Point, b: Point) -> bool:
    """PNPoly edge test: does a ray from *point* cross edge *a*-*b*?

    An edge only crosses when its endpoints straddle the point's longitude,
    which rules out ``a.lon == b.lon`` before the division is evaluated.
    """
    if (a.lon > point.lon) == (b.lon > point.lon):
        return False
    return point.lat < (b.lat - a.lat) * (point.lon - a.lon) / (b.lon - a.lon) + a.lat
