"""Data models.

- Point: Latitude/longitude location with spherical trigonometry and codecs
- Polygon: Ordered ring of Points with even-odd containment
- contracts: TypedDict shapes of the ``to_dict()`` payloads
"""

from spherical_geo.models.point import Point, PointDecodeError, PointEncodeError
from spherical_geo.models.polygon import Polygon, PolygonError, edge_crosses

__all__ = [
    "Point",
    "PointDecodeError",
    "PointEncodeError",
    "Polygon",
    "PolygonError",
    "edge_crosses",
]
