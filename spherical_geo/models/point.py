"""Data model for a point on a spherical Earth.

A Point is a latitude/longitude pair in degrees.  Coordinates are not
range-checked: any pair of floats is a valid Point and every operation
accepts it.  The trigonometry treats the Earth as a sphere of radius
``EARTH_RADIUS_KM``; formulas follow
http://www.movable-type.co.uk/scripts/latlong.html.

Wire formats:
- Binary: 16 bytes, little-endian double latitude then longitude.
- JSON: ``{"lat":<lat>,"lon":<lon>}`` with no whitespace.
"""

from __future__ import annotations

import json
import logging
import math
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

from spherical_geo.core.constants import (
    COORDINATE_BINARY_SIZE,
    EARTH_RADIUS_KM,
    JSON_LAT_KEY,
    JSON_LON_KEY,
    POINT_BINARY_FORMAT,
    POINT_BINARY_SIZE,
)
from spherical_geo.core.exceptions import DecodeError, EncodeError
from spherical_geo.utils.helpers import format_json_number

if TYPE_CHECKING:
    import shapely.geometry

    from spherical_geo.core.config import GeoConfig
    from spherical_geo.models.contracts import PointPayload

logger = logging.getLogger("spherical_geo.models.point")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PointDecodeError(DecodeError):
    """Raised when a binary or JSON payload cannot be decoded into a Point."""

    default_operation = "point.decode"
    default_code = "POINT_DECODE_FAILED"


class PointEncodeError(EncodeError):
    """Raised when a Point cannot be represented in the requested format."""

    default_operation = "point.encode"
    default_code = "POINT_ENCODE_FAILED"


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Point:
    """A location on Earth's surface.

    Attributes:
        lat: Latitude in degrees (conventionally -90 to 90, not enforced).
        lon: Longitude in degrees (conventionally -180 to 180, not enforced).
    """

    lat: float
    lon: float

    # -- spherical trigonometry ---------------------------------------------

    def point_at_distance_and_bearing(self, distance_km: float, bearing_deg: float) -> Point:
        """Return the point reached by travelling from this one.

        Follows the great circle leaving this point on the initial compass
        bearing *bearing_deg* (0 = north, clockwise) for *distance_km*.
        The resulting longitude is wrapped into (-180, 180].  Near the
        poles the result degrades numerically; no special handling.
        """
        dr = distance_km / EARTH_RADIUS_KM
        bearing = math.radians(bearing_deg)
        lat1 = math.radians(self.lat)
        lon1 = math.radians(self.lon)

        lat2 = math.asin(
            math.sin(lat1) * math.cos(dr) + math.cos(lat1) * math.sin(dr) * math.cos(bearing)
        )
        lon2 = lon1 + math.atan2(
            math.sin(bearing) * math.sin(dr) * math.cos(lat1),
            math.cos(dr) - math.sin(lat1) * math.sin(lat2),
        )
        lon2 = math.fmod(lon2 + 3 * math.pi, 2 * math.pi) - math.pi

        return Point(lat=math.degrees(lat2), lon=math.degrees(lon2))

    def great_circle_distance(self, other: Point) -> float:
        """Haversine distance to *other* in kilometres."""
        d_lat = math.radians(other.lat - self.lat)
        d_lon = math.radians(other.lon - self.lon)
        lat1 = math.radians(self.lat)
        lat2 = math.radians(other.lat)

        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return EARTH_RADIUS_KM * c

    def bearing_to(self, other: Point) -> float:
        """Initial bearing (forward azimuth) towards *other* in degrees.

        The result is in (-180, 180] as returned by ``atan2``; callers that
        want a compass bearing in [0, 360) normalise it themselves.
        """
        d_lon = math.radians(other.lon - self.lon)
        lat1 = math.radians(self.lat)
        lat2 = math.radians(other.lat)

        y = math.sin(d_lon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

        return math.degrees(math.atan2(y, x))

    def midpoint_to(self, other: Point) -> Point:
        """Great-circle midpoint between this point and *other*."""
        lat1 = math.radians(self.lat)
        lat2 = math.radians(other.lat)
        lon1 = math.radians(self.lon)
        d_lon = math.radians(other.lon - self.lon)

        bx = math.cos(lat2) * math.cos(d_lon)
        by = math.cos(lat2) * math.sin(d_lon)

        lat3 = math.atan2(
            math.sin(lat1) + math.sin(lat2),
            math.sqrt((math.cos(lat1) + bx) ** 2 + by**2),
        )
        lon3 = lon1 + math.atan2(by, math.cos(lat1) + bx)

        return Point(lat=math.degrees(lat3), lon=math.degrees(lon3))

    # -- binary codec -------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Encode as 16 bytes: little-endian double ``lat`` then ``lon``.

        Raises:
            PointEncodeError: If a coordinate is not a real number.
        """
        try:
            return struct.pack(POINT_BINARY_FORMAT, self.lat, self.lon)
        except struct.error as exc:
            msg = f"Cannot encode point ({self.lat!r}, {self.lon!r}) as binary: {exc}"
            raise PointEncodeError(msg, operation="point.to_bytes") from exc

    @classmethod
    def from_bytes(cls, data: bytes, *, config: GeoConfig | None = None) -> Point:
        """Decode a Point from the 16-byte binary layout.

        Only the first 16 bytes are read; anything after them is ignored
        unless ``config.binary_strict_length`` is set.

        Raises:
            PointDecodeError: If the payload is truncated (or, in strict
                mode, not exactly 16 bytes long).
        """
        size = len(data)
        if size < COORDINATE_BINARY_SIZE:
            _binary_failed(f"truncated while reading lat: got {size} of 8 bytes")
        if size < POINT_BINARY_SIZE:
            _binary_failed(
                f"truncated while reading lon: got {size - COORDINATE_BINARY_SIZE} of 8 bytes",
            )
        if config is not None and config.binary_strict_length and size != POINT_BINARY_SIZE:
            _binary_failed(f"expected exactly {POINT_BINARY_SIZE} bytes, got {size}")

        lat, lon = struct.unpack_from(POINT_BINARY_FORMAT, data)
        return cls(lat=lat, lon=lon)

    # -- JSON codec ---------------------------------------------------------

    def to_json(self) -> bytes:
        """Encode as compact JSON, e.g. ``{"lat":40.7486,"lon":-73.9864}``.

        Raises:
            PointEncodeError: If a coordinate is NaN or infinite, which JSON
                cannot represent.
        """
        for key, value in ((JSON_LAT_KEY, self.lat), (JSON_LON_KEY, self.lon)):
            if not math.isfinite(value):
                msg = f"Cannot encode non-finite {key}={value!r} as JSON"
                raise PointEncodeError(msg, operation="point.to_json")

        lat = format_json_number(self.lat)
        lon = format_json_number(self.lon)
        return f'{{"{JSON_LAT_KEY}":{lat},"{JSON_LON_KEY}":{lon}}}'.encode()

    @classmethod
    def from_json(cls, data: bytes | str, *, config: GeoConfig | None = None) -> Point:
        """Decode a Point from a JSON object with numeric ``lat``/``lon``.

        Extra keys are ignored.  A key that is absent (or ``null``) decodes
        as ``0.0`` unless ``config.json_strict_keys`` is set.

        Raises:
            PointDecodeError: If the payload is not valid JSON, is not an
                object, holds a non-numeric or non-finite coordinate, or (in strict mode)
                lacks a coordinate key.
        """
        try:
            values = json.loads(data)
        except (ValueError, RecursionError) as exc:
            _json_failed(str(exc), cause=exc)

        if not isinstance(values, dict):
            _json_failed(f"expected an object, got {type(values).__name__}")

        strict = config is not None and config.json_strict_keys
        coords: dict[str, float] = {}
        for key in (JSON_LAT_KEY, JSON_LON_KEY):
            if key not in values:
                if strict:
                    _json_failed(f"missing key {key!r}")
                coords[key] = 0.0
                continue
            value = values[key]
            if value is None:
                coords[key] = 0.0
            elif isinstance(value, (int, float)) and not isinstance(value, bool):
                try:
                    number = float(value)
                except OverflowError as exc:
                    _json_failed(f"{key!r} is out of range for a double", cause=exc)
                if not math.isfinite(number):
                    _json_failed(f"{key!r} must be finite, got {value!r}")
                coords[key] = number
            else:
                _json_failed(f"{key!r} must be a number, got {type(value).__name__}")

        return cls(lat=coords[JSON_LAT_KEY], lon=coords[JSON_LON_KEY])

    # -- dict payload -------------------------------------------------------

    def to_dict(self) -> PointPayload:
        """Serialise to a plain dict."""
        return {"lat": self.lat, "lon": self.lon}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Point:
        """Deserialise from a plain dict.

        Missing coordinates are defaulted to ``0.0`` rather than raising.

        Raises:
            TypeError: If a coordinate is not a number.
        """
        lat_raw = data.get("lat", 0.0)
        lon_raw = data.get("lon", 0.0)
        for name, raw in (("lat", lat_raw), ("lon", lon_raw)):
            if isinstance(raw, bool) or not isinstance(raw, (int, float)):
                msg = f"{name} must be a number, got {type(raw).__name__}"
                raise TypeError(msg)
        return cls(lat=float(lat_raw), lon=float(lon_raw))  # type: ignore[arg-type]

    # -- interop ------------------------------------------------------------

    def to_shapely(self) -> shapely.geometry.Point:
        """Return a Shapely point with ``x = lon`` and ``y = lat``."""
        from shapely.geometry import Point as ShapelyPoint

        return ShapelyPoint(self.lon, self.lat)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _binary_failed(reason: str) -> NoReturn:
    logger.debug("Point binary decode failed | reason=%s", reason)
    msg = f"Cannot decode point from binary: {reason}"
    raise PointDecodeError(msg, operation="point.from_bytes")


def _json_failed(reason: str, *, cause: Exception | None = None) -> NoReturn:
    logger.debug("Point JSON decode failed | reason=%s", reason)
    msg = f"Cannot decode point from JSON: {reason}"
    raise PointDecodeError(msg, operation="point.from_json") from cause
