"""Canonical dict payload contracts for the models.

``Point.to_dict()`` and ``Polygon.to_dict()`` produce these shapes, and
drift-detection tests verify that runtime keys match the declared ones.
"""

from __future__ import annotations

from typing import TypedDict


class PointPayload(TypedDict):
    """Serialised ``Point``."""

    lat: float
    lon: float


class PolygonPayload(TypedDict):
    """Serialised ``Polygon``; vertices in ring order, closing edge implicit."""

    points: list[PointPayload]
