"""Shared pytest fixtures for the spherical_geo test suite."""

import pytest

from spherical_geo.models.point import Point
from spherical_geo.models.polygon import Polygon

# ---------------------------------------------------------------------------
# Reference points
# ---------------------------------------------------------------------------


@pytest.fixture()
def sea() -> Point:
    """Seattle-Tacoma International Airport."""
    return Point(lat=47.4489, lon=-122.3094)


@pytest.fixture()
def sfo() -> Point:
    """San Francisco International Airport."""
    return Point(lat=37.6160933, lon=-122.3924223)


@pytest.fixture()
def empire_state() -> Point:
    """Empire State Building, New York."""
    return Point(lat=40.7486, lon=-73.9864)


# ---------------------------------------------------------------------------
# Reference polygons
# ---------------------------------------------------------------------------


@pytest.fixture()
def square() -> Polygon:
    """10 x 10 degree square with a corner at the origin."""
    return Polygon(
        [
            Point(lat=0, lon=0),
            Point(lat=0, lon=10),
            Point(lat=10, lon=10),
            Point(lat=10, lon=0),
        ]
    )


@pytest.fixture()
def l_shape() -> Polygon:
    """Concave L-shaped polygon; the notch (4..8, 4..8) is outside."""
    return Polygon(
        [
            Point(lat=0, lon=0),
            Point(lat=0, lon=8),
            Point(lat=4, lon=8),
            Point(lat=4, lon=4),
            Point(lat=8, lon=4),
            Point(lat=8, lon=0),
        ]
    )
