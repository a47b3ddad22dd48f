"""Spherical geographic coordinate math.

Models a point on a spherical Earth by latitude/longitude, provides
great-circle distance, initial bearing, midpoint and destination-point
calculations, and tests point-in-polygon containment with the even-odd
ray-casting rule.  Points encode to a fixed 16-byte binary layout and to
compact JSON.
"""

__version__ = "0.1.0"
