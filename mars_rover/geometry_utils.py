"""
Geometry utilities for the rover simulation.

Provides coordinate wrapping, clamping and the flat degree-space distance
used by the projection, the rover state machine and collision checks.
"""

from __future__ import annotations

from dataclasses import dataclass
import math


LAT_LIMIT = 90.0
LON_LIMIT = 180.0


@dataclass(frozen=True)
class Position:
    """Geographic position in degrees.

    Attributes
    ----------
    lat : float
        Latitude, [-90, 90] once wrapped.
    lon : float
        Longitude, [-180, 180] once wrapped.
    """

    lat: float
    lon: float


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------


def wrap_longitude(lon: float) -> float:
    """Bring a longitude that stepped across the antimeridian back into range."""
    if lon > LON_LIMIT:
        return lon - 2.0 * LON_LIMIT
    if lon < -LON_LIMIT:
        return lon + 2.0 * LON_LIMIT
    return lon


def wrap_latitude(lat: float) -> float:
    """Shift a latitude that stepped over a pole into the opposite hemisphere.

    This is not a polar reflection: 95 becomes -85, and the caller keeps
    its longitude and heading.
    """
    if lat > LAT_LIMIT:
        return lat - 2.0 * LAT_LIMIT
    if lat < -LAT_LIMIT:
        return lat + 2.0 * LAT_LIMIT
    return lat


def wrap_coordinates(lat: float, lon: float) -> Position:
    """Normalize a (lat, lon) pair with at most one step of overflow."""
    return Position(lat=wrap_latitude(lat), lon=wrap_longitude(lon))


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------


def clamp(value: float, vmin: float, vmax: float) -> float:
    """Clamp value to [vmin, vmax]."""
    return max(vmin, min(vmax, value))


def degree_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Euclidean distance in raw (lat, lon) degree space, not great-circle."""
    return math.hypot(lat2 - lat1, lon2 - lon1)
