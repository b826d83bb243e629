"""
Geographic-to-screen projection for the square surface grid.

Longitude maps linearly to x. Latitude goes through a Mercator-style
log-tangent transform clamped to +/-89.99 degrees so the poles stay finite.
This is an approximation, not EPSG:3857: the full +/-90 span is squeezed
into the same extent as longitude, giving a square map.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple
import math

import numpy as np

from .geometry_utils import clamp


DEFAULT_GRID_SIZE = 600
MERCATOR_LAT_LIMIT = 89.99


def mercator(lat: float) -> float:
    """Log-tangent latitude transform with the pole clamp applied."""
    clamped = clamp(lat, -MERCATOR_LAT_LIMIT, MERCATOR_LAT_LIMIT)
    return math.log(math.tan(math.pi / 4.0 + math.radians(clamped) / 2.0))


_MERC_SOUTH = mercator(-90.0)
_MERC_NORTH = mercator(90.0)


def project_lon(lon: float) -> float:
    """Normalized x in [0, 1], west edge at 0."""
    return (lon + 180.0) / 360.0


def project_lat(lat: float) -> float:
    """Normalized y in [0, 1], north pole at 0 (screen y grows downward)."""
    return 1.0 - (mercator(lat) - _MERC_SOUTH) / (_MERC_NORTH - _MERC_SOUTH)


def to_screen(lat: float, lon: float, grid_size: float = DEFAULT_GRID_SIZE) -> Tuple[float, float]:
    """Project a geographic position to (x, y) on a square grid."""
    return project_lon(lon) * grid_size, project_lat(lat) * grid_size


@dataclass
class Graticule:
    """Screen positions of the grid lines.

    Attributes
    ----------
    lat_lines : list[float]
        y coordinates of parallels, ordered from +90 down to -90.
    lon_lines : list[float]
        x coordinates of meridians, ordered west to east.
    """

    lat_lines: List[float]
    lon_lines: List[float]


def graticule(num_lines: int = 10, grid_size: float = DEFAULT_GRID_SIZE) -> Graticule:
    """Latitude lines spaced evenly in degrees, longitude lines evenly on screen."""
    lats = np.linspace(90.0, -90.0, num_lines + 1)
    lat_lines = [project_lat(float(lat)) * grid_size for lat in lats]
    lon_lines = [float(x) for x in np.linspace(0.0, grid_size, num_lines + 1)]
    return Graticule(lat_lines=lat_lines, lon_lines=lon_lines)
