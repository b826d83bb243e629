from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
import random

from .geometry_utils import Position, degree_distance


DEFAULT_OBSTACLE_COUNT = 15
DEFAULT_COLLISION_THRESHOLD = 8.0


@dataclass(frozen=True)
class Obstacle:
    """Static point obstacle on the planetary surface.

    Attributes
    ----------
    lat : float
        Latitude in degrees, sampled from [-90, 90).
    lon : float
        Longitude in degrees, sampled from [-180, 180).
    """

    lat: float
    lon: float


ObstacleField = Tuple[Obstacle, ...]


# ------------------------------------------------------------------
# Obstacle generation
# ------------------------------------------------------------------
def generate_obstacle_field(
    count: int = DEFAULT_OBSTACLE_COUNT,
    rng: Optional[random.Random] = None,
) -> ObstacleField:
    """Sample ``count`` obstacles uniformly over the whole surface.

    The field is returned as a tuple and is meant to be generated once per
    session, then shared read-only.
    """
    rng = rng or random.Random()
    obstacles: List[Obstacle] = []
    for _ in range(max(0, int(count))):
        lat = rng.uniform(-90.0, 90.0)
        lon = rng.uniform(-180.0, 180.0)
        obstacles.append(Obstacle(lat=lat, lon=lon))
    return tuple(obstacles)


def obstacle_field_from_list(data: Iterable[Dict[str, Any]]) -> ObstacleField:
    """Build a field from ``[{"lat": .., "lon": ..}, ...]`` records."""
    return tuple(Obstacle(lat=float(o["lat"]), lon=float(o["lon"])) for o in data)


# ------------------------------------------------------------------
# Collision detection
# ------------------------------------------------------------------
def is_collision(
    position: Position,
    field: Sequence[Obstacle],
    threshold: float = DEFAULT_COLLISION_THRESHOLD,
) -> bool:
    """Return True if any obstacle lies strictly closer than ``threshold``.

    Distance is flat Euclidean distance in degree space; no antimeridian
    or geodesic correction is applied.
    """
    for obs in field:
        if degree_distance(position.lat, position.lon, obs.lat, obs.lon) < threshold:
            return True
    return False


def nearest_obstacle(
    position: Position, field: Sequence[Obstacle]
) -> Optional[Tuple[Obstacle, float]]:
    """Closest obstacle and its degree-space distance, or None for an empty field."""
    best: Optional[Tuple[Obstacle, float]] = None
    for obs in field:
        d = degree_distance(position.lat, position.lon, obs.lat, obs.lon)
        if best is None or d < best[1]:
            best = (obs, d)
    return best
