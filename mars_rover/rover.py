from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from .geometry_utils import Position, wrap_coordinates


DEFAULT_MOVE_STEP = 10.0


class Heading(Enum):
    """Compass heading. Declaration order is the clockwise rotation order."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


HEADING_ORDER: Tuple[Heading, ...] = tuple(Heading)

# Heading -> (axis moved by a forward step, sign of the step)
HEADING_AXIS: Dict[Heading, Tuple[str, float]] = {
    Heading.NORTH: ("lat", 1.0),
    Heading.SOUTH: ("lat", -1.0),
    Heading.EAST: ("lon", 1.0),
    Heading.WEST: ("lon", -1.0),
}


@dataclass(frozen=True)
class RoverState:
    """Snapshot of the rover.

    Attributes
    ----------
    position : Position
        Latitude/longitude in degrees, always within range.
    heading : Heading
        Facing direction.
    """

    position: Position
    heading: Heading

    @property
    def lat(self) -> float:
        return self.position.lat

    @property
    def lon(self) -> float:
        return self.position.lon


def rotate_heading(heading: Heading, left: bool) -> Heading:
    """Previous heading in the cycle for a left turn, next for a right turn."""
    idx = HEADING_ORDER.index(heading)
    new_idx = (idx + 3) % 4 if left else (idx + 1) % 4
    return HEADING_ORDER[new_idx]


class Rover:
    """Grid rover that moves a fixed step along one axis at a time.

    Moves are two-phase: ``propose_move`` returns the wrapped candidate
    position and ``commit`` applies it. The caller decides in between
    whether the candidate is clear of obstacles.
    """

    def __init__(self, move_step: float = DEFAULT_MOVE_STEP) -> None:
        self.move_step = float(move_step)
        self.state = RoverState(position=Position(lat=0.0, lon=0.0), heading=Heading.NORTH)

    # ------------------------------------------------------------------
    # State manipulation
    # ------------------------------------------------------------------
    def reset(self, lat: float = 0.0, lon: float = 0.0, heading: Heading = Heading.NORTH) -> None:
        """Place the rover at a position; the position is wrapped into range."""
        self.state = RoverState(position=wrap_coordinates(lat, lon), heading=heading)

    def get_state(self) -> RoverState:
        return self.state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def rotate(self, left: bool) -> RoverState:
        """Turn in place. Never fails and never changes position."""
        self.state = RoverState(
            position=self.state.position,
            heading=rotate_heading(self.state.heading, left),
        )
        return self.state

    def propose_move(self, forward: bool) -> Position:
        """Wrapped candidate position for one step, without committing it."""
        axis, sign = HEADING_AXIS[self.state.heading]
        delta = self.move_step * sign * (1.0 if forward else -1.0)
        lat = self.state.position.lat
        lon = self.state.position.lon
        if axis == "lat":
            lat += delta
        else:
            lon += delta
        return wrap_coordinates(lat, lon)

    def commit(self, position: Position) -> RoverState:
        """Move to ``position`` keeping the current heading."""
        self.state = RoverState(position=position, heading=self.state.heading)
        return self.state

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        s = self.state
        return {
            "lat": s.position.lat,
            "lon": s.position.lon,
            "heading": s.heading.value,
        }
