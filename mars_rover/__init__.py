"""
Top-level package for the Mars rover grid simulator.

Components:
- projection: Mercator-style lat/lon to square-grid mapping, graticule
- geometry_utils: coordinate wrapping and degree-space helpers
- world: obstacle field generation and collision checking
- rover: heading, rover state and the move/rotate state machine
- session: simulation session and command outcomes
- config: YAML configuration
- env: Gymnasium-compatible environment
- render: pygame-based visualization (imported on demand)
"""

from .geometry_utils import Position, wrap_coordinates
from .world import Obstacle, generate_obstacle_field, is_collision
from .rover import Heading, RoverState, Rover
from .session import Command, CommandResult, Simulation
from .config import SimConfig

__all__ = [
    "Position",
    "wrap_coordinates",
    "Obstacle",
    "generate_obstacle_field",
    "is_collision",
    "Heading",
    "RoverState",
    "Rover",
    "Command",
    "CommandResult",
    "Simulation",
    "SimConfig",
]
