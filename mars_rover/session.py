from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence
import random

from .config import SimConfig
from .rover import Rover, RoverState
from .world import (
    Obstacle,
    ObstacleField,
    generate_obstacle_field,
    is_collision,
    nearest_obstacle,
    obstacle_field_from_list,
)
from telemetry.logger import TelemetryLogger


COLLISION_MESSAGE = "Collision detected! Rotate rover."


class Command(Enum):
    """Discrete commands accepted by the simulation."""

    MOVE_FORWARD = "move_forward"
    MOVE_BACKWARD = "move_backward"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command.

    ``committed`` and ``collision`` are mutually exclusive: a move that would
    end too close to an obstacle is rejected and leaves the state untouched.
    """

    committed: bool
    collision: bool
    state: RoverState
    message: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "committed": self.committed,
            "collision": self.collision,
            "lat": self.state.lat,
            "lon": self.state.lon,
            "heading": self.state.heading.value,
        }


class Simulation:
    """Single-rover session owning the rover state and the obstacle field.

    The field is created once here (from ``obstacles``, the config, or by
    sampling with ``rng``) and never changes afterwards.
    """

    def __init__(
        self,
        config: Optional[SimConfig] = None,
        obstacles: Optional[Sequence[Obstacle]] = None,
        rng: Optional[random.Random] = None,
        telemetry: Optional[TelemetryLogger] = None,
    ) -> None:
        self.cfg = config or SimConfig()
        self.cfg.validate()
        self.telemetry = telemetry
        if rng is None:
            rng = random.Random(self.cfg.seed) if self.cfg.seed is not None else random.Random()
        self.rng = rng

        if obstacles is not None:
            self._obstacles: ObstacleField = tuple(obstacles)
        elif self.cfg.obstacles is not None:
            self._obstacles = obstacle_field_from_list(self.cfg.obstacles)
        else:
            self._obstacles = generate_obstacle_field(self.cfg.obstacle_count, self.rng)

        self.rover = Rover(move_step=self.cfg.move_step)
        self._step_count = 0

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    def get_state(self) -> RoverState:
        return self.rover.get_state()

    def get_obstacles(self) -> ObstacleField:
        return self._obstacles

    @property
    def step_count(self) -> int:
        return self._step_count

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def command(self, cmd: Command) -> CommandResult:
        """Apply one command atomically: it either commits or changes nothing."""
        if not isinstance(cmd, Command):
            raise ValueError(f"Unknown command: {cmd!r}")

        if cmd is Command.ROTATE_LEFT or cmd is Command.ROTATE_RIGHT:
            state = self.rover.rotate(left=cmd is Command.ROTATE_LEFT)
            result = CommandResult(committed=True, collision=False, state=state)
        else:
            candidate = self.rover.propose_move(forward=cmd is Command.MOVE_FORWARD)
            if is_collision(candidate, self._obstacles, self.cfg.collision_threshold):
                result = CommandResult(
                    committed=False,
                    collision=True,
                    state=self.rover.get_state(),
                    message=COLLISION_MESSAGE,
                )
            else:
                state = self.rover.commit(candidate)
                result = CommandResult(committed=True, collision=False, state=state)

        self._step_count += 1
        if self.telemetry is not None:
            record = {"step": self._step_count, "command": cmd.value, **result.as_dict()}
            nearest = nearest_obstacle(result.state.position, self._obstacles)
            if nearest is not None:
                record["nearest_obstacle_distance"] = nearest[1]
            self.telemetry.log_record(record)
        return result

    # ------------------------------------------------------------------
    # Utility
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Summary of the session shown in the renderer panel."""
        return {
            "rover": self.rover.to_dict(),
            "step": self._step_count,
            "obstacle_count": len(self._obstacles),
            "collision_threshold": self.cfg.collision_threshold,
        }
