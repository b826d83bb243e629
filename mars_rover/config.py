from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import os

import yaml

from .projection import DEFAULT_GRID_SIZE
from .rover import DEFAULT_MOVE_STEP
from .world import DEFAULT_COLLISION_THRESHOLD, DEFAULT_OBSTACLE_COUNT


MAX_MOVE_STEP = 180.0


def load_yaml(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


@dataclass
class RenderConfig:
    """Presentation parameters for the pygame window."""

    fps: int = 30
    show_graticule: bool = True
    graticule_lines: int = 10
    collision_message_frames: int = 90
    panel_height: int = 110


@dataclass
class SimConfig:
    """Parameters for one simulation session.

    ``obstacles`` optionally pins the obstacle field to explicit
    ``{"lat", "lon"}`` records instead of sampling ``obstacle_count`` of them.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    move_step: float = DEFAULT_MOVE_STEP
    collision_threshold: float = DEFAULT_COLLISION_THRESHOLD
    obstacle_count: int = DEFAULT_OBSTACLE_COUNT
    seed: Optional[int] = None
    obstacles: Optional[List[Dict[str, float]]] = None
    max_steps: int = 200
    telemetry_path: Optional[str] = None
    render: RenderConfig = field(default_factory=RenderConfig)

    def validate(self) -> None:
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        # Wrapping only undoes one step of overflow.
        if not 0.0 < self.move_step <= MAX_MOVE_STEP:
            raise ValueError(
                f"move_step must be in (0, {MAX_MOVE_STEP}], got {self.move_step}"
            )
        if self.collision_threshold < 0.0:
            raise ValueError(
                f"collision_threshold must be non-negative, got {self.collision_threshold}"
            )
        if self.obstacle_count < 0:
            raise ValueError(f"obstacle_count must be non-negative, got {self.obstacle_count}")
        if self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "SimConfig":
        """Build config from the sectioned YAML layout (sim/render/env/logging)."""
        sim_cfg = cfg.get("sim", {}) or {}
        render_cfg = cfg.get("render", {}) or {}
        env_cfg = cfg.get("env", {}) or {}
        logging_cfg = cfg.get("logging", {}) or {}

        seed = sim_cfg.get("seed", cfg.get("seed"))
        render = RenderConfig(
            fps=int(render_cfg.get("fps", 30)),
            show_graticule=bool(render_cfg.get("show_graticule", True)),
            graticule_lines=int(render_cfg.get("graticule_lines", 10)),
            collision_message_frames=int(render_cfg.get("collision_message_frames", 90)),
            panel_height=int(render_cfg.get("panel_height", 110)),
        )
        config = cls(
            grid_size=int(sim_cfg.get("grid_size", DEFAULT_GRID_SIZE)),
            move_step=float(sim_cfg.get("move_step", DEFAULT_MOVE_STEP)),
            collision_threshold=float(
                sim_cfg.get("collision_threshold", DEFAULT_COLLISION_THRESHOLD)
            ),
            obstacle_count=int(sim_cfg.get("obstacle_count", DEFAULT_OBSTACLE_COUNT)),
            seed=int(seed) if seed is not None else None,
            obstacles=sim_cfg.get("obstacles"),
            max_steps=int(env_cfg.get("max_steps", 200)),
            telemetry_path=logging_cfg.get("telemetry_path"),
            render=render,
        )
        config.validate()
        return config

    @classmethod
    def from_file(cls, path: str) -> "SimConfig":
        return cls.from_dict(load_yaml(path))
