from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Sequence, Tuple
import random

import gymnasium as gym
from gymnasium import spaces
import numpy as np

from .config import SimConfig
from .rover import HEADING_ORDER
from .session import Command, Simulation
from .world import Obstacle


ACTIONS: Tuple[Command, ...] = tuple(Command)
COLLISION_PENALTY = -1.0


class RoverEnv(gym.Env):
    """Gymnasium view of a rover session with the four discrete commands.

    Observation: [lat / 90, lon / 180, one-hot heading (4)].
    The session has no terminal state, so episodes only end by truncation.
    """

    metadata = {"render_modes": ["none"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[SimConfig] = None,
        obstacles: Optional[Sequence[Obstacle]] = None,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__()
        self.cfg = config or SimConfig()
        self.fixed_obstacles = tuple(obstacles) if obstacles is not None else None
        self._seed = seed if seed is not None else self.cfg.seed
        self.sim = self._make_session(self._seed)

        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(
            low=np.array([-1.0, -1.0, 0.0, 0.0, 0.0, 0.0], dtype=np.float32),
            high=np.ones(6, dtype=np.float32),
            dtype=np.float32,
        )

    def _make_session(self, seed: Optional[int]) -> Simulation:
        rng = random.Random(seed) if seed is not None else random.Random()
        return Simulation(config=replace(self.cfg), obstacles=self.fixed_obstacles, rng=rng)

    # ------------------------------------------------------------------
    # Gym API
    # ------------------------------------------------------------------
    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self._seed = seed
        # A new session means a freshly sampled obstacle field.
        self.sim = self._make_session(self._seed)
        return self._get_obs(), {}

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        cmd = ACTIONS[int(action)]
        result = self.sim.command(cmd)

        reward = COLLISION_PENALTY if result.collision else 0.0
        truncated = self.sim.step_count >= self.cfg.max_steps

        info: Dict[str, Any] = {
            "command": cmd.value,
            "committed": result.committed,
            "collision": result.collision,
        }
        return self._get_obs(), float(reward), False, bool(truncated), info

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    def _get_obs(self) -> np.ndarray:
        state = self.sim.get_state()
        heading = np.zeros(len(HEADING_ORDER), dtype=np.float32)
        heading[HEADING_ORDER.index(state.heading)] = 1.0
        pos = np.array([state.lat / 90.0, state.lon / 180.0], dtype=np.float32)
        return np.concatenate([pos, heading], axis=0)
