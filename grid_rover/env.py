from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Type

import gymnasium as gym
from gymnasium import spaces
import numpy as np

from .commands import AdvanceCommand, Command, RotateLeftCommand, RotateRightCommand
from .config import EnvConfig, SimConfig
from .rover import Outcome, Rover


# Action index -> command class
ACTIONS: List[Type[Command]] = [AdvanceCommand, RotateLeftCommand, RotateRightCommand]


class GridRoverEnv(gym.Env):
    """Gymnasium-compatible wrapper driving a grid rover through its commands.

    Observation: [x, y, heading_index]. Action: Discrete(3) over advance,
    rotate left and rotate right. The rover has no terminal state, so episodes
    only end by truncation after ``max_steps``.
    """

    metadata = {"render_modes": ["human", "none"], "render_fps": 4}

    def __init__(
        self,
        sim_config: SimConfig,
        config: Optional[EnvConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(
                f"Unknown render_mode: {render_mode}. Available: {self.metadata['render_modes']}"
            )
        self.sim_cfg = sim_config
        self.cfg = config if config is not None else sim_config.env
        self.render_mode = render_mode
        self._renderer = None

        self.rover = sim_config.build_rover()
        self._commands = [cls(self.rover) for cls in ACTIONS]
        self._step_count = 0

        grid = self.rover.grid
        self.observation_space = spaces.Box(
            low=np.array([0, 0, 0], dtype=np.int64),
            high=np.array([grid.width - 1, grid.height - 1, 3], dtype=np.int64),
            dtype=np.int64,
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

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
        self._step_count = 0

        # Keep the shared grid and obstacle set; only the rover's pose resets.
        grid, obstacles = self.rover.grid, self.rover.obstacles
        self.rover = Rover(
            self.sim_cfg.start_x,
            self.sim_cfg.start_y,
            self.sim_cfg.start_heading,
            grid,
            obstacles,
        )
        self._commands = [cls(self.rover) for cls in ACTIONS]

        info: Dict[str, Any] = {"status": self.rover.to_dict()}
        return self._get_obs(), info

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        if not self.action_space.contains(action):
            raise ValueError(f"Action {action!r} is outside {self.action_space}")
        self._step_count += 1

        command = self._commands[int(action)]
        self.rover.execute_command(command)
        outcome = self.rover.last_outcome

        reward = 0.0 if outcome is Outcome.OK else float(self.cfg.blocked_penalty)
        terminated = False
        truncated = self._step_count >= self.cfg.max_steps

        info: Dict[str, Any] = {
            "command": command.name,
            "outcome": outcome.value if outcome is not None else None,
            "status": self.rover.to_dict(),
        }
        return self._get_obs(), reward, terminated, truncated, info

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    def _get_obs(self) -> np.ndarray:
        s = self.rover.get_state()
        return np.array([s.x, s.y, s.heading.index], dtype=np.int64)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> None:
        if self.render_mode != "human":
            return
        if self._renderer is None:
            from .render import GridRenderer

            self._renderer = GridRenderer(
                self.rover,
                cell_size=self.sim_cfg.render.cell_size,
                show_trail=self.sim_cfg.render.show_trail,
            )
        # reset() replaces the rover instance
        self._renderer.rover = self.rover
        self._renderer.draw()
        self._renderer.tick(self.metadata["render_fps"])

    def close(self) -> None:
        if self._renderer is not None:
            self._renderer.close()
            self._renderer = None
        super().close()
