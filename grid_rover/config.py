from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import yaml

from .errors import InvalidConfiguration
from .heading import Heading
from .rover import Rover
from .world import Grid, ObstacleSet


def load_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise InvalidConfiguration(f"Cannot read config {path}: {exc}") from exc


@dataclass
class EnvConfig:
    max_steps: int = 100
    blocked_penalty: float = -1.0


@dataclass
class RenderConfig:
    cell_size: int = 48
    fps: int = 4
    show_trail: bool = True


@dataclass
class SimConfig:
    """Scenario description: grid, start pose, obstacles and command script."""

    grid_width: int
    grid_height: int
    start_x: int
    start_y: int
    start_heading: Heading
    obstacles: List[Tuple[int, int]] = field(default_factory=list)
    commands: str = ""
    seed: int = 0
    env: EnvConfig = field(default_factory=EnvConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "SimConfig":
        try:
            grid_cfg = cfg["grid"] or {}
            rover_cfg = cfg["rover"] or {}
            obstacles = [(int(o[0]), int(o[1])) for o in cfg.get("obstacles") or []]
            env_cfg = cfg.get("env") or {}
            render_cfg = cfg.get("render") or {}
            return cls(
                grid_width=int(grid_cfg["width"]),
                grid_height=int(grid_cfg["height"]),
                start_x=int(rover_cfg["x"]),
                start_y=int(rover_cfg["y"]),
                start_heading=Heading.from_name(rover_cfg.get("heading", "North")),
                obstacles=obstacles,
                commands=str(cfg.get("commands", "")),
                seed=int(cfg.get("seed", 0)),
                env=EnvConfig(
                    max_steps=int(env_cfg.get("max_steps", 100)),
                    blocked_penalty=float(env_cfg.get("blocked_penalty", -1.0)),
                ),
                render=RenderConfig(
                    cell_size=int(render_cfg.get("cell_size", 48)),
                    fps=int(render_cfg.get("fps", 4)),
                    show_trail=bool(render_cfg.get("show_trail", True)),
                ),
            )
        except (KeyError, TypeError, IndexError, ValueError, AttributeError) as exc:
            raise InvalidConfiguration(f"Malformed simulation config: {exc!r}") from exc

    @classmethod
    def from_yaml(cls, path: str) -> "SimConfig":
        return cls.from_dict(load_yaml(path))

    def build_rover(self) -> Rover:
        """Construct the grid, obstacle set and rover described by this config."""
        grid = Grid(width=self.grid_width, height=self.grid_height)
        obstacles = ObstacleSet(self.obstacles)
        return Rover(self.start_x, self.start_y, self.start_heading, grid, obstacles)
