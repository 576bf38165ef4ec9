"""
Top-level package for the grid rover simulator.

Components:
- heading: compass headings, turn table, unit moves
- world: grid bounds, obstacle cells, map loading
- rover: rover state, advance/turn transitions, status reports
- commands: command objects, registry and parser
- config: YAML scenario loading
- env: Gymnasium-compatible environment over the command layer
- render: pygame-based visualization
"""

from .errors import GridRoverError, InvalidConfiguration, InvalidInitialPlacement
from .heading import Heading, RoverState, apply_move, delta_for, rotate_left, rotate_right
from .world import Grid, Obstacle, ObstacleSet
from .rover import Outcome, Rover, StatusReport
from .commands import (
    AdvanceCommand,
    Command,
    RotateLeftCommand,
    RotateRightCommand,
    parse_commands,
    run_commands,
)

__all__ = [
    "GridRoverError",
    "InvalidConfiguration",
    "InvalidInitialPlacement",
    "Heading",
    "RoverState",
    "apply_move",
    "delta_for",
    "rotate_left",
    "rotate_right",
    "Grid",
    "Obstacle",
    "ObstacleSet",
    "Outcome",
    "Rover",
    "StatusReport",
    "Command",
    "AdvanceCommand",
    "RotateLeftCommand",
    "RotateRightCommand",
    "parse_commands",
    "run_commands",
]
