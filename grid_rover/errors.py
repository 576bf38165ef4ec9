from __future__ import annotations


class GridRoverError(Exception):
    """Base class for construction-time errors raised by the simulator."""


class InvalidConfiguration(GridRoverError, ValueError):
    """Grid dimensions, heading names or config sections are unusable."""


class InvalidInitialPlacement(GridRoverError, ValueError):
    """Rover start cell is outside the grid or sits on an obstacle."""
