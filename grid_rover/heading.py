"""
Compass headings for the grid rover.

A heading is one of four cardinal directions. Turning is a lookup in a
fixed transition table, and advancing translates the rover by the unit
vector of its heading.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import InvalidConfiguration


class Heading(Enum):
    """Cardinal direction the rover faces. +y is North, +x is East."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def __str__(self) -> str:
        return self.name.title()

    @property
    def index(self) -> int:
        """Clockwise index from North (0..3), used for numeric observations."""
        return _CLOCKWISE.index(self)

    @classmethod
    def from_name(cls, text: str) -> "Heading":
        """Parse "N", "north" or "North" into a Heading."""
        key = str(text).strip().upper()
        for heading in cls:
            if key in (heading.value, heading.name):
                return heading
        raise InvalidConfiguration(
            f"Unknown heading: {text!r}. Available: {[str(h) for h in cls]}"
        )

    def rotate_left(self) -> "Heading":
        return rotate_left(self)

    def rotate_right(self) -> "Heading":
        return rotate_right(self)


_CLOCKWISE = (Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST)

# (left, right) neighbour of each heading
_TURNS: Dict[Heading, Tuple[Heading, Heading]] = {
    Heading.NORTH: (Heading.WEST, Heading.EAST),
    Heading.EAST: (Heading.NORTH, Heading.SOUTH),
    Heading.SOUTH: (Heading.EAST, Heading.WEST),
    Heading.WEST: (Heading.SOUTH, Heading.NORTH),
}

_DELTAS: Dict[Heading, Tuple[int, int]] = {
    Heading.NORTH: (0, 1),
    Heading.EAST: (1, 0),
    Heading.SOUTH: (0, -1),
    Heading.WEST: (-1, 0),
}


def rotate_left(heading: Heading) -> Heading:
    """Heading after a 90 degree counter-clockwise turn."""
    return _TURNS[heading][0]


def rotate_right(heading: Heading) -> Heading:
    """Heading after a 90 degree clockwise turn."""
    return _TURNS[heading][1]


def delta_for(heading: Heading) -> Tuple[int, int]:
    """Unit vector (dx, dy) applied on advance."""
    return _DELTAS[heading]


@dataclass(frozen=True)
class RoverState:
    """Pose of the rover on the grid.

    Attributes
    ----------
    x : int
        Column index, increasing East.
    y : int
        Row index, increasing North.
    heading : Heading
        Direction the rover faces.
    """

    x: int
    y: int
    heading: Heading

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.x, self.y)


def apply_move(state: RoverState) -> RoverState:
    """Return ``state`` translated one cell along its heading."""
    dx, dy = delta_for(state.heading)
    return RoverState(x=state.x + dx, y=state.y + dy, heading=state.heading)
