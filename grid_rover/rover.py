from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .errors import InvalidInitialPlacement
from .heading import Heading, RoverState, apply_move, rotate_left, rotate_right
from .world import Grid, ObstacleSet

if TYPE_CHECKING:
    from .commands import Command


class Outcome(Enum):
    """Result of the most recent command."""

    OK = "ok"
    OUT_OF_BOUNDS = "out_of_bounds"
    OBSTACLE_BLOCKED = "obstacle_blocked"

    @property
    def succeeded(self) -> bool:
        return self is Outcome.OK


_BLOCKED_TEXT = {
    Outcome.OUT_OF_BOUNDS: "out of bounds",
    Outcome.OBSTACLE_BLOCKED: "obstacle",
}


@dataclass(frozen=True)
class StatusReport:
    """Read-only snapshot of the rover for display and telemetry."""

    x: int
    y: int
    heading: Heading
    last_outcome: Optional[Outcome] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "heading": str(self.heading),
            "last_outcome": self.last_outcome.value if self.last_outcome is not None else None,
        }

    def format(self) -> str:
        text = f"Rover is at ({self.x}, {self.y}) facing {self.heading}."
        if self.last_outcome in _BLOCKED_TEXT:
            text += f" Last advance blocked: {_BLOCKED_TEXT[self.last_outcome]}."
        return text

    def __str__(self) -> str:
        return self.format()


class Rover:
    """Single rover moving cell by cell on a bounded grid.

    The grid and obstacle set are shared with the caller and only read here.
    Advances are computed as a candidate state first and committed only when
    the candidate is inside the grid and not blocked, so the rover never holds
    an invalid cell.
    """

    def __init__(
        self,
        x: int,
        y: int,
        heading: Heading,
        grid: Grid,
        obstacles: Optional[ObstacleSet] = None,
    ) -> None:
        self.grid = grid
        self.obstacles = obstacles if obstacles is not None else ObstacleSet()

        if not self.grid.contains(x, y):
            raise InvalidInitialPlacement(
                f"Start cell ({x}, {y}) is outside the {grid.width}x{grid.height} grid"
            )
        if self.obstacles.occupies(x, y):
            raise InvalidInitialPlacement(f"Start cell ({x}, {y}) is occupied by an obstacle")

        self.state = RoverState(x=int(x), y=int(y), heading=heading)
        self.last_outcome: Optional[Outcome] = None
        self.path_history: List[RoverState] = [self.state]

    # ------------------------------------------------------------------
    # Obstacles
    # ------------------------------------------------------------------
    def register_obstacle(self, x: int, y: int) -> None:
        """Block cell (x, y). Registering a known cell again has no effect."""
        if (x, y) == self.state.cell:
            raise InvalidInitialPlacement(
                f"Cannot register an obstacle on the rover's cell ({x}, {y})"
            )
        self.obstacles.add(x, y)

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------
    def rotate_left(self) -> None:
        self.state = RoverState(self.state.x, self.state.y, rotate_left(self.state.heading))
        self.last_outcome = Outcome.OK

    def rotate_right(self) -> None:
        self.state = RoverState(self.state.x, self.state.y, rotate_right(self.state.heading))
        self.last_outcome = Outcome.OK

    def try_advance(self) -> Outcome:
        """Move one cell forward if the target cell is free.

        Bounds are checked before obstacles. On failure the current state is
        kept as is and the reason is returned.
        """
        candidate = apply_move(self.state)
        if not self.grid.contains(candidate.x, candidate.y):
            outcome = Outcome.OUT_OF_BOUNDS
        elif self.obstacles.occupies(candidate.x, candidate.y):
            outcome = Outcome.OBSTACLE_BLOCKED
        else:
            self.state = candidate
            self.path_history.append(candidate)
            outcome = Outcome.OK
        self.last_outcome = outcome
        return outcome

    def execute_command(self, command: "Command") -> None:
        command.execute()

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------
    def get_state(self) -> RoverState:
        return self.state

    def status_report(self) -> StatusReport:
        s = self.state
        return StatusReport(x=s.x, y=s.y, heading=s.heading, last_outcome=self.last_outcome)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize current rover state to a dict for logging/telemetry."""
        return self.status_report().to_dict()
