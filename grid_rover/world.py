from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple
import json
import numbers

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class Obstacle:
    """A single blocked grid cell.

    Coordinates use the grid origin at bottom-left:
    - x increases to the right (East)
    - y increases upward (North)
    """

    x: int
    y: int

    def is_at(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y


@dataclass(frozen=True)
class Grid:
    """Rectangular world covering cells [0, width) x [0, height).

    Parameters
    ----------
    width : int
        Number of columns, must be positive.
    height : int
        Number of rows, must be positive.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfiguration(f"Grid {name} must be an integer, got {value!r}")
            object.__setattr__(self, name, int(value))
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )

    def contains(self, x: int, y: int) -> bool:
        """Return True if cell (x, y) lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height


class ObstacleSet:
    """Static collection of blocked cells, tested by coordinate equality."""

    def __init__(self, obstacles: Optional[Iterable[Tuple[int, int]]] = None) -> None:
        self._cells: Set[Obstacle] = set()
        for x, y in obstacles or ():
            self.add(x, y)

    def add(self, x: int, y: int) -> None:
        """Register a blocked cell. Adding a known cell is a no-op."""
        self._cells.add(Obstacle(int(x), int(y)))

    def occupies(self, x: int, y: int) -> bool:
        """Return True if (x, y) was registered as an obstacle."""
        return Obstacle(x, y) in self._cells

    def __contains__(self, cell: object) -> bool:
        if isinstance(cell, Obstacle):
            return cell in self._cells
        if isinstance(cell, tuple) and len(cell) == 2:
            return self.occupies(*cell)
        return False

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)


# ----------------------------------------------------------------------
# Map loading
# ----------------------------------------------------------------------
def _parse_cell(item: Any) -> Tuple[int, int]:
    if isinstance(item, dict):
        return int(item["x"]), int(item["y"])
    x, y = item
    return int(x), int(y)


def load_map_dict(data: Dict[str, Any]) -> Tuple[Grid, ObstacleSet]:
    """Create a grid and obstacle set from a dict.

    Obstacles may be given as ``{"x": 2, "y": 2}`` mappings or ``[2, 2]`` pairs.
    """
    try:
        width = int(data["width"])
        height = int(data["height"])
        cells: List[Tuple[int, int]] = [_parse_cell(o) for o in data.get("obstacles", [])]
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"Malformed map description: {exc}") from exc
    return Grid(width=width, height=height), ObstacleSet(cells)


def load_map_file(path: str) -> Tuple[Grid, ObstacleSet]:
    """Create a grid and obstacle set from a JSON map file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidConfiguration(f"Cannot read map {path}: {exc}") from exc
    return load_map_dict(data)


def map_to_dict(grid: Grid, obstacles: ObstacleSet) -> Dict[str, Any]:
    """Serialize a grid and its obstacles to a Python dict."""
    return {
        "width": grid.width,
        "height": grid.height,
        "obstacles": [{"x": o.x, "y": o.y} for o in sorted(obstacles, key=lambda o: (o.x, o.y))],
    }
