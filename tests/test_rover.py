from __future__ import annotations

import pytest

from grid_rover.errors import InvalidInitialPlacement
from grid_rover.heading import Heading, RoverState
from grid_rover.rover import Outcome, Rover
from grid_rover.world import Grid, ObstacleSet


def test_advance_off_the_top_edge_is_discarded() -> None:
    rover = Rover(0, 9, Heading.NORTH, Grid(10, 10))

    outcome = rover.try_advance()

    assert outcome is Outcome.OUT_OF_BOUNDS
    assert rover.get_state() == RoverState(0, 9, Heading.NORTH)
    assert rover.status_report().last_outcome is Outcome.OUT_OF_BOUNDS


def test_advance_into_obstacle_is_discarded() -> None:
    rover = Rover(1, 2, Heading.EAST, Grid(10, 10))
    rover.register_obstacle(2, 2)

    outcome = rover.try_advance()

    assert outcome is Outcome.OBSTACLE_BLOCKED
    assert rover.get_state() == RoverState(1, 2, Heading.EAST)
    assert rover.path_history == [RoverState(1, 2, Heading.EAST)]


def test_bounds_are_checked_before_obstacles() -> None:
    # Obstacle registered outside the grid is never reached
    rover = Rover(0, 0, Heading.WEST, Grid(3, 3))
    rover.register_obstacle(-1, 0)
    assert rover.try_advance() is Outcome.OUT_OF_BOUNDS


def test_successful_advance_commits_and_keeps_heading() -> None:
    rover = Rover(5, 5, Heading.SOUTH, Grid(10, 10))

    assert rover.try_advance() is Outcome.OK
    assert rover.get_state() == RoverState(5, 4, Heading.SOUTH)
    assert rover.path_history[-1] == RoverState(5, 4, Heading.SOUTH)


def test_rotations_never_move() -> None:
    rover = Rover(3, 3, Heading.NORTH, Grid(10, 10))
    rover.rotate_left()
    assert rover.get_state() == RoverState(3, 3, Heading.WEST)
    rover.rotate_right()
    rover.rotate_right()
    assert rover.get_state() == RoverState(3, 3, Heading.EAST)
    assert rover.last_outcome is Outcome.OK


def test_rover_keeps_accepting_commands_after_rejection() -> None:
    rover = Rover(0, 9, Heading.NORTH, Grid(10, 10))
    assert rover.try_advance() is Outcome.OUT_OF_BOUNDS
    assert rover.try_advance() is Outcome.OUT_OF_BOUNDS
    rover.rotate_right()
    assert rover.try_advance() is Outcome.OK
    assert rover.get_state() == RoverState(1, 9, Heading.EAST)


@pytest.mark.parametrize("x,y", [(-1, 0), (10, 0), (0, 10)])
def test_start_outside_grid_is_rejected(x: int, y: int) -> None:
    with pytest.raises(InvalidInitialPlacement):
        Rover(x, y, Heading.NORTH, Grid(10, 10))


def test_start_on_obstacle_is_rejected() -> None:
    with pytest.raises(InvalidInitialPlacement):
        Rover(2, 2, Heading.NORTH, Grid(10, 10), ObstacleSet([(2, 2)]))


def test_obstacle_on_rover_cell_is_rejected() -> None:
    rover = Rover(4, 4, Heading.NORTH, Grid(10, 10))
    with pytest.raises(InvalidInitialPlacement):
        rover.register_obstacle(4, 4)
    assert not rover.obstacles.occupies(4, 4)


def test_obstacle_set_is_shared_with_caller() -> None:
    obstacles = ObstacleSet()
    rover = Rover(0, 0, Heading.NORTH, Grid(10, 10), obstacles)
    rover.register_obstacle(0, 1)
    rover.register_obstacle(0, 1)

    assert rover.obstacles is obstacles
    assert len(obstacles) == 1
    assert rover.try_advance() is Outcome.OBSTACLE_BLOCKED


def test_status_report_format_and_dict() -> None:
    rover = Rover(0, 9, Heading.NORTH, Grid(10, 10))
    report = rover.status_report()
    assert report.last_outcome is None
    assert report.format() == "Rover is at (0, 9) facing North."

    rover.try_advance()
    report = rover.status_report()
    assert report.format() == "Rover is at (0, 9) facing North. Last advance blocked: out of bounds."
    assert report.to_dict() == {"x": 0, "y": 9, "heading": "North", "last_outcome": "out_of_bounds"}
    assert rover.to_dict() == report.to_dict()
