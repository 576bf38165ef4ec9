from __future__ import annotations

import json

from grid_rover.commands import parse_commands, run_commands
from grid_rover.heading import Heading
from grid_rover.rover import Rover
from grid_rover.world import Grid
from telemetry.logger import TelemetryLogger


def test_log_command_writes_one_json_line_per_step(tmp_path) -> None:
    path = tmp_path / "runs" / "telemetry.jsonl"
    rover = Rover(0, 9, Heading.NORTH, Grid(10, 10))

    with TelemetryLogger(str(path)) as logger:
        run_commands(
            rover,
            parse_commands("FR", rover),
            on_step=lambda i, cmd, report: logger.log_command(i, cmd.name, report),
        )

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert records == [
        {"step": 0, "command": "advance", "x": 0, "y": 9, "heading": "North", "outcome": "out_of_bounds"},
        {"step": 1, "command": "right", "x": 0, "y": 9, "heading": "East", "outcome": "ok"},
    ]
