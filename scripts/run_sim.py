from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path when running this script directly
_script_dir = Path(__file__).resolve().parent
_project_root = _script_dir.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from grid_rover.commands import Command, parse_commands, run_commands
from grid_rover.config import SimConfig
from grid_rover.errors import GridRoverError
from grid_rover.heading import apply_move
from grid_rover.rover import Outcome, Rover, StatusReport
from grid_rover.world import load_map_file
from telemetry.logger import TelemetryLogger


def build_rover(cfg: SimConfig, map_path: Optional[str] = None) -> Rover:
    """Build the rover from config, optionally taking grid and obstacles from a map file."""
    if map_path is None:
        return cfg.build_rover()
    grid, obstacles = load_map_file(map_path)
    return Rover(cfg.start_x, cfg.start_y, cfg.start_heading, grid, obstacles)


def describe_step(rover: Rover, index: int, command: Command, report: StatusReport) -> List[str]:
    """Human-readable lines for one executed command."""
    lines = [f"[{index + 1:>3}] {command.name:<8} -> {report.format()}"]
    if report.last_outcome is Outcome.OBSTACLE_BLOCKED:
        blocked = apply_move(rover.get_state())
        lines.append(f"      Obstacle detected at ({blocked.x}, {blocked.y})")
    if report.last_outcome in (Outcome.OBSTACLE_BLOCKED, Outcome.OUT_OF_BOUNDS):
        lines.append("      Cannot move forward. Staying in the current position.")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a command script on the grid rover.")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/sim.yaml",
        help="Path to sim YAML config.",
    )
    parser.add_argument("--map", type=str, default=None, help="JSON map file overriding grid and obstacles.")
    parser.add_argument("--commands", type=str, default=None, help='Command script, e.g. "FFRFLF".')
    parser.add_argument("--telemetry", type=str, default=None, help="Append per-command JSONL records here.")
    parser.add_argument("--render", action="store_true", help="Show the run in a pygame window.")
    parser.add_argument("--verbose", action="store_true", help="Print a line per command.")
    args = parser.parse_args(argv)

    try:
        cfg = SimConfig.from_yaml(args.config)
        rover = build_rover(cfg, args.map)
        commands = parse_commands(args.commands if args.commands is not None else cfg.commands, rover)
    except (GridRoverError, KeyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    telemetry_logger = TelemetryLogger(args.telemetry) if args.telemetry else None
    renderer = None
    if args.render:
        from grid_rover.render import GridRenderer

        renderer = GridRenderer(rover, cell_size=cfg.render.cell_size, show_trail=cfg.render.show_trail)
        renderer.draw()

    def on_step(index: int, command: Command, report: StatusReport) -> None:
        if args.verbose:
            for line in describe_step(rover, index, command, report):
                print(line)
        if telemetry_logger is not None:
            telemetry_logger.log_command(index, command.name, report)
        if renderer is not None:
            renderer.tick(cfg.render.fps)
            renderer.draw()

    try:
        final = run_commands(rover, commands, on_step=on_step)
    finally:
        if telemetry_logger is not None:
            telemetry_logger.close()
        if renderer is not None:
            renderer.close()

    print(final.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())
