"""
Command objects for driving a rover.

Each command wraps one rover operation behind a uniform ``execute()`` entry
point. Commands hold only the rover they act on, so a single instance can be
reused for any number of calls. Outcomes are read from the rover's status
report, not from ``execute()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Sequence, Type
import re

from .rover import Rover, StatusReport


class Command(ABC):
    """Abstract action bound to a rover."""

    name: str = ""

    def __init__(self, rover: Rover) -> None:
        self.rover = rover

    @abstractmethod
    def execute(self) -> None:
        """Apply the action to the bound rover."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AdvanceCommand(Command):
    name = "advance"

    def execute(self) -> None:
        self.rover.try_advance()


class RotateLeftCommand(Command):
    name = "left"

    def execute(self) -> None:
        self.rover.rotate_left()


class RotateRightCommand(Command):
    name = "right"

    def execute(self) -> None:
        self.rover.rotate_right()


# ---------------------------------------------------------------------------
# Command registry and parsing
# ---------------------------------------------------------------------------


_COMMAND_REGISTRY: Dict[str, Type[Command]] = {
    "F": AdvanceCommand,
    "L": RotateLeftCommand,
    "R": RotateRightCommand,
    "advance": AdvanceCommand,
    "left": RotateLeftCommand,
    "right": RotateRightCommand,
}


def get_command_class(token: str) -> Type[Command]:
    """Return the command class for a letter ("F") or name ("advance")."""
    for key in (token, token.lower(), token.upper()):
        if key in _COMMAND_REGISTRY:
            return _COMMAND_REGISTRY[key]
    raise KeyError(f"Unknown command: {token}. Available: {list(_COMMAND_REGISTRY.keys())}")


def list_commands() -> List[str]:
    """Return list of registered command tokens."""
    return list(_COMMAND_REGISTRY.keys())


def parse_commands(text: str, rover: Rover) -> List[Command]:
    """Build commands from ``"FFRFLF"`` or ``"advance, advance, right"``.

    The text is split on commas and whitespace. Tokens made only of F/L/R
    letters are read letter by letter, so both forms can be mixed
    (``"FF left, R"``). Each command class is instantiated once and the
    instance reused for repeated tokens.
    """
    tokens: List[str] = []
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        if re.fullmatch(r"[FLRflr]+", token):
            tokens.extend(token.upper())
        else:
            tokens.append(token)

    instances: Dict[Type[Command], Command] = {}
    commands: List[Command] = []
    for token in tokens:
        cls = get_command_class(token)
        if cls not in instances:
            instances[cls] = cls(rover)
        commands.append(instances[cls])
    return commands


StepCallback = Callable[[int, Command, StatusReport], None]


def run_commands(
    rover: Rover,
    commands: Sequence[Command],
    on_step: Optional[StepCallback] = None,
) -> StatusReport:
    """Execute commands in order and return the final status report."""
    for i, command in enumerate(commands):
        rover.execute_command(command)
        if on_step is not None:
            on_step(i, command, rover.status_report())
    return rover.status_report()
