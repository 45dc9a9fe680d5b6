from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Tuple

from config import LOST_MARKER


class Orientation(str, Enum):
    N = 'N'
    E = 'E'
    S = 'S'
    W = 'W'


class Command(str, Enum):
    LEFT = 'L'
    RIGHT = 'R'
    FORWARD = 'F'


class Position(NamedTuple):
    x: int
    y: int


class GridBounds(NamedTuple):
    max_x: int
    max_y: int


# Clockwise for right turns, the exact reverse for left turns
RIGHT_TURNS = {
    Orientation.N: Orientation.E,
    Orientation.E: Orientation.S,
    Orientation.S: Orientation.W,
    Orientation.W: Orientation.N,
}
LEFT_TURNS = {after: before for before, after in RIGHT_TURNS.items()}

MOVES = {
    Orientation.N: (0, 1),
    Orientation.S: (0, -1),
    Orientation.E: (1, 0),
    Orientation.W: (-1, 0),
}


@dataclass(frozen=True)
class RobotState:
    position: Position
    orientation: Orientation
    is_lost: bool = False


@dataclass(frozen=True)
class RobotDefinition:
    """Starting state and command sequence for one robot, as read from input"""
    start_position: Position
    start_orientation: Orientation
    commands: Tuple[Command, ...]


def format_state(state: RobotState) -> str:
    """Render a final state as "<x> <y> <orientation>" with an optional LOST suffix"""
    x, y = state.position
    text = f"{x} {y} {state.orientation.value}"
    return f"{text} {LOST_MARKER}" if state.is_lost else text


def format_results(states: List[RobotState]) -> str:
    return "\n".join(format_state(state) for state in states)
