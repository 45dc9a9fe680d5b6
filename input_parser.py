"""
Turns raw mission text into grid bounds and robot definitions.

Expected layout::

    5 3            <- grid bounds (max x, max y)
    1 1 E          <- robot start position and orientation
    RFRFRFRF       <- robot instructions
    ...            <- further position/instruction pairs

Every problem with the text raises a subclass of InputError and aborts the
whole run; nothing is partially parsed.
"""
from typing import List, NamedTuple

from config import MAX_COORDINATE, MAX_INSTRUCTION_LENGTH
from utils import Command, GridBounds, Orientation, Position, RobotDefinition


class InputError(ValueError):
    """Base class for anything wrong with the mission text"""


class InvalidBoundsFormatError(InputError):
    pass


class InvalidBoundsError(InputError):
    pass


class BoundsTooLargeError(InputError):
    pass


class InvalidPositionFormatError(InputError):
    pass


class InvalidCoordinatesError(InputError):
    pass


class InvalidOrientationError(InputError):
    pass


class InvalidCommandError(InputError):
    pass


class InstructionTooLongError(InputError):
    pass


class ParsedInput(NamedTuple):
    bounds: GridBounds
    robots: List[RobotDefinition]


def parse_input(text: str) -> ParsedInput:
    lines = [line.strip() for line in text.strip().split('\n')]

    bounds = parse_grid_bounds(lines[0])

    # Robots come in position/instruction line pairs; an unpaired trailing
    # position line is dropped
    robots = []
    for i in range(1, len(lines) - 1, 2):
        robots.append(parse_robot(lines[i], lines[i + 1]))

    return ParsedInput(bounds, robots)


def _to_int(token: str, signed: bool = False) -> int:
    # int() would also accept "+5", "1_000" and surrounding whitespace
    digits = token[1:] if signed and token.startswith("-") else token
    if not digits.isascii() or not digits.isdigit():
        raise ValueError(token)
    return int(token)


def parse_grid_bounds(line: str) -> GridBounds:
    parts = line.split()
    if len(parts) != 2:
        raise InvalidBoundsFormatError(f"Invalid grid bounds format: {line}")

    try:
        max_x, max_y = (_to_int(part) for part in parts)
    except ValueError:
        raise InvalidBoundsError(f"Invalid grid bounds: {line}") from None

    if max_x > MAX_COORDINATE or max_y > MAX_COORDINATE:
        raise BoundsTooLargeError(f"Grid coordinates cannot exceed {MAX_COORDINATE}")

    return GridBounds(max_x, max_y)


def parse_robot(position_line: str, instruction_line: str) -> RobotDefinition:
    parts = position_line.split()
    if len(parts) != 3:
        raise InvalidPositionFormatError(f"Invalid robot position format: {position_line}")

    try:
        x, y = _to_int(parts[0], signed=True), _to_int(parts[1], signed=True)
    except ValueError:
        raise InvalidCoordinatesError(f"Invalid coordinates: {position_line}") from None

    try:
        orientation = Orientation(parts[2])
    except ValueError:
        raise InvalidOrientationError(f"Invalid orientation: {parts[2]}") from None

    return RobotDefinition(
        start_position=Position(x, y),
        start_orientation=orientation,
        commands=parse_instructions(instruction_line),
    )


def parse_instructions(line: str) -> tuple:
    if len(line) > MAX_INSTRUCTION_LENGTH:
        raise InstructionTooLongError(
            f"Instruction string cannot exceed {MAX_INSTRUCTION_LENGTH} characters"
        )

    commands = []
    for char in line:
        try:
            commands.append(Command(char))
        except ValueError:
            raise InvalidCommandError(f"Invalid command: {char}") from None
    return tuple(commands)
