"""
Robot class implementing the move/turn state machine with scent protection
"""
import logging
from typing import Iterable, Tuple

from grid import Grid
from utils import LEFT_TURNS, MOVES, RIGHT_TURNS, Command, Orientation, Position, RobotState

logger = logging.getLogger(__name__)


class Robot:
    def __init__(self, position: Tuple[int, int], orientation: Orientation, grid: Grid):
        self.position = Position(*position)
        self.orientation = Orientation(orientation)
        self.is_lost = False
        # Shared with every other robot in the run, never copied
        self.grid = grid

        self.commands_executed = 0
        self.moves_ignored = 0

    def execute_commands(self, commands: Iterable[Command]):
        """Run commands in order, stopping as soon as the robot is lost"""
        for command in commands:
            if self.is_lost:
                break

            command = Command(command)
            if command is Command.LEFT:
                self._turn('left')
            elif command is Command.RIGHT:
                self._turn('right')
            elif command is Command.FORWARD:
                self._move()
            self.commands_executed += 1

    def _turn(self, direction: str):
        turns = LEFT_TURNS if direction == 'left' else RIGHT_TURNS
        self.orientation = turns[self.orientation]

    def _next_position(self) -> Position:
        dx, dy = MOVES[self.orientation]
        x, y = self.position
        return Position(x + dx, y + dy)

    def _move(self):
        next_pos = self._next_position()
        if self.grid.is_within_bounds(next_pos):
            self.position = next_pos
            return

        # Off the edge: a scent at the current position means someone fell here before
        if self.grid.has_scent(self.position):
            self.moves_ignored += 1
            logger.debug("Scent at %s, ignoring move %s", tuple(self.position), self.orientation.value)
            return

        self.grid.add_scent(self.position)
        self.is_lost = True
        logger.debug("Robot lost at %s facing %s", tuple(self.position), self.orientation.value)

    def get_state(self) -> RobotState:
        return RobotState(Position(*self.position), self.orientation, self.is_lost)
