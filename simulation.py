"""
Simulation class for running robots one after another on a shared grid
"""
import logging
from typing import List, Sequence, Tuple

from grid import Grid
from input_parser import parse_input
from robot import Robot
from utils import RobotDefinition, RobotState, format_results, format_state

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self, bounds: Tuple[int, int], robot_definitions: Sequence[RobotDefinition]):
        max_x, max_y = bounds
        self.grid = Grid(max_x, max_y)
        self.robot_definitions = list(robot_definitions)
        self.robots: List[Robot] = []

    def run(self) -> List[RobotState]:
        """Run every robot to completion in input order and collect final states.

        Robots must not be run concurrently: each one has to see the scents
        left by all the robots before it.
        """
        results = []
        self.robots = []
        for i, definition in enumerate(self.robot_definitions):
            robot = Robot(definition.start_position, definition.start_orientation, self.grid)
            robot.execute_commands(definition.commands)
            self.robots.append(robot)

            state = robot.get_state()
            results.append(state)
            logger.debug("Robot %d finished: %s", i, format_state(state))

        lost = sum(1 for state in results if state.is_lost)
        logger.info(
            "Simulated %d robots on %dx%d grid: %d lost, %d scents",
            len(results), self.grid.bounds.max_x, self.grid.bounds.max_y, lost, self.grid.scent_count,
        )
        return results


def simulate(text: str) -> str:
    """Parse mission text, run it and return the formatted final states"""
    parsed = parse_input(text)
    return format_results(Simulation(parsed.bounds, parsed.robots).run())
