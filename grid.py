from typing import FrozenSet, Set

from utils import GridBounds, Position


class Grid:
    def __init__(self, max_x: int, max_y: int):
        self.bounds = GridBounds(max_x, max_y)
        self._scents: Set[Position] = set()

    def is_within_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x <= self.bounds.max_x and 0 <= y <= self.bounds.max_y

    def has_scent(self, pos: Position) -> bool:
        """Check whether a robot was previously lost from this exact position"""
        return Position(*pos) in self._scents

    def add_scent(self, pos: Position):
        self._scents.add(Position(*pos))

    @property
    def scents(self) -> FrozenSet[Position]:
        return frozenset(self._scents)

    @property
    def scent_count(self) -> int:
        return len(self._scents)
