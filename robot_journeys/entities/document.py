# IN THIS FILE: PARSED AND VALIDATED DOCUMENTS

from typing import FrozenSet, Iterable, Tuple

from robot_journeys.entities.grid import Grid
from robot_journeys.entities.journey import RobotJourney
from robot_journeys.entities.obstacle import Obstacle


class ParsedDocument:
    """
    Everything the parser read, exactly as written.
    Obstacles keep their source order and may repeat; nothing has been
    checked against the grid yet.
    """

    def __init__(
        self,
        grid: Grid,
        obstacles: Iterable[Obstacle],
        journeys: Iterable[RobotJourney],
    ):
        self.grid = grid
        self.obstacles: Tuple[Obstacle, ...] = tuple(obstacles)
        self.journeys: Tuple[RobotJourney, ...] = tuple(journeys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedDocument):
            return False
        return (self.grid == other.grid and
                self.obstacles == other.obstacles and
                self.journeys == other.journeys)

    def __repr__(self) -> str:
        return (f"ParsedDocument(grid={self.grid!r}, "
                f"obstacles={len(self.obstacles)}, journeys={len(self.journeys)})")


class ValidatedDocument:
    """
    A document whose grid is non-empty and whose every obstacle and journey
    endpoint lies inside that grid. Only the validator builds these; the
    simulator relies on the invariant without checking it again.

    Shared read-only by every journey simulation.
    """

    def __init__(
        self,
        grid: Grid,
        obstacles: Iterable[Obstacle],
        journeys: Iterable[RobotJourney],
    ):
        self.grid = grid
        self.obstacles: FrozenSet[Obstacle] = frozenset(obstacles)
        self.journeys: Tuple[RobotJourney, ...] = tuple(journeys)

    def is_blocked(self, x: int, y: int) -> bool:
        return Obstacle(x, y) in self.obstacles

    def __repr__(self) -> str:
        return (f"ValidatedDocument(grid={self.grid!r}, "
                f"obstacles={len(self.obstacles)}, journeys={len(self.journeys)})")
