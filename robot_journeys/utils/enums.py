# IN THIS FILE: DIRECTIONS and COMMANDS
from enum import Enum
from typing import Tuple


class Direction(int, Enum):
    """
    Robot facing direction.
    Uses even numbers so a quarter turn is always +/- 2 (mod 8).
    """
    NORTH = 0
    EAST = 2
    SOUTH = 4
    WEST = 6

    @property
    def letter(self) -> str:
        return self.name[0]

    @staticmethod
    def from_letter(letter: str) -> 'Direction':
        """
        Map one of N/E/S/W to its Direction.
        Raises ValueError for anything else.
        """
        for direction in Direction:
            if direction.letter == letter:
                return direction
        raise ValueError(f"Unknown direction letter {letter!r}")

    def turn_left(self) -> 'Direction':
        # N(0) -> W(6): (0 - 2) % 8 = 6
        return Direction((self.value - 2) % 8)

    def turn_right(self) -> 'Direction':
        # N(0) -> E(2): (0 + 2) % 8 = 2
        return Direction((self.value + 2) % 8)

    def step(self) -> Tuple[int, int]:
        """Unit (dx, dy) for one move forward in this direction."""
        return {
            Direction.NORTH: (0, 1),
            Direction.EAST:  (1, 0),
            Direction.SOUTH: (0, -1),
            Direction.WEST:  (-1, 0),
        }[self]


class Command(Enum):
    """
    Robot commands.
    Value is the letter used in the journey DSL.
    """
    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    MOVE_FORWARD = "F"

    @staticmethod
    def from_letter(letter: str) -> 'Command':
        """Map one of L/R/F to its Command. Raises ValueError for anything else."""
        for command in Command:
            if command.value == letter:
                return command
        raise ValueError(f"Unknown command letter {letter!r}")
