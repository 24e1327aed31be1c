# IN THIS FILE: ROBOTSTATE

from robot_journeys.utils.enums import Direction


class RobotState:
    """
    A robot's cell and facing direction on the grid.
    Value type: equality and hashing are structural, and every
    transition returns a new state instead of changing this one.
    """

    __slots__ = ("x", "y", "direction")

    def __init__(self, x: int, y: int, direction: Direction):
        self.x = x                  # Grid x-coordinate (cells, 0 = left column)
        self.y = y                  # Grid y-coordinate (cells, 0 = bottom row)
        self.direction = direction  # Facing direction (NORTH/EAST/SOUTH/WEST)

    def turned_left(self) -> 'RobotState':
        return RobotState(self.x, self.y, self.direction.turn_left())

    def turned_right(self) -> 'RobotState':
        return RobotState(self.x, self.y, self.direction.turn_right())

    def ahead(self) -> 'RobotState':
        """The state one cell forward, keeping the same direction."""
        dx, dy = self.direction.step()
        return RobotState(self.x + dx, self.y + dy, self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RobotState):
            return False
        return (self.x == other.x and
                self.y == other.y and
                self.direction == other.direction)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.direction))

    def __repr__(self) -> str:
        return f"RobotState(x={self.x}, y={self.y}, direction={self.direction.letter})"
