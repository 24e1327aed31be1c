# robot_journeys/entities/grid.py


class Grid:
    """
    Represents the rectangular arena declared by the GRID line.
    Cells run from (0, 0) in the bottom-left corner to
    (width - 1, height - 1) in the top-right corner.
    A grid with a zero dimension can be built (the parser does not
    reject it) but is_valid() reports it.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def is_valid(self) -> bool:
        return self.width >= 1 and self.height >= 1

    def is_within_bounds(self, x: int, y: int) -> bool:
        """
        Check if a cell lies inside the arena.
        """
        return 0 <= x < self.width and 0 <= y < self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return self.width == other.width and self.height == other.height

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
