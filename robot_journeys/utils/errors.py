# IN THIS FILE: PARSER AND VALIDATION ERRORS
#
# Parsing stops at the first problem and raises ParserError.
# Validation collects every problem as a ValidationError value and raises
# one ValidationFailed carrying all of them.
# Runtime failures are not exceptions at all, see simulation/outcomes.py.

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from robot_journeys.entities.grid import Grid
from robot_journeys.entities.obstacle import Obstacle
from robot_journeys.utils.types import RobotState


class RobotJourneyError(Exception):
    """Base class for every error raised by the pipeline."""


class ParserError(RobotJourneyError, ValueError):
    """
    The input text does not follow the document grammar.

    Attributes:
        expected: Name of the construct the parser was looking for
        found: Short description of what was there instead
        line, column: 1-based position where parsing stopped
    """

    def __init__(
        self,
        expected: str,
        found: str,
        line: int,
        column: int,
        detail: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        self.line = line
        self.column = column
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        text = f"line {self.line}, column {self.column}: expected {self.expected}, found {self.found}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return text


class ValidationErrorKind(Enum):
    INVALID_GRID = "invalid-grid"
    OBSTACLE_OUT_OF_BOUNDS = "obstacle-out-of-bounds"
    ROBOT_STATE_OUT_OF_BOUNDS = "robot-state-out-of-bounds"


class ValidationError:
    """
    One independent violation found by the validator.
    A value, not an exception: the validator gathers many of these.
    """

    def __init__(self, kind: ValidationErrorKind, message: str):
        self.kind = kind
        self.message = message

    @classmethod
    def invalid_grid(cls, grid: Grid) -> 'ValidationError':
        return cls(ValidationErrorKind.INVALID_GRID, f"Invalid grid {grid!r}")

    @classmethod
    def obstacle_out_of_bounds(cls, obstacle: Obstacle, grid: Grid) -> 'ValidationError':
        return cls(
            ValidationErrorKind.OBSTACLE_OUT_OF_BOUNDS,
            f"Obstacle [{obstacle!r}] out of bounds of defined grid [{grid}]",
        )

    @classmethod
    def robot_state_out_of_bounds(
        cls, state: RobotState, grid: Grid, initial: bool
    ) -> 'ValidationError':
        which = "Initial" if initial else "Final"
        return cls(
            ValidationErrorKind.ROBOT_STATE_OUT_OF_BOUNDS,
            f"{which} robot state [{state!r}] out of bounds of defined grid [{grid}]",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return False
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind.value}, message={self.message!r})"


class ValidationFailed(RobotJourneyError, ValueError):
    """Raised once by the validator with every violation it found, in document order."""

    def __init__(self, errors: Iterable[ValidationError]):
        self.errors: Tuple[ValidationError, ...] = tuple(errors)
        if not self.errors:
            raise ValueError("ValidationFailed needs at least one error")
        super().__init__("; ".join(error.message for error in self.errors))

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]
