# IN THIS FILE: PER-JOURNEY OUTCOMES
#
# One class per kind so the formatter can dispatch on type.
# Runtime failures are returned as values, never raised: one journey
# failing must not stop the next.

from robot_journeys.utils.types import RobotState


class Outcome:
    """Result of simulating one journey. `state` meaning depends on the kind."""

    kind = ""

    def __init__(self, state: RobotState):
        self.state = state

    @property
    def is_success(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.state == other.state

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.state))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state!r})"


class Success(Outcome):
    """Every command ran and the robot ended exactly where the document said."""

    kind = "SUCCESS"

    @property
    def is_success(self) -> bool:
        return True


class OutOfBounds(Outcome):
    """A move tried to leave the grid. `state` is the cell it tried to enter."""

    kind = "OUT OF BOUNDS"


class Crashed(Outcome):
    """
    The robot hit an obstacle. `state` is the obstacle's cell, either the
    cell a move tried to enter or the start cell itself.
    """

    kind = "CRASHED"


class UnexpectedFinalState(Outcome):
    """Every command ran but the robot ended somewhere else. `state` is where it actually is."""

    kind = "FAILURE"
