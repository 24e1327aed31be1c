# IN THIS FILE: OBSERVATION HOOKS FOR THE SIMULATOR
#
# The simulator calls an observer, it never owns one. Observers only
# look; none of them can change an outcome.

import logging
from typing import Iterable, List, Optional

from robot_journeys.entities.document import ValidatedDocument
from robot_journeys.entities.journey import RobotJourney
from robot_journeys.formatting.formatter import format_outcome
from robot_journeys.simulation.outcomes import Outcome
from robot_journeys.utils.consts import DIRECTION_SYMBOLS, OBSTACLE_SYMBOL, VIEW_RANGE
from robot_journeys.utils.types import RobotState


class JourneyObserver:
    """
    Receives simulation events in lockstep with the simulator.

    Order per journey: journey_started, then state_reached for the initial
    state and every state the robot moves or turns into, then
    journey_finished. A journey that starts on an obstacle gets no
    state_reached call.

    The base class ignores everything and is the simulator's default.
    """

    def journey_started(self, document: ValidatedDocument, journey: RobotJourney) -> None:
        pass

    def state_reached(self, document: ValidatedDocument, state: RobotState) -> None:
        pass

    def journey_finished(
        self, document: ValidatedDocument, journey: RobotJourney, outcome: Outcome
    ) -> None:
        pass


class CompositeObserver(JourneyObserver):
    """Passes every event to each wrapped observer, in the order given."""

    def __init__(self, observers: Iterable[JourneyObserver]):
        self.observers = list(observers)

    def journey_started(self, document, journey):
        for observer in self.observers:
            observer.journey_started(document, journey)

    def state_reached(self, document, state):
        for observer in self.observers:
            observer.state_reached(document, state)

    def journey_finished(self, document, journey, outcome):
        for observer in self.observers:
            observer.journey_finished(document, journey, outcome)


class LoggingObserver(JourneyObserver):
    """Forwards every event to a logger at DEBUG."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def journey_started(self, document, journey):
        self.logger.debug("Journey start: %r", journey)

    def state_reached(self, document, state):
        self.logger.debug("State: %r", state)

    def journey_finished(self, document, journey, outcome):
        self.logger.debug("Journey end: %s", format_outcome(outcome))


class TrajectoryRecorder(JourneyObserver):
    """
    Keeps every journey's visited states and outcome, in journey order.
    Used by the trajectory plot.
    """

    def __init__(self):
        self.paths: List[List[RobotState]] = []
        self.outcomes: List[Outcome] = []
        self._current: List[RobotState] = []

    def journey_started(self, document, journey):
        self._current = []

    def state_reached(self, document, state):
        self._current.append(state)

    def journey_finished(self, document, journey, outcome):
        path = self._current
        if not path:
            # Started on an obstacle: the start cell is the whole path
            path = [journey.initial]
        self.paths.append(path)
        self.outcomes.append(outcome)
        self._current = []


class AsciiGridObserver(JourneyObserver):
    """
    Renders a small ASCII window of the grid around the robot after every
    state, plus a banner at the start and the outcome at the end.

        +---+---+---+
      02|   | O |   |
        +---+---+---+
      01|   | ^ |   |
        ...
    """

    def __init__(self, view_range: int = VIEW_RANGE):
        self.view_range = view_range
        self.output: List[str] = []

    def log(self, text: str) -> None:
        self.output.append(text)

    def journey_started(self, document, journey):
        self.log(f"== Starting Journey from {journey.initial!r} to {journey.expected_final!r} ==")

    def state_reached(self, document, state):
        self.log(self.render(document, state))

    def journey_finished(self, document, journey, outcome):
        self.log("========= Final state ===========")
        self.log(f"[{format_outcome(outcome)}]")
        self.log("========= End of Journey ===========")

    def render(self, document: ValidatedDocument, state: RobotState) -> str:
        grid = document.grid
        start_x = max(0, state.x - self.view_range)
        end_x = min(grid.width - 1, state.x + self.view_range)
        start_y = max(0, state.y - self.view_range)
        end_y = min(grid.height - 1, state.y + self.view_range)
        columns = range(start_x, end_x + 1)
        border = "  " + "+---" * len(columns) + "+"

        lines = []
        # Top row first so north is up
        for y in range(end_y, start_y - 1, -1):
            lines.append(border)
            cells = []
            for x in columns:
                if state.x == x and state.y == y:
                    cells.append(f" {DIRECTION_SYMBOLS[state.direction.letter]} ")
                elif document.is_blocked(x, y):
                    cells.append(f" {OBSTACLE_SYMBOL} ")
                else:
                    cells.append("   ")
            lines.append(f"{y:02d}|" + "|".join(cells) + "|")
        lines.append(border)
        lines.append("    " + "".join(f"{x:02d}  " for x in columns))
        return "\n".join(lines)
