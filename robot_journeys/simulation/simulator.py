import logging
from typing import List, Optional, Union

from robot_journeys.entities.document import ValidatedDocument
from robot_journeys.entities.journey import RobotJourney
from robot_journeys.simulation.observers import JourneyObserver
from robot_journeys.simulation.outcomes import (
    Crashed,
    OutOfBounds,
    Outcome,
    Success,
    UnexpectedFinalState,
)
from robot_journeys.utils.enums import Command
from robot_journeys.utils.types import RobotState

logger = logging.getLogger(__name__)


class Simulator:
    """
    Drives every journey of a validated document.

    The document is only read. Obstacle and journey endpoints are trusted
    to be inside the grid (the validator guarantees it), so the only bounds
    checks here are for cells a move tries to enter.
    """

    def __init__(self, document: ValidatedDocument, observer: Optional[JourneyObserver] = None):
        self.document = document
        self.observer = observer if observer is not None else JourneyObserver()

    def step(self, state: RobotState, command: Command) -> Union[RobotState, Outcome]:
        """
        Apply one command. Returns the next state, or a failure Outcome when
        a forward move leaves the grid or hits an obstacle.
        """
        if command == Command.TURN_LEFT:
            return state.turned_left()
        if command == Command.TURN_RIGHT:
            return state.turned_right()
        if command == Command.MOVE_FORWARD:
            return self.move_forward(state)
        raise ValueError(f"Unknown command {command!r}")

    def move_forward(self, state: RobotState) -> Union[RobotState, Outcome]:
        target = state.ahead()
        # Bounds before obstacles: a cell off the grid can never be blocked
        if not self.document.grid.is_within_bounds(target.x, target.y):
            return OutOfBounds(target)
        if self.document.is_blocked(target.x, target.y):
            return Crashed(target)
        return target

    def travel(self, journey: RobotJourney) -> Outcome:
        self.observer.journey_started(self.document, journey)
        outcome = self._run(journey)
        self.observer.journey_finished(self.document, journey, outcome)
        logger.debug("Journey %r finished: %r", journey, outcome)
        return outcome

    def _run(self, journey: RobotJourney) -> Outcome:
        start = journey.initial
        if self.document.is_blocked(start.x, start.y):
            return Crashed(start)

        state = start
        self.observer.state_reached(self.document, state)
        for command in journey.commands:
            result = self.step(state, command)
            if isinstance(result, Outcome):
                return result
            state = result
            self.observer.state_reached(self.document, state)

        if state == journey.expected_final:
            return Success(state)
        return UnexpectedFinalState(state)

    def travel_all(self) -> List[Outcome]:
        """One outcome per journey, in document order. Failures never stop later journeys."""
        return [self.travel(journey) for journey in self.document.journeys]


def simulate(document: ValidatedDocument, observer: Optional[JourneyObserver] = None) -> List[Outcome]:
    return Simulator(document, observer).travel_all()
