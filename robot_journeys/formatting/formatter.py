# IN THIS FILE: OUTPUT LINE ENCODING
#
# The exact text of these lines is what downstream consumers compare
# against, so the templates live in consts.py and nothing else builds them.

from typing import Iterable, List

from robot_journeys.simulation.outcomes import (
    Crashed,
    OutOfBounds,
    Outcome,
    Success,
    UnexpectedFinalState,
)
from robot_journeys.utils.consts import (
    CRASHED_LINE,
    FAILURE_LINE,
    OUT_OF_BOUNDS_LINE,
    PARSING_PREFIX,
    SUCCESS_LINE,
    VALIDATION_PREFIX,
)
from robot_journeys.utils.errors import ParserError, ValidationError


def format_outcome(outcome: Outcome) -> str:
    state = outcome.state
    if isinstance(outcome, Success):
        return SUCCESS_LINE.format(x=state.x, y=state.y, d=state.direction.letter)
    if isinstance(outcome, OutOfBounds):
        return OUT_OF_BOUNDS_LINE
    if isinstance(outcome, Crashed):
        return CRASHED_LINE.format(x=state.x, y=state.y)
    if isinstance(outcome, UnexpectedFinalState):
        return FAILURE_LINE.format(x=state.x, y=state.y, d=state.direction.letter)
    raise TypeError(f"Unknown outcome {outcome!r}")


def format_outcomes(outcomes: Iterable[Outcome]) -> List[str]:
    return [format_outcome(outcome) for outcome in outcomes]


def format_parser_error(error: ParserError) -> List[str]:
    return [f"{PARSING_PREFIX}{error.message}"]


def format_validation_errors(errors: Iterable[ValidationError]) -> List[str]:
    return [f"{VALIDATION_PREFIX}{error.message}" for error in errors]
