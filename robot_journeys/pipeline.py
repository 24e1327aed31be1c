# IN THIS FILE: PARSE -> VALIDATE -> SIMULATE -> FORMAT

import logging
from typing import List, Optional, Sequence

from robot_journeys.entities.document import ValidatedDocument
from robot_journeys.formatting.formatter import (
    format_outcomes,
    format_parser_error,
    format_validation_errors,
)
from robot_journeys.parsing.document import parse_document
from robot_journeys.simulation.observers import JourneyObserver
from robot_journeys.simulation.outcomes import Outcome
from robot_journeys.simulation.simulator import simulate
from robot_journeys.utils.errors import ParserError, ValidationError, ValidationFailed
from robot_journeys.validation.validator import validate_document

logger = logging.getLogger(__name__)


class RunResult:
    """
    Everything one pipeline run produced.

    Exactly one of these holds: parser_error is set, validation_errors is
    non-empty, or document is set and outcomes has one entry per journey.
    `lines` is the formatted output in every case.
    """

    def __init__(
        self,
        lines: List[str],
        document: Optional[ValidatedDocument] = None,
        outcomes: Sequence[Outcome] = (),
        parser_error: Optional[ParserError] = None,
        validation_errors: Sequence[ValidationError] = (),
    ):
        self.lines = lines
        self.document = document
        self.outcomes = list(outcomes)
        self.parser_error = parser_error
        self.validation_errors = list(validation_errors)

    @property
    def ok(self) -> bool:
        return self.parser_error is None and not self.validation_errors


def run(text: str, observer: Optional[JourneyObserver] = None) -> RunResult:
    """
    Run the whole pipeline on one input document.
    Never raises for bad input: parse and validation failures become output lines.
    """
    try:
        parsed = parse_document(text)
    except ParserError as e:
        logger.info("Parsing failed: %s", e.message)
        return RunResult(format_parser_error(e), parser_error=e)

    try:
        document = validate_document(parsed)
    except ValidationFailed as e:
        return RunResult(format_validation_errors(e.errors), validation_errors=e.errors)

    outcomes = simulate(document, observer)
    return RunResult(format_outcomes(outcomes), document=document, outcomes=outcomes)


def execute(text: str, observer: Optional[JourneyObserver] = None) -> List[str]:
    """Input text in, output lines out."""
    return run(text, observer).lines
