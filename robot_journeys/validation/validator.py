import logging
from typing import List

from robot_journeys.entities.document import ParsedDocument, ValidatedDocument
from robot_journeys.entities.grid import Grid
from robot_journeys.entities.journey import RobotJourney
from robot_journeys.entities.obstacle import Obstacle
from robot_journeys.utils.errors import ValidationError, ValidationFailed
from robot_journeys.utils.types import RobotState

logger = logging.getLogger(__name__)


class Validator:
    """
    Checks a ParsedDocument against its own grid.

    Unlike the parser this never stops at the first problem. Violations are
    collected in document order and raised together in one ValidationFailed.
    An invalid grid is reported and the obstacle and journey checks still
    run against it.
    """

    def validate(self, document: ParsedDocument) -> ValidatedDocument:
        grid = document.grid
        errors: List[ValidationError] = []

        errors.extend(self.check_grid(grid))
        for obstacle in document.obstacles:
            errors.extend(self.check_obstacle(grid, obstacle))
        for journey in document.journeys:
            errors.extend(self.check_journey(grid, journey))

        if errors:
            logger.info("Document rejected with %d validation error(s)", len(errors))
            raise ValidationFailed(errors)

        validated = ValidatedDocument(grid, document.obstacles, document.journeys)
        logger.debug(
            "Validated document: %d distinct obstacles out of %d listed",
            len(validated.obstacles), len(document.obstacles),
        )
        return validated

    def check_grid(self, grid: Grid) -> List[ValidationError]:
        if grid.is_valid():
            return []
        return [ValidationError.invalid_grid(grid)]

    def check_obstacle(self, grid: Grid, obstacle: Obstacle) -> List[ValidationError]:
        if grid.is_within_bounds(obstacle.x, obstacle.y):
            return []
        return [ValidationError.obstacle_out_of_bounds(obstacle, grid)]

    def check_state(self, grid: Grid, state: RobotState, initial: bool) -> List[ValidationError]:
        if grid.is_within_bounds(state.x, state.y):
            return []
        return [ValidationError.robot_state_out_of_bounds(state, grid, initial)]

    def check_journey(self, grid: Grid, journey: RobotJourney) -> List[ValidationError]:
        # Initial before final, both always checked
        return (self.check_state(grid, journey.initial, initial=True) +
                self.check_state(grid, journey.expected_final, initial=False))


def validate_document(document: ParsedDocument) -> ValidatedDocument:
    """Validate a parsed document. Raises ValidationFailed listing every violation."""
    return Validator().validate(document)
