# IN THIS FILE: DOCUMENT GRAMMAR
#
#   GRID <width>x<height>
#   [OBSTACLE <x> <y>]*
#   [<x> <y> <DIR>
#    <COMMANDS>
#    <x> <y> <DIR>]*

import logging
from typing import List

from robot_journeys.entities.document import ParsedDocument
from robot_journeys.entities.grid import Grid
from robot_journeys.entities.journey import RobotJourney
from robot_journeys.entities.obstacle import Obstacle
from robot_journeys.parsing.primitives import Scanner
from robot_journeys.utils.consts import GRID_KEYWORD, GRID_SEPARATOR, OBSTACLE_KEYWORD
from robot_journeys.utils.types import RobotState

logger = logging.getLogger(__name__)


class DocumentParser:
    """
    Turns the input text into a ParsedDocument.
    Stops at the first problem with a ParserError; no partial documents.
    """

    def parse(self, text: str) -> ParsedDocument:
        scanner = Scanner(text)

        grid = self.parse_grid(scanner)
        scanner.skip_whitespace()

        obstacles: List[Obstacle] = []
        while scanner.starts_with(OBSTACLE_KEYWORD):
            obstacles.append(self.parse_obstacle(scanner))
            scanner.skip_whitespace()

        journeys: List[RobotJourney] = []
        while True:
            scanner.skip_whitespace()
            if scanner.at_end():
                break
            if not scanner.at_digit():
                if journeys:
                    raise scanner.error("robot journey or end of input")
                raise scanner.error("OBSTACLE line, robot journey or end of input")
            journeys.append(self.parse_journey(scanner))

        document = ParsedDocument(grid, obstacles, journeys)
        logger.debug(
            "Parsed document: grid %s, %d obstacles, %d journeys",
            grid, len(document.obstacles), len(document.journeys),
        )
        return document

    def parse_grid(self, scanner: Scanner) -> Grid:
        scanner.literal(GRID_KEYWORD, "GRID keyword")
        scanner.spaces1("at least one space after GRID keyword")
        width = scanner.number("grid width")
        scanner.literal(GRID_SEPARATOR, "'x' between grid width and height")
        height = scanner.number("grid height")
        scanner.optional_end_of_line()
        return Grid(width, height)

    def parse_obstacle(self, scanner: Scanner) -> Obstacle:
        scanner.literal(OBSTACLE_KEYWORD, "OBSTACLE keyword")
        scanner.spaces1("at least one space after OBSTACLE keyword")
        x = scanner.number("obstacle X coordinate")
        scanner.spaces1("at least one space after obstacle X coordinate")
        y = scanner.number("obstacle Y coordinate")
        scanner.optional_end_of_line()
        return Obstacle(x, y)

    def parse_robot_state(self, scanner: Scanner, which: str) -> RobotState:
        x = scanner.number(f"{which} robot X coordinate")
        scanner.spaces1(f"at least one space after {which} robot X coordinate")
        y = scanner.number(f"{which} robot Y coordinate")
        scanner.spaces1(f"at least one space after {which} robot Y coordinate")
        direction = scanner.direction(f"{which} robot direction, one of [N, E, S, W]")
        return RobotState(x, y, direction)

    def parse_journey(self, scanner: Scanner) -> RobotJourney:
        initial = self.parse_robot_state(scanner, "initial")
        scanner.end_of_line("newline after initial state")
        commands = scanner.commands1("robot commands, one or more of [L, R, F]")
        scanner.end_of_line("newline after commands")
        expected_final = self.parse_robot_state(scanner, "final")
        scanner.optional_end_of_line()
        return RobotJourney(initial, commands, expected_final)


def parse_document(text: str) -> ParsedDocument:
    """Parse a whole input document. Raises ParserError on the first violation."""
    return DocumentParser().parse(text)
