# IN THIS FILE: ONE ROBOT RUN (START STATE, COMMANDS, EXPECTED END STATE)

from typing import Iterable, Tuple

from robot_journeys.utils.enums import Command
from robot_journeys.utils.types import RobotState


class RobotJourney:
    """
    One robot run as written in the input document.
    """

    def __init__(
        self,
        initial: RobotState,
        commands: Iterable[Command],
        expected_final: RobotState,
    ):
        """
        Args:
            initial: Where the robot starts and which way it faces
            commands: Commands in the order they must be executed
            expected_final: The state the document claims the robot ends in
        """
        self.initial = initial
        self.commands: Tuple[Command, ...] = tuple(commands)
        self.expected_final = expected_final

    def command_string(self) -> str:
        """Commands back in their DSL spelling, e.g. 'FFLFF'."""
        return "".join(command.value for command in self.commands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RobotJourney):
            return False
        return (self.initial == other.initial and
                self.commands == other.commands and
                self.expected_final == other.expected_final)

    def __hash__(self) -> int:
        return hash((self.initial, self.commands, self.expected_final))

    def __repr__(self) -> str:
        return (f"RobotJourney(initial={self.initial!r}, "
                f"commands={self.command_string()!r}, "
                f"expected_final={self.expected_final!r})")
