# IN THIS FILE: GRAMMAR PRIMITIVES (integers, directions, commands, spacing, line ends)

from typing import List, Optional, Tuple

from robot_journeys.utils.consts import (
    COMMAND_LETTERS,
    DIRECTION_LETTERS,
    FIELD_SEPARATOR,
    MAX_INT,
)
from robot_journeys.utils.enums import Command, Direction
from robot_journeys.utils.errors import ParserError

DIGITS = "0123456789"


class Scanner:
    """
    Cursor over the input text.

    Every consuming method either advances past what it matched or raises
    ParserError naming the construct it expected. Nothing backtracks once
    consumed; callers peek first (starts_with / peek) when a rule is optional.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self.text[self.pos]

    def starts_with(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def at_digit(self) -> bool:
        ch = self.peek()
        return ch is not None and ch in DIGITS

    def position(self, pos: int) -> Tuple[int, int]:
        """1-based (line, column) of an offset. Scans from the start, so only call it on errors."""
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    @property
    def line(self) -> int:
        return self.position(self.pos)[0]

    @property
    def column(self) -> int:
        return self.position(self.pos)[1]

    def describe_current(self) -> str:
        """What sits under the cursor, for error messages."""
        ch = self.peek()
        if ch is None:
            return "end of input"
        if ch == "\n":
            return "newline"
        if ch == "\r":
            return "carriage return"
        if ch == " ":
            return "space"
        return repr(ch)

    def error(self, expected: str, detail: Optional[str] = None) -> ParserError:
        line, column = self.position(self.pos)
        return ParserError(expected, self.describe_current(), line, column, detail)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def literal(self, literal: str, expected: str) -> None:
        if not self.starts_with(literal):
            raise self.error(expected)
        self.pos += len(literal)

    def spaces1(self, expected: str) -> None:
        """One or more plain spaces. Tabs and newlines do not count."""
        if self.peek() != FIELD_SEPARATOR:
            raise self.error(expected)
        while self.peek() == FIELD_SEPARATOR:
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Zero or more whitespace characters of any kind, newlines included."""
        while not self.at_end() and self.text[self.pos].isspace():
            self.pos += 1

    def number(self, expected: str) -> int:
        """Non-negative decimal integer that fits the signed 32-bit range."""
        if not self.at_digit():
            raise self.error(expected)
        start = self.pos
        while self.at_digit():
            self.pos += 1
        significant = self.text[start:self.pos].lstrip("0") or "0"
        # Length check first: int() refuses very long digit strings
        if len(significant) > len(str(MAX_INT)) or int(significant) > MAX_INT:
            line, column = self.position(start)
            raise ParserError(
                expected,
                repr(self.text[start:self.pos][:20]),
                line,
                column,
                "Invalid decimal value",
            )
        return int(significant)

    def end_of_line(self, expected: str) -> None:
        """'\\n' or '\\r\\n'. A lone '\\r' is rejected."""
        if not self.optional_end_of_line():
            raise self.error(expected)

    def optional_end_of_line(self) -> bool:
        if self.starts_with("\r\n"):
            self.pos += 2
            return True
        if self.starts_with("\n"):
            self.pos += 1
            return True
        return False

    def direction(self, expected: str) -> Direction:
        ch = self.peek()
        if ch is None or ch not in DIRECTION_LETTERS:
            raise self.error(expected)
        self.pos += 1
        return Direction.from_letter(ch)

    def commands1(self, expected: str) -> List[Command]:
        """One or more command letters with nothing between them."""
        commands = []
        while self.peek() is not None and self.peek() in COMMAND_LETTERS:
            commands.append(Command.from_letter(self.text[self.pos]))
            self.pos += 1
        if not commands:
            raise self.error(expected)
        return commands
