import random

import pytest

from robot_journeys.formatting.formatter import format_outcome
from robot_journeys.pipeline import execute, run
from robot_journeys.simulation.outcomes import Crashed, OutOfBounds, Outcome, Success, UnexpectedFinalState
from robot_journeys.utils.enums import Direction
from robot_journeys.utils.types import RobotState

SEEDS = range(25)
LETTERS = "NESW"


class TestSampleDocuments:
    def test_five_by_five(self, five_by_five: str) -> None:
        assert execute(five_by_five) == [
            "SUCCESS 1 1 E",
            "SUCCESS 3 3 N",
            "CRASHED 1 3",
        ]

    def test_four_by_three(self, four_by_three: str) -> None:
        assert execute(four_by_three) == [
            "SUCCESS 1 0 W",
            "FAILURE 0 0 W",
            "OUT OF BOUNDS",
        ]

    def test_blank_line_separated_document(self) -> None:
        text = (
            "GRID 5x5\n\nOBSTACLE 1 3\n\n"
            "0 0 E\nFFLFF\n1 1 E\n\n"
            "1 1 E\nFFLFF\n3 3 N\n\n"
            "1 1 E\nFFLFF\n3 3 N"
        )
        # The first journey ends at (2, 2) facing north, not at its declared (1, 1) E
        assert execute(text) == ["FAILURE 2 2 N", "SUCCESS 3 3 N", "SUCCESS 3 3 N"]

    def test_empty_valid_grid(self) -> None:
        assert execute("GRID 5x5") == []
        assert execute("GRID 1x1\n\n") == []

    def test_obstacles_without_journeys(self) -> None:
        assert execute("GRID 3x3\nOBSTACLE 1 1\nOBSTACLE 1 1\n") == []

    def test_obstacle_at_start(self) -> None:
        text = "GRID 4x4\nOBSTACLE 2 1\n2 1 E\nLFRFFRRF\n0 0 N\n"
        assert execute(text) == ["CRASHED 2 1"]


class TestFailures:
    def test_parse_failure_is_one_line(self) -> None:
        lines = execute("GRID 5x5\n0 0 N\nF F\n0 2 N")
        assert len(lines) == 1
        assert lines[0].startswith("Parsing: ")
        assert "newline after commands" in lines[0]

    def test_validation_failure_lists_every_error(self) -> None:
        lines = execute("GRID 0x5\nOBSTACLE 7 1\n0 0 N\nF\n0 1 N\n")
        assert lines[:2] == [
            "Validation: Invalid grid Grid(width=0, height=5)",
            "Validation: Obstacle [Obstacle(x=7, y=1)] out of bounds of defined grid [0x5]",
        ]
        # Both journey endpoints are out of a zero-width grid too
        assert len(lines) == 4
        assert all(line.startswith("Validation: ") for line in lines)

    def test_validation_failure_skips_simulation(self) -> None:
        result = run("GRID 0x5\nOBSTACLE 7 1\n")
        assert not result.ok
        assert len(result.validation_errors) == 2
        assert result.outcomes == []
        assert result.document is None

    def test_parse_failure_skips_validation(self) -> None:
        # The grid is invalid too, but parsing fails first
        result = run("GRID 0x0\nOBSTACLE a b")
        assert result.parser_error is not None
        assert result.validation_errors == []
        assert len(result.lines) == 1

    def test_successful_run_result(self, five_by_five: str) -> None:
        result = run(five_by_five)
        assert result.ok
        assert result.document is not None
        assert len(result.outcomes) == 3
        assert result.lines == [format_outcome(o) for o in result.outcomes]

    def test_out_of_bounds_line_has_no_coordinates(self) -> None:
        assert execute("GRID 2x2\n1 1 E\nF\n1 1 E") == ["OUT OF BOUNDS"]


class TestFormatter:
    @pytest.mark.parametrize("outcome, line", [
        (Success(RobotState(3, 4, Direction.WEST)), "SUCCESS 3 4 W"),
        (OutOfBounds(RobotState(-1, 0, Direction.WEST)), "OUT OF BOUNDS"),
        (Crashed(RobotState(1, 3, Direction.NORTH)), "CRASHED 1 3"),
        (UnexpectedFinalState(RobotState(0, 0, Direction.SOUTH)), "FAILURE 0 0 S"),
    ])
    def test_lines(self, outcome, line) -> None:
        assert format_outcome(outcome) == line

    def test_unknown_outcome_kind(self) -> None:
        with pytest.raises(TypeError):
            format_outcome(Outcome(RobotState(0, 0, Direction.NORTH)))


class TestProperties:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_deterministic(self, seed: int) -> None:
        rng = random.Random(seed)
        width, height = rng.randint(1, 10), rng.randint(1, 10)
        obstacles = "".join(
            f"OBSTACLE {rng.randrange(width)} {rng.randrange(height)}\n" for _ in range(rng.randint(0, 5))
        )
        count = rng.randint(0, 4)
        journeys = "".join(
            f"{rng.randrange(width)} {rng.randrange(height)} {rng.choice(LETTERS)}\n"
            f"{''.join(rng.choice('LRF') for _ in range(rng.randint(1, 12)))}\n"
            f"{rng.randrange(width)} {rng.randrange(height)} {rng.choice(LETTERS)}\n\n"
            for _ in range(count)
        )
        text = f"GRID {width}x{height}\n{obstacles}\n{journeys}"
        first = execute(text)
        assert first == execute(text)
        assert len(first) == count

    @pytest.mark.parametrize("seed", SEEDS)
    def test_full_rotation_returns_to_start(self, seed: int) -> None:
        rng = random.Random(seed)
        width, height = rng.randint(1, 2_000_000), rng.randint(1, 2_000_000)
        blocks, expected = [], []
        for _ in range(rng.randint(1, 5)):
            x, y, d = rng.randrange(width), rng.randrange(height), rng.choice(LETTERS)
            turns = rng.choice(["RRRR", "LLLL"]) * rng.randint(1, 3)
            blocks.append(f"{x} {y} {d}\n{turns}\n{x} {y} {d}")
            expected.append(f"SUCCESS {x} {y} {d}")
        text = f"GRID {width}x{height}\n\n" + "\n\n".join(blocks)
        assert execute(text) == expected

    @pytest.mark.parametrize("seed", SEEDS)
    def test_driving_straight_leaves_an_empty_grid(self, seed: int) -> None:
        rng = random.Random(seed)
        width, height = rng.randint(1, 30), rng.randint(1, 30)
        moves = "F" * (max(width, height) + 1)
        blocks = [
            f"{rng.randrange(width)} {rng.randrange(height)} {rng.choice(LETTERS)}\n{moves}\n0 0 N"
            for _ in range(rng.randint(1, 5))
        ]
        text = f"GRID {width}x{height}\n\n" + "\n\n".join(blocks)
        assert execute(text) == ["OUT OF BOUNDS"] * len(blocks)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_obstacle_border_stops_every_interior_robot(self, seed: int) -> None:
        rng = random.Random(seed)
        width, height = rng.randint(3, 20), rng.randint(3, 20)
        border = (
            [(x, 0) for x in range(width)] +
            [(x, height - 1) for x in range(width)] +
            [(0, y) for y in range(1, height - 1)] +
            [(width - 1, y) for y in range(1, height - 1)]
        )
        obstacles = "\n".join(f"OBSTACLE {x} {y}" for x, y in border)
        moves = "F" * max(width, height)

        blocks, expected = [], []
        for _ in range(rng.randint(1, 5)):
            x, y, d = rng.randint(1, width - 2), rng.randint(1, height - 2), rng.choice(LETTERS)
            blocks.append(f"{x} {y} {d}\n{moves}\n{x} {y} {d}")
            hit = {"N": (x, height - 1), "E": (width - 1, y), "S": (x, 0), "W": (0, y)}[d]
            expected.append(f"CRASHED {hit[0]} {hit[1]}")

        text = f"GRID {width}x{height}\n{obstacles}\n\n" + "\n\n".join(blocks)
        assert execute(text) == expected

    @pytest.mark.parametrize("seed", SEEDS)
    def test_one_step_with_wrong_expectation(self, seed: int) -> None:
        rng = random.Random(seed)
        width, height = rng.randint(3, 50), rng.randint(3, 50)
        x, y, d = rng.randint(1, width - 2), rng.randint(1, height - 2), rng.choice(LETTERS)
        moved = RobotState(x, y, Direction.from_letter(d)).ahead()
        text = f"GRID {width}x{height}\n{x} {y} {d}\nF\n0 0 N\n"
        assert execute(text) == [f"FAILURE {moved.x} {moved.y} {d}"]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_arbitrary_text_never_raises(self, seed: int) -> None:
        rng = random.Random(seed)
        alphabet = "GRIDOBSTACLExNESWLRF0123456789 \n\r\t-é"
        for _ in range(40):
            noise = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 60)))
            prefix = rng.choice(["", "GRID 3x3\n", "GRID 3x3\nOBSTACLE 1 1\n", "GRID 3x3\n0 0 N\n"])
            lines = execute(prefix + noise)
            assert isinstance(lines, list)
            assert all(isinstance(line, str) and line for line in lines)
