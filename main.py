# main.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from robot_journeys.pipeline import RunResult, run
from robot_journeys.simulation.observers import (
    AsciiGridObserver,
    CompositeObserver,
    JourneyObserver,
    LoggingObserver,
    TrajectoryRecorder,
)
from robot_journeys.utils.consts import DEFAULT_LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger("robot_journeys.main")


# =============================================================================
# PYDANTIC MODELS (JSON REPORT)
# =============================================================================

class StatePoint(BaseModel):
    x: int
    y: int
    d: str


class JourneyReport(BaseModel):
    index: int
    status: str
    line: str
    state: StatePoint


class RunReport(BaseModel):
    file: str
    ok: bool
    lines: List[str]
    journeys: List[JourneyReport]
    errors: List[str]


def build_report(file_name: str, result: RunResult) -> RunReport:
    journeys = [
        JourneyReport(
            index=i,
            status=outcome.kind,
            line=line,
            state=StatePoint(x=outcome.state.x, y=outcome.state.y, d=outcome.state.direction.letter),
        )
        for i, (outcome, line) in enumerate(zip(result.outcomes, result.lines))
    ]
    return RunReport(
        file=file_name,
        ok=result.ok,
        lines=result.lines,
        journeys=journeys,
        errors=[] if result.ok else list(result.lines),
    )


# =============================================================================
# INPUT FILE
# =============================================================================

class InputFileError(Exception):
    """The input file could not be read. The message is shown to the user as-is."""


def load_file(path: str) -> str:
    # newline="" keeps '\r\n' and lone '\r' as written; the grammar tells them apart
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except FileNotFoundError:
        raise InputFileError(f"Error: File not found at path '{path}'.")
    except PermissionError:
        raise InputFileError(f"Error: Access to the file at '{path}' is denied.")
    except UnicodeDecodeError as e:
        raise InputFileError(f"Error: File at '{path}' is not valid UTF-8: {e.reason}")
    except OSError as e:
        raise InputFileError(f"Error: An I/O error occurred while reading the file: {e.strerror or e}")


# =============================================================================
# CLI
# =============================================================================

def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Simulate robot journeys described in a GRID/OBSTACLE/journey document.",
    )
    parser.add_argument("input_file", help="Path to the journey document")
    parser.add_argument(
        "-v", "--visualise",
        action="store_true",
        help="Print an ASCII view of the grid around the robot after every step",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of plain output lines",
    )
    parser.add_argument(
        "--plot",
        metavar="IMAGE",
        default=None,
        help="Save a trajectory plot of every journey to IMAGE (e.g. run.png)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics level on stderr (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        content = load_file(args.input_file)
    except InputFileError as e:
        print(str(e))
        return 1

    file_name = Path(args.input_file).name
    visualiser = AsciiGridObserver() if args.visualise else None
    recorder = TrajectoryRecorder() if args.plot else None

    observers: List[JourneyObserver] = [o for o in (visualiser, recorder) if o is not None]
    if logger.isEnabledFor(logging.DEBUG):
        observers.append(LoggingObserver())
    observer = CompositeObserver(observers) if observers else None

    result = run(content, observer)

    if args.json:
        print(build_report(file_name, result).model_dump_json(indent=2))
    else:
        header = f"Processing file {file_name}"
        if args.visualise:
            header += " with visualisation"
        print(header)
        if visualiser is not None:
            for trace in visualiser.output:
                print(trace)
        for line in result.lines:
            print(line)

    if recorder is not None and result.document is not None:
        # Imported here so plain runs never load matplotlib
        from dashboard import save_run_plot
        save_run_plot(result.document, recorder, args.plot, title=file_name)
        logger.info("Trajectory plot written to %s", args.plot)
    elif recorder is not None:
        logger.warning("No trajectory plot written: the document was rejected")

    return 0


if __name__ == "__main__":
    sys.exit(main())
