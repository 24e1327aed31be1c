import json

import pytest

from main import build_report, load_file, InputFileError, main
from robot_journeys.pipeline import run


@pytest.fixture
def journey_file(tmp_path, five_by_five):
    path = tmp_path / "journeys.txt"
    path.write_text(five_by_five, encoding="utf-8")
    return path


def test_plain_run(journey_file, capsys) -> None:
    assert main([str(journey_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Processing file journeys.txt",
        "SUCCESS 1 1 E",
        "SUCCESS 3 3 N",
        "CRASHED 1 3",
    ]


def test_missing_file(tmp_path, capsys) -> None:
    missing = tmp_path / "nope.txt"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().out.strip() == f"Error: File not found at path '{missing}'."


def test_visualise(journey_file, capsys) -> None:
    assert main(["--visualise", str(journey_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Processing file journeys.txt with visualisation\n")
    assert out.count("== Starting Journey") == 3
    assert out.rstrip().endswith("CRASHED 1 3")


def test_json_report(journey_file, capsys) -> None:
    assert main(["--json", str(journey_file)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["file"] == "journeys.txt"
    assert report["ok"] is True
    assert report["errors"] == []
    assert [j["status"] for j in report["journeys"]] == ["SUCCESS", "SUCCESS", "CRASHED"]
    assert report["journeys"][2]["state"] == {"x": 1, "y": 3, "d": "N"}


def test_json_report_for_rejected_document(tmp_path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("GRID 0x5\n", encoding="utf-8")
    assert main(["--json", str(path)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["ok"] is False
    assert report["journeys"] == []
    assert report["errors"] == ["Validation: Invalid grid Grid(width=0, height=5)"]


def test_plot_is_written(journey_file, tmp_path, capsys) -> None:
    image = tmp_path / "run.png"
    assert main(["--plot", str(image), str(journey_file)]) == 0
    assert image.exists()
    assert image.stat().st_size > 0
    # Plotting does not change the printed lines
    assert capsys.readouterr().out.splitlines()[1:] == ["SUCCESS 1 1 E", "SUCCESS 3 3 N", "CRASHED 1 3"]


def test_no_plot_for_parse_failure(tmp_path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("GRID x\n", encoding="utf-8")
    image = tmp_path / "run.png"
    assert main(["--plot", str(image), str(path)]) == 0
    assert not image.exists()
    assert capsys.readouterr().out.splitlines()[1].startswith("Parsing: ")


def test_crlf_file(tmp_path, capsys) -> None:
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"GRID 2x2\r\n\r\n0 0 N\r\nF\r\n0 1 N\r\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["SUCCESS 0 1 N"]


def test_byte_order_mark_is_ignored(tmp_path) -> None:
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbfGRID 2x2\n")
    assert load_file(str(path)) == "GRID 2x2\n"


def test_invalid_utf8(tmp_path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"GRID 2x2\n\xff\xfe\n")
    with pytest.raises(InputFileError) as exc:
        load_file(str(path))
    assert "not valid UTF-8" in str(exc.value)


def test_unknown_flag_exits_with_usage_error(journey_file) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--frobnicate", str(journey_file)])
    assert exc.value.code == 2


def test_build_report_pairs_outcomes_with_lines(four_by_three) -> None:
    report = build_report("four.txt", run(four_by_three))
    assert [(j.index, j.line) for j in report.journeys] == [
        (0, "SUCCESS 1 0 W"),
        (1, "FAILURE 0 0 W"),
        (2, "OUT OF BOUNDS"),
    ]
    # The attempted cell is still reported in the structured state
    assert report.journeys[2].state.y == 3
