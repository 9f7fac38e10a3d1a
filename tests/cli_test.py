"""CLI: printed output, audit trail, fatal errors exit 1."""

import json
import logging

import pytest

import main as cli


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    d = tmp_path / "logs"
    monkeypatch.setenv("CAMPSITE_LOG_DIR", str(d))
    yield d
    # handlers hold the captured stderr and the tmp log file of this test
    logger = logging.getLogger("campsite")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def guide(tmp_path):
    path = tmp_path / "guide.txt"
    path.write_text("A Y\nB X\nC Z\n", encoding="utf-8")
    return path


@pytest.fixture
def inventory(tmp_path):
    path = tmp_path / "calories.txt"
    path.write_text("1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n", encoding="utf-8")
    return path


def _audit_entries(log_dir):
    lines = (log_dir / "audit.log").read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines]


def test_rps_output(log_dir, guide, capsys):
    cli.main(["rps", str(guide)])
    out = capsys.readouterr().out
    assert out == "Wins: 1\nLosses: 1\nDraws: 1\nTotal Score: 15\n"

    entries = _audit_entries(log_dir)
    assert entries[-1]["action"] == "rock_paper_scissors"
    assert entries[-1]["status"] == "ok"
    assert entries[-1]["answer"] == 15
    assert (log_dir / "puzzle_results.csv").exists()
    assert (log_dir / "puzzle_results.jsonl").exists()


def test_rps_outcome_strategy_json(log_dir, guide, capsys):
    cli.main(["rps", str(guide), "--strategy", "outcome", "--json"])
    result = json.loads(capsys.readouterr().out)
    assert result["answer"] == 12
    assert result["part"] == 2


def test_calories_output(log_dir, inventory, capsys):
    cli.main(["calories", str(inventory)])
    assert capsys.readouterr().out == "24000\n"


def test_calories_top_three_output(log_dir, inventory, capsys):
    cli.main(["calories", str(inventory), "--top", "3"])
    assert capsys.readouterr().out == "[24000, 11000, 10000]\n45000\n"


def test_report_dir_writes_report(log_dir, guide, tmp_path, capsys):
    reports = tmp_path / "reports"
    cli.main(["rps", str(guide), "--report-dir", str(reports)])
    files = list(reports.glob("run_report_*.json"))
    assert len(files) == 1
    report = json.loads(files[0].read_text(encoding="utf-8"))
    assert report["answer"] == 15


def test_missing_input_exits_1(log_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["rps", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert "Error: Puzzle input not found" in capsys.readouterr().err

    entries = _audit_entries(log_dir)
    assert entries[-1]["status"] == "error"


def test_bad_token_exits_1_without_output(log_dir, tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("A Y\nB Q\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["rps", str(path)])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Line 2" in captured.err


def test_default_input_from_env(log_dir, guide, monkeypatch, capsys):
    monkeypatch.setenv("CAMPSITE_INPUT", str(guide))
    cli.main(["rps"])
    assert "Total Score: 15" in capsys.readouterr().out


def test_directory_input_exits_1(log_dir, tmp_path, capsys):
    input_dir = tmp_path / "inputs"
    input_dir.mkdir()
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["rps", str(input_dir)])
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.count("Error: ") == 1

    entry = _audit_entries(log_dir)[-1]
    assert entry["status"] == "error"
    assert entry["input_path"] == str(input_dir)
    assert entry["timestamp"].endswith("Z")


def test_unwritable_report_dir_exits_1(log_dir, guide, tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["rps", str(guide), "--report-dir", str(blocker / "reports")])
    assert exc_info.value.code == 1
    assert "Error: " in capsys.readouterr().err
    assert _audit_entries(log_dir)[-1]["status"] == "error"
