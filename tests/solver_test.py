"""Solver orchestration: published examples, determinism, fatal errors."""

import pytest

from campsite import read_puzzle_input, solve_calories, solve_strategy_guide
from puzzles.pipeline import InputParseError
from puzzles.scoring import EmptyInventoryError
from puzzles.utils import hash_text


CALORIES_EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
STRATEGY_GUIDE_EXAMPLE = "A Y\nB X\nC Z\n"


def test_calories_part_one():
    result = solve_calories(CALORIES_EXAMPLE)
    assert result["puzzle"] == "calories"
    assert result["part"] == 1
    assert result["answer"] == 24000
    assert result["elves"] == 5
    assert result["top_totals"] == [24000]
    assert result["input_hash"] == hash_text(CALORIES_EXAMPLE)


def test_calories_part_two():
    result = solve_calories(CALORIES_EXAMPLE, top=3)
    assert result["part"] == 2
    assert result["top_totals"] == [24000, 11000, 10000]
    assert result["answer"] == 45000


def test_calories_empty_input_raises():
    with pytest.raises(EmptyInventoryError):
        solve_calories("\n")


def test_strategy_guide_part_one():
    result = solve_strategy_guide(STRATEGY_GUIDE_EXAMPLE)
    assert result["puzzle"] == "rock_paper_scissors"
    assert result["part"] == 1
    assert result["answer"] == 15
    assert result["total_score"] == 15
    assert (result["wins"], result["losses"], result["draws"]) == (1, 1, 1)
    assert result["rounds"] == 3


def test_strategy_guide_part_two():
    result = solve_strategy_guide(STRATEGY_GUIDE_EXAMPLE, strategy="outcome")
    assert result["part"] == 2
    assert result["answer"] == 12
    assert (result["wins"], result["losses"], result["draws"]) == (1, 1, 1)


def test_strategy_guide_determinism():
    """Same input -> identical results across 10 runs."""
    results = [solve_strategy_guide(STRATEGY_GUIDE_EXAMPLE) for _ in range(10)]
    assert all(r == results[0] for r in results)


def test_strategy_guide_bad_line_aborts_whole_run():
    """One bad line anywhere means no result at all."""
    with pytest.raises(InputParseError) as exc_info:
        solve_strategy_guide("A Y\nB X\nC Q\n")
    assert exc_info.value.line_no == 3


def test_read_puzzle_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(STRATEGY_GUIDE_EXAMPLE, encoding="utf-8")
    assert read_puzzle_input(path) == STRATEGY_GUIDE_EXAMPLE


def test_read_puzzle_input_missing(tmp_path):
    with pytest.raises(FileNotFoundError) as exc_info:
        read_puzzle_input(tmp_path / "nope.txt")
    assert "Puzzle input not found" in str(exc_info.value)
