"""Deterministic puzzle scoring."""

from puzzles.scoring.engine import (
    Hand,
    Outcome,
    Round,
    Tally,
    choose_hand,
    round_outcome,
    score_round,
    tally_rounds,
)
from puzzles.scoring.calories import EmptyInventoryError, calorie_totals, max_calories, top_calories

__all__ = [
    "Hand",
    "Outcome",
    "Round",
    "Tally",
    "choose_hand",
    "round_outcome",
    "score_round",
    "tally_rounds",
    "EmptyInventoryError",
    "calorie_totals",
    "max_calories",
    "top_calories",
]
