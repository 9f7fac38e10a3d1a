"""Orchestrates parse → decode → score for each puzzle. Returns plain result dicts."""

import logging

from puzzles.utils import hash_text
from puzzles.pipeline import decode_rounds, split_groups, split_rounds
from puzzles.scoring import calorie_totals, max_calories, tally_rounds, top_calories

log = logging.getLogger(__name__)


def solve_calories(text: str, top: int = 1) -> dict:
    """
    Day 1. With top=1 the answer is the largest elf total (part one);
    otherwise it is the sum of the `top` largest totals (part two).
    Raises InputParseError on a non-integer line, EmptyInventoryError on empty input.
    """
    groups = split_groups(text)
    totals = calorie_totals(groups)
    log.debug("Parsed %d elf inventories", len(totals))

    if top == 1:
        best = max_calories(totals)
        top_totals = [best]
        part = 1
    else:
        top_totals = top_calories(totals, top)
        part = 2

    return {
        "puzzle": "calories",
        "part": part,
        "answer": sum(top_totals),
        "input_hash": hash_text(text),
        "elves": len(totals),
        "top_totals": top_totals,
    }


def solve_strategy_guide(text: str, strategy: str = "hand") -> dict:
    """
    Day 2. strategy="hand" reads the second column as the player's hand (part one),
    strategy="outcome" reads it as the required outcome (part two).
    Any unparseable line aborts the whole run; there are no partial results.
    """
    pairs = split_rounds(text)
    rounds = decode_rounds(pairs, strategy)
    tally = tally_rounds(rounds)
    log.debug("Scored %d rounds with strategy=%s", tally.rounds, strategy)

    return {
        "puzzle": "rock_paper_scissors",
        "part": 1 if strategy == "hand" else 2,
        "answer": tally.total_score,
        "input_hash": hash_text(text),
        "strategy": strategy,
        **tally.as_dict(),
    }
