"""2-stage input pipeline: parse → decode."""

from puzzles.pipeline.parse import InputParseError, split_groups, split_rounds
from puzzles.pipeline.decode import (
    STRATEGIES,
    decode_hand_round,
    decode_outcome_round,
    decode_rounds,
)

__all__ = [
    "InputParseError",
    "split_groups",
    "split_rounds",
    "STRATEGIES",
    "decode_hand_round",
    "decode_outcome_round",
    "decode_rounds",
]
