"""Stage B: Decode strategy guide tokens into rounds.

First column is always the opponent's hand (A/B/C). The second column is read
either as the player's hand (X/Y/Z) or as the outcome the round must end with.
"""

from puzzles.pipeline.parse import InputParseError
from puzzles.scoring.engine import Hand, Outcome, Round, choose_hand

OPPONENT_TOKENS = {"A": Hand.ROCK, "B": Hand.PAPER, "C": Hand.SCISSORS}
PLAYER_TOKENS = {"X": Hand.ROCK, "Y": Hand.PAPER, "Z": Hand.SCISSORS}
OUTCOME_TOKENS = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}

STRATEGIES = ("hand", "outcome")


def _lookup(table: dict, token: str, line_no: int, column: str):
    try:
        return table[token]
    except KeyError:
        expected = "/".join(table)
        raise InputParseError(line_no, token, f"unknown {column} token, expected {expected}") from None


def decode_hand_round(line_no: int, left: str, right: str) -> Round:
    """Part one: second column is the hand to play."""
    opponent = _lookup(OPPONENT_TOKENS, left, line_no, "opponent")
    player = _lookup(PLAYER_TOKENS, right, line_no, "player")
    return Round(opponent, player)


def decode_outcome_round(line_no: int, left: str, right: str) -> Round:
    """Part two: second column is the required outcome; pick the hand that produces it."""
    opponent = _lookup(OPPONENT_TOKENS, left, line_no, "opponent")
    outcome = _lookup(OUTCOME_TOKENS, right, line_no, "outcome")
    return Round(opponent, choose_hand(opponent, outcome))


def decode_rounds(pairs: list[tuple[int, str, str]], strategy: str = "hand") -> list[Round]:
    """Decode every (line_no, left, right) pair with the given strategy."""
    if strategy == "hand":
        decode = decode_hand_round
    elif strategy == "outcome":
        decode = decode_outcome_round
    else:
        raise ValueError(f"Unknown strategy {strategy!r}. Valid: {', '.join(STRATEGIES)}")
    return [decode(line_no, left, right) for line_no, left, right in pairs]
