"""Day 2: Rock Paper Scissors round scoring. Pure lookup tables, no I/O."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Hand(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class Outcome(Enum):
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"

    def inverted(self) -> "Outcome":
        """Outcome seen from the other side of the table."""
        if self is Outcome.WIN:
            return Outcome.LOSS
        if self is Outcome.LOSS:
            return Outcome.WIN
        return Outcome.DRAW


@dataclass(frozen=True)
class Round:
    opponent: Hand
    player: Hand


SHAPE_SCORES = {Hand.ROCK: 1, Hand.PAPER: 2, Hand.SCISSORS: 3}
OUTCOME_SCORES = {Outcome.LOSS: 0, Outcome.DRAW: 3, Outcome.WIN: 6}

# (opponent, player) -> outcome for the player
OUTCOME_TABLE = {
    (Hand.ROCK, Hand.ROCK): Outcome.DRAW,
    (Hand.ROCK, Hand.PAPER): Outcome.WIN,
    (Hand.ROCK, Hand.SCISSORS): Outcome.LOSS,
    (Hand.PAPER, Hand.ROCK): Outcome.LOSS,
    (Hand.PAPER, Hand.PAPER): Outcome.DRAW,
    (Hand.PAPER, Hand.SCISSORS): Outcome.WIN,
    (Hand.SCISSORS, Hand.ROCK): Outcome.WIN,
    (Hand.SCISSORS, Hand.PAPER): Outcome.LOSS,
    (Hand.SCISSORS, Hand.SCISSORS): Outcome.DRAW,
}


def round_outcome(opponent: Hand, player: Hand) -> Outcome:
    """Outcome of a round from the player's point of view."""
    return OUTCOME_TABLE[(opponent, player)]


def score_round(round_: Round) -> tuple[int, Outcome]:
    """
    Score a single round: shape score of the player's hand plus outcome score.
    Returns (score, outcome).
    """
    outcome = round_outcome(round_.opponent, round_.player)
    return SHAPE_SCORES[round_.player] + OUTCOME_SCORES[outcome], outcome


def choose_hand(opponent: Hand, outcome: Outcome) -> Hand:
    """Hand the player must show against `opponent` to end the round with `outcome`."""
    for (opp, player), result in OUTCOME_TABLE.items():
        if opp is opponent and result is outcome:
            return player
    raise KeyError(f"No hand yields {outcome.value} against {opponent.value}")


@dataclass
class Tally:
    total_score: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def record(self, score: int, outcome: Outcome) -> None:
        self.total_score += score
        if outcome is Outcome.WIN:
            self.wins += 1
        elif outcome is Outcome.LOSS:
            self.losses += 1
        else:
            self.draws += 1

    @property
    def rounds(self) -> int:
        return self.wins + self.losses + self.draws

    def as_dict(self) -> dict:
        return {
            "total_score": self.total_score,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "rounds": self.rounds,
        }


def tally_rounds(rounds: Iterable[Round]) -> Tally:
    """Score every round and accumulate totals and win/loss/draw counts."""
    tally = Tally()
    for r in rounds:
        score, outcome = score_round(r)
        tally.record(score, outcome)
    return tally
