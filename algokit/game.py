"""Guess-the-number game logic."""

from __future__ import annotations

import random
from enum import Enum


class Outcome(Enum):
    """Result of a single guess."""

    WON = "won"
    TOO_LOW = "too low"
    TOO_HIGH = "too high"
    LOST = "lost"


def random_secret(rng: random.Random | None = None) -> int:
    """Pick a secret number from 0 to 99."""
    return (rng or random).randrange(100)


class GuessGame:
    """A round in which the player has a limited number of guesses."""

    def __init__(self, secret: int, moves: int = 7) -> None:
        if moves < 1:
            raise ValueError("a game needs at least one move")
        self.secret = secret
        self.remaining = moves
        self.finished = False

    def guess(self, move: int) -> Outcome:
        """Submit a guess and return how it compares to the secret."""
        if self.finished:
            raise RuntimeError("the game is already over")
        self.remaining -= 1
        if move == self.secret:
            self.finished = True
            return Outcome.WON
        if self.remaining < 1:
            self.finished = True
            return Outcome.LOST
        return Outcome.TOO_LOW if move < self.secret else Outcome.TOO_HIGH