"""Data models and errors for guessgame.

Verdict enum, RoundResult, SessionStats and the exception family that the
game, menu and CLI layers raise and recover from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Verdict(str, Enum):
    """Outcome of comparing a guess with the secret."""

    LOW = "low"
    HIGH = "high"
    CORRECT = "correct"


class GuessGameError(Exception):
    """Base class for every error guessgame raises on purpose."""


class GameError(GuessGameError):
    """Raised by a Game while reading or evaluating a guess."""


class InvalidInput(GameError):
    """The input was not an integer inside the game's range."""

    def __init__(self, low: int, high: int, quit_token: str = "quit") -> None:
        super().__init__(
            f"Invalid input, please guess an integer belonging to [{low},{high}] "
            f"or enter '{quit_token}' to quit playing."
        )


class QuitRequested(GameError):
    """The player asked to stop the current round.

    Game.play() attaches the partial RoundResult before re-raising.
    """

    def __init__(self, reason: str = "quit", result: Optional[RoundResult] = None) -> None:
        self.reason = reason
        self.result = result
        super().__init__(reason)


class MenuError(GuessGameError):
    """Raised by a Menu for a selection it cannot dispatch."""


class InvalidSelection(MenuError):
    """The selection does not name a registered option."""

    def __init__(self) -> None:
        super().__init__("Invalid choice!")


class ConfigError(GuessGameError):
    """Settings could not be loaded or are inconsistent."""


@dataclass
class RoundResult:
    """Summary of one finished round."""

    secret: int
    guesses: int = 0
    invalid_inputs: int = 0
    won: bool = False


@dataclass
class SessionStats:
    """Running tally over every round of a session."""

    rounds: int = 0
    wins: int = 0
    quits: int = 0
    total_guesses: int = 0
    best: Optional[int] = None

    def record(self, result: RoundResult) -> None:
        """Fold a finished round into the tally."""
        self.rounds += 1
        self.total_guesses += result.guesses
        if result.won:
            self.wins += 1
            if self.best is None or result.guesses < self.best:
                self.best = result.guesses
        else:
            self.quits += 1

    @property
    def average(self) -> float:
        """Mean number of guesses per round, quit rounds included."""
        if self.rounds == 0:
            return 0.0
        return self.total_guesses / self.rounds
