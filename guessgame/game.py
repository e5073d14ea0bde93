"""One round of the guessing game.

A Game knows a secret number and exposes play(), which prompts the guesser
in a loop until they guess correctly or ask to quit.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.markup import escape

from guessgame.config import DEFAULT_MAX_SECRET, DEFAULT_MIN_SECRET, DEFAULT_QUIT_TOKEN
from guessgame.models import InvalidInput, QuitRequested, RoundResult, Verdict
from guessgame.source import NumberSource
from guessgame.terminal import parse_int, prompt


class Game:
    """A secret number plus the channels used to play for it.

    The secret is drawn from ``source`` exactly once, here in the
    constructor, and never changes afterwards.
    """

    def __init__(
        self,
        source: NumberSource,
        writer: Console,
        reader: TextIO,
        *,
        low: int = DEFAULT_MIN_SECRET,
        high: int = DEFAULT_MAX_SECRET,
        quit_token: str = DEFAULT_QUIT_TOKEN,
    ) -> None:
        secret = source()
        if not low <= secret <= high:
            raise ValueError(f"number source returned {secret}, outside [{low},{high}]")
        self.secret = secret
        self.writer = writer
        self.reader = reader
        self.low = low
        self.high = high
        self.quit_token = quit_token.strip().lower()
        self.guesses = 0

    def evaluate(self, guess: int) -> Verdict:
        """Compare a guess with the secret."""
        if guess < self.secret:
            return Verdict.LOW
        if guess > self.secret:
            return Verdict.HIGH
        return Verdict.CORRECT

    def guess(self, raw: str) -> Verdict:
        """Parse and evaluate one line of input.

        Raises:
            QuitRequested: the line is the quit token.
            InvalidInput: the line is not an integer in [low, high]. The
                guess counter is left untouched.
        """
        text = raw.strip()
        if text.lower() == self.quit_token:
            raise QuitRequested(text)
        try:
            value = parse_int(text)
        except ValueError:
            raise InvalidInput(self.low, self.high, self.quit_token) from None
        if not self.low <= value <= self.high:
            raise InvalidInput(self.low, self.high, self.quit_token)
        self.guesses += 1
        return self.evaluate(value)

    def play(self) -> RoundResult:
        """Prompt for guesses until one is correct.

        Invalid input is reported and the guesser is asked again. End of
        input counts as quitting.

        Raises:
            QuitRequested: the guesser entered the quit token. Nothing more
                is read from the reader once this is raised.
        """
        result = RoundResult(secret=self.secret)
        while True:
            self.writer.print("Guess a number...")
            try:
                raw = prompt(self.writer, self.reader)
            except EOFError:
                self.writer.print("Quitting...")
                raise QuitRequested("end of input", result) from None
            try:
                verdict = self.guess(raw)
            except InvalidInput as e:
                result.invalid_inputs += 1
                self.writer.print(f"[yellow]{escape(str(e))}[/yellow]")
                continue
            except QuitRequested as e:
                self.writer.print("Quitting...")
                e.result = result
                raise

            result.guesses = self.guesses
            if verdict is Verdict.CORRECT:
                self.writer.print("[green]Correct![/green]")
                result.won = True
                return result
            self.writer.print(f"{int(raw)} is too {verdict.value}!\n")
