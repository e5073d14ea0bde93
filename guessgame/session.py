"""Session orchestration — greet, menu loop, rounds, summary.

Data flow per round:
1. Menu dispatches "play game" to Session.play_round
2. A fresh Game draws its secret from the session's number source
3. Game.play() runs until the guesser wins or quits
4. The RoundResult is folded into SessionStats and reported
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TextIO

from rich.console import Console
from rich.table import Table

from guessgame.config import Settings
from guessgame.game import Game
from guessgame.menu import Menu
from guessgame.models import QuitRequested, RoundResult, SessionStats
from guessgame.source import NumberSource, fixed_source, random_source

GREETING = "Welcome to the guessing game!"


def build_source(settings: Settings) -> NumberSource:
    """Pick the number source the settings ask for."""
    if settings.secret is not None:
        return fixed_source(settings.secret)
    return random_source(settings.min_secret, settings.max_secret, seed=settings.seed)


@dataclass
class Session:
    """Everything one process run shares across rounds."""

    settings: Settings
    console: Console
    reader: TextIO
    diagnostics: Optional[Console] = None
    source: Optional[NumberSource] = None
    stats: SessionStats = field(default_factory=SessionStats)

    def __post_init__(self) -> None:
        if self.source is None:
            self.source = build_source(self.settings)

    def _debug(self, message: str) -> None:
        if self.settings.verbose and self.diagnostics is not None:
            self.diagnostics.print(f"  [dim]{message}[/dim]")

    def new_game(self) -> Game:
        return Game(
            self.source,
            self.console,
            self.reader,
            low=self.settings.min_secret,
            high=self.settings.max_secret,
            quit_token=self.settings.quit_token,
        )

    def run_round(self) -> RoundResult:
        """Play one game and record it. Never raises QuitRequested."""
        game = self.new_game()
        self._debug(f"round {self.stats.rounds + 1}: range [{game.low},{game.high}]")
        try:
            result = game.play()
        except QuitRequested as e:
            result = e.result or RoundResult(secret=game.secret, guesses=game.guesses)
            self._debug(f"round ended early: {e.reason}")
            self.console.print("You quit. ", end="")
        else:
            plural = "guess" if result.guesses == 1 else "guesses"
            self.console.print(f"[bold green]You won![/bold green] ({result.guesses} {plural})")
        self._debug(f"secret was {result.secret}, invalid inputs: {result.invalid_inputs}")
        self.stats.record(result)
        return result

    def play_round(self) -> bool:
        """Menu handler for "play game"."""
        self.run_round()
        self.console.print("Play again?")
        return True

    def exit(self) -> bool:
        """Menu handler for "exit"."""
        return False

    def build_menu(self) -> Menu:
        menu = Menu(intro="", writer=self.console, reader=self.reader)
        menu.add_option("play game", self.play_round)
        menu.add_option("exit", self.exit)
        return menu

    def run(self) -> SessionStats:
        """Greet, loop the menu until exit, then show the summary."""
        self.console.print(f"[bold]{GREETING}[/bold]\n")
        self._debug(
            f"secrets in [{self.settings.min_secret},{self.settings.max_secret}], "
            f"seed={self.settings.seed}"
        )
        self.build_menu().run()
        render_summary(self.stats, self.console)
        return self.stats


def render_summary(stats: SessionStats, console: Console) -> None:
    """Render a Rich table summarising the session."""
    if stats.rounds == 0:
        console.print("[yellow]No rounds played.[/yellow] Goodbye!")
        return

    table = Table(title="Session summary", show_header=True, header_style="bold")
    table.add_column("Rounds", justify="right")
    table.add_column("Won", justify="right", style="green")
    table.add_column("Quit", justify="right", style="red")
    table.add_column("Guesses", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("Best", justify="right")
    table.add_row(
        str(stats.rounds),
        str(stats.wins),
        str(stats.quits),
        str(stats.total_guesses),
        f"{stats.average:.1f}",
        str(stats.best) if stats.best is not None else "--",
    )
    console.print()
    console.print(table)
    console.print("Goodbye!")
