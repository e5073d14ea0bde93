"""CLI for the guessgame number-guessing game.

Usage:
    python -m guessgame                            # Menu session
    python -m guessgame play --min 1 --max 50      # Menu session, custom range
    python -m guessgame play --seed 42 --verbose   # Reproducible secrets
    python -m guessgame round --secret 7           # One round, no menu
"""

from __future__ import annotations

import sys
from typing import Optional

import typer

from guessgame.config import Settings, load_settings
from guessgame.models import ConfigError
from guessgame.session import Session
from guessgame.terminal import make_console

app = typer.Typer(
    name="guessgame",
    help="Guess the secret number",
    no_args_is_help=False,
)
console = make_console(stderr=True)

_MIN_OPT = typer.Option(None, "--min", help="Smallest possible secret (default 0)")
_MAX_OPT = typer.Option(None, "--max", help="Largest possible secret (default 100)")
_SEED_OPT = typer.Option(None, "--seed", help="Seed for reproducible secrets")
_SECRET_OPT = typer.Option(None, "--secret", help="Use this secret for every round")
_VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Print diagnostics to stderr")


def _settings(
    min_secret: Optional[int],
    max_secret: Optional[int],
    seed: Optional[int],
    secret: Optional[int],
    verbose: bool,
) -> Settings:
    try:
        return load_settings().override(
            min_secret=min_secret,
            max_secret=max_secret,
            seed=seed,
            secret=secret,
            verbose=verbose,
        )
    except ConfigError as e:
        console.print(f"[red]Invalid settings: {e}[/red]")
        raise typer.Exit(1)


def _session(settings: Settings) -> Session:
    return Session(
        settings=settings,
        console=make_console(),
        reader=sys.stdin,
        diagnostics=console,
    )


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Start a menu session when no command is given."""
    if ctx.invoked_subcommand is None:
        cmd_play(min_secret=None, max_secret=None, seed=None, secret=None, verbose=False)


@app.command("play")
def cmd_play(
    min_secret: Optional[int] = _MIN_OPT,
    max_secret: Optional[int] = _MAX_OPT,
    seed: Optional[int] = _SEED_OPT,
    secret: Optional[int] = _SECRET_OPT,
    verbose: bool = _VERBOSE_OPT,
) -> None:
    """Show the menu and play rounds until you choose exit."""
    session = _session(_settings(min_secret, max_secret, seed, secret, verbose))
    try:
        session.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130)


@app.command("round")
def cmd_round(
    min_secret: Optional[int] = _MIN_OPT,
    max_secret: Optional[int] = _MAX_OPT,
    seed: Optional[int] = _SEED_OPT,
    secret: Optional[int] = _SECRET_OPT,
    verbose: bool = _VERBOSE_OPT,
) -> None:
    """Play a single round. Exits 0 on a win, 1 on quit."""
    session = _session(_settings(min_secret, max_secret, seed, secret, verbose))
    try:
        result = session.run_round()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(130)
    if not result.won:
        session.console.print()
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
