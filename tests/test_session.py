"""Tests for the session loop: menu wiring, round reporting, summary."""

from guessgame.config import Settings
from guessgame.models import RoundResult, SessionStats
from guessgame.session import Session, build_source, render_summary
from guessgame.source import fixed_source


def make_session(io, *secrets, **settings):
    return Session(
        settings=Settings(**settings),
        console=io.writer,
        reader=io.reader,
        source=fixed_source(*(secrets or (10,))),
    )


# --- Sources ---

def test_build_source_uses_fixed_secret():
    draw = build_source(Settings(secret=4))
    assert {draw() for _ in range(5)} == {4}


def test_build_source_is_seeded():
    a = build_source(Settings(seed=3))
    b = build_source(Settings(seed=3))
    assert a() == b()


# --- Rounds ---

def test_run_round_win_is_reported_and_recorded(channels):
    io = channels("5", "10")
    session = make_session(io)
    result = session.run_round()
    assert result.won
    assert "You won! (2 guesses)" in io.output
    assert session.stats.wins == 1


def test_run_round_quit_is_reported_not_raised(channels):
    io = channels("quit")
    session = make_session(io)
    result = session.run_round()
    assert not result.won
    assert "You quit." in io.output
    assert session.stats.quits == 1


# --- Full session ---

def test_session_plays_until_exit(channels):
    io = channels("1", "10", "1", "quit", "2")
    stats = make_session(io, 10, 20).run()
    assert io.output.startswith("Welcome to the guessing game!")
    assert stats.rounds == 2
    assert stats.wins == 1
    assert stats.quits == 1
    assert io.output.count("Play again?") == 2
    assert "Session summary" in io.output


def test_each_round_draws_a_new_secret(channels):
    io = channels("1", "3", "1", "3", "5", "2")
    stats = make_session(io, 3, 5).run()
    assert stats.wins == 2
    assert "3 is too low!" in io.output


def test_session_invalid_menu_choice_rerenders(channels):
    io = channels("banana", "2")
    stats = make_session(io).run()
    assert stats.rounds == 0
    assert "Invalid choice!" in io.output
    assert "No rounds played." in io.output


def test_session_ends_on_end_of_input(channels):
    io = channels("1", "4")
    stats = make_session(io).run()
    assert stats.rounds == 1
    assert stats.quits == 1


# --- Summary ---

def test_stats_record_tracks_best_and_average():
    stats = SessionStats()
    stats.record(RoundResult(secret=1, guesses=4, won=True))
    stats.record(RoundResult(secret=2, guesses=2, won=True))
    stats.record(RoundResult(secret=3, guesses=3, won=False))
    assert stats.best == 2
    assert stats.average == 3.0
    assert (stats.wins, stats.quits) == (2, 1)


def test_render_summary_table(channels):
    io = channels()
    stats = SessionStats()
    stats.record(RoundResult(secret=1, guesses=3, won=True))
    render_summary(stats, io.writer)
    assert "Session summary" in io.output
    assert "Goodbye!" in io.output
