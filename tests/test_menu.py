"""Tests for Menu rendering, selection and dispatch."""

import pytest

from guessgame.menu import Menu
from guessgame.models import InvalidSelection


def make_menu(io, calls=None, labels=("first", "second")):
    calls = calls if calls is not None else []
    menu = Menu(intro="Hello there", writer=io.writer, reader=io.reader)
    for label in labels:
        menu.add_option(label, lambda label=label: calls.append(label) or label != "second")
    return menu


# --- render ---

def test_render_writes_intro_then_generic_line(channels):
    io = channels()
    make_menu(io).render()
    assert io.lines[0] == "Hello there"
    assert io.lines[1] == "Please choose from the following..."


def test_render_numbers_options_in_insertion_order(channels):
    io = channels()
    make_menu(io).render()
    assert io.lines[2] == "1) first"
    assert io.lines[3] == "2) second"


# --- select ---

def test_select_returns_matching_option(channels):
    menu = make_menu(channels())
    assert menu.select("2").label == "second"
    assert menu.select(" 1 ").label == "first"


@pytest.mark.parametrize("raw", ["not a number", "0", "-1", "3", "", "1_0", "\uff11"])
def test_select_rejects_invalid(channels, raw):
    with pytest.raises(InvalidSelection, match="Invalid choice!"):
        make_menu(channels()).select(raw)


# --- prompt / run ---

def test_prompt_invokes_exactly_the_chosen_handler(channels):
    calls = []
    io = channels("1")
    assert make_menu(io, calls).prompt() is True
    assert calls == ["first"]


def test_prompt_invalid_selection_reports_and_keeps_running(channels):
    calls = []
    io = channels("7")
    assert make_menu(io, calls).prompt() is True
    assert calls == []
    assert "Invalid choice!" in io.output


def test_prompt_end_of_input_stops(channels):
    assert make_menu(channels()).prompt() is False


def test_run_rerenders_after_invalid_selection(channels):
    calls = []
    io = channels("9", "1", "2")
    make_menu(io, calls).run()
    assert calls == ["first", "second"]
    assert io.output.count("Please choose from the following...") == 3
    assert io.output.count("Invalid choice!") == 1
