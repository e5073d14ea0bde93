"""Shared fixtures: captured Console output and scripted input."""

import io

import pytest
from rich.console import Console

from guessgame.terminal import make_console


class ScriptedReader(io.StringIO):
    """StringIO over the given lines that counts readline() calls."""

    def __init__(self, *lines):
        super().__init__("".join(f"{line}\n" for line in lines))
        self.reads = 0

    def readline(self, *args):
        self.reads += 1
        return super().readline(*args)


class Channels:
    """A writer Console backed by a StringIO, plus a ScriptedReader."""

    def __init__(self, *lines):
        self.buffer = io.StringIO()
        self.writer: Console = make_console(file=self.buffer)
        self.reader = ScriptedReader(*lines)

    @property
    def output(self) -> str:
        return self.buffer.getvalue()

    @property
    def lines(self) -> list:
        return [line for line in self.output.splitlines() if line.strip()]


@pytest.fixture
def channels():
    """Factory: channels("3", "quit") -> Channels with those input lines."""
    return Channels
