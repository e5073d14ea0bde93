"""Numbered text menu.

Options are rendered in the order they were added, numbered from 1. A
handler returns whether the menu should keep running after it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, TextIO

from rich.console import Console
from rich.markup import escape

from guessgame.models import InvalidSelection
from guessgame.terminal import parse_int, prompt

Handler = Callable[[], bool]


@dataclass
class MenuOption:
    """A label and the handler it dispatches to."""

    label: str
    handler: Handler


@dataclass
class Menu:
    """Intro text plus an ordered list of options."""

    intro: str
    writer: Console
    reader: TextIO
    options: list[MenuOption] = field(default_factory=list)

    def add_option(self, label: str, handler: Handler) -> MenuOption:
        option = MenuOption(label=label, handler=handler)
        self.options.append(option)
        return option

    def render(self) -> None:
        """Write the intro and the numbered options."""
        if self.intro:
            self.writer.print(self.intro)
        self.writer.print("\nPlease choose from the following...")
        for index, option in enumerate(self.options, start=1):
            self.writer.print(f"{index}) {escape(option.label)}")

    def select(self, raw: str) -> MenuOption:
        """Map a 1-based selection to its option.

        Raises:
            InvalidSelection: not a number, or outside 1..len(options).
        """
        try:
            number = parse_int(raw)
        except ValueError:
            raise InvalidSelection() from None
        if not 1 <= number <= len(self.options):
            raise InvalidSelection()
        return self.options[number - 1]

    def prompt(self) -> bool:
        """Read a selection and run its handler.

        Returns the handler's keep-running flag. An invalid selection is
        reported and returns True so the caller re-renders; end of input
        returns False.
        """
        try:
            raw = prompt(self.writer, self.reader)
        except EOFError:
            return False
        try:
            option = self.select(raw)
        except InvalidSelection as e:
            self.writer.print(f"[red]{e}[/red]")
            return True
        return option.handler()

    def run(self) -> None:
        """Render and prompt until a handler (or end of input) says stop."""
        keep_running = True
        while keep_running:
            self.render()
            keep_running = self.prompt()
