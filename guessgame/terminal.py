"""Terminal channel helpers shared by the game and the menu.

Output always goes through a rich Console; input is any text stream with
readline(), normally sys.stdin.
"""

from __future__ import annotations

import re
from typing import IO, Optional, TextIO

from rich.console import Console

PROMPT = "> "

# ASCII digits only: no underscores, no full-width or other Unicode digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def make_console(file: Optional[IO[str]] = None, stderr: bool = False) -> Console:
    """Build the Console used as a writer.

    Passing a StringIO as file gives plain, uncoloured text that tests can
    inspect with getvalue().
    """
    if file is not None:
        return Console(file=file, highlight=False, width=120)
    return Console(stderr=stderr, highlight=False)


def prompt(writer: Console, reader: TextIO) -> str:
    """Print the prompt, read one line and return it stripped.

    Raises:
        EOFError: the reader has no more lines.
    """
    line = writer.input(PROMPT, stream=reader)
    if not line:
        raise EOFError("input closed")
    # pad w/ empty line
    writer.print()
    return line.strip()


def parse_int(text: str) -> int:
    """Parse a plain decimal integer typed by the player.

    Raises:
        ValueError: anything but an optional sign followed by ASCII digits.
    """
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)
