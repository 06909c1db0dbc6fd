from __future__ import annotations

import re
from typing import Optional, TextIO

from rich.console import Console

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


class InputClosedError(EOFError):
    """The input stream ended; nothing more can be read."""

    def __init__(self, message: str = "Input stream closed.") -> None:
        super().__init__(message)


def parse_int(text: str) -> Optional[int]:
    """Plain decimal 32-bit integer, or None when ``text`` is not one."""
    if not INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


class ConsoleIO:
    """Line-based prompts on top of a rich console.

    Without a ``stream`` the console reads through ``input()``, which keeps
    line editing in a terminal and follows ``sys.stdin`` when a test runner
    swaps it.
    """

    def __init__(self, console: Console | None = None, stream: Optional[TextIO] = None) -> None:
        self.console = console or Console()
        self.stream = stream

    def say(self, text: str = "", style: str | None = None) -> None:
        self.console.print(text, style=style, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def _read_line(self, prompt: str) -> str:
        try:
            line = self.console.input(prompt, markup=False, emoji=False, stream=self.stream)
        except EOFError:
            raise InputClosedError() from None
        # readline() signals the end of a stream with an empty string
        if self.stream is not None and not line:
            raise InputClosedError()
        return line.strip()

    def read_string(self, prompt: str) -> str:
        return self._read_line(prompt)

    def read_int(self, prompt: str) -> int:
        while True:
            value = parse_int(self._read_line(prompt))
            if value is not None:
                return value
            self.say("Please enter a valid integer.", style="red")
