"""Terminal implementation of the Console protocol."""
from __future__ import annotations


class ConsoleClosed(Exception):
    """Raised when standard input is exhausted."""


class TerminalConsole:
    """Reads from stdin and writes to stdout."""

    def write(self, text: str = "") -> None:
        print(text)

    def read(self, prompt: str = "") -> str:
        try:
            return input(prompt)
        except EOFError as exc:
            raise ConsoleClosed() from exc
