from __future__ import annotations

from typing import Iterable, List


class ScriptExhausted(Exception):
    """Raised when the code under test reads more answers than were scripted."""


class ScriptedConsole:
    """Console double that replays scripted answers and records everything written."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers: List[str] = list(answers)
        self.lines: List[str] = []
        self.prompts: List[str] = []

    def write(self, text: str = "") -> None:
        self.lines.extend(text.split("\n"))

    def read(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise ScriptExhausted(f"No scripted answer left for prompt {prompt!r}.")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)
