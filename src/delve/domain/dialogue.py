"""Choice-driven prompts used for rooms, menus and combat actions."""
from __future__ import annotations

import logging
from typing import Iterable, List

from delve.core.console import Console
from delve.domain.defs import DialogueDef

logger = logging.getLogger(__name__)

MENU_SELECTION = 0


def parse_selection(raw: str, upper: int, *, lower: int = 1) -> int | None:
    """Return the integer in ``raw`` if it lies within [lower, upper], else None."""
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    if lower <= value <= upper:
        return value
    return None


def prompt_number(console: Console, prompt: str, upper: int, *, lower: int = 1) -> int:
    """Ask until the console yields a number within [lower, upper]."""
    while True:
        selection = parse_selection(console.read(prompt), upper, lower=lower)
        if selection is not None:
            return selection
        logger.debug("Rejected selection for %r; expected %d..%d", prompt, lower, upper)
        console.write(f"Please enter a number between {lower} and {upper}.")


class Dialogue:
    """A prompt with an ordered list of numbered choices.

    ``activate`` returns the 1-based index of the chosen label. When the dialogue
    is built with ``allow_menu=True`` the answer ``0`` is also accepted and
    returned as ``MENU_SELECTION``.
    """

    def __init__(self, prompt: str, choices: Iterable[str] = (), *, allow_menu: bool = False) -> None:
        self.prompt = prompt
        self.choices: List[str] = list(choices)
        self.allow_menu = allow_menu

    @classmethod
    def from_def(cls, definition: DialogueDef) -> "Dialogue":
        return cls(definition.prompt, definition.choices)

    def add_choice(self, label: str) -> None:
        self.choices.append(label)

    def copy(self, *, allow_menu: bool | None = None) -> "Dialogue":
        return Dialogue(
            self.prompt,
            self.choices,
            allow_menu=self.allow_menu if allow_menu is None else allow_menu,
        )

    def size(self) -> int:
        return len(self.choices)

    def __len__(self) -> int:
        return len(self.choices)

    def render(self) -> List[str]:
        lines: List[str] = []
        if self.prompt:
            lines.append(self.prompt)
        lines.extend(f"{idx}: {label}" for idx, label in enumerate(self.choices, start=1))
        return lines

    def activate(self, console: Console) -> int:
        """Show the dialogue and block until a valid selection is read."""
        if not self.choices and not self.allow_menu:
            raise ValueError("Cannot activate a dialogue without choices.")
        for line in self.render():
            console.write(line)
        lower = MENU_SELECTION if self.allow_menu else 1
        return prompt_number(console, "> ", len(self.choices), lower=lower)
