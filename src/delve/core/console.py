"""Line-oriented interaction boundary used by dialogues and menus."""
from __future__ import annotations

from typing import Protocol


class Console(Protocol):
    """Synchronous request/response surface: write text, read one token back."""

    def write(self, text: str = "") -> None: ...

    def read(self, prompt: str = "") -> str: ...
