"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ItemDef:
    """Collectible item definition; base of every equippable variant."""

    id: str
    name: str
    description: str = ""
    value: int = 0

    def describe(self) -> str:
        if not self.description:
            return self.name
        return f"{self.name} - {self.description}"
