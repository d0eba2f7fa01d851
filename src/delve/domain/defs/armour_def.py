"""Armour definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from .item_def import ItemDef


@dataclass(slots=True)
class ArmourDef(ItemDef):
    """Armour definition; defense is subtracted from every incoming hit."""

    defense: int = 0

    def mitigate(self, raw_damage: int) -> int:
        return max(0, raw_damage - self.defense)
