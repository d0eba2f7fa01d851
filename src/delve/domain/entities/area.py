"""Area runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from delve.domain.dialogue import Dialogue
from delve.domain.inventory import Inventory

from .creature import Creature
from .door import Door


@dataclass(slots=True)
class Area:
    """Mutable state of an area during a playthrough."""

    id: str
    dialogue: Dialogue
    doors: List[Door] = field(default_factory=list)
    creatures: List[Creature] = field(default_factory=list)
    items: Inventory = field(default_factory=Inventory)

    def living_creatures(self) -> List[Creature]:
        return [creature for creature in self.creatures if creature.is_alive]
