"""Player model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

from delve.domain.defs import ArmourDef, WeaponDef
from delve.domain.inventory import Inventory

from .stats import Stats

DEFAULT_CRIT_CHANCE = 1 / 64


@dataclass(slots=True)
class Player:
    """The player's persistent state for the whole session."""

    name: str
    class_name: str
    stats: Stats
    level: int = 1
    xp: int = 0
    crit_chance: float = DEFAULT_CRIT_CHANCE
    inventory: Inventory = field(default_factory=Inventory)
    equipped_weapon: WeaponDef | None = None
    equipped_armour: ArmourDef | None = None
    current_area_id: str = ""
    visited_areas: Set[str] = field(default_factory=set)

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive

    @staticmethod
    def xp_to_level(level: int) -> int:
        """Total experience required to reach ``level``."""
        return int(1.5 * level**3)

    def can_level_up(self) -> bool:
        return self.xp >= self.xp_to_level(self.level + 1)
