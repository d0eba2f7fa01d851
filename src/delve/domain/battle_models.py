"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from delve.core.types import BattleStatus
from delve.domain.entities import Creature, Player


@dataclass(slots=True)
class BattleState:
    """Tracks one fight between the player and the creatures of an area."""

    player: Player
    creatures: List[Creature]
    status: BattleStatus = "ongoing"
    round: int = 0
    guarding: bool = False
    xp_pool: int = 0
    rewards_applied: bool = field(default=False)

    @property
    def is_over(self) -> bool:
        return self.status != "ongoing"

    def living_creatures(self) -> List[Creature]:
        return [creature for creature in self.creatures if creature.is_alive]
