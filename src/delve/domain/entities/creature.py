"""Creature runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from .stats import Stats


@dataclass(slots=True)
class Creature:
    """A live creature standing in an area, spawned from a CreatureDef."""

    creature_id: str
    name: str
    stats: Stats
    xp_reward: int
    evasion: float = 0.0
    defense: int = 0
    loot: tuple[str, ...] = ()

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive
