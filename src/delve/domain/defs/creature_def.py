"""Creature definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CreatureDef:
    """Template for a creature; areas spawn independent copies of it."""

    id: str
    name: str
    hp: int
    strength: int
    agility: int
    xp: int
    evasion: float = 0.0
    defense: int = 0
    loot: tuple[str, ...] = ()
