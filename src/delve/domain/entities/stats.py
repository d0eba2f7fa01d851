"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Health and combat attributes shared by players and creatures."""

    max_hp: int
    hp: int
    strength: int
    agility: int

    def __post_init__(self) -> None:
        self.max_hp = max(0, self.max_hp)
        self.hp = min(max(0, self.hp), self.max_hp)

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def apply_damage(self, amount: int) -> int:
        """Reduce hp by ``amount`` (never below zero) and return the damage taken."""
        taken = min(self.hp, max(0, amount))
        self.hp -= taken
        return taken

    def heal(self, amount: int) -> None:
        self.hp = min(self.max_hp, self.hp + max(0, amount))
