"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from delve.core.rng import RNG
from delve.domain.combat import DamageRoll, roll_damage

from .item_def import ItemDef


@dataclass(slots=True)
class WeaponDef(ItemDef):
    """Weapon definition with its damage range and hit modifiers."""

    damage_min: int = 0
    damage_max: int = 0
    miss_chance: float = 0.0
    crit_bonus: float = 0.0
    strength_scaling: float = 0.0

    def roll_damage(
        self,
        strength: int,
        rng: RNG,
        *,
        miss_chance: float = 0.0,
        crit_chance: float = 0.0,
    ) -> DamageRoll:
        """Roll an attack made with this weapon by a wielder of the given strength.

        ``miss_chance`` and ``crit_chance`` come from the fight (defender evasion,
        wielder crit chance) and are combined with the weapon's own modifiers.
        """
        return roll_damage(
            self.damage_min,
            self.damage_max,
            rng,
            bonus=int(strength * self.strength_scaling),
            miss_chance=miss_chance + self.miss_chance,
            crit_chance=crit_chance + self.crit_bonus,
        )
