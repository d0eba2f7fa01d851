"""Damage rolls and the constants that drive combat arithmetic."""
from __future__ import annotations

from dataclasses import dataclass

from delve.core.rng import RNG

CRITICAL_MULTIPLIER = 2
DODGE_PER_AGILITY = 1 / 64
MAX_DODGE = 0.5


@dataclass(slots=True, frozen=True)
class DamageRoll:
    """Outcome of a single attack roll before the defender's mitigation."""

    amount: int
    hit: bool
    critical: bool = False


MISS = DamageRoll(amount=0, hit=False)


def roll_damage(
    low: int,
    high: int,
    rng: RNG,
    *,
    bonus: int = 0,
    miss_chance: float = 0.0,
    crit_chance: float = 0.0,
) -> DamageRoll:
    """Roll a hit-or-miss attack dealing low..high (+bonus) damage."""
    if rng.chance(miss_chance):
        return MISS
    amount = max(0, rng.randint(low, max(low, high)) + bonus)
    critical = rng.chance(crit_chance)
    if critical:
        amount *= CRITICAL_MULTIPLIER
    return DamageRoll(amount=amount, hit=True, critical=critical)


def roll_unarmed(
    strength: int,
    rng: RNG,
    *,
    miss_chance: float = 0.0,
    crit_chance: float = 0.0,
) -> DamageRoll:
    """Roll a bare-handed attack; creatures always fight this way."""
    return roll_damage(
        1,
        max(1, strength // 2),
        rng,
        miss_chance=miss_chance,
        crit_chance=crit_chance,
    )


def dodge_chance(agility: int) -> float:
    """Return the chance that a defender with this agility dodges a blow."""
    return min(MAX_DODGE, max(0, agility) * DODGE_PER_AGILITY)
