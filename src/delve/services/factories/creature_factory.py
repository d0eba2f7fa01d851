"""Factory for spawning creatures from definitions."""
from __future__ import annotations

from delve.domain.defs import CreatureDef
from delve.domain.entities import Creature, Stats


def create_creature(creature_def: CreatureDef, *, hp: int | None = None) -> Creature:
    """Spawn an independent creature; ``hp`` overrides full health (save restore)."""
    stats = Stats(
        max_hp=creature_def.hp,
        hp=creature_def.hp if hp is None else hp,
        strength=creature_def.strength,
        agility=creature_def.agility,
    )
    return Creature(
        creature_id=creature_def.id,
        name=creature_def.name,
        stats=stats,
        xp_reward=creature_def.xp,
        evasion=creature_def.evasion,
        defense=creature_def.defense,
        loot=creature_def.loot,
    )
