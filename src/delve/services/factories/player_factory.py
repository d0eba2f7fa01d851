"""Factory for creating player entities from class seeds."""
from __future__ import annotations

from delve.domain.entities import Player, Stats
from delve.domain.progression import CLASS_SEEDS
from delve.services.errors import FactoryError


def create_player(name: str, class_name: str, *, start_area_id: str = "") -> Player:
    """Instantiate a level 1 player of the given class."""
    try:
        seed = CLASS_SEEDS[class_name]
    except KeyError as exc:
        raise FactoryError(f"Class '{class_name}' not found.") from exc

    stats = Stats(max_hp=seed.hp, hp=seed.hp, strength=seed.strength, agility=seed.agility)
    return Player(
        name=name,
        class_name=seed.name,
        stats=stats,
        current_area_id=start_area_id,
    )
