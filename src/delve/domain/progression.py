"""Class seeds and level progression."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

from delve.core.rng import RNG
from delve.domain.entities import Player

FavouredStat = Literal["strength", "agility", "balanced"]


@dataclass(slots=True, frozen=True)
class ClassSeed:
    """Base stats a new character of this class starts with."""

    name: str
    hp: int
    strength: int
    agility: int
    favoured: FavouredStat


FIGHTER = ClassSeed(name="Fighter", hp=15, strength=5, agility=4, favoured="strength")
ROGUE = ClassSeed(name="Rogue", hp=15, strength=4, agility=5, favoured="agility")
ADVENTURER = ClassSeed(name="Adventurer", hp=15, strength=4, agility=4, favoured="balanced")

# Order matters: it is the order of the class selection dialogue.
SELECTABLE_CLASSES: tuple[ClassSeed, ...] = (FIGHTER, ROGUE)
CLASS_SEEDS: Dict[str, ClassSeed] = {seed.name: seed for seed in (FIGHTER, ROGUE, ADVENTURER)}


@dataclass(slots=True, frozen=True)
class LevelUpResult:
    level: int
    hp_gain: int
    strength_gain: int
    agility_gain: int


def level_up(player: Player, rng: RNG) -> LevelUpResult | None:
    """Raise the player one level if they have enough experience."""
    if not player.can_level_up():
        return None
    player.level += 1
    hp_gain = rng.randint(2, 4)
    favoured = CLASS_SEEDS.get(player.class_name, ADVENTURER).favoured
    strength_gain = 0
    agility_gain = 0
    if favoured == "strength":
        strength_gain = 1
    elif favoured == "agility":
        agility_gain = 1
    elif player.level % 2 == 0:
        strength_gain = agility_gain = 1

    stats = player.stats
    stats.max_hp += hp_gain
    stats.strength += strength_gain
    stats.agility += agility_gain
    stats.hp = stats.max_hp
    return LevelUpResult(
        level=player.level,
        hp_gain=hp_gain,
        strength_gain=strength_gain,
        agility_gain=agility_gain,
    )
