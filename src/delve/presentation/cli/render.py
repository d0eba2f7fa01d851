"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, Sequence

from delve.core.console import Console
from delve.domain.entities import Player
from delve.services.battle_service import (
    AttackMissedEvent,
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    CombatantDefeatedEvent,
    ExpGainedEvent,
    GuardAppliedEvent,
    LevelUpEvent,
    LootDroppedEvent,
)

DEATH_BANNER = "----YOU DIED----"


def render_heading(console: Console, title: str) -> None:
    """Print a consistent section heading."""
    console.write()
    console.write(f"=== {title} ===")


def render_lines(console: Console, lines: Iterable[str]) -> None:
    for line in lines:
        console.write(line)


def format_battle_event(event: BattleEvent) -> str:
    """Return the console line for a battle event."""
    if isinstance(event, BattleStartedEvent):
        return f"\nBattle started against {', '.join(event.creature_names)}."
    if isinstance(event, AttackResolvedEvent):
        prefix = "Critical hit! " if event.critical else ""
        return (
            f"- {prefix}{event.attacker_name} hits {event.target_name} for {event.damage} damage "
            f"(HP now {event.target_hp})."
        )
    if isinstance(event, AttackMissedEvent):
        return f"- {event.attacker_name} misses {event.target_name}."
    if isinstance(event, GuardAppliedEvent):
        return f"- {event.combatant_name} braces for the next blows."
    if isinstance(event, CombatantDefeatedEvent):
        return f"- {event.combatant_name} is defeated."
    if isinstance(event, BattleResolvedEvent):
        return f"- Battle resolved: {event.status}."
    if isinstance(event, ExpGainedEvent):
        return f"You gain {event.amount} experience ({event.total_exp} total)."
    if isinstance(event, LevelUpEvent):
        return (
            f"You reached level {event.level}! "
            f"(+{event.hp_gain} HP, +{event.strength_gain} STR, +{event.agility_gain} AGI)"
        )
    if isinstance(event, LootDroppedEvent):
        return f"{event.creature_name} dropped {', '.join(event.item_names)}."
    return f"- {event}"


def render_battle_events(console: Console, events: Sequence[BattleEvent]) -> None:
    for event in events:
        console.write(format_battle_event(event))


def character_sheet_lines(player: Player) -> list[str]:
    next_level_xp = Player.xp_to_level(player.level + 1)
    return [
        f"Name: {player.name}",
        f"Class: {player.class_name}",
        f"Health: {player.stats.hp}/{player.stats.max_hp}",
        f"Strength: {player.stats.strength}",
        f"Agility: {player.stats.agility}",
        f"Level: {player.level} ({player.xp}/{next_level_xp} xp)",
    ]


def equipment_lines(player: Player) -> list[str]:
    weapon = player.equipped_weapon.describe() if player.equipped_weapon else "nothing"
    armour = player.equipped_armour.describe() if player.equipped_armour else "nothing"
    return [f"Weapon: {weapon}", f"Armour: {armour}"]
