"""Battle service resolving turn-based fights between the player and creatures."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from delve.core.rng import RNG
from delve.data.registry import EntityRegistry
from delve.domain.battle_models import BattleState
from delve.domain.combat import DamageRoll, dodge_chance, roll_unarmed
from delve.domain.entities import Area, Creature, Player, Stats
from delve.domain.progression import level_up

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    creature_names: List[str]


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    attacker_name: str
    target_name: str
    damage: int
    target_hp: int
    critical: bool = False


@dataclass(slots=True)
class AttackMissedEvent(BattleEvent):
    attacker_name: str
    target_name: str


@dataclass(slots=True)
class GuardAppliedEvent(BattleEvent):
    combatant_name: str


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_name: str


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    status: str


@dataclass(slots=True)
class ExpGainedEvent(BattleEvent):
    amount: int
    total_exp: int


@dataclass(slots=True)
class LevelUpEvent(BattleEvent):
    level: int
    hp_gain: int
    strength_gain: int
    agility_gain: int


@dataclass(slots=True)
class LootDroppedEvent(BattleEvent):
    creature_name: str
    item_names: Tuple[str, ...]


class BattleService:
    """Resolves attacks and tracks when a fight is won or lost.

    Every damage application re-checks the battle status: the player at zero hp
    is a defeat, every creature at zero hp is a victory. Once resolved, further
    actions are ignored.
    """

    def __init__(self, registry: EntityRegistry) -> None:
        self._registry = registry

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, player: Player, area: Area) -> tuple[BattleState, List[BattleEvent]]:
        """Pit the player against every living creature of the area."""
        creatures = area.living_creatures()
        battle_state = BattleState(
            player=player,
            creatures=creatures,
            xp_pool=sum(creature.xp_reward for creature in creatures),
        )
        self._update_status(battle_state)
        logger.debug("Battle started in %s against %d creature(s)", area.id, len(creatures))
        return battle_state, [BattleStartedEvent(creature_names=[creature.name for creature in creatures])]

    def apply_victory_rewards(self, battle_state: BattleState, area: Area, rng: RNG) -> List[BattleEvent]:
        """Grant experience, drop loot and clear the area's creatures after a victory."""
        if battle_state.status != "victory":
            raise ValueError("Rewards can only be applied after a victory.")
        if battle_state.rewards_applied:
            return []
        battle_state.rewards_applied = True
        player = battle_state.player
        player.xp += battle_state.xp_pool
        events: List[BattleEvent] = [ExpGainedEvent(amount=battle_state.xp_pool, total_exp=player.xp)]

        while True:
            result = level_up(player, rng)
            if result is None:
                break
            events.append(
                LevelUpEvent(
                    level=result.level,
                    hp_gain=result.hp_gain,
                    strength_gain=result.strength_gain,
                    agility_gain=result.agility_gain,
                )
            )

        for creature in battle_state.creatures:
            if not creature.loot:
                continue
            dropped = [self._registry.get_item(item_id) for item_id in creature.loot]
            for item in dropped:
                area.items.add(item)
            events.append(
                LootDroppedEvent(creature_name=creature.name, item_names=tuple(item.name for item in dropped))
            )
        area.creatures.clear()
        return events

    # -----------------------
    # Actions
    # -----------------------
    def creature_attack(self, battle_state: BattleState, creature: Creature, rng: RNG) -> List[BattleEvent]:
        """A creature strikes the player; armour and guarding reduce the blow."""
        if battle_state.is_over or not creature.is_alive:
            return []
        player = battle_state.player
        roll = roll_unarmed(
            creature.stats.strength,
            rng,
            miss_chance=dodge_chance(player.stats.agility),
        )
        if not roll.hit:
            return [AttackMissedEvent(attacker_name=creature.name, target_name=player.name)]

        damage = roll.amount
        if battle_state.guarding:
            damage //= 2
        if player.equipped_armour is not None:
            damage = player.equipped_armour.mitigate(damage)
        return self._apply_hit(battle_state, creature.name, player.name, player.stats, damage, roll)

    def player_attack(self, battle_state: BattleState, target: Creature, rng: RNG) -> List[BattleEvent]:
        """The player strikes a creature with the equipped weapon, or bare-handed."""
        if battle_state.is_over:
            return []
        if target not in battle_state.creatures:
            raise ValueError(f"'{target.name}' is not part of this battle.")
        if not target.is_alive:
            raise ValueError(f"'{target.name}' is already defeated.")
        battle_state.guarding = False
        player = battle_state.player
        weapon = player.equipped_weapon
        if weapon is not None:
            roll = weapon.roll_damage(
                player.stats.strength,
                rng,
                miss_chance=target.evasion,
                crit_chance=player.crit_chance,
            )
        else:
            roll = roll_unarmed(
                player.stats.strength,
                rng,
                miss_chance=target.evasion,
                crit_chance=player.crit_chance,
            )
        if not roll.hit:
            return [AttackMissedEvent(attacker_name=player.name, target_name=target.name)]
        damage = max(0, roll.amount - target.defense)
        return self._apply_hit(battle_state, player.name, target.name, target.stats, damage, roll)

    def player_defend(self, battle_state: BattleState) -> List[BattleEvent]:
        """The player braces, halving creature hits until their next action."""
        if battle_state.is_over:
            return []
        battle_state.guarding = True
        return [GuardAppliedEvent(combatant_name=battle_state.player.name)]

    # -----------------------
    # Helpers
    # -----------------------
    def _apply_hit(
        self,
        battle_state: BattleState,
        attacker_name: str,
        target_name: str,
        target_stats: Stats,
        damage: int,
        roll: DamageRoll,
    ) -> List[BattleEvent]:
        # Landed hits always deal at least 1 damage.
        taken = target_stats.apply_damage(max(1, damage))
        logger.debug("%s hits %s for %d (hp now %d)", attacker_name, target_name, taken, target_stats.hp)
        events: List[BattleEvent] = [
            AttackResolvedEvent(
                attacker_name=attacker_name,
                target_name=target_name,
                damage=taken,
                target_hp=target_stats.hp,
                critical=roll.critical,
            )
        ]
        if not target_stats.is_alive:
            events.append(CombatantDefeatedEvent(combatant_name=target_name))
        resolved = self._update_status(battle_state)
        if resolved:
            events.append(resolved)
        return events

    def _update_status(self, battle_state: BattleState) -> BattleResolvedEvent | None:
        if battle_state.is_over:
            return None
        if not battle_state.player.is_alive:
            battle_state.status = "defeat"
        elif not battle_state.living_creatures():
            battle_state.status = "victory"
        else:
            return None
        logger.info("Battle resolved: %s after %d round(s)", battle_state.status, battle_state.round)
        return BattleResolvedEvent(status=battle_state.status)
