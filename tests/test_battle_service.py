from pathlib import Path

import pytest

from delve.core.rng import RNG
from delve.data.registry import EntityRegistry
from delve.domain.defs import AreaDef, ArmourDef, CreatureDef, WeaponDef
from delve.domain.dialogue import Dialogue
from delve.domain.entities import Area, Creature, Player, Stats
from delve.services.battle_service import (
    AttackMissedEvent,
    AttackResolvedEvent,
    BattleResolvedEvent,
    BattleService,
    CombatantDefeatedEvent,
    ExpGainedEvent,
    GuardAppliedEvent,
    LevelUpEvent,
    LootDroppedEvent,
)
from delve.services.factories import create_player, instantiate_area
from tests.helpers.definitions import make_registry
from tests.helpers.rng import StubRNG


def _make_player(*, hp: int = 15, strength: int = 5, agility: int = 4) -> Player:
    player = create_player("Tester", "Fighter")
    player.stats = Stats(max_hp=hp, hp=hp, strength=strength, agility=agility)
    player.crit_chance = 0.0
    return player


def _make_creature(name: str = "Wolf", *, hp: int = 10, strength: int = 4, xp: int = 4) -> Creature:
    return Creature(
        creature_id=name.lower(),
        name=name,
        stats=Stats(max_hp=hp, hp=hp, strength=strength, agility=2),
        xp_reward=xp,
    )


def _make_area(*creatures: Creature) -> Area:
    return Area(id="pit", dialogue=Dialogue("A pit."), creatures=list(creatures))


def _make_service(tmp_path: Path) -> tuple[BattleService, EntityRegistry]:
    registry = make_registry(tmp_path)
    return BattleService(registry), registry


def test_start_battle_pools_experience(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    area = _make_area(_make_creature("Wolf", xp=4), _make_creature("Bat", hp=2, xp=1))

    battle_state, events = service.start_battle(_make_player(), area)

    assert battle_state.status == "ongoing"
    assert battle_state.xp_pool == 5
    assert events[0].creature_names == ["Wolf", "Bat"]


def test_three_sword_hits_defeat_ten_hp_creature(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    sword = registry.get(WeaponDef, "short_sword")
    for seed in range(20):
        rng = RNG(seed)
        player = _make_player(strength=5)
        player.equipped_weapon = sword
        creature = _make_creature(hp=10)
        battle_state, _ = service.start_battle(player, _make_area(creature))

        service.player_attack(battle_state, creature, rng)
        service.player_attack(battle_state, creature, rng)
        assert creature.stats.hp <= 2
        if battle_state.status == "ongoing":
            service.player_attack(battle_state, creature, rng)
        assert creature.stats.hp <= 0
        assert battle_state.status == "victory"


def test_player_attack_uses_weapon_roll(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    player = _make_player()
    player.equipped_weapon = registry.get(WeaponDef, "short_sword")
    creature = _make_creature(hp=10)
    battle_state, _ = service.start_battle(player, _make_area(creature))

    events = service.player_attack(battle_state, creature, StubRNG(randints=[5]))

    assert isinstance(events[0], AttackResolvedEvent)
    assert events[0].damage == 5
    assert creature.stats.hp == 5


def test_unarmed_attack_scales_with_strength(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    creature = _make_creature(hp=10)
    battle_state, _ = service.start_battle(_make_player(strength=6), _make_area(creature))

    service.player_attack(battle_state, creature, StubRNG(randints=[3]))

    assert creature.stats.hp == 7


def test_critical_hit_doubles_damage(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    player = _make_player()
    player.equipped_weapon = registry.get(WeaponDef, "short_sword")
    player.crit_chance = 0.5
    creature = _make_creature(hp=20)
    battle_state, _ = service.start_battle(player, _make_area(creature))

    events = service.player_attack(battle_state, creature, StubRNG(randints=[4], randoms=[0.9, 0.1]))

    assert events[0].critical is True
    assert creature.stats.hp == 12


def test_creature_defense_reduces_damage(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    creature = _make_creature(hp=10)
    creature.defense = 2
    battle_state, _ = service.start_battle(_make_player(strength=8), _make_area(creature))

    events = service.player_attack(battle_state, creature, StubRNG(randints=[4]))

    assert events[0].damage == 2
    assert creature.stats.hp == 8


def test_landed_hit_deals_at_least_one_damage(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    creature = _make_creature(hp=10, strength=2)
    creature.defense = 2
    player = _make_player(strength=2)
    player.equipped_armour = registry.get(ArmourDef, "leather")
    battle_state, _ = service.start_battle(player, _make_area(creature))

    player_events = service.player_attack(battle_state, creature, StubRNG(randints=[1]))
    service.player_defend(battle_state)
    creature_events = service.creature_attack(battle_state, creature, StubRNG(randints=[1]))

    assert player_events[0].damage == 1
    assert creature.stats.hp == 9
    assert creature_events[0].damage == 1
    assert player.stats.hp == 14


def test_evasive_creature_can_dodge(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    creature = _make_creature(hp=10)
    creature.evasion = 0.5
    battle_state, _ = service.start_battle(_make_player(), _make_area(creature))

    events = service.player_attack(battle_state, creature, StubRNG(randoms=[0.2]))

    assert isinstance(events[0], AttackMissedEvent)
    assert creature.stats.hp == 10


def test_player_agility_dodges_creature(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    creature = _make_creature()
    player = _make_player(agility=16)
    battle_state, _ = service.start_battle(player, _make_area(creature))

    events = service.creature_attack(battle_state, creature, StubRNG(randoms=[0.2]))

    assert isinstance(events[0], AttackMissedEvent)
    assert player.stats.hp == 15


def test_guard_and_armour_reduce_creature_hits(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    creature = _make_creature(strength=8)
    player = _make_player()
    battle_state, _ = service.start_battle(player, _make_area(creature))

    guard_events = service.player_defend(battle_state)
    assert isinstance(guard_events[0], GuardAppliedEvent)
    service.creature_attack(battle_state, creature, StubRNG(randints=[4]))
    assert player.stats.hp == 13
    service.creature_attack(battle_state, creature, StubRNG(randints=[4]))
    assert player.stats.hp == 11

    service.player_attack(battle_state, creature, StubRNG())
    assert battle_state.guarding is False
    player.equipped_armour = registry.get(ArmourDef, "leather")
    service.creature_attack(battle_state, creature, StubRNG(randints=[4]))
    assert player.stats.hp == 8


def test_defeat_stops_further_actions(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    creature = _make_creature(strength=4)
    player = _make_player(hp=1)
    battle_state, _ = service.start_battle(player, _make_area(creature))

    events = service.creature_attack(battle_state, creature, StubRNG(randints=[2]))

    assert battle_state.status == "defeat"
    assert any(isinstance(event, CombatantDefeatedEvent) for event in events)
    assert isinstance(events[-1], BattleResolvedEvent)
    assert service.player_attack(battle_state, creature, StubRNG()) == []
    assert service.creature_attack(battle_state, creature, StubRNG()) == []
    with pytest.raises(ValueError):
        service.apply_victory_rewards(battle_state, _make_area(), StubRNG())


def test_attacking_defeated_creature_raises(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    dead = _make_creature("Bat", hp=2)
    alive = _make_creature("Wolf")
    battle_state, _ = service.start_battle(_make_player(), _make_area(dead, alive))
    service.player_attack(battle_state, dead, StubRNG(randints=[2]))

    with pytest.raises(ValueError):
        service.player_attack(battle_state, dead, StubRNG())


def test_victory_rewards_clear_area_and_drop_loot(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    area = instantiate_area(registry.get(AreaDef, "den"), registry)
    player = _make_player()
    player.equipped_weapon = registry.get(WeaponDef, "short_sword")
    battle_state, _ = service.start_battle(player, area)
    wolf = area.creatures[0]
    while battle_state.status == "ongoing":
        service.player_attack(battle_state, wolf, StubRNG(randints=[6]))

    events = service.apply_victory_rewards(battle_state, area, StubRNG())

    assert battle_state.status == "victory"
    assert area.creatures == []
    assert player.xp == 4
    assert isinstance(events[0], ExpGainedEvent)
    assert any(isinstance(event, LootDroppedEvent) and event.item_names == ("Fang",) for event in events)
    assert area.items.contains("fang")
    assert area.items.contains("brass_key")
    assert service.apply_victory_rewards(battle_state, area, StubRNG()) == []
    assert player.xp == 4


def test_victory_rewards_level_up(tmp_path: Path) -> None:
    service, _ = _make_service(tmp_path)
    creature = _make_creature(hp=1, xp=Player.xp_to_level(2))
    area = _make_area(creature)
    player = _make_player()
    battle_state, _ = service.start_battle(player, area)
    service.player_attack(battle_state, creature, StubRNG(randints=[1]))

    events = service.apply_victory_rewards(battle_state, area, StubRNG(randints=[3]))

    level_events = [event for event in events if isinstance(event, LevelUpEvent)]
    assert [event.level for event in level_events] == [2]
    assert player.level == 2
    assert player.stats.max_hp == 18
    assert player.stats.hp == 18
    assert player.stats.strength == 6


def test_defeating_creatures_leaves_definitions_untouched(tmp_path: Path) -> None:
    service, registry = _make_service(tmp_path)
    area = instantiate_area(registry.get(AreaDef, "den"), registry)
    battle_state, _ = service.start_battle(_make_player(), area)
    wolf = area.creatures[0]
    while battle_state.status == "ongoing":
        service.player_attack(battle_state, wolf, StubRNG(randints=[2]))
    service.apply_victory_rewards(battle_state, area, StubRNG())

    assert registry.get(CreatureDef, "wolf").hp == 10
    assert registry.get(AreaDef, "den").creature_ids == ("wolf",)
    fresh = instantiate_area(registry.get(AreaDef, "den"), registry)
    assert fresh.creatures[0].stats.hp == 10
