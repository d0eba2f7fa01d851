from pathlib import Path

import pytest

from delve.core.rng import RNG
from delve.data.errors import EntityLookupError
from delve.domain.defs import ArmourDef, WeaponDef
from delve.domain.dialogue import Dialogue
from delve.domain.entities import Area, Creature, Stats
from delve.services.battle_service import BattleEvent, BattleService
from delve.services.controllers import BattleAction, BattleController
from delve.services.factories import create_player
from tests.helpers.console import ScriptedConsole
from tests.helpers.definitions import make_registry
from tests.helpers.rng import StubRNG


def _make_controller(tmp_path: Path) -> BattleController:
    return BattleController(BattleService(make_registry(tmp_path)))


def _make_creature(name: str, hp: int, *, strength: int = 2) -> Creature:
    return Creature(
        creature_id=name.lower(),
        name=name,
        stats=Stats(max_hp=hp, hp=hp, strength=strength, agility=1),
        xp_reward=1,
    )


def test_run_terminates_for_positive_health_combatants(tmp_path: Path) -> None:
    controller = _make_controller(tmp_path)
    for seed in range(10):
        player = create_player("Tester", "Rogue")
        area = Area(id="pit", dialogue=Dialogue("Pit"), creatures=[_make_creature("Wolf", 10, strength=4)])
        battle_state, _ = controller.start_battle(player, area)
        console = ScriptedConsole(["1"] * 200)

        status = controller.run(battle_state, console, RNG(seed))

        assert status in ("victory", "defeat")
        assert battle_state.round < 200


def test_run_terminates_when_defenses_exceed_rolls(tmp_path: Path) -> None:
    registry = make_registry(tmp_path)
    controller = BattleController(BattleService(registry))
    for seed in range(10):
        player = create_player("Tester", "Rogue")
        player.stats = Stats(max_hp=15, hp=15, strength=2, agility=1)
        player.equipped_armour = registry.get(ArmourDef, "leather")
        ogre = _make_creature("Ogre", 5, strength=2)
        ogre.defense = 2
        battle_state, _ = controller.start_battle(player, Area(id="pit", dialogue=Dialogue("Pit"), creatures=[ogre]))

        status = controller.run(battle_state, ScriptedConsole(["1"] * 50), RNG(seed))

        assert status == "victory"
        assert battle_state.round == 5
        assert player.stats.hp < 15


def test_creatures_act_before_player_each_round(tmp_path: Path) -> None:
    controller = _make_controller(tmp_path)
    player = create_player("Tester", "Fighter")
    area = Area(id="pit", dialogue=Dialogue("Pit"), creatures=[_make_creature("Rat", 1)])
    battle_state, _ = controller.start_battle(player, area)
    rendered: list[BattleEvent] = []

    status = controller.run(battle_state, ScriptedConsole(["1"]), StubRNG(), render_events=rendered.extend)

    assert status == "victory"
    assert battle_state.round == 1
    assert rendered[0].attacker_name == "Rat"
    assert rendered[1].attacker_name == "Tester"
    assert player.stats.hp == 14


def test_multiple_creatures_prompt_for_target(tmp_path: Path) -> None:
    controller = _make_controller(tmp_path)
    player = create_player("Tester", "Fighter")
    rat = _make_creature("Rat", 5)
    bat = _make_creature("Bat", 1)
    battle_state, _ = controller.start_battle(player, Area(id="pit", dialogue=Dialogue("Pit"), creatures=[rat, bat]))
    console = ScriptedConsole(["1", "2"])

    action = controller.prompt_player_action(battle_state, console)

    assert action.action_type == "attack"
    assert action.target is bat
    assert "Attack which creature?" in console.lines
    assert "2: Bat (1/1 HP)" in console.lines


def test_defend_action_sets_guard(tmp_path: Path) -> None:
    controller = _make_controller(tmp_path)
    player = create_player("Tester", "Fighter")
    battle_state, _ = controller.start_battle(
        player, Area(id="pit", dialogue=Dialogue("Pit"), creatures=[_make_creature("Rat", 5)])
    )

    action = controller.prompt_player_action(battle_state, ScriptedConsole(["2"]))
    controller.apply_player_action(battle_state, action, StubRNG())

    assert action == BattleAction(action_type="defend")
    assert battle_state.guarding is True


def test_attack_without_target_raises(tmp_path: Path) -> None:
    controller = _make_controller(tmp_path)
    battle_state, _ = controller.start_battle(
        create_player("Tester", "Fighter"),
        Area(id="pit", dialogue=Dialogue("Pit"), creatures=[_make_creature("Rat", 5)]),
    )

    with pytest.raises(ValueError):
        controller.apply_player_action(battle_state, BattleAction(action_type="attack"), StubRNG())


def test_missing_loot_definition_aborts_rewards(tmp_path: Path) -> None:
    controller = _make_controller(tmp_path)
    player = create_player("Tester", "Fighter")
    creature = _make_creature("Rat", 1)
    creature.loot = ("unknown_item",)
    area = Area(id="pit", dialogue=Dialogue("Pit"), creatures=[creature])
    battle_state, _ = controller.start_battle(player, area)
    controller.run(battle_state, ScriptedConsole(["1"]), StubRNG())

    with pytest.raises(EntityLookupError):
        controller.apply_victory_rewards(battle_state, area, StubRNG())


def test_equipped_weapon_used_in_run(tmp_path: Path) -> None:
    registry = make_registry(tmp_path)
    controller = BattleController(BattleService(registry))
    player = create_player("Tester", "Fighter")
    player.equipped_weapon = registry.get(WeaponDef, "short_sword")
    wolf = _make_creature("Wolf", 10)
    battle_state, _ = controller.start_battle(player, Area(id="pit", dialogue=Dialogue("Pit"), creatures=[wolf]))

    status = controller.run(battle_state, ScriptedConsole(["1", "1", "1"]), StubRNG(randints=[1, 5, 1, 5]))

    assert status == "victory"
    assert battle_state.round == 2
