"""Battle controller that drives rounds and asks the player for actions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Literal, Sequence

from delve.core.console import Console
from delve.core.rng import RNG
from delve.core.types import BattleStatus
from delve.domain.battle_models import BattleState
from delve.domain.dialogue import Dialogue
from delve.domain.entities import Area, Creature, Player
from delve.services.battle_service import BattleEvent, BattleService

BattleActionType = Literal["attack", "defend"]
EventRenderer = Callable[[Sequence[BattleEvent]], None]

ACTION_LABELS: tuple[tuple[BattleActionType, str], ...] = (
    ("attack", "Attack"),
    ("defend", "Defend"),
)


@dataclass(slots=True)
class BattleAction:
    """Represents a structured action decision from the player."""

    action_type: BattleActionType
    target: Creature | None = None


class BattleController:
    """
    Runs a battle to resolution.

    Each round every living creature attacks in area order, then the player
    picks an action through a Dialogue. Rendering is delegated to the optional
    ``render_events`` callback so the controller never formats text itself.
    """

    def __init__(self, battle_service: BattleService) -> None:
        self._service = battle_service

    def start_battle(self, player: Player, area: Area) -> tuple[BattleState, List[BattleEvent]]:
        return self._service.start_battle(player, area)

    def run(
        self,
        battle_state: BattleState,
        console: Console,
        rng: RNG,
        *,
        render_events: EventRenderer | None = None,
    ) -> BattleStatus:
        """Alternate creature and player turns until victory or defeat."""
        render = render_events or (lambda events: None)
        while not battle_state.is_over:
            battle_state.round += 1
            for creature in battle_state.creatures:
                if battle_state.is_over:
                    break
                render(self._service.creature_attack(battle_state, creature, rng))
            if battle_state.is_over:
                break
            action = self.prompt_player_action(battle_state, console)
            render(self.apply_player_action(battle_state, action, rng))
        return battle_state.status

    def prompt_player_action(self, battle_state: BattleState, console: Console) -> BattleAction:
        player = battle_state.player
        console.write(f"{player.name}: {player.stats.hp}/{player.stats.max_hp} HP")
        dialogue = Dialogue("What will you do?", [label for _, label in ACTION_LABELS])
        action_type = ACTION_LABELS[dialogue.activate(console) - 1][0]
        if action_type == "attack":
            return BattleAction(action_type="attack", target=self._prompt_target(battle_state, console))
        return BattleAction(action_type=action_type)

    def apply_player_action(self, battle_state: BattleState, action: BattleAction, rng: RNG) -> List[BattleEvent]:
        if action.action_type == "attack":
            if action.target is None:
                raise ValueError("Attack action requires a target.")
            return self._service.player_attack(battle_state, action.target, rng)
        if action.action_type == "defend":
            return self._service.player_defend(battle_state)
        raise ValueError(f"Unknown action type: {action.action_type}")

    def apply_victory_rewards(self, battle_state: BattleState, area: Area, rng: RNG) -> List[BattleEvent]:
        return self._service.apply_victory_rewards(battle_state, area, rng)

    @staticmethod
    def _prompt_target(battle_state: BattleState, console: Console) -> Creature:
        living = battle_state.living_creatures()
        if len(living) == 1:
            return living[0]
        dialogue = Dialogue(
            "Attack which creature?",
            [f"{creature.name} ({creature.stats.hp}/{creature.stats.max_hp} HP)" for creature in living],
        )
        return living[dialogue.activate(console) - 1]
