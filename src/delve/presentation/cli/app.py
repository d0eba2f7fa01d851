"""Console-driven UI loops for Delve."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from delve.core.console import Console
from delve.core.rng import RNG
from delve.core.types import TraverseResult
from delve.data.registry import EntityRegistry
from delve.domain.defs import ArmourDef, WeaponDef
from delve.domain.dialogue import MENU_SELECTION, Dialogue, prompt_number
from delve.domain.entities import Door
from delve.domain.progression import ADVENTURER, SELECTABLE_CLASSES
from delve.domain.state import GameState
from delve.services import (
    AreaService,
    BattleService,
    EquipFailedEvent,
    InventoryEvent,
    InventoryService,
    ItemEquippedEvent,
    SaveLoadError,
    SaveService,
)
from delve.services.controllers import BattleController
from delve.services.factories import create_player
from delve.presentation.cli.render import (
    DEATH_BANNER,
    character_sheet_lines,
    equipment_lines,
    render_battle_events,
    render_heading,
    render_lines,
)
from delve.presentation.cli.save_store import SaveStore

logger = logging.getLogger(__name__)

MenuAction = Literal["items", "equipment", "character"]
MENU_OPTIONS: tuple[tuple[MenuAction, str], ...] = (
    ("items", "Items"),
    ("equipment", "Equipment"),
    ("character", "Character"),
)
EQUIPMENT_OPTIONS = ("Equip Armour", "Equip Weapon", "Close")


@dataclass(slots=True)
class GameServices:
    """Everything the session loop needs, wired around one registry."""

    registry: EntityRegistry
    area_service: AreaService
    battle_controller: BattleController
    inventory_service: InventoryService
    save_service: SaveService
    save_store: SaveStore
    start_area_id: str


def build_services(registry: EntityRegistry, save_store: SaveStore, *, start_area_id: str) -> GameServices:
    """Construct the services with a loaded registry."""
    return GameServices(
        registry=registry,
        area_service=AreaService(registry),
        battle_controller=BattleController(BattleService(registry)),
        inventory_service=InventoryService(),
        save_service=SaveService(registry),
        save_store=save_store,
        start_area_id=start_area_id,
    )


def play(console: Console, services: GameServices, rng: RNG) -> None:
    """Start or resume a game and run it until the player dies."""
    console.write("=== Delve ===")
    state = start_game(console, services, rng)
    run_session(console, services, state)


def start_game(console: Console, services: GameServices, rng: RNG) -> GameState:
    """Resume the named player's save, or create a new character."""
    name = _prompt_player_name(console)
    store = services.save_store
    if store.exists(name):
        try:
            player_payload, areas_payload = store.read(name)
            state = services.save_service.deserialize(player_payload, areas_payload, rng)
        except SaveLoadError as exc:
            logger.warning("Could not load save for %s: %s", name, exc)
            console.write(f"Your save could not be loaded ({exc}). Starting a new adventure.")
        else:
            console.write(f"Welcome back, {state.player.name}.")
            return state

    dialogue = Dialogue(
        f"Choose your class ({MENU_SELECTION} to go without one):",
        [seed.name for seed in SELECTABLE_CLASSES],
        allow_menu=True,
    )
    selection = dialogue.activate(console)
    seed = ADVENTURER if selection == MENU_SELECTION else SELECTABLE_CLASSES[selection - 1]
    player = create_player(name, seed.name, start_area_id=services.start_area_id)
    console.write(f"{player.name} the {player.class_name} sets out.")
    return GameState(rng=rng, player=player)


def run_session(console: Console, services: GameServices, state: GameState) -> None:
    """Top-level loop: save, fight whatever is here, then let the player act."""
    area_service = services.area_service
    player = state.player
    while True:
        area_service.mark_visited(state)
        save_game(services, state)
        area = area_service.current_area(state)

        if area.living_creatures():
            controller = services.battle_controller
            battle_state, events = controller.start_battle(player, area)
            render_battle_events(console, events)
            status = controller.run(
                battle_state,
                console,
                state.rng,
                render_events=lambda battle_events: render_battle_events(console, battle_events),
            )
            if status == "defeat":
                break
            render_battle_events(console, controller.apply_victory_rewards(battle_state, area, state.rng))
            continue

        if not player.is_alive:
            break

        dialogue = area_service.build_room_dialogue(area)
        console.write()
        action = area_service.resolve_room_choice(area, dialogue.activate(console))
        if action.kind == "menu":
            _run_meta_menu(console, services, state)
        elif action.kind == "content":
            logger.debug("Choice %s in %s has no effect", action.content_index, area.id)
        elif action.kind == "door" and action.door is not None:
            _go_through(console, services, state, action.door)
        elif action.kind == "search":
            _search(console, services, state)

    console.write(DEATH_BANNER)


def save_game(services: GameServices, state: GameState) -> None:
    player_payload, areas_payload = services.save_service.serialize(state)
    services.save_store.write(state.player.name, player_payload, areas_payload)


def _prompt_player_name(console: Console) -> str:
    while True:
        name = console.read("What is your name? ").strip()
        if name and any(char.isalnum() for char in name):
            return name
        console.write("Please enter a name.")


def _go_through(console: Console, services: GameServices, state: GameState, door: Door) -> None:
    result = services.area_service.traverse(state, door)
    if result is TraverseResult.LOCKED:
        console.write(f"The {door.description} is locked.")
    elif result is TraverseResult.UNLOCKED:
        console.write(f"You unlock the {door.description} and go through it.")
    else:
        console.write(f"You go through the {door.description}.")


def _search(console: Console, services: GameServices, state: GameState) -> None:
    found = services.area_service.search(state)
    if not found:
        console.write("You find nothing.")
        return
    console.write("You find:")
    for entry in found:
        console.write(f"  {entry.describe()}")


def _run_meta_menu(console: Console, services: GameServices, state: GameState) -> None:
    dialogue = Dialogue("Menu", [label for _, label in MENU_OPTIONS])
    action = MENU_OPTIONS[dialogue.activate(console) - 1][0]
    player = state.player
    if action == "items":
        render_heading(console, "Items")
        if player.inventory.print(console) == 0:
            console.write("You are carrying nothing.")
    elif action == "equipment":
        _run_equipment_menu(console, services, state)
    else:
        render_heading(console, "Character")
        render_lines(console, character_sheet_lines(player))


def _run_equipment_menu(console: Console, services: GameServices, state: GameState) -> None:
    player = state.player
    render_heading(console, "Equipment")
    render_lines(console, equipment_lines(player))
    selection = Dialogue("", EQUIPMENT_OPTIONS).activate(console)
    if selection == 1:
        _equip(console, services, state, ArmourDef)
    elif selection == 2:
        _equip(console, services, state, WeaponDef)


def _equip(console: Console, services: GameServices, state: GameState, item_type: type) -> None:
    inventory = state.player.inventory
    count = inventory.print(console, item_type, numbered=True)
    if count == 0:
        console.write("You have nothing to equip.")
        return
    ordinal = prompt_number(console, "Equip which? ", count) - 1
    item = inventory.get(item_type, ordinal)
    service = services.inventory_service
    if item_type is ArmourDef:
        event = service.equip_armour(state.player, item)
    else:
        event = service.equip_weapon(state.player, item)
    _render_inventory_event(console, event)


def _render_inventory_event(console: Console, event: InventoryEvent) -> None:
    if isinstance(event, ItemEquippedEvent):
        console.write(f"You equip the {event.item_name}.")
    elif isinstance(event, EquipFailedEvent):
        console.write(event.message)
