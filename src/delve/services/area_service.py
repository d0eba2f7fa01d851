"""Application service for areas: live area state, exits and searching."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from delve.core.types import RoomActionKind, TraverseResult
from delve.data.registry import EntityRegistry
from delve.domain.defs import AreaDef
from delve.domain.dialogue import MENU_SELECTION, Dialogue
from delve.domain.entities import Area, Door
from delve.domain.inventory import InventoryEntry
from delve.domain.state import GameState
from delve.services.factories import instantiate_area

logger = logging.getLogger(__name__)

DEFAULT_STARTING_AREA_ID = "area_01"
SEARCH_LABEL = "Search"


@dataclass(slots=True)
class RoomAction:
    """What a selection in the room dialogue asks for."""

    kind: RoomActionKind
    content_index: int | None = None
    door: Door | None = None


class AreaService:
    """Owns the live copies of areas and the actions taken inside them."""

    def __init__(self, registry: EntityRegistry) -> None:
        self._registry = registry

    def get_area(self, state: GameState, area_id: str) -> Area:
        """Return the live area, creating it from its definition on first visit."""
        area = state.areas.get(area_id)
        if area is None:
            area = instantiate_area(self._registry.get(AreaDef, area_id), self._registry)
            state.areas[area_id] = area
            logger.debug("Instantiated area %s", area_id)
        return area

    def current_area(self, state: GameState) -> Area:
        if not state.player.current_area_id:
            state.player.current_area_id = DEFAULT_STARTING_AREA_ID
        return self.get_area(state, state.player.current_area_id)

    def mark_visited(self, state: GameState) -> None:
        state.player.visited_areas.add(self.current_area(state).id)

    def build_room_dialogue(self, area: Area) -> Dialogue:
        """The area's own choices, then one exit per door, then Search."""
        dialogue = area.dialogue.copy(allow_menu=True)
        for door in area.doors:
            dialogue.add_choice(f"Go through the {door.description}")
        dialogue.add_choice(SEARCH_LABEL)
        return dialogue

    @staticmethod
    def resolve_room_choice(area: Area, selection: int) -> RoomAction:
        """Map a selection from ``build_room_dialogue`` to the action it stands for."""
        static_count = area.dialogue.size()
        door_count = len(area.doors)
        if selection == MENU_SELECTION:
            return RoomAction(kind="menu")
        if 1 <= selection <= static_count:
            return RoomAction(kind="content", content_index=selection - 1)
        if static_count < selection <= static_count + door_count:
            return RoomAction(kind="door", door=area.doors[selection - static_count - 1])
        if selection == static_count + door_count + 1:
            return RoomAction(kind="search")
        raise ValueError(f"Selection {selection} is not a choice of area '{area.id}'.")

    def traverse(self, state: GameState, door: Door) -> TraverseResult:
        """Go through ``door``, unlocking it for good if the player carries the key."""
        player = state.player
        destination = self._registry.get(AreaDef, door.to)
        if door.locked:
            if door.key is None or not player.inventory.contains(door.key):
                return TraverseResult.LOCKED
            door.locked = False
            player.current_area_id = destination.id
            logger.info("%s unlocked %s with %s", player.name, door.door_id, door.key)
            return TraverseResult.UNLOCKED
        player.current_area_id = destination.id
        return TraverseResult.PASSED

    def search(self, state: GameState) -> List[InventoryEntry]:
        """Move everything lying in the current area into the player's inventory."""
        area = self.current_area(state)
        found = area.items.entries()
        state.player.inventory.merge(area.items)
        return found
