"""Serialization helpers for manual save/load."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Set, Tuple, Type, TypeVar

from delve.core.rng import RNG
from delve.data.errors import EntityLookupError
from delve.data.registry import EntityRegistry
from delve.domain.defs import AreaDef, ArmourDef, CreatureDef, WeaponDef
from delve.domain.entities import Area, Player, Stats
from delve.domain.inventory import Inventory
from delve.domain.progression import CLASS_SEEDS
from delve.domain.state import GameState
from delve.services.errors import SaveLoadError
from delve.services.factories import create_creature, instantiate_area

SavePayload = Dict[str, Any]
T = TypeVar("T")


class SaveService:
    """Converts runtime state to/from the player and areas payloads.

    The player document holds the character itself; the areas document maps
    every instantiated area id to a snapshot of what is left in it. Ids in both
    are resolved through the registry on load.
    """

    SAVE_VERSION = 1

    def __init__(self, registry: EntityRegistry) -> None:
        self._registry = registry

    def serialize(self, state: GameState) -> Tuple[SavePayload, SavePayload]:
        """Return JSON-serializable (player, areas) payloads for disk persistence."""
        player_payload = self._serialize_player(state.player)
        player_payload["save_version"] = self.SAVE_VERSION
        player_payload["saved_at"] = datetime.now(timezone.utc).isoformat()
        areas_payload: SavePayload = {
            area_id: self._serialize_area(area) for area_id, area in state.areas.items()
        }
        return player_payload, areas_payload

    def deserialize(
        self,
        player_payload: Mapping[str, Any],
        areas_payload: Mapping[str, Any] | None,
        rng: RNG,
    ) -> GameState:
        """Rehydrate a GameState from persisted payloads."""
        if not isinstance(player_payload, Mapping):
            raise SaveLoadError("Save data must be a JSON object.")
        version = player_payload.get("save_version")
        if version != self.SAVE_VERSION:
            raise SaveLoadError("Save format changed. Please start a new game.")

        player = self._coerce_player(player_payload)
        state = GameState(rng=rng, player=player)
        if areas_payload is not None:
            mapping = self._require_dict(areas_payload, "areas")
            for area_id, snapshot in mapping.items():
                area_key = self._require_str(area_id, "areas key")
                state.areas[area_key] = self._coerce_area(area_key, snapshot)
        return state

    # -----------------------
    # Serialization
    # -----------------------
    @staticmethod
    def _serialize_player(player: Player) -> Dict[str, Any]:
        return {
            "name": player.name,
            "class": player.class_name,
            "level": player.level,
            "xp": player.xp,
            "crit_chance": player.crit_chance,
            "stats": {
                "max_hp": player.stats.max_hp,
                "hp": player.stats.hp,
                "strength": player.stats.strength,
                "agility": player.stats.agility,
            },
            "equipped_weapon": player.equipped_weapon.id if player.equipped_weapon else None,
            "equipped_armour": player.equipped_armour.id if player.equipped_armour else None,
            "current_area": player.current_area_id,
            "visited_areas": sorted(player.visited_areas),
            "inventory": SaveService._serialize_inventory(player.inventory),
        }

    @staticmethod
    def _serialize_area(area: Area) -> Dict[str, Any]:
        return {
            "creatures": [[creature.creature_id, creature.stats.hp] for creature in area.creatures],
            "items": SaveService._serialize_inventory(area.items),
            "unlocked_doors": [door.door_id for door in area.doors if not door.locked],
        }

    @staticmethod
    def _serialize_inventory(inventory: Inventory) -> List[List[Any]]:
        return [[entry.item.id, entry.quantity] for entry in inventory]

    # -----------------------
    # Deserialization
    # -----------------------
    def _coerce_player(self, payload: Mapping[str, Any]) -> Player:
        class_name = self._require_str(payload.get("class"), "player.class")
        if class_name not in CLASS_SEEDS:
            raise SaveLoadError(f"Unknown class '{class_name}' in save.")
        stats_payload = self._require_dict(payload.get("stats"), "player.stats")
        stats = Stats(
            max_hp=self._require_non_negative_int(stats_payload.get("max_hp"), "player.stats.max_hp"),
            hp=self._require_non_negative_int(stats_payload.get("hp"), "player.stats.hp"),
            strength=self._require_non_negative_int(stats_payload.get("strength"), "player.stats.strength"),
            agility=self._require_non_negative_int(stats_payload.get("agility"), "player.stats.agility"),
        )
        crit_chance = payload.get("crit_chance")
        if isinstance(crit_chance, bool) or not isinstance(crit_chance, (int, float)):
            raise SaveLoadError("player.crit_chance must be a number.")

        current_area = self._require_str(payload.get("current_area"), "player.current_area")
        self._resolve(AreaDef, current_area)
        visited: Set[str] = set()
        for entry in self._require_list(payload.get("visited_areas", []), "player.visited_areas"):
            area_id = self._require_str(entry, "player.visited_areas[]")
            self._resolve(AreaDef, area_id)
            visited.add(area_id)

        player = Player(
            name=self._require_str(payload.get("name"), "player.name"),
            class_name=class_name,
            stats=stats,
            level=self._require_non_negative_int(payload.get("level"), "player.level"),
            xp=self._require_non_negative_int(payload.get("xp"), "player.xp"),
            crit_chance=float(crit_chance),
            inventory=self._coerce_inventory(payload.get("inventory"), "player.inventory"),
            current_area_id=current_area,
            visited_areas=visited,
        )
        weapon_id = payload.get("equipped_weapon")
        if weapon_id is not None:
            player.equipped_weapon = self._resolve_equipped(
                WeaponDef, weapon_id, player.inventory, "player.equipped_weapon"
            )
        armour_id = payload.get("equipped_armour")
        if armour_id is not None:
            player.equipped_armour = self._resolve_equipped(
                ArmourDef, armour_id, player.inventory, "player.equipped_armour"
            )
        return player

    def _resolve_equipped(self, entity_type: Type[T], value: Any, inventory: Inventory, context: str) -> T:
        item_id = self._require_str(value, context)
        item = self._resolve(entity_type, item_id)
        if not inventory.contains(item_id):
            raise SaveLoadError(f"{context} '{item_id}' is not in the player's inventory.")
        return item

    def _coerce_area(self, area_id: str, snapshot: Any) -> Area:
        context = f"areas[{area_id}]"
        mapping = self._require_dict(snapshot, context)
        area = instantiate_area(self._resolve(AreaDef, area_id), self._registry)

        area.creatures = []
        for entry in self._require_list(mapping.get("creatures", []), f"{context}.creatures"):
            if not isinstance(entry, list) or len(entry) != 2:
                raise SaveLoadError(f"{context}.creatures entries must be [id, hp] pairs.")
            creature_id = self._require_str(entry[0], f"{context}.creatures[].id")
            hp = self._require_non_negative_int(entry[1], f"{context}.creatures[{creature_id}].hp")
            definition = self._resolve(CreatureDef, creature_id)
            if hp == 0:
                continue
            area.creatures.append(create_creature(definition, hp=hp))

        area.items = self._coerce_inventory(mapping.get("items", []), f"{context}.items")

        unlocked = {
            self._require_str(door_id, f"{context}.unlocked_doors[]")
            for door_id in self._require_list(mapping.get("unlocked_doors", []), f"{context}.unlocked_doors")
        }
        for door in area.doors:
            if door.door_id in unlocked:
                door.locked = False
        return area

    def _coerce_inventory(self, value: Any, context: str) -> Inventory:
        inventory = Inventory()
        for entry in self._require_list(value, context):
            if not isinstance(entry, list) or len(entry) != 2:
                raise SaveLoadError(f"{context} entries must be [id, quantity] pairs.")
            item_id = self._require_str(entry[0], f"{context}[].id")
            quantity = self._require_non_negative_int(entry[1], f"{context}[{item_id}].quantity")
            try:
                item = self._registry.get_item(item_id)
            except EntityLookupError as exc:
                raise SaveLoadError(
                    f"Save incompatible with current definitions: item '{item_id}' missing."
                ) from exc
            inventory.add(item, quantity)
        return inventory

    def _resolve(self, entity_type: Type[T], entity_id: str) -> T:
        try:
            return self._registry.get(entity_type, entity_id)
        except EntityLookupError as exc:
            raise SaveLoadError(
                f"Save incompatible with current definitions: {entity_type.__name__} '{entity_id}' missing."
            ) from exc

    # -----------------------
    # Primitive validators
    # -----------------------
    @staticmethod
    def _require_dict(value: Any, context: str) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise SaveLoadError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_list(value: Any, context: str) -> List[Any]:
        if not isinstance(value, list):
            raise SaveLoadError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise SaveLoadError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_non_negative_int(value: Any, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SaveLoadError(f"{context} must be a non-negative integer.")
        return value
