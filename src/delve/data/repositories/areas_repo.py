"""Repository for area definitions."""
from __future__ import annotations

from typing import Dict, List, Tuple

from delve.data.errors import DataReferenceError, DataValidationError
from delve.data.repositories.base import RepositoryBase
from delve.data.repositories.doors_repo import DoorsRepository
from delve.domain.defs import AreaDef, DialogueDef, DoorDef


class AreasRepository(RepositoryBase[AreaDef]):
    """Loads area definitions, embedding the door definitions they list.

    Doors must be loaded first. Creature and item ids stay raw and are resolved
    when a live copy of the area is created.
    """

    entity_label = "area"

    def __init__(self, doors_repo: DoorsRepository, base_path=None) -> None:
        super().__init__("areas.json", base_path)
        self._doors_repo = doors_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, AreaDef]:
        if not self._doors_repo.is_loaded:
            raise DataReferenceError("Door definitions must be loaded before areas.")
        definitions: Dict[str, AreaDef] = {}
        for area_id, area_map in self._iter_records(raw):
            context = f"area '{area_id}'"
            self._assert_fields(
                area_map,
                {"dialogue"},
                context,
                optional_fields={"doors", "creatures", "items"},
            )
            definitions[area_id] = AreaDef(
                id=area_id,
                dialogue=self._parse_dialogue(area_map["dialogue"], context),
                doors=self._resolve_doors(area_map.get("doors", []), context),
                creature_ids=tuple(self._require_str_list(area_map.get("creatures", []), f"{context} creatures")),
                items=self._parse_items(area_map.get("items", []), context),
            )
        return definitions

    def _parse_dialogue(self, value: object, context: str) -> DialogueDef:
        dialogue_map = self._require_mapping(value, f"{context} dialogue")
        self._assert_fields(dialogue_map, {"prompt"}, f"{context} dialogue", optional_fields={"choices"})
        return DialogueDef(
            prompt=self._require_str(dialogue_map["prompt"], f"{context} dialogue prompt"),
            choices=tuple(self._require_str_list(dialogue_map.get("choices", []), f"{context} dialogue choices")),
        )

    def _resolve_doors(self, value: object, context: str) -> Tuple[DoorDef, ...]:
        doors: List[DoorDef] = []
        for door_id in self._require_str_list(value, f"{context} doors"):
            if door_id not in self._doors_repo:
                raise DataReferenceError(f"{context} references unknown door '{door_id}'.")
            doors.append(self._doors_repo.get(door_id))
        return tuple(doors)

    def _parse_items(self, value: object, context: str) -> Tuple[Tuple[str, int], ...]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} items must be a list.")
        items: List[Tuple[str, int]] = []
        for index, entry in enumerate(value):
            entry_context = f"{context} items[{index}]"
            if isinstance(entry, str):
                items.append((entry, 1))
                continue
            if not isinstance(entry, list) or len(entry) != 2:
                raise DataValidationError(f"{entry_context} must be an id or an [id, quantity] pair.")
            item_id = self._require_str(entry[0], f"{entry_context} id")
            quantity = self._require_int(entry[1], f"{entry_context} quantity")
            if quantity <= 0:
                raise DataValidationError(f"{entry_context} quantity must be positive.")
            items.append((item_id, quantity))
        return tuple(items)
