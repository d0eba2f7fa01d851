"""Doors repository."""
from __future__ import annotations

import logging
from typing import Dict

from delve.data.repositories.base import RepositoryBase
from delve.domain.defs import DoorDef

logger = logging.getLogger(__name__)


class DoorsRepository(RepositoryBase[DoorDef]):
    """Loads and validates door definitions.

    A door's target area is stored as a raw id; the registry checks it once the
    areas themselves are loaded.
    """

    entity_label = "door"

    def __init__(self, base_path=None) -> None:
        super().__init__("doors.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, DoorDef]:
        doors: Dict[str, DoorDef] = {}
        for raw_id, door_data in self._iter_records(raw):
            context = f"door '{raw_id}'"
            self._assert_fields(door_data, {"description", "to"}, context, optional_fields={"locked", "key"})
            key = door_data.get("key")
            if key is not None:
                key = self._require_str(key, f"{context} key")
            locked = self._require_bool(door_data.get("locked", False), f"{context} locked")
            if locked and key is None:
                logger.warning("Door '%s' is locked but names no key; it can never be opened.", raw_id)

            doors[raw_id] = DoorDef(
                id=raw_id,
                description=self._require_str(door_data["description"], f"{context} description"),
                to=self._require_str(door_data["to"], f"{context} to").strip(),
                locked=locked,
                key=key,
            )
        return doors
