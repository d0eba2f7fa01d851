"""Armour repository."""
from __future__ import annotations

from typing import Callable, Dict

from delve.data.repositories.items_repo import ItemsRepository
from delve.domain.defs import ArmourDef


class ArmourRepository(ItemsRepository):
    """Loads and validates armour definitions."""

    entity_label = "armour"
    definition_cls = ArmourDef
    default_filename = "armour.json"

    def _variant_fields(self) -> Dict[str, Callable[[object, str], object]]:
        return {"defense": self._require_non_negative_int}
