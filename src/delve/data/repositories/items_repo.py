"""Items repository."""
from __future__ import annotations

from typing import Callable, Dict

from delve.data.repositories.base import RepositoryBase
from delve.domain.defs import ItemDef

BASE_ITEM_FIELDS = {"description", "value"}


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates plain item definitions.

    Weapon and armour repositories reuse this parser: the base item fields are
    shared and each variant only declares its extra fields, which default to the
    definition's zero values when a record leaves them out.
    """

    entity_label = "item"
    definition_cls: type[ItemDef] = ItemDef
    default_filename = "items.json"

    def __init__(self, base_path=None) -> None:
        super().__init__(self.default_filename, base_path)

    def _variant_fields(self) -> Dict[str, Callable[[object, str], object]]:
        return {}

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        variant_fields = self._variant_fields()
        items: Dict[str, ItemDef] = {}
        for raw_id, item_data in self._iter_records(raw):
            context = f"{self.entity_label} '{raw_id}'"
            self._assert_fields(
                item_data,
                {"name"},
                context,
                optional_fields=BASE_ITEM_FIELDS | set(variant_fields),
            )
            extras = {
                field_name: parse(item_data[field_name], f"{context} {field_name}")
                for field_name, parse in variant_fields.items()
                if field_name in item_data
            }
            items[raw_id] = self.definition_cls(
                id=raw_id,
                name=self._require_str(item_data["name"], f"{context} name"),
                description=self._require_str(item_data.get("description", ""), f"{context} description"),
                value=self._require_non_negative_int(item_data.get("value", 0), f"{context} value"),
                **extras,
            )
        return items
