"""Creatures repository."""
from __future__ import annotations

from typing import Dict

from delve.data.errors import DataValidationError
from delve.data.repositories.base import RepositoryBase
from delve.domain.defs import CreatureDef


class CreaturesRepository(RepositoryBase[CreatureDef]):
    """Loads and validates creature definitions."""

    entity_label = "creature"

    def __init__(self, base_path=None) -> None:
        super().__init__("creatures.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CreatureDef]:
        creatures: Dict[str, CreatureDef] = {}
        for raw_id, creature_data in self._iter_records(raw):
            context = f"creature '{raw_id}'"
            self._assert_fields(
                creature_data,
                {"name", "hp", "strength", "agility", "xp"},
                context,
                optional_fields={"evasion", "defense", "loot"},
            )
            hp = self._require_int(creature_data["hp"], f"{context} hp")
            if hp <= 0:
                raise DataValidationError(f"{context} hp must be positive.")

            creatures[raw_id] = CreatureDef(
                id=raw_id,
                name=self._require_str(creature_data["name"], f"{context} name"),
                hp=hp,
                strength=self._require_non_negative_int(creature_data["strength"], f"{context} strength"),
                agility=self._require_non_negative_int(creature_data["agility"], f"{context} agility"),
                xp=self._require_non_negative_int(creature_data["xp"], f"{context} xp"),
                evasion=self._require_probability(creature_data.get("evasion", 0.0), f"{context} evasion"),
                defense=self._require_non_negative_int(creature_data.get("defense", 0), f"{context} defense"),
                loot=tuple(self._require_str_list(creature_data.get("loot", []), f"{context} loot")),
            )
        return creatures
