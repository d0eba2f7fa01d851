"""Entity registry: the single source of truth for loaded definitions."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Tuple, Type, TypeVar

from delve.data.errors import DataReferenceError, DataValidationError, EntityLookupError
from delve.data.repositories import (
    AreasRepository,
    ArmourRepository,
    CreaturesRepository,
    DoorsRepository,
    ItemsRepository,
    RepositoryBase,
    WeaponsRepository,
)
from delve.domain.defs import AreaDef, ArmourDef, CreatureDef, DoorDef, ItemDef, WeaponDef

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Doors before areas: areas embed their door definitions when they are built.
LOAD_ORDER: Tuple[type, ...] = (ItemDef, WeaponDef, ArmourDef, CreatureDef, DoorDef, AreaDef)
ITEM_TYPES: Tuple[Type[ItemDef], ...] = (ItemDef, WeaponDef, ArmourDef)


class EntityRegistry:
    """Type-indexed store of every definition, keyed by identifier.

    Built once at startup and handed to the services that need it. Nothing in
    the registry is mutated during play; areas and creatures are copied out of it.
    """

    def __init__(self, base_path: Path | str | None = None) -> None:
        doors_repo = DoorsRepository(base_path)
        self._repositories: Dict[type, RepositoryBase] = {
            ItemDef: ItemsRepository(base_path),
            WeaponDef: WeaponsRepository(base_path),
            ArmourDef: ArmourRepository(base_path),
            CreatureDef: CreaturesRepository(base_path),
            DoorDef: doors_repo,
            AreaDef: AreasRepository(doors_repo, base_path),
        }

    def load(self, entity_type: type, source: Path | str | None = None) -> int:
        """Load (or reload) every definition of ``entity_type``."""
        repo = self._repository(entity_type)
        count = repo.load(source)
        if entity_type in ITEM_TYPES:
            self._check_item_ids_unique(entity_type)
        areas_repo = self._repositories[AreaDef]
        if entity_type is DoorDef and areas_repo.is_loaded:
            # Areas embed their doors; rebuild them against the new ones.
            logger.info("Doors reloaded; rebuilding area definitions")
            areas_repo.reload()
        return count

    def load_all(self) -> None:
        """Load every definition file in dependency order and check references."""
        for entity_type in LOAD_ORDER:
            self.load(entity_type)
        self.validate_references()

    def is_loaded(self, entity_type: type) -> bool:
        return self._repository(entity_type).is_loaded

    def get(self, entity_type: Type[T], entity_id: str) -> T:
        """Return the ``entity_type`` definition with this id."""
        repo = self._repository(entity_type)
        if entity_id in repo:
            return repo.get(entity_id)
        for other_type, other_repo in self._repositories.items():
            if other_type is not entity_type and entity_id in other_repo:
                raise EntityLookupError(
                    repo.entity_label,
                    entity_id,
                    f"'{entity_id}' is a {other_repo.entity_label}.",
                )
        return repo.get(entity_id)

    def get_item(self, item_id: str) -> ItemDef:
        """Return an item of any variant (plain item, weapon or armour)."""
        for item_type in ITEM_TYPES:
            repo = self._repositories[item_type]
            if item_id in repo:
                return repo.get(item_id)
        raise EntityLookupError("item", item_id)

    def all(self, entity_type: Type[T]) -> list[T]:
        return self._repository(entity_type).all()

    def validate_references(self) -> None:
        """Check cross-type references that could not be resolved at load time."""
        for door in self.all(DoorDef):
            if door.to not in self._repositories[AreaDef]:
                raise DataReferenceError(f"door '{door.id}' leads to unknown area '{door.to}'.")
            if door.key is not None:
                self._require_item(door.key, f"door '{door.id}' key")
        for creature in self.all(CreatureDef):
            for item_id in creature.loot:
                self._require_item(item_id, f"creature '{creature.id}' loot")
        for area in self.all(AreaDef):
            for creature_id in area.creature_ids:
                if creature_id not in self._repositories[CreatureDef]:
                    raise DataReferenceError(f"area '{area.id}' references unknown creature '{creature_id}'.")
            for item_id, _ in area.items:
                self._require_item(item_id, f"area '{area.id}' items")
        logger.debug("All cross references resolved.")

    def _require_item(self, item_id: str, context: str) -> None:
        try:
            self.get_item(item_id)
        except EntityLookupError as exc:
            raise DataReferenceError(f"{context} references unknown item '{item_id}'.") from exc

    def _check_item_ids_unique(self, loaded_type: type) -> None:
        loaded = self._repositories[loaded_type]
        for other_type in ITEM_TYPES:
            if other_type is loaded_type:
                continue
            other = self._repositories[other_type]
            clashes = sorted(definition.id for definition in loaded.all() if definition.id in other)
            if clashes:
                raise DataValidationError(
                    f"{loaded.entity_label} ids {clashes} are already used by {other.entity_label} definitions."
                )

    def _repository(self, entity_type: type) -> RepositoryBase:
        try:
            return self._repositories[entity_type]
        except KeyError as exc:
            raise TypeError(f"No definitions are registered for {entity_type!r}.") from exc
