"""Weapons repository."""
from __future__ import annotations

from typing import Callable, Dict

from delve.data.errors import DataValidationError
from delve.data.repositories.items_repo import ItemsRepository
from delve.domain.defs import ItemDef, WeaponDef


class WeaponsRepository(ItemsRepository):
    """Loads and validates weapon definitions."""

    entity_label = "weapon"
    definition_cls = WeaponDef
    default_filename = "weapons.json"

    def _variant_fields(self) -> Dict[str, Callable[[object, str], object]]:
        return {
            "damage_min": self._require_non_negative_int,
            "damage_max": self._require_non_negative_int,
            "miss_chance": self._require_probability,
            "crit_bonus": self._require_probability,
            "strength_scaling": self._require_scaling,
        }

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        weapons = super()._build(raw)
        for weapon in weapons.values():
            assert isinstance(weapon, WeaponDef)
            if weapon.damage_max < weapon.damage_min:
                weapon.damage_max = weapon.damage_min
        return weapons

    @staticmethod
    def _require_scaling(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        if value < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return float(value)
