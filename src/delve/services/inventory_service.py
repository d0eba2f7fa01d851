"""Equipment orchestration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from delve.domain.defs import ArmourDef, ItemDef, WeaponDef
from delve.domain.entities import Player

EquipSlot = Literal["weapon", "armour"]


@dataclass(slots=True)
class InventoryEvent:
    """Base class for inventory/equipment events."""


@dataclass(slots=True)
class ItemEquippedEvent(InventoryEvent):
    item_id: str
    item_name: str
    slot: EquipSlot
    previous_item_name: str | None = None


@dataclass(slots=True)
class EquipFailedEvent(InventoryEvent):
    item_id: str
    slot: EquipSlot
    reason: str
    message: str


class InventoryService:
    """Equips items the player already carries; the replaced item stays in the inventory."""

    def equip_weapon(self, player: Player, weapon: WeaponDef) -> InventoryEvent:
        failure = self._check_owned(player, weapon, "weapon")
        if failure:
            return failure
        previous = player.equipped_weapon
        player.equipped_weapon = weapon
        return ItemEquippedEvent(
            item_id=weapon.id,
            item_name=weapon.name,
            slot="weapon",
            previous_item_name=previous.name if previous else None,
        )

    def equip_armour(self, player: Player, armour: ArmourDef) -> InventoryEvent:
        failure = self._check_owned(player, armour, "armour")
        if failure:
            return failure
        previous = player.equipped_armour
        player.equipped_armour = armour
        return ItemEquippedEvent(
            item_id=armour.id,
            item_name=armour.name,
            slot="armour",
            previous_item_name=previous.name if previous else None,
        )

    @staticmethod
    def _check_owned(player: Player, item: ItemDef, slot: EquipSlot) -> EquipFailedEvent | None:
        if player.inventory.contains(item.id):
            return None
        return EquipFailedEvent(
            item_id=item.id,
            slot=slot,
            reason="not_in_inventory",
            message=f"You are not carrying {item.name}.",
        )
