from pathlib import Path

from delve.domain.defs import ArmourDef, WeaponDef
from delve.services.factories import create_player
from delve.services.inventory_service import EquipFailedEvent, InventoryService, ItemEquippedEvent
from tests.helpers.definitions import make_registry


def test_equip_weapon_from_inventory(tmp_path: Path) -> None:
    registry = make_registry(tmp_path)
    player = create_player("Tester", "Fighter")
    sword = registry.get(WeaponDef, "short_sword")
    player.inventory.add(sword)

    event = InventoryService().equip_weapon(player, sword)

    assert isinstance(event, ItemEquippedEvent)
    assert event.slot == "weapon"
    assert player.equipped_weapon is sword


def test_equip_replaces_slot_and_keeps_old_item(tmp_path: Path) -> None:
    registry = make_registry(tmp_path)
    player = create_player("Tester", "Fighter")
    sword = registry.get(WeaponDef, "short_sword")
    club = registry.get(WeaponDef, "club")
    player.inventory.add(sword)
    player.inventory.add(club)
    service = InventoryService()
    service.equip_weapon(player, sword)

    event = service.equip_weapon(player, club)

    assert isinstance(event, ItemEquippedEvent)
    assert event.previous_item_name == "Short Sword"
    assert player.equipped_weapon is club
    assert player.inventory.contains("short_sword")


def test_equip_missing_item_fails_without_change(tmp_path: Path) -> None:
    registry = make_registry(tmp_path)
    player = create_player("Tester", "Fighter")

    event = InventoryService().equip_armour(player, registry.get(ArmourDef, "leather"))

    assert isinstance(event, EquipFailedEvent)
    assert event.reason == "not_in_inventory"
    assert player.equipped_armour is None
