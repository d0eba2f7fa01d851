import pytest

from delve.domain.defs import ArmourDef, ItemDef, WeaponDef
from delve.domain.inventory import Inventory
from tests.helpers.console import ScriptedConsole


def _coin() -> ItemDef:
    return ItemDef(id="gold_coin", name="Gold Coin", description="A shiny coin", value=1)


def _sword() -> WeaponDef:
    return WeaponDef(id="sword", name="Sword", damage_min=4, damage_max=6)


def _shield() -> ArmourDef:
    return ArmourDef(id="shield", name="Shield", defense=1)


def test_add_stacks_same_item() -> None:
    inventory = Inventory()
    inventory.add(_coin(), 2)
    inventory.add(_coin())

    assert len(inventory) == 1
    assert inventory.quantity_of("gold_coin") == 3


def test_add_ignores_non_positive_quantity() -> None:
    inventory = Inventory()
    inventory.add(_coin(), 0)

    assert inventory.is_empty()


def test_entries_filter_by_exact_type() -> None:
    inventory = Inventory()
    inventory.add(_sword())
    inventory.add(_coin())
    inventory.add(_shield())

    assert [entry.item.id for entry in inventory.entries()] == ["sword", "gold_coin", "shield"]
    assert [entry.item.id for entry in inventory.entries(ItemDef)] == ["gold_coin"]
    assert [entry.item.id for entry in inventory.entries(WeaponDef)] == ["sword"]


def test_merge_appends_then_empties_other() -> None:
    first = Inventory()
    first.add(_sword())
    first.add(_coin(), 2)
    second = Inventory()
    second.add(_coin(), 3)
    second.add(_shield())

    first.merge(second)

    assert [(entry.item.id, entry.quantity) for entry in first] == [
        ("sword", 1),
        ("gold_coin", 5),
        ("shield", 1),
    ]
    assert second.is_empty()


def test_merge_empty_is_noop() -> None:
    inventory = Inventory()
    inventory.add(_coin())

    inventory.merge(Inventory())

    assert [(entry.item.id, entry.quantity) for entry in inventory] == [("gold_coin", 1)]


def test_print_and_get_share_ordering() -> None:
    inventory = Inventory()
    other_sword = WeaponDef(id="axe", name="Axe", damage_min=1, damage_max=8)
    inventory.add(_sword())
    inventory.add(_coin(), 3)
    inventory.add(other_sword)
    console = ScriptedConsole()

    count = inventory.print(console, WeaponDef, numbered=True)

    assert count == 2
    assert console.lines == ["1. 1 x Sword", "2. 1 x Axe"]
    assert inventory.get(WeaponDef, 1) is other_sword


def test_print_unnumbered_lists_quantities() -> None:
    inventory = Inventory()
    inventory.add(_coin(), 3)
    console = ScriptedConsole()

    inventory.print(console)

    assert console.lines == ["3 x Gold Coin - A shiny coin"]


def test_print_empty_lists_nothing() -> None:
    console = ScriptedConsole()

    assert Inventory().print(console, ArmourDef) == 0
    assert console.lines == []


def test_get_out_of_range_raises_index_error() -> None:
    inventory = Inventory()
    inventory.add(_sword())

    with pytest.raises(IndexError):
        inventory.get(WeaponDef, 1)
    with pytest.raises(IndexError):
        inventory.get(ArmourDef, 0)


def test_contains_and_clear() -> None:
    inventory = Inventory()
    inventory.add(_coin())

    assert inventory.contains("gold_coin")
    assert not inventory.contains("sword")
    inventory.clear()
    assert inventory.is_empty()
