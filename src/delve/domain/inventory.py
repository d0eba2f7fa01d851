"""Ordered, type-filterable item collections owned by players and areas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Type

from delve.core.console import Console
from delve.domain.defs import ItemDef


@dataclass(slots=True)
class InventoryEntry:
    """An item definition together with how many of it are held."""

    item: ItemDef
    quantity: int = 1

    def describe(self) -> str:
        return f"{self.quantity} x {self.item.describe()}"


class Inventory:
    """Insertion-ordered stack of items, filterable by exact item variant.

    ``entries``, ``print`` and ``get`` share one enumeration order, so an ordinal
    shown by ``print`` stays valid for ``get`` until the inventory is mutated.
    """

    def __init__(self, entries: List[InventoryEntry] | None = None) -> None:
        self._entries: List[InventoryEntry] = []
        for entry in entries or []:
            self.add(entry.item, entry.quantity)

    def add(self, item: ItemDef, quantity: int = 1) -> None:
        if quantity <= 0:
            return
        for entry in self._entries:
            if entry.item.id == item.id:
                entry.quantity += quantity
                return
        self._entries.append(InventoryEntry(item=item, quantity=quantity))

    def entries(self, item_type: Type[ItemDef] | None = None) -> List[InventoryEntry]:
        """Return entries whose item is exactly ``item_type`` (all entries when None)."""
        if item_type is None:
            return list(self._entries)
        return [entry for entry in self._entries if type(entry.item) is item_type]

    def print(
        self,
        console: Console,
        item_type: Type[ItemDef] | None = None,
        *,
        numbered: bool = False,
    ) -> int:
        """Write one line per matching entry and return how many were listed."""
        matching = self.entries(item_type)
        for idx, entry in enumerate(matching, start=1):
            prefix = f"{idx}. " if numbered else ""
            console.write(f"{prefix}{entry.describe()}")
        return len(matching)

    def get(self, item_type: Type[ItemDef], ordinal: int) -> ItemDef:
        """Return the ``ordinal``-th (0-based) item of ``item_type``."""
        matching = self.entries(item_type)
        if not 0 <= ordinal < len(matching):
            raise IndexError(f"No {item_type.__name__} at position {ordinal}.")
        return matching[ordinal].item

    def merge(self, other: "Inventory") -> None:
        """Move every entry of ``other`` into this inventory and empty it."""
        if other is self:
            return
        for entry in other._entries:
            self.add(entry.item, entry.quantity)
        other.clear()

    def contains(self, item_id: str) -> bool:
        return self.quantity_of(item_id) > 0

    def quantity_of(self, item_id: str) -> int:
        for entry in self._entries:
            if entry.item.id == item_id:
                return entry.quantity
        return 0

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[InventoryEntry]:
        return iter(list(self._entries))
