"""Factory for live areas built from area definitions."""
from __future__ import annotations

from delve.data.registry import EntityRegistry
from delve.domain.defs import AreaDef, CreatureDef
from delve.domain.dialogue import Dialogue
from delve.domain.entities import Area, Door
from delve.domain.inventory import Inventory

from .creature_factory import create_creature


def instantiate_area(area_def: AreaDef, registry: EntityRegistry) -> Area:
    """Copy an area definition into fresh, mutable runtime state."""
    items = Inventory()
    for item_id, quantity in area_def.items:
        items.add(registry.get_item(item_id), quantity)
    return Area(
        id=area_def.id,
        dialogue=Dialogue.from_def(area_def.dialogue),
        doors=[
            Door(
                door_id=door.id,
                description=door.description,
                to=door.to,
                locked=door.locked,
                key=door.key,
            )
            for door in area_def.doors
        ],
        creatures=[create_creature(registry.get(CreatureDef, creature_id)) for creature_id in area_def.creature_ids],
        items=items,
    )
