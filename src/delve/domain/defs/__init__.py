"""Domain definition exports."""

from .area_def import AreaDef, DialogueDef
from .armour_def import ArmourDef
from .creature_def import CreatureDef
from .door_def import DoorDef
from .item_def import ItemDef
from .weapon_def import WeaponDef

__all__ = [
    "AreaDef",
    "ArmourDef",
    "CreatureDef",
    "DialogueDef",
    "DoorDef",
    "ItemDef",
    "WeaponDef",
]
