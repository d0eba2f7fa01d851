"""Repository exports."""

from .areas_repo import AreasRepository
from .armour_repo import ArmourRepository
from .base import RepositoryBase
from .creatures_repo import CreaturesRepository
from .doors_repo import DoorsRepository
from .items_repo import ItemsRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "AreasRepository",
    "ArmourRepository",
    "CreaturesRepository",
    "DoorsRepository",
    "ItemsRepository",
    "RepositoryBase",
    "WeaponsRepository",
]
