"""Service layer exports."""

from .errors import FactoryError, SaveLoadError
from .battle_service import (
    AttackMissedEvent,
    AttackResolvedEvent,
    BattleEvent,
    BattleResolvedEvent,
    BattleService,
    BattleStartedEvent,
    CombatantDefeatedEvent,
    ExpGainedEvent,
    GuardAppliedEvent,
    LevelUpEvent,
    LootDroppedEvent,
)
from .area_service import AreaService, RoomAction
from .inventory_service import EquipFailedEvent, InventoryEvent, InventoryService, ItemEquippedEvent
from .save_service import SaveService

__all__ = [
    "FactoryError",
    "SaveLoadError",
    "AttackMissedEvent",
    "AttackResolvedEvent",
    "BattleEvent",
    "BattleResolvedEvent",
    "BattleService",
    "BattleStartedEvent",
    "CombatantDefeatedEvent",
    "ExpGainedEvent",
    "GuardAppliedEvent",
    "LevelUpEvent",
    "LootDroppedEvent",
    "AreaService",
    "RoomAction",
    "EquipFailedEvent",
    "InventoryEvent",
    "InventoryService",
    "ItemEquippedEvent",
    "SaveService",
]
