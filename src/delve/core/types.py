"""Shared type aliases for the core and domain layers."""
from enum import Enum
from typing import Literal

BattleStatus = Literal["ongoing", "victory", "defeat"]
RoomActionKind = Literal["menu", "content", "door", "search"]


class TraverseResult(Enum):
    """Outcome of trying to go through a door."""

    LOCKED = 0
    UNLOCKED = 1
    PASSED = 2


__all__ = ["BattleStatus", "RoomActionKind", "TraverseResult"]
