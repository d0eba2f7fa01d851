"""Controllers that drive interactive game flow."""
from __future__ import annotations

from .battle_controller import BattleAction, BattleActionType, BattleController

__all__ = [
    "BattleController",
    "BattleAction",
    "BattleActionType",
]
