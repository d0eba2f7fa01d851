"""Area definition data structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .door_def import DoorDef


@dataclass(slots=True)
class DialogueDef:
    """Static prompt and choices shown whenever the player stands in an area."""

    prompt: str
    choices: Tuple[str, ...] = ()


@dataclass(slots=True)
class AreaDef:
    """Describes an area: its dialogue, exits and starting contents."""

    id: str
    dialogue: DialogueDef
    doors: Tuple[DoorDef, ...] = ()
    creature_ids: Tuple[str, ...] = ()
    items: Tuple[Tuple[str, int], ...] = ()
