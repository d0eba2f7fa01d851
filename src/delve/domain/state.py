"""Session-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from delve.core.rng import RNG
from delve.domain.entities import Area, Player


@dataclass
class GameState:
    """Everything that changes during one playthrough."""

    rng: RNG
    player: Player
    areas: Dict[str, Area] = field(default_factory=dict)
