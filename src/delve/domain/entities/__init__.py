"""Runtime entity exports."""

from .area import Area
from .creature import Creature
from .door import Door
from .player import Player
from .stats import Stats

__all__ = [
    "Area",
    "Creature",
    "Door",
    "Player",
    "Stats",
]
