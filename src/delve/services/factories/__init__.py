"""Factory helpers for runtime entities."""

from .area_factory import instantiate_area
from .creature_factory import create_creature
from .player_factory import create_player

__all__ = [
    "create_creature",
    "create_player",
    "instantiate_area",
]
