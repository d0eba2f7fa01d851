"""Door runtime models."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Door:
    """A live door; unlocking it only affects the area that owns this copy."""

    door_id: str
    description: str
    to: str
    locked: bool = False
    key: str | None = None
