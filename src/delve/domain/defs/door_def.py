"""Door definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class DoorDef:
    """A one-way passage into another area, optionally locked behind a key item."""

    id: str
    description: str
    to: str
    locked: bool = False
    key: str | None = None
