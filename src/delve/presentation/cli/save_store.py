"""File-system helpers for per-player save storage."""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Tuple

from delve.data.json_loader import dump_json
from delve.presentation.cli import config
from delve.services.errors import SaveLoadError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


class SaveStore:
    """Keeps two documents per player name: the player and the visited areas."""

    def __init__(self, base_dir: Path | str | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else config.get_save_dir()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def exists(self, name: str) -> bool:
        """Return True if a player save exists for this name."""
        return self.player_path(name).exists()

    def read(self, name: str) -> Tuple[Dict[str, Any], Dict[str, Any] | None]:
        """Load the (player, areas) payloads; the areas document is optional."""
        player_payload = self._read_document(self.player_path(name))
        areas_path = self.areas_path(name)
        areas_payload = self._read_document(areas_path) if areas_path.exists() else None
        return player_payload, areas_payload

    def write(self, name: str, player_payload: Dict[str, Any], areas_payload: Dict[str, Any]) -> None:
        """Persist both documents for this player."""
        dump_json(self.player_path(name), player_payload)
        dump_json(self.areas_path(name), areas_payload)
        logger.debug("Saved %s to %s", name, self._base_dir)

    def delete(self, name: str) -> None:
        """Delete both documents if they exist."""
        for path in (self.player_path(name), self.areas_path(name)):
            try:
                path.unlink()
            except FileNotFoundError:
                continue

    def player_path(self, name: str) -> Path:
        return self._base_dir / f"{self._file_stem(name)}.json"

    def areas_path(self, name: str) -> Path:
        return self._base_dir / f"{self._file_stem(name)}_areas.json"

    @staticmethod
    def _file_stem(name: str) -> str:
        stem = _UNSAFE_CHARS.sub("_", name.strip())
        if not stem:
            raise ValueError("Player name must contain at least one letter or digit.")
        return stem

    @staticmethod
    def _read_document(path: Path) -> Dict[str, Any]:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable save file %s: %s", path, exc)
            raise SaveLoadError(f"Unable to read save file {path.name}.") from exc
        if not isinstance(payload, dict):
            raise SaveLoadError(f"Save file {path.name} must contain a JSON object.")
        return payload
