"""Base repository implementation for JSON definition data."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from delve.data import paths
from delve.data.errors import DataValidationError, EntityLookupError
from delve.data.json_loader import load_json

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Loads one definitions file into typed definitions keyed by id."""

    entity_label = "entity"

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None
        self._loaded_from: Path | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self, file_path: Path) -> dict[str, object]:
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def load(self, source: Path | str | None = None) -> int:
        """(Re)load definitions, replacing anything loaded before."""
        file_path = Path(source) if source is not None else self._get_file_path()
        self._definitions = self._build(self._load_raw(file_path))
        self._loaded_from = file_path
        logger.info("Loaded %d %s definitions from %s", len(self._definitions), self.entity_label, file_path)
        return len(self._definitions)

    def reload(self) -> int:
        """Load again from the file used last time."""
        return self.load(self._loaded_from)

    @property
    def is_loaded(self) -> bool:
        return self._definitions is not None

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        if self._definitions is None:
            raise EntityLookupError(self.entity_label, def_id, f"No {self.entity_label} definitions are loaded.")
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise EntityLookupError(self.entity_label, def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        if self._definitions is None:
            return []
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    def __contains__(self, def_id: object) -> bool:
        return self._definitions is not None and def_id in self._definitions

    def _iter_records(self, raw: dict[str, object]):
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id.strip():
                raise DataValidationError(f"{self.entity_label.capitalize()} IDs must be non-empty strings.")
            yield raw_id, self._require_mapping(payload, f"{self.entity_label} '{raw_id}'")

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_non_negative_int(value: object, context: str) -> int:
        number = RepositoryBase._require_int(value, context)
        if number < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return number

    @staticmethod
    def _require_probability(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        if not 0 <= value <= 1:
            raise DataValidationError(f"{context} must be between 0 and 1.")
        return float(value)

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise DataValidationError(f"{context} must be true or false.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(entry)
        return result

    @staticmethod
    def _assert_fields(
        payload: dict[str, object],
        required: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = required - actual_keys
        unknown = actual_keys - required - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")
