"""Data layer: definition files, repositories and the entity registry."""

from .errors import (
    DataError,
    DataLoadError,
    DataReferenceError,
    DataValidationError,
    EntityLookupError,
)
from .paths import get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataValidationError",
    "EntityLookupError",
    "get_definitions_path",
    "get_repo_root",
]
