"""Custom exceptions for definition loading and lookup."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definitions file is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when a definition record is malformed or incomplete."""


class DataReferenceError(DataError, LookupError):
    """Raised when a definition references an entity that was never loaded."""


class EntityLookupError(DataError, LookupError):
    """Raised when an identifier does not resolve to an entity of the requested type."""

    def __init__(self, entity_type: str, entity_id: str, detail: str | None = None) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        message = f"No {entity_type} with id '{entity_id}'."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
