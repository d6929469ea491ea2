"""Domain errors raised by the storage layer."""

from __future__ import annotations

from typing import Any, Dict, Mapping, NoReturn


class DomainError(Exception):
    """Base class for the closed set of storage-layer domain errors.

    Domain errors double as the failure variants of ``Result`` so callers can
    branch on ``result.ok`` without catching anything.
    """

    ok = False

    def unwrap(self) -> NoReturn:
        raise self

    def to_dict(self) -> Dict[str, Any]:
        return {"error": type(self).__name__, "message": str(self)}


class ValidationError(DomainError):
    """Raised when client-supplied data fails a format or business rule."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "field": self.field}


class DuplicateEntityError(DomainError):
    """Raised when an entity with the same natural key already exists."""

    def __init__(self, entity_type: str, key: Mapping[str, Any]):
        self.entity_type = entity_type
        self.key = dict(key)
        super().__init__(f"{entity_type} {_format_key(self.key)} already exists")

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "entity_type": self.entity_type, "key": self.key}


class EntityNotFoundError(DomainError):
    """Raised when an entity (or a referenced parent) does not exist."""

    def __init__(self, entity_type: str, key: Mapping[str, Any]):
        self.entity_type = entity_type
        self.key = dict(key)
        super().__init__(f"{entity_type} {_format_key(self.key)} not found")

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "entity_type": self.entity_type, "key": self.key}


def _format_key(key: Mapping[str, Any]) -> str:
    return "(" + ", ".join(f"{name}={value!r}" for name, value in key.items()) + ")"
