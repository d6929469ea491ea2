"""Cross-cutting pieces: domain errors, result variants and logging setup."""

from .errors import DomainError, DuplicateEntityError, EntityNotFoundError, ValidationError
from .result import Ok, Result, returns_result

__all__ = [
    "DomainError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "ValidationError",
    "Ok",
    "Result",
    "returns_result",
]
