"""Result variants returned at the repository boundary."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from codehub.core.errors import (
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the persisted entity."""

    value: T
    ok = True

    def unwrap(self) -> T:
        return self.value


Result = Union[Ok[T], ValidationError, DuplicateEntityError, EntityNotFoundError]


def returns_result(func: Callable[..., T]) -> Callable[..., Result[T]]:
    """Turn raised domain errors into returned variants.

    Anything that is not a ``DomainError`` keeps propagating.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return Ok(func(*args, **kwargs))
        except DomainError as exc:
            return exc

    return wrapper
