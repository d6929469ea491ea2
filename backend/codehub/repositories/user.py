"""User Repository - accounts that can sign in."""

from typing import Optional

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.user import User
from codehub.keys import account_key

from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, User)

    def get(self, username: str) -> Optional[User]:
        return self._get(account_key(username))

    @returns_result
    def create(self, user: User) -> Result[User]:
        """Create a user. Fails with DuplicateEntityError if the name is taken by any account."""
        return self._create(user)

    @returns_result
    def update(self, user: User) -> Result[User]:
        return self._update(user)

    def delete(self, username: str) -> None:
        self._delete(account_key(username))
