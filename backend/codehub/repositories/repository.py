"""Repository Repository - code repositories owned by accounts."""

from typing import Optional

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.database.pagination import DEFAULT_PAGE_SIZE, Page
from codehub.entities.repository import Repository
from codehub.keys import GSI3PK, account_key, account_pk, repository_key

from .base import BaseRepository, ParentCheck


class RepositoryRepository(BaseRepository[Repository]):
    """Repository for Repository entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, Repository)

    def get(self, owner: str, repo_name: str) -> Optional[Repository]:
        return self._get(repository_key(owner, repo_name))

    @returns_result
    def create(self, repository: Repository) -> Result[Repository]:
        """Create a repository under an existing user or organization."""
        owner = ParentCheck("Account", {"name": repository.owner}, account_key(repository.owner))
        return self._create(repository, [owner])

    @returns_result
    def update(self, repository: Repository) -> Result[Repository]:
        return self._update(repository)

    def delete(self, owner: str, repo_name: str) -> None:
        self._delete(repository_key(owner, repo_name))

    def list_by_owner(
        self,
        owner: str,
        limit: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
    ) -> Page[Repository]:
        """
        List an account's repositories, most recently created first.

        Args:
            owner: User or organization name
            limit: Page size, 1..100
            page_token: Token from a previous page, or None for the first page

        Returns:
            Page of repositories; next_page_token is None on the last page
        """
        return self._query_page(
            self.config.account_repo_index,
            limit=limit,
            page_token=page_token,
            KeyConditionExpression=Key(GSI3PK).eq(account_pk(owner)),
            ScanIndexForward=False,
        )
