"""Star Repository - users starring repositories."""

from typing import List, Optional

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.star import Star
from codehub.keys import PK, SK, STAR_PREFIX, account_key, account_pk, repository_key, star_key

from .base import BaseRepository, ParentCheck


class StarRepository(BaseRepository[Star]):
    """Repository for Star entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, Star)

    def get(self, username: str, repo_owner: str, repo_name: str) -> Optional[Star]:
        return self._get(star_key(username, repo_owner, repo_name))

    @returns_result
    def create(self, star: Star) -> Result[Star]:
        """The starring user and the starred repository must both exist."""
        user = ParentCheck("User", {"username": star.username}, account_key(star.username))
        repository = ParentCheck(
            "Repository",
            {"owner": star.repo_owner, "repo_name": star.repo_name},
            repository_key(star.repo_owner, star.repo_name),
        )
        return self._create(star, [user, repository])

    def delete(self, username: str, repo_owner: str, repo_name: str) -> None:
        self._delete(star_key(username, repo_owner, repo_name))

    def list_stars_by_user(self, username: str) -> List[Star]:
        return self._query(
            KeyConditionExpression=Key(PK).eq(account_pk(username))
            & Key(SK).begins_with(STAR_PREFIX),
        )

    def is_starred(self, username: str, repo_owner: str, repo_name: str) -> bool:
        return self.get(username, repo_owner, repo_name) is not None
