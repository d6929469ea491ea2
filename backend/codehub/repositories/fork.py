"""Fork Repository - links between a source repository and its forks."""

from typing import List, Optional

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.fork import Fork
from codehub.keys import GSI2PK, fork_key, repo_pk, repository_key

from .base import BaseRepository, ParentCheck


class ForkRepository(BaseRepository[Fork]):
    """Repository for Fork entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, Fork)

    def get(self, original_owner: str, original_repo: str, fork_owner: str) -> Optional[Fork]:
        return self._get(fork_key(original_owner, original_repo, fork_owner))

    @returns_result
    def create(self, fork: Fork) -> Result[Fork]:
        """Both the source and the fork repository must already exist."""
        source = ParentCheck(
            "Repository",
            {"owner": fork.original_owner, "repo_name": fork.original_repo},
            repository_key(fork.original_owner, fork.original_repo),
        )
        target = ParentCheck(
            "Repository",
            {"owner": fork.fork_owner, "repo_name": fork.fork_repo},
            repository_key(fork.fork_owner, fork.fork_repo),
        )
        return self._create(fork, [source, target])

    def delete(self, original_owner: str, original_repo: str, fork_owner: str) -> None:
        self._delete(fork_key(original_owner, original_repo, fork_owner))

    def list_forks_of_repo(self, owner: str, repo_name: str) -> List[Fork]:
        return self._query(
            self.config.fork_index,
            KeyConditionExpression=Key(GSI2PK).eq(repo_pk(owner, repo_name)),
        )
