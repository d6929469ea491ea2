import uuid
from typing import List, Optional

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.pr_comment import PRComment
from codehub.keys import PK, SK, pr_comment_key, pr_comment_prefix, pull_request_key, repo_pk

from .base import BaseRepository, ParentCheck


class PRCommentRepository(BaseRepository[PRComment]):
    """Repository for PRComment entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, PRComment)

    def get(
        self, owner: str, repo_name: str, pr_number: int, comment_id: str
    ) -> Optional[PRComment]:
        return self._get(pr_comment_key(owner, repo_name, pr_number, comment_id))

    @returns_result
    def create(self, comment: PRComment) -> Result[PRComment]:
        comment = comment.model_copy(update={"comment_id": str(uuid.uuid4())})
        pull_request = ParentCheck(
            "PullRequest",
            {
                "owner": comment.owner,
                "repo_name": comment.repo_name,
                "pr_number": comment.pr_number,
            },
            pull_request_key(comment.owner, comment.repo_name, comment.pr_number),
        )
        return self._create(comment, [pull_request])

    @returns_result
    def update(self, comment: PRComment) -> Result[PRComment]:
        return self._update(comment)

    def delete(self, owner: str, repo_name: str, pr_number: int, comment_id: str) -> None:
        self._delete(pr_comment_key(owner, repo_name, pr_number, comment_id))

    def list_by_pr(self, owner: str, repo_name: str, pr_number: int) -> List[PRComment]:
        return self._query(
            KeyConditionExpression=Key(PK).eq(repo_pk(owner, repo_name))
            & Key(SK).begins_with(pr_comment_prefix(pr_number)),
        )
