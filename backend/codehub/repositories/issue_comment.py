"""Issue Comment Repository - comments stored under their issue's sort key."""

import uuid
from typing import List, Optional

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.issue_comment import IssueComment
from codehub.keys import PK, SK, issue_comment_key, issue_comment_prefix, issue_key, repo_pk

from .base import BaseRepository, ParentCheck


class IssueCommentRepository(BaseRepository[IssueComment]):
    """Repository for IssueComment entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, IssueComment)

    def get(
        self, owner: str, repo_name: str, issue_number: int, comment_id: str
    ) -> Optional[IssueComment]:
        return self._get(issue_comment_key(owner, repo_name, issue_number, comment_id))

    @returns_result
    def create(self, comment: IssueComment) -> Result[IssueComment]:
        """Create a comment with a freshly generated id on an existing issue."""
        comment = comment.model_copy(update={"comment_id": str(uuid.uuid4())})
        issue = ParentCheck(
            "Issue",
            {
                "owner": comment.owner,
                "repo_name": comment.repo_name,
                "issue_number": comment.issue_number,
            },
            issue_key(comment.owner, comment.repo_name, comment.issue_number),
        )
        return self._create(comment, [issue])

    @returns_result
    def update(self, comment: IssueComment) -> Result[IssueComment]:
        return self._update(comment)

    def delete(self, owner: str, repo_name: str, issue_number: int, comment_id: str) -> None:
        self._delete(issue_comment_key(owner, repo_name, issue_number, comment_id))

    def list_by_issue(self, owner: str, repo_name: str, issue_number: int) -> List[IssueComment]:
        return self._query(
            KeyConditionExpression=Key(PK).eq(repo_pk(owner, repo_name))
            & Key(SK).begins_with(issue_comment_prefix(issue_number)),
        )
