"""Issue Repository - numbered issues of a repository."""

from typing import List, Optional, Union

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.errors import ValidationError
from codehub.core.result import Result, returns_result
from codehub.entities.issue import Issue, IssueStatus
from codehub.keys import (
    GSI1PK,
    GSI4PK,
    GSI4SK,
    issue_key,
    issue_list_pk,
    repo_pk,
    repository_key,
    status_prefix,
)

from .base import BaseRepository, ParentCheck
from .counter import CounterRepository


class IssueRepository(BaseRepository[Issue]):
    """Repository for Issue entities."""

    def __init__(self, table, config: TableConfig, counters: Optional[CounterRepository] = None):
        super().__init__(table, config, Issue)
        self.counters = counters or CounterRepository(table, config)

    def get(self, owner: str, repo_name: str, issue_number: int) -> Optional[Issue]:
        return self._get(issue_key(owner, repo_name, issue_number))

    @returns_result
    def create(self, issue: Issue) -> Result[Issue]:
        """
        Create an issue with the next number of the repository's counter.

        The number is taken before the transactional write; a failed create
        leaves a gap in the sequence.
        """
        issue.validate_rules()
        number = self.counters.increment_and_get(issue.owner, issue.repo_name)
        issue = issue.model_copy(update={"issue_number": number})
        repository = ParentCheck(
            "Repository",
            {"owner": issue.owner, "repo_name": issue.repo_name},
            repository_key(issue.owner, issue.repo_name),
        )
        return self._create(issue, [repository])

    @returns_result
    def update(self, issue: Issue) -> Result[Issue]:
        return self._update(issue)

    def delete(self, owner: str, repo_name: str, issue_number: int) -> None:
        self._delete(issue_key(owner, repo_name, issue_number))

    def list(self, owner: str, repo_name: str) -> List[Issue]:
        """All issues of a repository, ascending by number."""
        return self._query(
            self.config.issue_pr_index,
            KeyConditionExpression=Key(GSI1PK).eq(issue_list_pk(owner, repo_name)),
        )

    def list_by_status(
        self, owner: str, repo_name: str, status: Union[IssueStatus, str]
    ) -> List[Issue]:
        """Open issues newest first; closed issues oldest first."""
        try:
            status = IssueStatus(status).value
        except ValueError:
            raise ValidationError("status", "Status must be 'open' or 'closed'")
        return self._query(
            self.config.status_index,
            KeyConditionExpression=Key(GSI4PK).eq(repo_pk(owner, repo_name))
            & Key(GSI4SK).begins_with(status_prefix("ISSUE", status)),
        )
