"""Pull Request Repository - numbered from the counter shared with issues."""

from typing import List, Optional, Union

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.errors import ValidationError
from codehub.core.result import Result, returns_result
from codehub.entities.pull_request import PullRequest, PullRequestStatus
from codehub.keys import (
    GSI1PK,
    GSI4PK,
    GSI4SK,
    pull_request_key,
    pull_request_list_pk,
    repo_pk,
    repository_key,
    status_prefix,
)

from .base import BaseRepository, ParentCheck
from .counter import CounterRepository


class PullRequestRepository(BaseRepository[PullRequest]):
    """Repository for PullRequest entities."""

    def __init__(self, table, config: TableConfig, counters: Optional[CounterRepository] = None):
        super().__init__(table, config, PullRequest)
        self.counters = counters or CounterRepository(table, config)

    def get(self, owner: str, repo_name: str, pr_number: int) -> Optional[PullRequest]:
        return self._get(pull_request_key(owner, repo_name, pr_number))

    @returns_result
    def create(self, pull_request: PullRequest) -> Result[PullRequest]:
        pull_request.validate_rules()
        number = self.counters.increment_and_get(pull_request.owner, pull_request.repo_name)
        pull_request = pull_request.model_copy(update={"pr_number": number})
        repository = ParentCheck(
            "Repository",
            {"owner": pull_request.owner, "repo_name": pull_request.repo_name},
            repository_key(pull_request.owner, pull_request.repo_name),
        )
        return self._create(pull_request, [repository])

    @returns_result
    def update(self, pull_request: PullRequest) -> Result[PullRequest]:
        return self._update(pull_request)

    def delete(self, owner: str, repo_name: str, pr_number: int) -> None:
        self._delete(pull_request_key(owner, repo_name, pr_number))

    def list(self, owner: str, repo_name: str) -> List[PullRequest]:
        return self._query(
            self.config.issue_pr_index,
            KeyConditionExpression=Key(GSI1PK).eq(pull_request_list_pk(owner, repo_name)),
        )

    def list_by_status(
        self, owner: str, repo_name: str, status: Union[PullRequestStatus, str]
    ) -> List[PullRequest]:
        """Open pull requests newest first; closed and merged ones oldest first."""
        try:
            status = PullRequestStatus(status).value
        except ValueError:
            raise ValidationError("status", "Status must be 'open', 'closed', or 'merged'")
        return self._query(
            self.config.status_index,
            KeyConditionExpression=Key(GSI4PK).eq(repo_pk(owner, repo_name))
            & Key(GSI4SK).begins_with(status_prefix("PR", status)),
        )
