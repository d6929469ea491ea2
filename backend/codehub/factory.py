"""
Repository factory.

Builds every repository facade from one explicit ``TableConfig``. Nothing is
cached at module level; two factories with different configs are independent.
"""

import logging
from typing import Optional

from codehub.config import TableConfig
from codehub.database.dynamodb import create_resource
from codehub.repositories import (
    CounterRepository,
    ForkRepository,
    IssueCommentRepository,
    IssueRepository,
    OrganizationRepository,
    PRCommentRepository,
    PullRequestRepository,
    ReactionRepository,
    RepositoryRepository,
    StarRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class RepositoryFactory:
    """Creates repositories bound to one table."""

    def __init__(self, config: TableConfig, resource=None):
        self.config = config
        self.resource = resource or create_resource(config)
        self.table = self.resource.Table(config.table_name)
        self._counters: Optional[CounterRepository] = None
        logger.debug(f"Repository factory bound to table '{config.table_name}'")

    def counters(self) -> CounterRepository:
        if self._counters is None:
            self._counters = CounterRepository(self.table, self.config)
        return self._counters

    def users(self) -> UserRepository:
        return UserRepository(self.table, self.config)

    def organizations(self) -> OrganizationRepository:
        return OrganizationRepository(self.table, self.config)

    def repositories(self) -> RepositoryRepository:
        return RepositoryRepository(self.table, self.config)

    def issues(self) -> IssueRepository:
        return IssueRepository(self.table, self.config, self.counters())

    def pull_requests(self) -> PullRequestRepository:
        return PullRequestRepository(self.table, self.config, self.counters())

    def issue_comments(self) -> IssueCommentRepository:
        return IssueCommentRepository(self.table, self.config)

    def pr_comments(self) -> PRCommentRepository:
        return PRCommentRepository(self.table, self.config)

    def reactions(self) -> ReactionRepository:
        return ReactionRepository(self.table, self.config)

    def forks(self) -> ForkRepository:
        return ForkRepository(self.table, self.config)

    def stars(self) -> StarRepository:
        return StarRepository(self.table, self.config)
