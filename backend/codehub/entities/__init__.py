"""Entity models stored in the single table."""

from .base import BaseEntity
from .counter import Counter
from .fork import Fork
from .issue import Issue, IssueStatus
from .issue_comment import IssueComment
from .organization import Organization
from .pr_comment import PRComment
from .pull_request import PullRequest, PullRequestStatus
from .reaction import Reaction, ReactionTargetType
from .repository import Repository
from .star import Star
from .user import User

__all__ = [
    "BaseEntity",
    "Counter",
    "Fork",
    "Issue",
    "IssueStatus",
    "IssueComment",
    "Organization",
    "PRComment",
    "PullRequest",
    "PullRequestStatus",
    "Reaction",
    "ReactionTargetType",
    "Repository",
    "Star",
    "User",
]
