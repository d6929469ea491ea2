"""Repository facades, one per entity type."""

from .base import BaseRepository, ParentCheck
from .counter import CounterRepository
from .fork import ForkRepository
from .issue import IssueRepository
from .issue_comment import IssueCommentRepository
from .organization import OrganizationRepository
from .pr_comment import PRCommentRepository
from .pull_request import PullRequestRepository
from .reaction import ReactionRepository
from .repository import RepositoryRepository
from .star import StarRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "ParentCheck",
    "CounterRepository",
    "ForkRepository",
    "IssueRepository",
    "IssueCommentRepository",
    "OrganizationRepository",
    "PRCommentRepository",
    "PullRequestRepository",
    "ReactionRepository",
    "RepositoryRepository",
    "StarRepository",
    "UserRepository",
]
