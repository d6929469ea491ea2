from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from codehub.core.errors import ValidationError
from codehub.keys import ItemKey, pull_request_index_keys, pull_request_key

from .base import BaseEntity
from .validation import require, validate_owner, validate_repo_name, validate_title


class PullRequestStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    MERGED = "merged"


class PullRequest(BaseEntity):
    """Pull request; numbered from the same counter as issues."""

    ENTITY_TYPE = "PullRequest"
    NATURAL_KEY_FIELDS = ("owner", "repo_name", "pr_number")

    owner: str
    repo_name: str
    pr_number: int = 0
    title: str
    body: Optional[str] = None
    status: PullRequestStatus = PullRequestStatus.OPEN
    author: str
    source_branch: str
    target_branch: str
    merge_commit_sha: Optional[str] = None

    def key(self) -> ItemKey:
        return pull_request_key(self.owner, self.repo_name, self.pr_number)

    def index_keys(self) -> Dict[str, str]:
        return pull_request_index_keys(self.owner, self.repo_name, self.pr_number, self.status)

    def validate_rules(self) -> None:
        validate_owner("owner", self.owner)
        validate_repo_name("repo_name", self.repo_name)
        validate_title(self.title)
        require("author", self.author, "Author")
        require("source_branch", self.source_branch, "Source branch")
        require("target_branch", self.target_branch, "Target branch")
        if self.merge_commit_sha and self.status != PullRequestStatus.MERGED.value:
            raise ValidationError(
                "merge_commit_sha", "Merge commit SHA only allowed when status is 'merged'"
            )
