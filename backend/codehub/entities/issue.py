"""
Issue entity.

Issue numbers come from the repository counter shared with pull requests, so
an issue has no number until the repository facade assigns one.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from codehub.core.errors import ValidationError
from codehub.keys import ItemKey, issue_index_keys, issue_key

from .base import BaseEntity
from .validation import require, validate_owner, validate_repo_name, validate_title


class IssueStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Issue(BaseEntity):
    ENTITY_TYPE = "Issue"
    NATURAL_KEY_FIELDS = ("owner", "repo_name", "issue_number")
    SET_FIELDS = ("assignees", "labels")

    owner: str
    repo_name: str
    issue_number: int = 0
    title: str
    body: Optional[str] = None
    status: IssueStatus = IssueStatus.OPEN
    author: str
    assignees: List[str] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)

    def key(self) -> ItemKey:
        return issue_key(self.owner, self.repo_name, self.issue_number)

    def index_keys(self) -> Dict[str, str]:
        return issue_index_keys(self.owner, self.repo_name, self.issue_number, self.status)

    def validate_rules(self) -> None:
        validate_owner("owner", self.owner)
        validate_repo_name("repo_name", self.repo_name)
        validate_title(self.title)
        require("author", self.author, "Author")
        if self.status not in (IssueStatus.OPEN.value, IssueStatus.CLOSED.value):
            raise ValidationError("status", "Status must be 'open' or 'closed'")
