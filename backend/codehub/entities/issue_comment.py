from __future__ import annotations

from typing import Optional

from codehub.keys import ItemKey, issue_comment_key

from .base import BaseEntity
from .validation import require, validate_body, validate_owner, validate_repo_name


class IssueComment(BaseEntity):
    ENTITY_TYPE = "IssueComment"
    NATURAL_KEY_FIELDS = ("owner", "repo_name", "issue_number", "comment_id")

    owner: str
    repo_name: str
    issue_number: int
    # Generated when the comment is created
    comment_id: Optional[str] = None
    body: str
    author: str

    def key(self) -> ItemKey:
        return issue_comment_key(self.owner, self.repo_name, self.issue_number, self.comment_id)

    def validate_rules(self) -> None:
        validate_owner("owner", self.owner)
        validate_repo_name("repo_name", self.repo_name)
        validate_body(self.body)
        require("author", self.author, "Author")
