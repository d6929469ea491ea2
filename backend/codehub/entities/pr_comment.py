from __future__ import annotations

from typing import Optional

from codehub.keys import ItemKey, pr_comment_key

from .base import BaseEntity
from .validation import require, validate_body, validate_owner, validate_repo_name


class PRComment(BaseEntity):
    ENTITY_TYPE = "PRComment"
    NATURAL_KEY_FIELDS = ("owner", "repo_name", "pr_number", "comment_id")

    owner: str
    repo_name: str
    pr_number: int
    comment_id: Optional[str] = None
    body: str
    author: str

    def key(self) -> ItemKey:
        return pr_comment_key(self.owner, self.repo_name, self.pr_number, self.comment_id)

    def validate_rules(self) -> None:
        validate_owner("owner", self.owner)
        validate_repo_name("repo_name", self.repo_name)
        validate_body(self.body)
        require("author", self.author, "Author")
