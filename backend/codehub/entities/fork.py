from __future__ import annotations

from typing import Dict

from codehub.core.errors import ValidationError
from codehub.keys import ItemKey, fork_index_keys, fork_key

from .base import BaseEntity
from .validation import validate_owner, validate_repo_name


class Fork(BaseEntity):
    """Link from a source repository to a copy under another account."""

    ENTITY_TYPE = "Fork"
    NATURAL_KEY_FIELDS = ("original_owner", "original_repo", "fork_owner")

    original_owner: str
    original_repo: str
    fork_owner: str
    fork_repo: str

    def key(self) -> ItemKey:
        return fork_key(self.original_owner, self.original_repo, self.fork_owner)

    def index_keys(self) -> Dict[str, str]:
        return fork_index_keys(self.original_owner, self.original_repo, self.fork_owner)

    def validate_rules(self) -> None:
        validate_owner("original_owner", self.original_owner, "Original owner")
        validate_repo_name("original_repo", self.original_repo, "Original repository name")
        validate_owner("fork_owner", self.fork_owner, "Fork owner")
        validate_repo_name("fork_repo", self.fork_repo, "Fork repository name")
        if (self.original_owner, self.original_repo) == (self.fork_owner, self.fork_repo):
            raise ValidationError(
                "fork", "Fork cannot have the same owner and repository name as the original"
            )
