from __future__ import annotations

from codehub.keys import ItemKey, star_key

from .base import BaseEntity
from .validation import validate_account_name, validate_owner, validate_repo_name


class Star(BaseEntity):
    ENTITY_TYPE = "Star"
    NATURAL_KEY_FIELDS = ("username", "repo_owner", "repo_name")

    username: str
    repo_owner: str
    repo_name: str

    def key(self) -> ItemKey:
        return star_key(self.username, self.repo_owner, self.repo_name)

    def validate_rules(self) -> None:
        validate_account_name("username", self.username, "Username")
        validate_owner("repo_owner", self.repo_owner, "Repository owner")
        validate_repo_name("repo_name", self.repo_name)
