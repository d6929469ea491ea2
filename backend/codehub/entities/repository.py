from __future__ import annotations

from typing import Dict, Optional

from codehub.keys import ItemKey, repository_index_keys, repository_key
from codehub.utils.datetime import to_iso

from .base import BaseEntity
from .validation import validate_owner, validate_repo_name


class Repository(BaseEntity):
    ENTITY_TYPE = "Repository"
    NATURAL_KEY_FIELDS = ("owner", "repo_name")

    owner: str
    repo_name: str
    description: Optional[str] = None
    is_private: bool = False
    language: Optional[str] = None

    def key(self) -> ItemKey:
        return repository_key(self.owner, self.repo_name)

    def index_keys(self) -> Dict[str, str]:
        # Listed under the owning account by creation time
        if self.created is None:
            return {}
        return repository_index_keys(self.owner, to_iso(self.created))

    def validate_rules(self) -> None:
        validate_owner("owner", self.owner)
        validate_repo_name("repo_name", self.repo_name)
