from __future__ import annotations

from codehub.keys import ItemKey, counter_key

from .base import BaseEntity


class Counter(BaseEntity):
    """Issue and pull request number sequence of one repository."""

    ENTITY_TYPE = "Counter"
    NATURAL_KEY_FIELDS = ("owner", "repo_name")

    owner: str
    repo_name: str
    current_value: int = 0

    def key(self) -> ItemKey:
        return counter_key(self.owner, self.repo_name)
