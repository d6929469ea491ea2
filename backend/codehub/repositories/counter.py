"""
Counter Repository - per-repository number sequence.

Issues and pull requests of one repository draw their numbers from the same
counter, so numbers interleave across both kinds and are never reused.
"""

import logging
from typing import Optional

from codehub.config import TableConfig
from codehub.entities.base import ENTITY_TYPE_ATTRIBUTE
from codehub.entities.counter import Counter
from codehub.keys import counter_key
from codehub.utils.datetime import to_iso, utc_now

from .base import BaseRepository

logger = logging.getLogger(__name__)


class CounterRepository(BaseRepository[Counter]):
    """Repository for Counter entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, Counter)

    def get(self, owner: str, repo_name: str) -> Optional[Counter]:
        return self._get(counter_key(owner, repo_name))

    def increment_and_get(self, owner: str, repo_name: str) -> int:
        """
        Atomically add one to the counter and return the new value.

        A single UpdateItem with ADD, so concurrent callers never see the same
        value. The first call for a repository creates the counter and returns 1.
        """
        now = to_iso(utc_now())
        response = self.table.update_item(
            Key=counter_key(owner, repo_name).as_key(),
            UpdateExpression=(
                "SET #owner = :owner, #repo = :repo, #et = :et, "
                "#created = if_not_exists(#created, :now), #modified = :now "
                "ADD #value :one"
            ),
            ExpressionAttributeNames={
                "#owner": "owner",
                "#repo": "repo_name",
                "#et": ENTITY_TYPE_ATTRIBUTE,
                "#created": "created",
                "#modified": "modified",
                "#value": "current_value",
            },
            ExpressionAttributeValues={
                ":owner": owner,
                ":repo": repo_name,
                ":et": self.entity_type,
                ":now": now,
                ":one": 1,
            },
            ReturnValues="ALL_NEW",
        )
        value = int(response["Attributes"]["current_value"])
        logger.debug(f"Counter {owner}/{repo_name} -> {value}", extra=self._log_extra("increment"))
        return value
