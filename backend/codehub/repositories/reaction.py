"""Reaction Repository - emoji reactions on issues, pull requests and comments."""

from typing import List, Optional

from boto3.dynamodb.conditions import Key

from codehub.config import TableConfig
from codehub.core.result import Result, returns_result
from codehub.entities.reaction import Reaction
from codehub.keys import PK, SK, reaction_key, reaction_prefix, repo_pk

from .base import BaseRepository, ParentCheck


class ReactionRepository(BaseRepository[Reaction]):
    """Repository for Reaction entities."""

    def __init__(self, table, config: TableConfig):
        super().__init__(table, config, Reaction)

    def get(
        self,
        owner: str,
        repo_name: str,
        target_type: str,
        target_id: str,
        user: str,
        emoji: str,
    ) -> Optional[Reaction]:
        return self._get(reaction_key(owner, repo_name, target_type, target_id, user, emoji))

    @returns_result
    def create(self, reaction: Reaction) -> Result[Reaction]:
        """
        Create a reaction after checking that its target exists.

        A malformed target_id fails with ValidationError before any write.
        """
        reaction.validate_rules()
        target = ParentCheck(
            reaction.target_entity_type(),
            {
                "owner": reaction.owner,
                "repo_name": reaction.repo_name,
                "target_id": reaction.target_id,
            },
            reaction.target_key(),
        )
        return self._create(reaction, [target])

    def delete(
        self,
        owner: str,
        repo_name: str,
        target_type: str,
        target_id: str,
        user: str,
        emoji: str,
    ) -> None:
        self._delete(reaction_key(owner, repo_name, target_type, target_id, user, emoji))

    def list_by_target(
        self, owner: str, repo_name: str, target_type: str, target_id: str
    ) -> List[Reaction]:
        return self._query(
            KeyConditionExpression=Key(PK).eq(repo_pk(owner, repo_name))
            & Key(SK).begins_with(reaction_prefix(target_type, target_id)),
        )

    def list_by_user_and_target(
        self, owner: str, repo_name: str, target_type: str, target_id: str, user: str
    ) -> List[Reaction]:
        return self._query(
            KeyConditionExpression=Key(PK).eq(repo_pk(owner, repo_name))
            & Key(SK).begins_with(reaction_prefix(target_type, target_id, user)),
        )
