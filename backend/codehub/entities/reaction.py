"""
Reaction entity.

A reaction targets an issue, a pull request or a comment on either. Comment
targets use a composite ``target_id`` of the form "<parentNumber>-<commentId>".
"""

from __future__ import annotations

from enum import Enum

from codehub.keys import (
    ItemKey,
    issue_comment_key,
    issue_key,
    parse_composite_target_id,
    parse_number_target_id,
    pr_comment_key,
    pull_request_key,
    reaction_key,
)

from .base import BaseEntity
from .validation import (
    require,
    validate_account_name,
    validate_emoji,
    validate_owner,
    validate_repo_name,
)


class ReactionTargetType(str, Enum):
    ISSUE = "ISSUE"
    PR = "PR"
    ISSUECOMMENT = "ISSUECOMMENT"
    PRCOMMENT = "PRCOMMENT"


class Reaction(BaseEntity):
    ENTITY_TYPE = "Reaction"
    NATURAL_KEY_FIELDS = ("owner", "repo_name", "target_type", "target_id", "user", "emoji")

    owner: str
    repo_name: str
    target_type: ReactionTargetType
    target_id: str
    user: str
    emoji: str

    def key(self) -> ItemKey:
        return reaction_key(
            self.owner, self.repo_name, self.target_type, self.target_id, self.user, self.emoji
        )

    def target_key(self) -> ItemKey:
        """
        Primary key of the reacted-to item.

        Raises ValidationError when ``target_id`` does not fit ``target_type``.
        """
        if self.target_type == ReactionTargetType.ISSUE.value:
            number = parse_number_target_id(self.target_type, self.target_id)
            return issue_key(self.owner, self.repo_name, number)
        if self.target_type == ReactionTargetType.PR.value:
            number = parse_number_target_id(self.target_type, self.target_id)
            return pull_request_key(self.owner, self.repo_name, number)

        number, comment_id = parse_composite_target_id(self.target_type, self.target_id)
        if self.target_type == ReactionTargetType.ISSUECOMMENT.value:
            return issue_comment_key(self.owner, self.repo_name, number, comment_id)
        return pr_comment_key(self.owner, self.repo_name, number, comment_id)

    def target_entity_type(self) -> str:
        return {
            ReactionTargetType.ISSUE.value: "Issue",
            ReactionTargetType.PR.value: "PullRequest",
            ReactionTargetType.ISSUECOMMENT.value: "IssueComment",
            ReactionTargetType.PRCOMMENT.value: "PRComment",
        }[self.target_type]

    def validate_rules(self) -> None:
        validate_owner("owner", self.owner)
        validate_repo_name("repo_name", self.repo_name)
        require("target_id", self.target_id, "Target ID")
        validate_account_name("user", self.user, "User")
        validate_emoji(self.emoji)
