"""DynamoDB key builders for every entity stored in the single table."""

from typing import Dict, NamedTuple, Tuple

from codehub.core.errors import ValidationError

# Key attribute names
PK = "PK"
SK = "SK"
GSI1PK, GSI1SK = "GSI1PK", "GSI1SK"
GSI2PK, GSI2SK = "GSI2PK", "GSI2SK"
GSI3PK, GSI3SK = "GSI3PK", "GSI3SK"
GSI4PK, GSI4SK = "GSI4PK", "GSI4SK"

KEY_ATTRIBUTES = (PK, SK, GSI1PK, GSI1SK, GSI2PK, GSI2SK, GSI3PK, GSI3SK, GSI4PK, GSI4SK)

# Key prefixes
ACCOUNT_PREFIX = "ACCOUNT#"
REPO_PREFIX = "REPO#"
COUNTER_PREFIX = "COUNTER#"
ISSUE_PREFIX = "ISSUE#"
PR_PREFIX = "PR#"
COMMENT_PREFIX = "COMMENT#"
REACTION_PREFIX = "REACTION#"
FORK_PREFIX = "FORK#"
STAR_PREFIX = "STAR#"

SK_COUNTER = "METADATA"

# Issue and PR numbers occupy six digits in every key
NUMBER_WIDTH = 6
MAX_NUMBER = 999999

COMPOSITE_TARGET_TYPES = ("ISSUECOMMENT", "PRCOMMENT")


class ItemKey(NamedTuple):
    """Primary key of one item."""

    pk: str
    sk: str

    def as_key(self) -> Dict[str, str]:
        return {PK: self.pk, SK: self.sk}


def pad_number(number: int) -> str:
    """Zero-pad an issue/PR number to the fixed key width."""
    return str(number).zfill(NUMBER_WIDTH)


def _check_number(number: int, field: str) -> None:
    if number < 1 or number > MAX_NUMBER:
        raise ValidationError(field, f"{field} must be between 1 and {MAX_NUMBER}")


# ---------------------------------------------------------------------------
# Primary keys
# ---------------------------------------------------------------------------


def account_pk(name: str) -> str:
    return f"{ACCOUNT_PREFIX}{name}"


def repo_pk(owner: str, repo_name: str) -> str:
    return f"{REPO_PREFIX}{owner}#{repo_name}"


def account_key(name: str) -> ItemKey:
    """Users and organizations share this key, so names are unique across both."""
    pk = account_pk(name)
    return ItemKey(pk, pk)


def repository_key(owner: str, repo_name: str) -> ItemKey:
    pk = repo_pk(owner, repo_name)
    return ItemKey(pk, pk)


def counter_key(owner: str, repo_name: str) -> ItemKey:
    return ItemKey(f"{COUNTER_PREFIX}{owner}#{repo_name}", SK_COUNTER)


def issue_sk(issue_number: int) -> str:
    return f"{ISSUE_PREFIX}{pad_number(issue_number)}"


def issue_key(owner: str, repo_name: str, issue_number: int) -> ItemKey:
    return ItemKey(repo_pk(owner, repo_name), issue_sk(issue_number))


def pull_request_sk(pr_number: int) -> str:
    return f"{PR_PREFIX}{pad_number(pr_number)}"


def pull_request_key(owner: str, repo_name: str, pr_number: int) -> ItemKey:
    return ItemKey(repo_pk(owner, repo_name), pull_request_sk(pr_number))


def issue_comment_prefix(issue_number: int) -> str:
    return f"{issue_sk(issue_number)}#{COMMENT_PREFIX}"


def issue_comment_key(owner: str, repo_name: str, issue_number: int, comment_id: str) -> ItemKey:
    return ItemKey(repo_pk(owner, repo_name), f"{issue_comment_prefix(issue_number)}{comment_id}")


def pr_comment_prefix(pr_number: int) -> str:
    return f"{pull_request_sk(pr_number)}#{COMMENT_PREFIX}"


def pr_comment_key(owner: str, repo_name: str, pr_number: int, comment_id: str) -> ItemKey:
    return ItemKey(repo_pk(owner, repo_name), f"{pr_comment_prefix(pr_number)}{comment_id}")


def reaction_prefix(target_type: str, target_id: str, user: str = "") -> str:
    """Sort key prefix selecting reactions on one target, optionally by one user."""
    prefix = f"{REACTION_PREFIX}{target_type}#{target_id}#"
    if user:
        prefix = f"{prefix}{user}#"
    return prefix


def reaction_key(
    owner: str,
    repo_name: str,
    target_type: str,
    target_id: str,
    user: str,
    emoji: str,
) -> ItemKey:
    return ItemKey(
        repo_pk(owner, repo_name),
        f"{reaction_prefix(target_type, target_id, user)}{emoji}",
    )


def fork_key(original_owner: str, original_repo: str, fork_owner: str) -> ItemKey:
    return ItemKey(repo_pk(original_owner, original_repo), f"{FORK_PREFIX}{fork_owner}")


def star_key(username: str, repo_owner: str, repo_name: str) -> ItemKey:
    return ItemKey(account_pk(username), f"{STAR_PREFIX}{repo_owner}#{repo_name}")


# ---------------------------------------------------------------------------
# Secondary index keys
# ---------------------------------------------------------------------------


def issue_list_pk(owner: str, repo_name: str) -> str:
    return f"{ISSUE_PREFIX}{owner}#{repo_name}"


def pull_request_list_pk(owner: str, repo_name: str) -> str:
    return f"{PR_PREFIX}{owner}#{repo_name}"


def status_sort_key(kind: str, status: str, number: int) -> str:
    """
    Build the status index sort key for an issue ("ISSUE") or pull request ("PR").

    Open items use the inverted number so the newest sorts first. Closed and
    merged items keep the plain number (oldest first) and carry a leading "#",
    which keeps every status in its own prefix block of the partition.
    """
    field = "issue_number" if kind == "ISSUE" else "pr_number"
    _check_number(number, field)
    if status == "open":
        return f"{kind}#OPEN#{pad_number(MAX_NUMBER - number)}"
    return f"#{kind}#{status.upper()}#{pad_number(number)}"


def status_prefix(kind: str, status: str) -> str:
    if status == "open":
        return f"{kind}#OPEN#"
    return f"#{kind}#{status.upper()}#"


def issue_index_keys(owner: str, repo_name: str, issue_number: int, status: str) -> Dict[str, str]:
    return {
        GSI1PK: issue_list_pk(owner, repo_name),
        GSI1SK: issue_sk(issue_number),
        GSI4PK: repo_pk(owner, repo_name),
        GSI4SK: status_sort_key("ISSUE", status, issue_number),
    }


def pull_request_index_keys(owner: str, repo_name: str, pr_number: int, status: str) -> Dict[str, str]:
    return {
        GSI1PK: pull_request_list_pk(owner, repo_name),
        GSI1SK: pull_request_sk(pr_number),
        GSI4PK: repo_pk(owner, repo_name),
        GSI4SK: status_sort_key("PR", status, pr_number),
    }


def repository_index_keys(owner: str, created: str) -> Dict[str, str]:
    return {GSI3PK: account_pk(owner), GSI3SK: created}


def fork_index_keys(original_owner: str, original_repo: str, fork_owner: str) -> Dict[str, str]:
    return {
        GSI2PK: repo_pk(original_owner, original_repo),
        GSI2SK: f"{FORK_PREFIX}{fork_owner}",
    }


# ---------------------------------------------------------------------------
# Reaction targets
# ---------------------------------------------------------------------------


def parse_composite_target_id(target_type: str, target_id: str) -> Tuple[int, str]:
    """
    Split a comment target id of the form "<parentNumber>-<commentId>".

    The parent number is purely numeric, so the first "-" is the boundary even
    when the comment id itself contains dashes (UUIDs do).
    """
    parent, sep, comment_id = target_id.partition("-")
    if not sep:
        raise ValidationError(
            "target_id",
            f"{target_type} target_id must be in format '<number>-<commentId>'",
        )
    if not _is_number(parent) or not comment_id:
        raise ValidationError("target_id", f"Invalid {target_type} target_id format")
    return int(parent), comment_id


def parse_number_target_id(target_type: str, target_id: str) -> int:
    if not _is_number(target_id):
        raise ValidationError("target_id", f"{target_type} target_id must be a valid number")
    return int(target_id)


def _is_number(value: str) -> bool:
    return value.isascii() and value.isdigit()
