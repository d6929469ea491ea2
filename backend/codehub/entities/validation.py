"""
Field format rules shared by the entity models.

Every check raises ``ValidationError`` naming the offending field.
"""

import re
import unicodedata
from typing import Optional

from codehub.core.errors import ValidationError

MAX_ACCOUNT_NAME_LENGTH = 39
MAX_TITLE_LENGTH = 255

ACCOUNT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
REPO_NAME_PATTERN = re.compile(r"[A-Za-z0-9_.-]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
RESERVED_REPO_NAMES = (".", "..")

# Emoji components: keycap bases, ZWJ, variation selectors and the keycap mark
_EMOJI_COMPONENTS = frozenset("#*0123456789\u200d\ufe0e\ufe0f\u20e3")
_TAG_RANGE = (0xE0020, 0xE007F)
_SKIN_TONE_RANGE = (0x1F3FB, 0x1F3FF)
# Emoji code points outside the "Symbol, other" category
_EMOJI_EXTRAS = frozenset(
    [0x203C, 0x2049, 0x2122, 0x2139, 0x3030, 0x303D]
    + list(range(0x2194, 0x219A))
    + [0x21A9, 0x21AA]
)


def require(field: str, value: Optional[str], label: str) -> str:
    if not value:
        raise ValidationError(field, f"{label} is required")
    return value


def validate_account_name(field: str, value: Optional[str], label: str = "Name") -> None:
    """Usernames, organization names and repository owners."""
    require(field, value, label)
    if len(value) > MAX_ACCOUNT_NAME_LENGTH:
        raise ValidationError(
            field, f"{label} must be {MAX_ACCOUNT_NAME_LENGTH} characters or less"
        )
    if not ACCOUNT_NAME_PATTERN.fullmatch(value):
        raise ValidationError(
            field, f"{label} can only contain letters, numbers, hyphens, and underscores"
        )


def validate_owner(field: str, value: Optional[str], label: str = "Owner") -> None:
    require(field, value, label)
    if not ACCOUNT_NAME_PATTERN.fullmatch(value):
        raise ValidationError(
            field, f"{label} can only contain letters, numbers, hyphens, and underscores"
        )


def validate_repo_name(field: str, value: Optional[str], label: str = "Repository name") -> None:
    require(field, value, label)
    if value in RESERVED_REPO_NAMES:
        raise ValidationError(field, f"{label} is reserved")
    if not REPO_NAME_PATTERN.fullmatch(value):
        raise ValidationError(
            field,
            f"{label} can only contain letters, numbers, hyphens, underscores, and dots",
        )


def validate_email(value: Optional[str]) -> None:
    require("email", value, "Email")
    if not EMAIL_PATTERN.fullmatch(value):
        raise ValidationError("email", "Invalid email format")


def validate_title(value: Optional[str]) -> None:
    if not value or not value.strip():
        raise ValidationError("title", "Title is required")
    if len(value) > MAX_TITLE_LENGTH:
        raise ValidationError("title", f"Title must be {MAX_TITLE_LENGTH} characters or less")


def validate_body(value: Optional[str]) -> None:
    require("body", value, "Comment body")
    if not value.strip():
        raise ValidationError("body", "Comment body cannot be empty")


def validate_emoji(value: Optional[str]) -> None:
    require("emoji", value, "Emoji")
    if not all(_is_emoji_char(char) for char in value):
        raise ValidationError("emoji", "Emoji must be a valid unicode emoji")


def _is_emoji_char(char: str) -> bool:
    if char in _EMOJI_COMPONENTS:
        return True
    code = ord(char)
    if code in _EMOJI_EXTRAS or _TAG_RANGE[0] <= code <= _TAG_RANGE[1]:
        return True
    if _SKIN_TONE_RANGE[0] <= code <= _SKIN_TONE_RANGE[1]:
        return True
    # pictographs and regional indicators
    return code > 0x7F and unicodedata.category(char) == "So"
