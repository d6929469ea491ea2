"""Opaque page tokens for paged index queries."""

from __future__ import annotations

import base64
import binascii
import json
from decimal import Decimal
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

from codehub.core.errors import ValidationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100


class Page(BaseModel, Generic[T]):
    """One page of results; ``next_page_token`` is None on the last page."""

    items: List[T] = Field(default_factory=list)
    next_page_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.next_page_token is not None


def encode_page_token(last_evaluated_key: Optional[Dict[str, Any]]) -> Optional[str]:
    if not last_evaluated_key:
        return None
    payload = json.dumps(last_evaluated_key, sort_keys=True, default=_json_default)
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")


def decode_page_token(
    token: Optional[str], key_attributes: Optional[Sequence[str]] = None
) -> Optional[Dict[str, Any]]:
    """
    Decode a page token back into an ExclusiveStartKey.

    When ``key_attributes`` is given the token must hold exactly those
    attributes, each a non-empty string.
    """
    if not token:
        return None
    try:
        decoded = json.loads(base64.urlsafe_b64decode(token.encode("ascii")))
    except (binascii.Error, UnicodeError, ValueError):
        raise ValidationError("page_token", "Invalid page token")
    if not isinstance(decoded, dict):
        raise ValidationError("page_token", "Invalid page token")
    if key_attributes is not None:
        if set(decoded) != set(key_attributes):
            raise ValidationError("page_token", "Invalid page token")
        if not all(isinstance(value, str) and value for value in decoded.values()):
            raise ValidationError("page_token", "Invalid page token")
    return decoded


def check_page_size(limit: int) -> None:
    if limit < 1 or limit > MAX_PAGE_SIZE:
        raise ValidationError("limit", f"limit must be between 1 and {MAX_PAGE_SIZE}")


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
