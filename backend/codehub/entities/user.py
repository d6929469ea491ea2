from __future__ import annotations

from typing import Optional

from codehub.keys import ItemKey, account_key

from .base import BaseEntity
from .validation import validate_account_name, validate_email


class User(BaseEntity):
    ENTITY_TYPE = "User"
    NATURAL_KEY_FIELDS = ("username",)

    username: str
    email: str
    bio: Optional[str] = None
    payment_plan_id: Optional[str] = None

    def key(self) -> ItemKey:
        return account_key(self.username)

    def validate_rules(self) -> None:
        validate_account_name("username", self.username, "Username")
        validate_email(self.email)
