from __future__ import annotations

from typing import Optional

from codehub.keys import ItemKey, account_key

from .base import BaseEntity
from .validation import validate_account_name


class Organization(BaseEntity):
    """An account that owns repositories but cannot sign in."""

    ENTITY_TYPE = "Organization"
    NATURAL_KEY_FIELDS = ("org_name",)

    org_name: str
    description: Optional[str] = None
    payment_plan_id: Optional[str] = None

    def key(self) -> ItemKey:
        return account_key(self.org_name)

    def validate_rules(self) -> None:
        validate_account_name("org_name", self.org_name, "Organization name")
