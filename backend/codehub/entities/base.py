"""
Base entity shared by every item stored in the table.

An entity knows how to build its own keys and how to convert itself to and
from a DynamoDB item. Store-managed timestamps live here as well.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from codehub.core.errors import ValidationError
from codehub.keys import KEY_ATTRIBUTES, PK, SK, ItemKey
from codehub.utils.datetime import parse_datetime, to_iso, utc_now

ENTITY_TYPE_ATTRIBUTE = "entity_type"
TIMESTAMP_FIELDS = ("created", "modified")


class BaseEntity(BaseModel):
    """
    Base class for all stored entities.

    Subclasses set ``ENTITY_TYPE`` and ``NATURAL_KEY_FIELDS`` and implement
    ``key()``. List fields named in ``SET_FIELDS`` are stored as string sets
    and omitted from the item while empty.
    """

    model_config = ConfigDict(use_enum_values=True, validate_default=True, extra="ignore")

    ENTITY_TYPE: ClassVar[str] = ""
    NATURAL_KEY_FIELDS: ClassVar[Tuple[str, ...]] = ()
    SET_FIELDS: ClassVar[Tuple[str, ...]] = ()

    created: Optional[datetime] = None
    modified: Optional[datetime] = None

    @field_validator("created", "modified", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        return parse_datetime(value)

    def key(self) -> ItemKey:
        raise NotImplementedError

    def index_keys(self) -> Dict[str, str]:
        return {}

    def natural_key(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.NATURAL_KEY_FIELDS}

    def validate_rules(self) -> None:
        """Check business rules. Raises ValidationError."""

    def with_timestamps(self, now: datetime) -> "BaseEntity":
        """Copy stamped as freshly created at ``now``."""
        return self.model_copy(update={"created": now, "modified": now})

    def with_changes(self, **changes: Any) -> "BaseEntity":
        """
        Return a re-validated copy with ``changes`` applied and a fresh ``modified``.

        Natural-key fields and ``created`` identify the stored item and cannot
        change this way.
        """
        fixed = set(self.NATURAL_KEY_FIELDS) | {"created"}
        for name, value in changes.items():
            if name not in type(self).model_fields or name == "modified":
                raise ValidationError(name, f"Unknown or read-only field '{name}'")
            if name in fixed and value != getattr(self, name):
                raise ValidationError(name, f"{name} cannot be changed")

        data = self.model_dump()
        data.update(changes)
        data["modified"] = utc_now()
        updated = type(self).model_validate(data)
        updated.validate_rules()
        return updated

    # ------------------------------------------------------------------
    # Item conversion
    # ------------------------------------------------------------------

    def attributes(self) -> Dict[str, Any]:
        """Non-key attributes as stored, without empty optional values."""
        attributes: Dict[str, Any] = {}
        for name, value in self.model_dump(exclude=set(TIMESTAMP_FIELDS)).items():
            if value is None:
                continue
            if name in self.SET_FIELDS:
                if not value:
                    continue
                value = set(value)
            attributes[name] = value
        for name in TIMESTAMP_FIELDS:
            value = getattr(self, name)
            if value is not None:
                attributes[name] = to_iso(value)
        attributes[ENTITY_TYPE_ATTRIBUTE] = self.ENTITY_TYPE
        return attributes

    def optional_fields(self) -> Tuple[str, ...]:
        """Fields that may be missing from the stored item."""
        return tuple(
            name
            for name, field in type(self).model_fields.items()
            if name not in TIMESTAMP_FIELDS
            and (not field.is_required() or name in self.SET_FIELDS)
        )

    def to_item(self) -> Dict[str, Any]:
        key = self.key()
        item = {PK: key.pk, SK: key.sk}
        item.update(self.index_keys())
        item.update(self.attributes())
        return item

    @classmethod
    def from_item(cls, item: Dict[str, Any]):
        data = {
            name: _from_store(value)
            for name, value in item.items()
            if name not in KEY_ATTRIBUTES and name != ENTITY_TYPE_ATTRIBUTE
        }
        for name in cls.SET_FIELDS:
            data.setdefault(name, [])
        return cls.model_validate(data)


def _from_store(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return value
