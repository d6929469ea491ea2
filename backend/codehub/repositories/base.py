"""
Base repository over the single DynamoDB table.

Concrete repositories describe keys and parents; this class owns the store
calls: point reads, transactional creates, conditional updates,
unconditional deletes and index queries.
"""

import logging
from typing import Any, Dict, Generic, List, NamedTuple, Optional, Sequence, Type, TypeVar

from botocore.exceptions import ClientError

from codehub.config import TableConfig
from codehub.core.errors import ValidationError
from codehub.database.dynamodb import start_key_attributes
from codehub.database.error_translator import (
    FailureTarget,
    error_code,
    translate_client_error,
    translate_transaction_failure,
    translate_update_error,
)
from codehub.database.pagination import (
    DEFAULT_PAGE_SIZE,
    Page,
    check_page_size,
    decode_page_token,
    encode_page_token,
)
from codehub.database.transactions import ConditionalPut, ConditionCheck, TransactionalWriter
from codehub.entities.base import ENTITY_TYPE_ATTRIBUTE, BaseEntity
from codehub.keys import ItemKey
from codehub.utils.datetime import to_iso, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)


class ParentCheck(NamedTuple):
    """An item that must exist for a create to succeed."""

    entity_type: str
    natural_key: Dict[str, Any]
    key: ItemKey


class BaseRepository(Generic[T]):
    """Base repository with common DynamoDB operations."""

    def __init__(self, table, config: TableConfig, entity_class: Type[T]):
        self.table = table
        self.config = config
        self.entity_class = entity_class
        self.entity_type = entity_class.ENTITY_TYPE
        self.writer = TransactionalWriter(table)

    def _log_extra(self, operation: str) -> Dict[str, str]:
        return {
            "entity_type": self.entity_type,
            "table": self.config.table_name,
            "operation": operation,
        }

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _get(self, key: ItemKey) -> Optional[T]:
        """Point read; None when absent or when the item is of another kind."""
        response = self.table.get_item(Key=key.as_key())
        item = response.get("Item")
        if not item or item.get(ENTITY_TYPE_ATTRIBUTE) != self.entity_type:
            return None
        return self.entity_class.from_item(item)

    def _query(self, index_name: Optional[str] = None, **kwargs) -> List[T]:
        """Run a query to exhaustion, following LastEvaluatedKey."""
        if index_name:
            kwargs["IndexName"] = index_name
        items: List[T] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(self._to_entities(response.get("Items", [])))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def _query_page(
        self,
        index_name: Optional[str] = None,
        limit: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
        **kwargs,
    ) -> Page[T]:
        check_page_size(limit)
        start_key = decode_page_token(page_token, start_key_attributes(self.config, index_name))
        if index_name:
            kwargs["IndexName"] = index_name
        if start_key:
            kwargs["ExclusiveStartKey"] = start_key
        try:
            response = self.table.query(Limit=limit, **kwargs)
        except ClientError as e:
            if start_key and error_code(e) == "ValidationException":
                raise ValidationError("page_token", "Invalid page token")
            translate_client_error(e)
        return Page[self.entity_class](
            items=self._to_entities(response.get("Items", [])),
            next_page_token=encode_page_token(response.get("LastEvaluatedKey")),
        )

    def _to_entities(self, items: Sequence[Dict[str, Any]]) -> List[T]:
        return [
            self.entity_class.from_item(item)
            for item in items
            if item.get(ENTITY_TYPE_ATTRIBUTE) == self.entity_type
        ]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def _create(self, entity: T, parents: Sequence[ParentCheck] = ()) -> T:
        """
        Put ``entity`` if its key is free and every parent exists, atomically.

        Operation 0 is the entity's own put; operation i >= 1 checks parents[i - 1].
        Returns the entity as re-read after the write.
        """
        entity.validate_rules()
        entity = entity.with_timestamps(utc_now())
        key = entity.key()

        ops = [ConditionalPut(entity.to_item())]
        ops.extend(ConditionCheck(parent.key) for parent in parents)
        targets = [FailureTarget(self.entity_type, entity.natural_key())]
        targets.extend(FailureTarget(parent.entity_type, parent.natural_key) for parent in parents)

        try:
            outcome = self.writer.execute(ops)
        except ClientError as e:
            translate_client_error(e)
        if not outcome.succeeded:
            translate_transaction_failure(outcome, targets)

        logger.info(
            f"Created {self.entity_type} {entity.natural_key()}",
            extra=self._log_extra("create"),
        )
        persisted = self._get(key)
        return persisted if persisted is not None else entity

    def _update(self, entity: T) -> T:
        """
        Overwrite the attributes of an existing item in one UpdateItem call.

        ``created`` is only written when missing; ``modified`` is always now.
        Optional attributes that are now empty are removed from the item.
        """
        entity.validate_rules()
        key = entity.key()
        attributes = entity.attributes()
        for name in ("created", "modified", ENTITY_TYPE_ATTRIBUTE):
            attributes.pop(name, None)
        # Index keys derived from created stay as written at create time
        attributes.update(entity.model_copy(update={"created": None}).index_keys())

        names = {"#created": "created", "#modified": "modified", "#et": ENTITY_TYPE_ATTRIBUTE}
        values: Dict[str, Any] = {":now": to_iso(utc_now()), ":et": self.entity_type}
        set_clauses = []
        for i, (name, value) in enumerate(attributes.items()):
            names[f"#f{i}"] = name
            values[f":v{i}"] = value
            set_clauses.append(f"#f{i} = :v{i}")
        set_clauses.append("#created = if_not_exists(#created, :now)")
        set_clauses.append("#modified = :now")

        remove_clauses = []
        for i, name in enumerate(entity.optional_fields()):
            if name not in attributes:
                names[f"#r{i}"] = name
                remove_clauses.append(f"#r{i}")

        expression = "SET " + ", ".join(set_clauses)
        if remove_clauses:
            expression += " REMOVE " + ", ".join(remove_clauses)

        try:
            response = self.table.update_item(
                Key=key.as_key(),
                UpdateExpression=expression,
                ConditionExpression="attribute_exists(PK) AND #et = :et",
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            translate_update_error(e, self.entity_type, entity.natural_key())

        logger.debug(
            f"Updated {self.entity_type} {entity.natural_key()}",
            extra=self._log_extra("update"),
        )
        return self.entity_class.from_item(response["Attributes"])

    def _delete(self, key: ItemKey) -> None:
        """Unconditional delete; deleting a missing item is not an error."""
        self.table.delete_item(Key=key.as_key())
        logger.debug(f"Deleted {self.entity_type} at {key.pk} / {key.sk}", extra=self._log_extra("delete"))
