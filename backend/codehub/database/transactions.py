"""
Transactional writes across several items of the table.

A create is expressed as an ordered list of operations: the entity's own
conditional put first, then one existence check per referenced parent. The
whole list is applied with a single TransactWriteItems call. When DynamoDB
cancels the transaction, the per-operation cancellation reasons are returned
positionally so the caller can tell which condition failed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from botocore.exceptions import ClientError

from codehub.keys import ItemKey

logger = logging.getLogger(__name__)

TRANSACTION_CANCELED = "TransactionCanceledException"
CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailed"
NO_FAILURE = "None"

# DynamoDB allows at most 100 actions per transaction
MAX_TRANSACTION_ITEMS = 100

_REASONS_IN_MESSAGE = re.compile(r"\[([^\]]*)\]\s*$")


@dataclass(frozen=True)
class ConditionalPut:
    """Put an item only if nothing exists at its primary key."""

    item: Dict[str, Any]

    def to_transact_item(self, table_name: str) -> Dict[str, Any]:
        return {
            "Put": {
                "TableName": table_name,
                "Item": self.item,
                "ConditionExpression": "attribute_not_exists(PK)",
            }
        }


@dataclass(frozen=True)
class ConditionCheck:
    """Require an item to exist at ``key`` without modifying it."""

    key: ItemKey

    def to_transact_item(self, table_name: str) -> Dict[str, Any]:
        return {
            "ConditionCheck": {
                "TableName": table_name,
                "Key": self.key.as_key(),
                "ConditionExpression": "attribute_exists(PK)",
            }
        }


TransactionOp = Union[ConditionalPut, ConditionCheck]


@dataclass(frozen=True)
class TransactionOutcome:
    succeeded: bool
    reasons: Tuple[str, ...] = ()
    error: Optional[ClientError] = None

    def condition_failed(self, index: int) -> bool:
        return self.reasons[index] == CONDITIONAL_CHECK_FAILED

    @property
    def first_failed_index(self) -> Optional[int]:
        for index, code in enumerate(self.reasons):
            if code == CONDITIONAL_CHECK_FAILED:
                return index
        return None


class TransactionalWriter:
    """Runs ordered operation lists as all-or-nothing units."""

    def __init__(self, table):
        self.table = table
        self.client = table.meta.client

    def execute(self, ops: Sequence[TransactionOp]) -> TransactionOutcome:
        """
        Apply every operation or none of them.

        Returns a successful outcome, or a failed one whose ``reasons`` hold
        one cancellation code per operation in submission order. Client errors
        other than a transaction cancellation with readable reasons propagate.
        """
        if not ops:
            raise ValueError("A transaction needs at least one operation")
        if len(ops) > MAX_TRANSACTION_ITEMS:
            raise ValueError(f"A transaction accepts at most {MAX_TRANSACTION_ITEMS} operations")

        items = [op.to_transact_item(self.table.name) for op in ops]
        try:
            self.client.transact_write_items(TransactItems=items)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") != TRANSACTION_CANCELED:
                raise
            reasons = cancellation_reasons(e)
            if len(reasons) != len(ops):
                logger.error(
                    f"Transaction cancelled with {len(reasons)} reasons for {len(ops)} operations"
                )
                raise
            logger.debug(f"Transaction cancelled: {', '.join(reasons)}")
            return TransactionOutcome(succeeded=False, reasons=reasons, error=e)

        return TransactionOutcome(succeeded=True)


def cancellation_reasons(error: ClientError) -> Tuple[str, ...]:
    """
    Extract per-operation cancellation codes from a TransactionCanceledException.

    Prefers the structured ``CancellationReasons`` list; falls back to the
    bracketed list DynamoDB appends to the message, e.g.
    "... specific reasons [ConditionalCheckFailed, None]".
    """
    structured = error.response.get("CancellationReasons")
    if structured:
        return tuple(reason.get("Code") or NO_FAILURE for reason in structured)

    message = error.response.get("Error", {}).get("Message", "")
    match = _REASONS_IN_MESSAGE.search(message)
    if not match:
        return ()
    return tuple(code.strip() or NO_FAILURE for code in match.group(1).split(","))
