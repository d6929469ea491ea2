"""
Translate DynamoDB failure signals into domain errors.

Only three outcomes are recognised: duplicate entity, missing entity and
validation failure. Everything else is re-raised untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, NoReturn, Sequence

from botocore.exceptions import ClientError

from codehub.core.errors import DuplicateEntityError, EntityNotFoundError, ValidationError
from codehub.database.transactions import TransactionOutcome

logger = logging.getLogger(__name__)

CONDITIONAL_CHECK_FAILED_EXCEPTION = "ConditionalCheckFailedException"
VALIDATION_EXCEPTION = "ValidationException"


@dataclass(frozen=True)
class FailureTarget:
    """Entity an operation of a transaction refers to, in submission order."""

    entity_type: str
    key: Dict[str, Any] = field(default_factory=dict)


def error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


def translate_transaction_failure(
    outcome: TransactionOutcome,
    targets: Sequence[FailureTarget],
) -> NoReturn:
    """
    Raise the domain error matching the first failed operation.

    Position 0 is always the entity's own conditional put, so a failure there
    means a duplicate; any later position is a parent existence check.
    """
    if len(targets) != len(outcome.reasons):
        raise ValueError(
            f"Expected {len(outcome.reasons)} failure targets, got {len(targets)}"
        )

    index = outcome.first_failed_index
    if index is None:
        # e.g. TransactionConflict: not a condition failure, surface as-is
        logger.error(f"Unrecognised transaction failure: {', '.join(outcome.reasons)}")
        raise outcome.error

    target = targets[index]
    if index == 0:
        logger.warning(f"Duplicate {target.entity_type}: {target.key}")
        raise DuplicateEntityError(target.entity_type, target.key)

    logger.warning(f"Missing {target.entity_type} referenced by transaction: {target.key}")
    raise EntityNotFoundError(target.entity_type, target.key)


def translate_update_error(error: ClientError, entity_type: str, key: Dict[str, Any]) -> NoReturn:
    """An update requires the item to exist; a failed condition means it doesn't."""
    if error_code(error) == CONDITIONAL_CHECK_FAILED_EXCEPTION:
        logger.warning(f"Update of missing {entity_type}: {key}")
        raise EntityNotFoundError(entity_type, key)
    translate_client_error(error)


def translate_client_error(error: ClientError) -> NoReturn:
    """Map store-reported schema violations to validation errors, re-raise the rest."""
    if error_code(error) == VALIDATION_EXCEPTION:
        message = error.response.get("Error", {}).get("Message", "Invalid item")
        logger.warning(f"Store rejected item: {message}")
        raise ValidationError("item", message)
    logger.error(f"Unexpected DynamoDB error: {error_code(error) or error}")
    raise error
