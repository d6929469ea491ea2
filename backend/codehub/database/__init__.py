"""DynamoDB access: table management, transactions, error translation, paging."""

from .dynamodb import (
    create_resource,
    create_table,
    describe_table,
    get_table,
    get_table_definition,
    start_key_attributes,
)
from .error_translator import (
    FailureTarget,
    translate_client_error,
    translate_transaction_failure,
    translate_update_error,
)
from .pagination import Page, decode_page_token, encode_page_token
from .transactions import ConditionalPut, ConditionCheck, TransactionalWriter, TransactionOutcome

__all__ = [
    "create_resource",
    "create_table",
    "describe_table",
    "get_table",
    "get_table_definition",
    "start_key_attributes",
    "FailureTarget",
    "translate_client_error",
    "translate_transaction_failure",
    "translate_update_error",
    "Page",
    "decode_page_token",
    "encode_page_token",
    "ConditionalPut",
    "ConditionCheck",
    "TransactionalWriter",
    "TransactionOutcome",
]
