"""
DynamoDB connection and table helpers.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import boto3
from botocore.exceptions import ClientError

from codehub.config import TableConfig
from codehub.keys import GSI1PK, GSI1SK, GSI2PK, GSI2SK, GSI3PK, GSI3SK, GSI4PK, GSI4SK, PK, SK

logger = logging.getLogger(__name__)


def create_resource(config: TableConfig):
    """Create a boto3 DynamoDB resource for the configured region/endpoint."""
    kwargs: Dict[str, Any] = {"region_name": config.region_name}
    if config.endpoint_url:
        kwargs["endpoint_url"] = config.endpoint_url
    if config.aws_access_key_id and config.aws_secret_access_key:
        kwargs["aws_access_key_id"] = config.aws_access_key_id
        kwargs["aws_secret_access_key"] = config.aws_secret_access_key
    return boto3.resource("dynamodb", **kwargs)


def get_table(config: TableConfig, resource=None):
    resource = resource or create_resource(config)
    return resource.Table(config.table_name)


def index_key_schema(config: TableConfig) -> Tuple[Tuple[str, str, str], ...]:
    """(index name, partition key attribute, sort key attribute) per secondary index."""
    return (
        (config.issue_pr_index, GSI1PK, GSI1SK),
        (config.fork_index, GSI2PK, GSI2SK),
        (config.account_repo_index, GSI3PK, GSI3SK),
        (config.status_index, GSI4PK, GSI4SK),
    )


def start_key_attributes(config: TableConfig, index_name: Optional[str] = None) -> Tuple[str, ...]:
    """Attributes of a LastEvaluatedKey returned by a query on the table or one of its indexes."""
    if not index_name:
        return (PK, SK)
    for name, pk, sk in index_key_schema(config):
        if name == index_name:
            return (PK, SK, pk, sk)
    raise ValueError(f"Unknown index: {index_name}")


def get_table_definition(config: TableConfig) -> Dict[str, Any]:
    """
    Get the DynamoDB table definition for CreateTable.

    Returns a dictionary suitable for boto3 create_table().
    """
    index_keys = index_key_schema(config)
    attributes = [PK, SK] + [name for _, pk, sk in index_keys for name in (pk, sk)]
    return {
        "TableName": config.table_name,
        "BillingMode": "PAY_PER_REQUEST",
        "AttributeDefinitions": [
            {"AttributeName": name, "AttributeType": "S"} for name in attributes
        ],
        "KeySchema": [
            {"AttributeName": PK, "KeyType": "HASH"},
            {"AttributeName": SK, "KeyType": "RANGE"},
        ],
        "GlobalSecondaryIndexes": [
            {
                "IndexName": index_name,
                "KeySchema": [
                    {"AttributeName": pk, "KeyType": "HASH"},
                    {"AttributeName": sk, "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            }
            for index_name, pk, sk in index_keys
        ],
    }


def create_table(config: TableConfig, resource=None, wait: bool = True) -> bool:
    """
    Create the table if it does not exist yet.

    Returns True when the table was created, False when it already existed.
    """
    resource = resource or create_resource(config)
    try:
        table = resource.create_table(**get_table_definition(config))
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            logger.info(f"Table '{config.table_name}' already exists, skipping creation")
            return False
        raise

    if wait:
        table.wait_until_exists()
    logger.info(f"Created table '{config.table_name}'")
    return True


def describe_table(config: TableConfig, resource=None) -> Optional[Dict[str, Any]]:
    resource = resource or create_resource(config)
    try:
        return resource.meta.client.describe_table(TableName=config.table_name)["Table"]
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceNotFoundException":
            return None
        raise
