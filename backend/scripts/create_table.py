"""
Create the DynamoDB table with its secondary indexes.

Safe to run repeatedly: an existing table is reported and left untouched.
Run with: python -m scripts.create_table [--no-wait]

Reads AWS_REGION, AWS_ENDPOINT_URL and DYNAMODB_TABLE_NAME from the
environment (or .env); point AWS_ENDPOINT_URL at DynamoDB Local for
development.
"""

import argparse
import logging

from codehub.config import get_settings
from codehub.core.logging import setup_logging
from codehub.database.dynamodb import create_table, describe_table

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the CodeHub DynamoDB table")
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Return right after CreateTable instead of waiting for ACTIVE",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)
    config = settings.table_config()

    target = config.endpoint_url or config.region_name
    logger.info(f"Creating table '{config.table_name}' at {target}")

    created = create_table(config, wait=not args.no_wait)
    if not created:
        logger.info(f"Table '{config.table_name}' already exists")

    description = describe_table(config)
    if description:
        indexes = [index["IndexName"] for index in description.get("GlobalSecondaryIndexes", [])]
        logger.info(f"   Status: {description['TableStatus']}")
        logger.info(f"   Indexes: {', '.join(sorted(indexes))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
