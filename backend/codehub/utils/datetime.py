import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(dt_value: datetime) -> str:
    """
    Format a datetime as fixed-width ISO-8601 UTC with millisecond precision.

    Fixed width keeps lexicographic order equal to chronological order, which
    the account repository index relies on.
    """
    if dt_value.tzinfo is None:
        dt_value = dt_value.replace(tzinfo=timezone.utc)
    return dt_value.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def parse_datetime(dt_value) -> datetime | None:
    """
    Parse a stored timestamp to an aware UTC datetime.

    Handles:
    - ISO string with timezone (e.g., "2024-01-01T00:00:00Z")
    - datetime object with or without timezone (naive values are taken as UTC)
    - None or invalid -> None
    """
    if dt_value is None:
        return None

    if isinstance(dt_value, str):
        try:
            dt = datetime.fromisoformat(dt_value.replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Failed to parse datetime string: {dt_value}")
            return None
        return ensure_utc(dt)

    if isinstance(dt_value, datetime):
        return ensure_utc(dt_value)

    logger.warning(f"Unexpected datetime type: {type(dt_value)}")
    return None


def ensure_utc(dt_value: datetime) -> datetime:
    if dt_value.tzinfo is None:
        return dt_value.replace(tzinfo=timezone.utc)
    return dt_value.astimezone(timezone.utc)
