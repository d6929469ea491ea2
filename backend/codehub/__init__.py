"""Single-table DynamoDB storage layer for a code hosting domain."""

from .config import Settings, TableConfig, get_settings
from .factory import RepositoryFactory

__all__ = ["Settings", "TableConfig", "get_settings", "RepositoryFactory"]
