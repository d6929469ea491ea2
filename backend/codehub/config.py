"""
Application configuration
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class TableConfig(BaseModel):
    """Immutable description of the single table every repository talks to."""

    model_config = ConfigDict(frozen=True)

    table_name: str = "GitHubTable"
    region_name: str = "us-east-1"
    endpoint_url: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None

    # Global secondary indexes
    issue_pr_index: str = "GSI1"
    fork_index: str = "GSI2"
    account_repo_index: str = "GSI3"
    status_index: str = "GSI4"

    @property
    def index_names(self) -> tuple:
        return (
            self.issue_pr_index,
            self.fork_index,
            self.account_repo_index,
            self.status_index,
        )


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "CodeHub Store"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "test", "production"] = "development"

    # AWS / DynamoDB
    AWS_REGION: str = "us-east-1"
    AWS_ENDPOINT_URL: Optional[str] = None  # DynamoDB Local for development
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    DYNAMODB_TABLE_NAME: str = "GitHubTable"

    # Logging
    LOG_FORMAT: Literal["text", "json"] = "text"
    LOG_LEVEL: str = "INFO"

    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    def is_test(self) -> bool:
        return self.APP_ENV == "test"

    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def table_config(self) -> TableConfig:
        """Build the table configuration value handed to the repository factory."""
        return TableConfig(
            table_name=self.DYNAMODB_TABLE_NAME,
            region_name=self.AWS_REGION,
            endpoint_url=self.AWS_ENDPOINT_URL,
            aws_access_key_id=self.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=self.AWS_SECRET_ACCESS_KEY,
        )


def get_settings() -> Settings:
    """Load settings from the environment. Each call reads the environment anew."""
    return Settings()
