"""Application configuration using Pydantic Settings."""

from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store settings loaded from ``OTAKU_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OTAKU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "otaku-store"
    app_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"

    # Storage
    storage_backend: Literal["memory", "dynamodb"] = "memory"
    session_key: str = "otaku_user"
    accounts_key: str = "otaku_users"

    # AWS settings for the DynamoDB backend
    aws_region: str = "us-east-1"
    storage_table_name: str = "OtakuStorage"

    # Accounts and sessions
    auth_latency_seconds: float = Field(default=1.0, ge=0)
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Activity
    history_limit: int = Field(default=50, ge=1)
    strict_favorite_removal: bool = False


# Create a singleton instance
settings = Settings()
