"""
Runtime configuration using Pydantic settings.

These settings come from the process environment (and an optional
.env file), not from the action's inputs. They select the execution
profile and carry the ambient AWS credentials used by local runs.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOCAL_PROFILE = "local"


class Settings(BaseSettings):
    """
    Runtime settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    app_env: str = Field(
        default="",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
        description="Execution profile. 'local' uses fixed inputs; anything else reads workflow inputs."
    )

    # Ambient AWS configuration (local profile)
    aws_access_key_id: str = Field(
        default="",
        description="AWS access key ID used by the local profile"
    )
    aws_secret_access_key: str = Field(
        default="",
        description="AWS secret access key used by the local profile"
    )
    aws_bucket: str = Field(
        default="",
        description="Bucket used by the local profile"
    )
    aws_endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom S3 endpoint (e.g. a local S3-compatible server)"
    )

    storage_mock_mode: bool = Field(
        default=False,
        description="Use the in-memory storage client instead of S3."
    )

    # GitHub Actions runner
    github_output: Optional[str] = Field(
        default=None,
        description="Path of the step output file provided by the runner"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_local(self) -> bool:
        return self.app_env.strip().lower() == LOCAL_PROFILE


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    For tests, call get_settings.cache_clear() to reset.
    """
    return Settings()
