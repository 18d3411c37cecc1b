"""Configuration management with Pydantic Settings.

Environment variables are loaded from:
1. Environment variables (highest priority)
2. .env file (development)
3. Defaults (lowest priority)
"""

import json
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


def parse_broker_list(value: Any) -> frozenset[str]:
    """Normalize an allow-list into a frozenset of ``host:port`` strings.

    Accepts a JSON list, a comma-separated string, or a list, tuple or set
    of strings. Entries are trimmed and blanks dropped.

    Raises:
        ValueError: If the value or one of its entries is not a string
    """
    if isinstance(value, str):
        raw = value.strip()
        if raw.startswith(("[", "{")):
            value = json.loads(raw)
            if not isinstance(value, list):
                raise ValueError("allowed brokers JSON must be a list")
        else:
            value = raw.split(",")
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValueError(
            f"allowed brokers must be a list or comma-separated string, got {value!r}"
        )
    for item in value:
        if not isinstance(item, str):
            raise ValueError(
                f"allowed broker entries must be 'host:port' strings, got {item!r}"
            )
    return frozenset(item.strip() for item in value if item.strip())


class DruidSettings(BaseSettings):
    """Druid broker configuration.

    The allow-list is read once at process start and never mutated
    afterwards. Accepts either a JSON list or a comma-separated string:

        DRUID_ALLOWED_BROKERS='["broker1.example.com:8082"]'
        DRUID_ALLOWED_BROKERS=broker1.example.com:8082,broker2.example.com:8082
    """

    model_config = SettingsConfigDict(env_prefix="DRUID_")

    allowed_brokers: Annotated[frozenset[str], NoDecode] = Field(
        default_factory=frozenset,
        description="Permitted broker host:port pairs",
    )
    status_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for the broker reachability check",
    )

    @field_validator("allowed_brokers", mode="before")
    @classmethod
    def parse_allowed_brokers(cls, v: Any) -> frozenset[str]:
        """Split comma-separated values and drop blank entries."""
        return parse_broker_list(v)


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    For nested settings, use the appropriate prefix (e.g., DRUID_ALLOWED_BROKERS).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="druid-registry", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        alias="ENV",
        description="Deployment environment",
    )

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.JSON, description="Logging format")

    # Nested settings
    druid: DruidSettings = Field(default_factory=DruidSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment variables.
    """
    return Settings()
