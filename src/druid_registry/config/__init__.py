"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- The broker allow-list and status check timeout
- Cached settings access via get_settings()
"""

from .settings import (
    DruidSettings,
    Environment,
    LogFormat,
    LogLevel,
    Settings,
    get_settings,
    parse_broker_list,
)

__all__ = [
    # Main settings
    "Settings",
    "get_settings",
    "parse_broker_list",
    # Enums
    "Environment",
    "LogLevel",
    "LogFormat",
    # Component settings
    "DruidSettings",
]
