"""Data models for the Druid cluster registry.

All models follow these conventions:
- Field names: lowercase snake_case, camelCase aliases accepted on input
- Enums: uppercase SNAKE_CASE
"""

# Base
from .base import RegistryBaseModel

# Cluster descriptor
from .cluster import (
    CONSTRUCTOR_FIELDS,
    DruidCluster,
    DruidClusterUpdate,
    broker_key,
    is_allowed_broker,
)

# Common types
from .common import ClusterHealth

__all__ = [
    # Base
    "RegistryBaseModel",
    # Common
    "ClusterHealth",
    # Cluster
    "CONSTRUCTOR_FIELDS",
    "DruidCluster",
    "DruidClusterUpdate",
    "broker_key",
    "is_allowed_broker",
]
