"""Common types used across all models."""

from enum import Enum


class ClusterHealth(str, Enum):
    """Result of a broker reachability check."""

    OK = "OK"
    ERROR = "ERROR"
