"""Services that talk to the outside world."""

from .health import is_broker_reachable

__all__ = ["is_broker_reachable"]
