"""Druid Cluster Registry.

Connection descriptors for Druid brokers and the checks applied to them:
- models: Pydantic descriptor models
- services: broker reachability check
- config: Configuration management
- observability: Structured logging
- errors: Validation error types

Logging goes through structlog. Call
``druid_registry.observability.setup_logging()`` once at process start;
until then structlog's default console renderer prints every event,
debug lines included, to stdout.
"""

__version__ = "0.1.0"
