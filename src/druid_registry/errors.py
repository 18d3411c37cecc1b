"""Exceptions raised by the registry."""


class RegistryError(Exception):
    """Base class for registry errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidConfigError(RegistryError):
    """Raised when a cluster descriptor fails validation.

    The message is one of a fixed set of strings so that form UIs can map
    it back to the offending field.
    """

    pass
