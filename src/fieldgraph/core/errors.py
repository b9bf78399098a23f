"""
Custom exceptions for fieldgraph.
"""

from __future__ import annotations



class FieldgraphError(Exception):
    """Base exception for all fieldgraph errors."""
    pass


class ConfigError(FieldgraphError):
    """Raised when the custom field configuration is invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid configuration: {errors}")


class SchemaError(FieldgraphError):
    """Raised when the live schema cannot be built from its SDL sources."""
    pass


class IAMError(FieldgraphError):
    """Raised when a capability check fails."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
