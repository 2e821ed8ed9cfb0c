"""
Domain Errors

This module defines the error taxonomy raised while building, comparing and
merging Things.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(DomainError):
    """Raised when a required argument is missing."""

    def __init__(self, argument: str, details: Optional[Dict[str, Any]] = None):
        message = f"Argument '{argument}' must not be None"
        super().__init__(message, {"argument": argument, **(details or {})})


class MalformedReferenceError(DomainError):
    """Raised when an identifier string cannot be parsed into a UID."""

    def __init__(
        self, value: Any, reason: str, details: Optional[Dict[str, Any]] = None
    ):
        message = f"Malformed UID '{value}': {reason}"
        super().__init__(
            message, {"value": value, "reason": reason, **(details or {})}
        )


class IncompleteDescriptorError(DomainError):
    """Raised when a builder is completed without its required identity fields."""

    def __init__(self, missing: List[str], details: Optional[Dict[str, Any]] = None):
        message = f"Cannot build thing, missing required fields: {', '.join(missing)}"
        super().__init__(message, {"missing": missing, **(details or {})})


class DuplicateChannelError(DomainError):
    """Raised when a channel UID is registered twice on the same thing."""

    def __init__(self, channel_uid: Any, details: Optional[Dict[str, Any]] = None):
        message = f"Channel '{channel_uid}' already exists"
        super().__init__(
            message, {"channel_uid": str(channel_uid), **(details or {})}
        )


class InvalidConfigurationValueError(DomainError):
    """Raised when a configuration value has an unsupported type."""

    def __init__(
        self, key: str, value: Any, details: Optional[Dict[str, Any]] = None
    ):
        message = (
            f"Invalid type '{type(value).__name__}' of configuration value "
            f"for key '{key}'"
        )
        super().__init__(message, {"key": key, **(details or {})})
