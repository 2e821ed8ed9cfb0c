"""
Shared module - Cross-cutting concerns / Shared Layer

Enums and logging helpers used by every other layer. It must not depend on
the domain, application or main layers.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import (
    bound_thing_context,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "bound_thing_context",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
