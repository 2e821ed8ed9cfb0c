"""
Domain Entities Package

Things, channels, UIDs, configuration and the domain error taxonomy.
"""

from .channel import Channel, ChannelKind
from .configuration import Configuration, normalize_value
from .errors import (
    DomainError,
    DuplicateChannelError,
    IncompleteDescriptorError,
    InvalidArgumentError,
    InvalidConfigurationValueError,
    MalformedReferenceError,
)
from .thing import Bridge, Thing, ThingKind
from .uid import AbstractUID, ChannelUID, ThingTypeUID, ThingUID

__all__ = [
    "AbstractUID",
    "ThingTypeUID",
    "ThingUID",
    "ChannelUID",
    "Configuration",
    "normalize_value",
    "Channel",
    "ChannelKind",
    "Thing",
    "Bridge",
    "ThingKind",
    "DomainError",
    "InvalidArgumentError",
    "MalformedReferenceError",
    "IncompleteDescriptorError",
    "DuplicateChannelError",
    "InvalidConfigurationValueError",
]
