"""Staged builders for things and channels."""

from .thing_builder import (
    BridgeBuilder,
    ChannelBuilder,
    GenericThingBuilder,
    ThingBuilder,
    create_builder,
)

__all__ = [
    "GenericThingBuilder",
    "ThingBuilder",
    "BridgeBuilder",
    "ChannelBuilder",
    "create_builder",
]
