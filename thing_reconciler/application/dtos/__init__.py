"""
DTOs Package - Application Layer

Partial thing and channel representations plus their mappers.
"""

from .mappers import to_channel, to_channel_dto, to_thing_dto
from .thing_dto import ChannelDTO, ThingDTO

__all__ = [
    "ChannelDTO",
    "ThingDTO",
    "to_channel",
    "to_channel_dto",
    "to_thing_dto",
]
