"""Domain entities for thing channels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

from .configuration import Configuration
from .uid import ChannelUID


class ChannelKind(str, Enum):
    """Whether a channel carries state or fires trigger events."""

    STATE = "STATE"
    TRIGGER = "TRIGGER"


@dataclass(frozen=True)
class Channel:
    """A named interaction point exposed by a thing."""

    uid: ChannelUID
    accepted_item_type: Optional[str] = None
    kind: ChannelKind = ChannelKind.STATE
    channel_type_uid: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    default_tags: FrozenSet[str] = field(default_factory=frozenset)
    properties: Mapping[str, str] = field(default_factory=dict, hash=False)
    configuration: Configuration = field(default_factory=Configuration)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_tags", frozenset(self.default_tags))
        object.__setattr__(
            self, "properties", MappingProxyType(dict(self.properties))
        )
