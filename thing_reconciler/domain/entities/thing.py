"""
Domain Entities - Thing

A Thing describes a managed device or service instance. Things are frozen
once built; the only post-construction operation is attaching children to a
Bridge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from .channel import Channel
from .configuration import Configuration
from .uid import ChannelUID, ThingTypeUID, ThingUID


class ThingKind(str, Enum):
    """Variant tag of a thing."""

    THING = "thing"
    BRIDGE = "bridge"


@dataclass(frozen=True, eq=False)
class Thing:
    """Represents a managed device or service instance.

    ``==`` compares UIDs only, i.e. whether two objects describe the same
    managed entity. Use ``things_equal`` for a content comparison.
    """

    uid: ThingUID
    thing_type_uid: ThingTypeUID
    bridge_uid: Optional[ThingUID] = None
    label: Optional[str] = None
    configuration: Optional[Configuration] = None
    properties: Mapping[str, str] = field(default_factory=dict)
    channels: Tuple[Channel, ...] = ()
    kind: ThingKind = field(default=ThingKind.THING, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "channels", tuple(self.channels))
        object.__setattr__(
            self, "properties", MappingProxyType(dict(self.properties))
        )

    @property
    def is_bridge(self) -> bool:
        return self.kind is ThingKind.BRIDGE

    def get_channel(self, channel_id: str) -> Optional[Channel]:
        """Return the channel whose id (last UID segment) is ``channel_id``."""
        for channel in self.channels:
            if channel.uid.id == channel_id:
                return channel
        return None

    def get_channel_by_uid(self, channel_uid: ChannelUID) -> Optional[Channel]:
        for channel in self.channels:
            if channel.uid == channel_uid:
                return channel
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Thing):
            return NotImplemented
        return self.uid == other.uid

    def __hash__(self) -> int:
        return hash(self.uid)


@dataclass(frozen=True, eq=False)
class Bridge(Thing):
    """A thing that other things are attached to."""

    kind: ThingKind = field(default=ThingKind.BRIDGE, init=False)
    _things: List[Thing] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def things(self) -> Tuple[Thing, ...]:
        """Children in attachment order."""
        return tuple(self._things)

    def add_thing(self, thing: Thing) -> None:
        """Attach ``thing`` as a child of this bridge.

        No deduplication is done and the child's own ``bridge_uid`` is not
        checked against this bridge.
        """
        self._things.append(thing)

    def get_thing(self, thing_uid: ThingUID) -> Optional[Thing]:
        for thing in self._things:
            if thing.uid == thing_uid:
                return thing
        return None
