"""
Domain Builders - Things and Channels

Staged construction of immutable Things and Channels. The builder variant
(plain thing or bridge) is fixed when the builder is created.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, Union

from thing_reconciler.domain.entities.channel import Channel, ChannelKind
from thing_reconciler.domain.entities.configuration import Configuration
from thing_reconciler.domain.entities.errors import (
    DuplicateChannelError,
    IncompleteDescriptorError,
)
from thing_reconciler.domain.entities.thing import Bridge, Thing, ThingKind
from thing_reconciler.domain.entities.uid import ChannelUID, ThingTypeUID, ThingUID


class GenericThingBuilder:
    """Accumulates thing fields and validates them on ``build``."""

    thing_class: Type[Thing] = Thing

    def __init__(
        self,
        thing_type_uid: Optional[ThingTypeUID],
        thing_uid: Optional[ThingUID],
    ):
        self._thing_type_uid = thing_type_uid
        self._thing_uid = thing_uid
        self._label: Optional[str] = None
        self._bridge_uid: Optional[ThingUID] = None
        self._configuration: Optional[Configuration] = None
        self._properties: Dict[str, str] = {}
        self._channels: List[Channel] = []

    @classmethod
    def create(
        cls,
        thing_type_uid: Optional[ThingTypeUID],
        thing_uid: Union[ThingUID, str, None],
    ):
        """Start a builder.

        ``thing_uid`` may be a full ``ThingUID`` or a bare thing id, in which
        case the UID is derived from ``thing_type_uid``.
        """
        if isinstance(thing_uid, str) and thing_type_uid is not None:
            thing_uid = ThingUID.of(thing_type_uid, thing_uid)
        return cls(thing_type_uid, thing_uid)

    @property
    def kind(self) -> ThingKind:
        return self.thing_class.kind

    def with_label(self, label: Optional[str]):
        self._label = label
        return self

    def with_bridge(self, bridge_uid: Optional[ThingUID]):
        self._bridge_uid = bridge_uid
        return self

    def with_configuration(self, configuration: Optional[Configuration]):
        self._configuration = configuration
        return self

    def with_properties(self, properties: Optional[Mapping[str, str]]):
        self._properties = dict(properties or {})
        return self

    def with_channel(self, channel: Channel):
        """Add ``channel``.

        Raises:
            DuplicateChannelError: If a channel with the same UID was added.
        """
        if any(existing.uid == channel.uid for existing in self._channels):
            raise DuplicateChannelError(
                channel.uid, {"thing_uid": str(self._thing_uid)}
            )
        self._channels.append(channel)
        return self

    def with_channels(self, channels: Iterable[Channel]):
        for channel in channels:
            self.with_channel(channel)
        return self

    def without_channel(self, channel_uid: ChannelUID):
        self._channels = [c for c in self._channels if c.uid != channel_uid]
        return self

    def build(self) -> Thing:
        """Validate the accumulated state and return a new thing.

        Raises:
            IncompleteDescriptorError: If the thing UID or thing type UID is
                missing.
        """
        missing = []
        if self._thing_uid is None:
            missing.append("uid")
        if self._thing_type_uid is None:
            missing.append("thing_type_uid")
        if missing:
            raise IncompleteDescriptorError(missing)

        return self.thing_class(
            uid=self._thing_uid,
            thing_type_uid=self._thing_type_uid,
            bridge_uid=self._bridge_uid,
            label=self._label,
            configuration=self._configuration,
            properties=self._properties,
            channels=tuple(self._channels),
        )


class ThingBuilder(GenericThingBuilder):
    """Builder for plain things."""

    thing_class = Thing


class BridgeBuilder(GenericThingBuilder):
    """Builder for bridges."""

    thing_class = Bridge


_BUILDERS: Dict[ThingKind, Type[GenericThingBuilder]] = {
    ThingKind.THING: ThingBuilder,
    ThingKind.BRIDGE: BridgeBuilder,
}


def create_builder(
    kind: ThingKind,
    thing_type_uid: Optional[ThingTypeUID],
    thing_uid: Union[ThingUID, str, None],
) -> GenericThingBuilder:
    """Return the builder variant matching ``kind``."""
    return _BUILDERS[kind].create(thing_type_uid, thing_uid)


class ChannelBuilder:
    """Accumulates channel fields."""

    def __init__(self, channel_uid: ChannelUID, accepted_item_type: Optional[str]):
        self._uid = channel_uid
        self._accepted_item_type = accepted_item_type
        self._kind = ChannelKind.STATE
        self._channel_type_uid: Optional[str] = None
        self._label: Optional[str] = None
        self._description: Optional[str] = None
        self._default_tags: frozenset = frozenset()
        self._properties: Dict[str, str] = {}
        self._configuration = Configuration()

    @classmethod
    def create(
        cls, channel_uid: ChannelUID, accepted_item_type: Optional[str] = None
    ) -> "ChannelBuilder":
        return cls(channel_uid, accepted_item_type)

    def with_kind(self, kind: Union[ChannelKind, str, None]) -> "ChannelBuilder":
        if kind is not None:
            self._kind = ChannelKind(kind)
        return self

    def with_type(self, channel_type_uid: Optional[str]) -> "ChannelBuilder":
        self._channel_type_uid = channel_type_uid
        return self

    def with_label(self, label: Optional[str]) -> "ChannelBuilder":
        self._label = label
        return self

    def with_description(self, description: Optional[str]) -> "ChannelBuilder":
        self._description = description
        return self

    def with_default_tags(self, tags: Optional[Iterable[str]]) -> "ChannelBuilder":
        self._default_tags = frozenset(tags or ())
        return self

    def with_properties(
        self, properties: Optional[Mapping[str, str]]
    ) -> "ChannelBuilder":
        self._properties = dict(properties or {})
        return self

    def with_configuration(
        self, configuration: Optional[Mapping[str, Any]]
    ) -> "ChannelBuilder":
        self._configuration = Configuration(configuration)
        return self

    def build(self) -> Channel:
        return Channel(
            uid=self._uid,
            accepted_item_type=self._accepted_item_type,
            kind=self._kind,
            channel_type_uid=self._channel_type_uid,
            label=self._label,
            description=self._description,
            default_tags=self._default_tags,
            properties=self._properties,
            configuration=self._configuration,
        )
