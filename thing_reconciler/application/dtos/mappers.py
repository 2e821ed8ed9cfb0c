"""Conversions between thing/channel DTOs and domain entities."""

from thing_reconciler.application.dtos.thing_dto import ChannelDTO, ThingDTO
from thing_reconciler.domain.builders.thing_builder import ChannelBuilder
from thing_reconciler.domain.entities.channel import Channel
from thing_reconciler.domain.entities.thing import Thing
from thing_reconciler.domain.entities.uid import ChannelUID


def to_channel(channel_dto: ChannelDTO) -> Channel:
    """Build a channel from its DTO.

    Raises:
        MalformedReferenceError: If ``channel_dto.uid`` is not a valid
            channel UID.
    """
    return (
        ChannelBuilder.create(ChannelUID.parse(channel_dto.uid), channel_dto.item_type)
        .with_kind(channel_dto.kind)
        .with_type(channel_dto.channel_type_uid)
        .with_label(channel_dto.label)
        .with_description(channel_dto.description)
        .with_default_tags(channel_dto.default_tags)
        .with_properties(channel_dto.properties)
        .with_configuration(channel_dto.configuration)
        .build()
    )


def to_channel_dto(channel: Channel) -> ChannelDTO:
    return ChannelDTO(
        uid=str(channel.uid),
        id=channel.uid.id,
        channel_type_uid=channel.channel_type_uid,
        item_type=channel.accepted_item_type,
        kind=channel.kind,
        label=channel.label,
        description=channel.description,
        default_tags=sorted(channel.default_tags),
        properties=dict(channel.properties),
        configuration=channel.configuration.as_dict(),
    )


def to_thing_dto(thing: Thing) -> ThingDTO:
    """Full DTO of ``thing``; merging it back yields an equal thing."""
    return ThingDTO(
        thing_type_uid=str(thing.thing_type_uid),
        uid=str(thing.uid),
        label=thing.label,
        bridge_uid=str(thing.bridge_uid) if thing.bridge_uid is not None else None,
        configuration=(
            thing.configuration.as_dict() if thing.configuration is not None else None
        ),
        properties=dict(thing.properties),
        channels=[to_channel_dto(channel) for channel in thing.channels],
    )
