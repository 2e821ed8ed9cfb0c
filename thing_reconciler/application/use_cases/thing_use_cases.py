"""
Thing Use Cases - Application Layer

This module defines the use cases that reconcile things with updates:
merging a partial DTO into an existing thing, comparing two things and
appending channels. All of them are synchronous and stateless; every result
is a new thing instance.
"""

from typing import Callable, Iterable, cast

from dependency_injector.wiring import Provide, inject

from thing_reconciler.application.dtos.mappers import to_channel
from thing_reconciler.application.dtos.thing_dto import ChannelDTO, ThingDTO
from thing_reconciler.domain.builders.thing_builder import create_builder
from thing_reconciler.domain.entities.channel import Channel
from thing_reconciler.domain.entities.configuration import Configuration
from thing_reconciler.domain.entities.errors import DomainError, InvalidArgumentError
from thing_reconciler.domain.entities.thing import Bridge, Thing
from thing_reconciler.domain.entities.uid import ThingUID
from thing_reconciler.domain.services.thing_comparator import things_equal
from thing_reconciler.shared import bound_thing_context, get_logger

logger = get_logger(__name__)

ChannelMapper = Callable[[ChannelDTO], Channel]


def _keep_children(source: Thing, target: Thing) -> Thing:
    """Attach the children of ``source`` to ``target`` when both are bridges."""
    if source.is_bridge and target.is_bridge:
        new_bridge = cast(Bridge, target)
        for child in cast(Bridge, source).things:
            new_bridge.add_thing(child)
    return target


class MergeThingUseCase:
    """Use case for merging a ThingDTO into an existing thing."""

    @inject
    def __init__(
        self,
        channel_mapper: ChannelMapper = Provide["channel_mapper"],
        log_field_changes: bool = Provide["config.merge.log_field_changes"],
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            channel_mapper: Converts one ChannelDTO into a Channel
            log_field_changes: Emit a debug event per merged field
        """
        self._channel_mapper = channel_mapper
        self._log_field_changes = log_field_changes

    def execute(self, thing: Thing, updated_contents: ThingDTO) -> Thing:
        """
        Merge ``updated_contents`` into ``thing``.

        Where the DTO holds ``None`` the value of ``thing`` is kept, otherwise
        the DTO value is used. Configuration, properties and channels are
        replaced as a whole, so the DTO must carry the full collection. An
        empty configuration mapping keeps the existing configuration while an
        empty properties mapping clears the properties.

        Args:
            thing: The thing to merge the new content into
            updated_contents: DTO carrying the updated content

        Returns:
            Thing: A new thing of the same kind; a bridge keeps its children

        Raises:
            InvalidArgumentError: If an argument is None
            MalformedReferenceError: If a UID in the DTO cannot be parsed
            IncompleteDescriptorError: If the resulting thing lacks its UIDs
            DuplicateChannelError: If the update lists the same channel UID
                twice; channel UIDs are unique within a thing
        """
        if thing is None:
            raise InvalidArgumentError("thing")
        if updated_contents is None:
            raise InvalidArgumentError("updated_contents")

        with bound_thing_context(thing.uid):
            logger.info("things.merge_started", kind=thing.kind.value)
            try:
                merged = _keep_children(thing, self._merge(thing, updated_contents))
            except DomainError as e:
                logger.error(
                    "things.merge_failed",
                    error=e.message,
                    details=e.details,
                    exc_info=e,
                )
                raise

            logger.info(
                "things.merge_completed",
                kind=merged.kind.value,
                channel_count=len(merged.channels),
                child_count=len(cast(Bridge, merged).things) if merged.is_bridge else 0,
            )
            return merged

    def _merge(self, thing: Thing, updated_contents: ThingDTO) -> Thing:
        builder = create_builder(thing.kind, thing.thing_type_uid, thing.uid)

        if updated_contents.label is not None:
            builder.with_label(updated_contents.label)
        else:
            builder.with_label(thing.label)
        self._field_merged("label", updated_contents.label is not None)

        if updated_contents.bridge_uid is not None:
            builder.with_bridge(ThingUID.parse(updated_contents.bridge_uid))
        else:
            builder.with_bridge(thing.bridge_uid)
        self._field_merged("bridge_uid", updated_contents.bridge_uid is not None)

        if updated_contents.configuration:
            builder.with_configuration(Configuration(updated_contents.configuration))
        else:
            builder.with_configuration(thing.configuration)
        self._field_merged("configuration", bool(updated_contents.configuration))

        if updated_contents.properties is not None:
            builder.with_properties(updated_contents.properties)
        else:
            builder.with_properties(thing.properties)
        self._field_merged("properties", updated_contents.properties is not None)

        if updated_contents.channels is not None:
            builder.with_channels(
                self._channel_mapper(channel_dto)
                for channel_dto in updated_contents.channels
            )
        else:
            builder.with_channels(thing.channels)
        self._field_merged("channels", updated_contents.channels is not None)

        return builder.build()

    def _field_merged(self, field_name: str, from_update: bool) -> None:
        if self._log_field_changes:
            logger.debug(
                "things.merge_field",
                field=field_name,
                source="update" if from_update else "existing",
            )


class CompareThingsUseCase:
    """Use case for checking whether two things are technically equal."""

    def execute(self, a: Thing, b: Thing) -> bool:
        equal = things_equal(a, b)
        logger.debug("things.compared", a=str(a.uid), b=str(b.uid), equal=equal)
        return equal


class AddChannelsUseCase:
    """Use case for appending channels to a thing."""

    def execute(self, thing: Thing, channels: Iterable[Channel]) -> Thing:
        """
        Return a copy of ``thing`` with ``channels`` appended.

        Raises:
            InvalidArgumentError: If ``thing`` is None
            DuplicateChannelError: If a channel UID is already present
        """
        if thing is None:
            raise InvalidArgumentError("thing")

        with bound_thing_context(thing.uid):
            new_channels = list(channels)
            builder = (
                create_builder(thing.kind, thing.thing_type_uid, thing.uid)
                .with_label(thing.label)
                .with_bridge(thing.bridge_uid)
                .with_configuration(thing.configuration)
                .with_properties(thing.properties)
                .with_channels(thing.channels)
            )
            try:
                builder.with_channels(new_channels)
            except DomainError as e:
                logger.error("things.add_channels_failed", error=e.message)
                raise

            logger.info("things.channels_added", added=len(new_channels))
            return _keep_children(thing, builder.build())


def merge_thing(
    thing: Thing,
    updated_contents: ThingDTO,
    channel_mapper: ChannelMapper = to_channel,
) -> Thing:
    """Merge ``updated_contents`` into ``thing`` without a container."""
    use_case = MergeThingUseCase(channel_mapper=channel_mapper, log_field_changes=False)
    return use_case.execute(thing, updated_contents)


def add_channels_to_thing(thing: Thing, channels: Iterable[Channel]) -> Thing:
    return AddChannelsUseCase().execute(thing, channels)
