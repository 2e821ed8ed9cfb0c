"""
Domain Entities - UIDs

Identifiers for thing types, things and channels. A UID is a sequence of
``:``-separated segments; each UID kind fixes how many segments it needs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .errors import MalformedReferenceError

SEPARATOR = ":"

_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]*")
_CHANNEL_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]*(#[A-Za-z0-9_-]*)?")


@dataclass(frozen=True)
class AbstractUID:
    """Base class for segment based identifiers."""

    segments: Tuple[str, ...]

    MIN_SEGMENTS: ClassVar[int] = 1
    MAX_SEGMENTS: ClassVar[Optional[int]] = None

    def __post_init__(self) -> None:
        if isinstance(self.segments, str):
            raise MalformedReferenceError(
                self.segments, "segments must be a sequence, use parse() for strings"
            )
        object.__setattr__(self, "segments", tuple(self.segments))
        count = len(self.segments)
        if count < self.MIN_SEGMENTS:
            raise MalformedReferenceError(
                SEPARATOR.join(self.segments),
                f"{type(self).__name__} must have at least "
                f"{self.MIN_SEGMENTS} segments",
            )
        if self.MAX_SEGMENTS is not None and count > self.MAX_SEGMENTS:
            raise MalformedReferenceError(
                SEPARATOR.join(self.segments),
                f"{type(self).__name__} must have at most "
                f"{self.MAX_SEGMENTS} segments",
            )
        for index, segment in enumerate(self.segments):
            if not self._segment_pattern(index).fullmatch(segment):
                raise MalformedReferenceError(
                    SEPARATOR.join(self.segments),
                    f"segment '{segment}' contains invalid characters",
                )

    def _segment_pattern(self, index: int) -> re.Pattern[str]:
        return _SEGMENT_PATTERN

    @classmethod
    def parse(cls, value: str):
        """Parse ``value`` into a UID of this kind.

        Raises:
            MalformedReferenceError: If ``value`` is not a string or does not
                have a valid segment structure.
        """
        if not isinstance(value, str) or not value:
            raise MalformedReferenceError(value, "UID must be a non-empty string")
        return cls(tuple(value.split(SEPARATOR)))

    @property
    def binding_id(self) -> str:
        return self.segments[0]

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)


@dataclass(frozen=True)
class ThingTypeUID(AbstractUID):
    """``binding:type``"""

    MIN_SEGMENTS: ClassVar[int] = 2
    MAX_SEGMENTS: ClassVar[Optional[int]] = 2

    @classmethod
    def of(cls, binding_id: str, thing_type_id: str) -> "ThingTypeUID":
        return cls((binding_id, thing_type_id))

    @property
    def id(self) -> str:
        return self.segments[1]


@dataclass(frozen=True)
class ThingUID(AbstractUID):
    """``binding:type:[bridge ids...]:id``"""

    MIN_SEGMENTS: ClassVar[int] = 3

    @classmethod
    def of(
        cls,
        thing_type_uid: ThingTypeUID,
        thing_id: str,
        bridge_uid: Optional["ThingUID"] = None,
    ) -> "ThingUID":
        """Build a thing UID, nesting it under ``bridge_uid`` when given."""
        bridge_ids: Tuple[str, ...] = ()
        if bridge_uid is not None:
            bridge_ids = bridge_uid.bridge_ids + (bridge_uid.id,)
        return cls(thing_type_uid.segments + bridge_ids + (thing_id,))

    @property
    def thing_type_id(self) -> str:
        return self.segments[1]

    @property
    def bridge_ids(self) -> Tuple[str, ...]:
        return self.segments[2:-1]

    @property
    def id(self) -> str:
        return self.segments[-1]


@dataclass(frozen=True)
class ChannelUID(AbstractUID):
    """``<thing uid>:[group#]channel``"""

    MIN_SEGMENTS: ClassVar[int] = 4

    def _segment_pattern(self, index: int) -> re.Pattern[str]:
        if index == len(self.segments) - 1:
            return _CHANNEL_ID_PATTERN
        return _SEGMENT_PATTERN

    @classmethod
    def of(cls, thing_uid: ThingUID, channel_id: str) -> "ChannelUID":
        return cls(thing_uid.segments + (channel_id,))

    @property
    def id(self) -> str:
        return self.segments[-1]

    @property
    def thing_uid(self) -> ThingUID:
        return ThingUID(self.segments[:-1])

    @property
    def group_id(self) -> Optional[str]:
        group, sep, _ = self.id.partition("#")
        return group if sep else None

    @property
    def id_without_group(self) -> str:
        return self.id.partition("#")[2] or self.id
