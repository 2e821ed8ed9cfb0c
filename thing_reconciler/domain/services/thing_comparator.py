"""Domain service comparing two things by content."""

from typing import Optional, Sequence

from thing_reconciler.domain.entities.channel import Channel
from thing_reconciler.domain.entities.errors import InvalidArgumentError
from thing_reconciler.domain.entities.thing import Thing


def _channels_signature(channels: Sequence[Channel]) -> str:
    """Order independent projection of a channel list.

    Each channel becomes ``<uid>#<accepted item type>``; the projections are
    sorted and joined with ``,``.
    """
    projections = [
        f"{channel.uid}#{channel.accepted_item_type}" for channel in channels
    ]
    return ",".join(sorted(projections))


def _differs(a: Optional[object], b: Optional[object]) -> bool:
    # an absent value only matches another absent value
    if a is None:
        return b is not None
    return a != b


def things_equal(a: Thing, b: Thing) -> bool:
    """Indicate whether two things are technically equal.

    Compares the UID, the bridge UID, the configuration and the channel set.
    Label, properties and bridge children are ignored. Channel order is not
    significant.

    Raises:
        InvalidArgumentError: If either argument is ``None``.
    """
    if a is None:
        raise InvalidArgumentError("a")
    if b is None:
        raise InvalidArgumentError("b")

    if a.uid != b.uid:
        return False
    if _differs(a.bridge_uid, b.bridge_uid):
        return False
    if _differs(a.configuration, b.configuration):
        return False
    if len(a.channels) != len(b.channels):
        return False
    return _channels_signature(a.channels) == _channels_signature(b.channels)
