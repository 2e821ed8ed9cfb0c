from __future__ import annotations

import pytest

from thing_reconciler.domain.entities.errors import MalformedReferenceError
from thing_reconciler.domain.entities.uid import ChannelUID, ThingTypeUID, ThingUID


def test_thing_uid_parse_exposes_segments() -> None:
    uid = ThingUID.parse("hue:0210:bridge1:bulb1")

    assert uid.binding_id == "hue"
    assert uid.thing_type_id == "0210"
    assert uid.bridge_ids == ("bridge1",)
    assert uid.id == "bulb1"
    assert str(uid) == "hue:0210:bridge1:bulb1"


def test_thing_uid_of_nests_under_bridge() -> None:
    bridge_uid = ThingUID.parse("hue:bridge:bridge1")
    uid = ThingUID.of(ThingTypeUID.of("hue", "0210"), "bulb1", bridge_uid=bridge_uid)

    assert uid == ThingUID.parse("hue:0210:bridge1:bulb1")
    assert hash(uid) == hash(ThingUID.parse("hue:0210:bridge1:bulb1"))


@pytest.mark.parametrize(
    "value",
    ["", "hue:bulb", "hue:0210:bulb 1", "hue:0210:bulb/1", None, 42],
)
def test_thing_uid_parse_rejects_malformed_values(value) -> None:
    with pytest.raises(MalformedReferenceError):
        ThingUID.parse(value)


def test_thing_type_uid_requires_exactly_two_segments() -> None:
    assert ThingTypeUID.parse("hue:0210").id == "0210"

    with pytest.raises(MalformedReferenceError) as exc:
        ThingTypeUID.parse("hue:0210:extra")

    assert "at most 2 segments" in exc.value.details["reason"]


def test_channel_uid_supports_group_separator() -> None:
    uid = ChannelUID.parse("hue:0210:bridge1:bulb1:lights#color")

    assert uid.id == "lights#color"
    assert uid.group_id == "lights"
    assert uid.id_without_group == "color"
    assert uid.thing_uid == ThingUID.parse("hue:0210:bridge1:bulb1")


def test_channel_uid_rejects_group_separator_outside_channel_id() -> None:
    with pytest.raises(MalformedReferenceError):
        ChannelUID.parse("hue:0210:bridge#1:color")


def test_uids_of_different_kinds_are_not_equal() -> None:
    assert ThingUID.parse("a:b:c:d") != ChannelUID.parse("a:b:c:d")


def test_uid_rejects_a_plain_string_as_segments() -> None:
    with pytest.raises(MalformedReferenceError, match="parse"):
        ThingUID("hue:0210:bulb1")  # type: ignore[arg-type]
