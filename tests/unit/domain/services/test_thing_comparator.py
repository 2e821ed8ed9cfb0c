from __future__ import annotations

import pytest

from tests.conftest import BRIDGE_UID, BULB_TYPE_UID, BULB_UID, make_channel
from thing_reconciler.domain.builders.thing_builder import BridgeBuilder, ThingBuilder
from thing_reconciler.domain.entities.configuration import Configuration
from thing_reconciler.domain.entities.errors import InvalidArgumentError
from thing_reconciler.domain.entities.thing import Thing
from thing_reconciler.domain.entities.uid import ThingUID
from thing_reconciler.domain.services.thing_comparator import things_equal


def _thing(
    uid: ThingUID = BULB_UID,
    bridge_uid: ThingUID | None = BRIDGE_UID,
    configuration: Configuration | None = None,
    channels=(),
    label: str | None = None,
) -> Thing:
    return (
        ThingBuilder.create(BULB_TYPE_UID, uid)
        .with_bridge(bridge_uid)
        .with_configuration(configuration)
        .with_channels(channels)
        .with_label(label)
        .build()
    )


def test_things_equal_is_reflexive_and_symmetric(bulb: Thing) -> None:
    other = _thing(
        configuration=Configuration({"fadeTime": 400, "lightId": "1"}),
        channels=list(reversed(bulb.channels)),
    )

    assert things_equal(bulb, bulb)
    assert things_equal(bulb, other)
    assert things_equal(other, bulb)


def test_things_equal_ignores_channel_order() -> None:
    c1 = make_channel(BULB_UID, "c1")
    c2 = make_channel(BULB_UID, "c2", "Number")

    assert things_equal(_thing(channels=[c1, c2]), _thing(channels=[c2, c1]))


def test_things_equal_detects_item_type_change() -> None:
    a = _thing(channels=[make_channel(BULB_UID, "c1", "Switch")])
    b = _thing(channels=[make_channel(BULB_UID, "c1", "Dimmer")])

    assert not things_equal(a, b)


def test_things_equal_detects_channel_count_change() -> None:
    c1 = make_channel(BULB_UID, "c1")

    assert not things_equal(
        _thing(channels=[c1]), _thing(channels=[c1, make_channel(BULB_UID, "c2")])
    )


def test_things_equal_detects_uid_change() -> None:
    other_uid = ThingUID.of(BULB_TYPE_UID, "bulb2", bridge_uid=BRIDGE_UID)

    assert not things_equal(_thing(), _thing(uid=other_uid))


def test_things_equal_bridge_uid_asymmetry() -> None:
    top_level = _thing(bridge_uid=None)
    attached = _thing(bridge_uid=BRIDGE_UID)

    assert not things_equal(top_level, attached)
    assert not things_equal(attached, top_level)
    assert things_equal(_thing(bridge_uid=None), top_level)
    assert not things_equal(
        attached, _thing(bridge_uid=ThingUID.parse("hue:bridge:bridge2"))
    )


def test_things_equal_absent_configuration_differs_from_empty() -> None:
    absent = _thing(configuration=None)
    empty = _thing(configuration=Configuration())

    assert not things_equal(absent, empty)
    assert not things_equal(empty, absent)
    assert things_equal(empty, _thing(configuration=Configuration({})))


def test_things_equal_detects_configuration_change() -> None:
    a = _thing(configuration=Configuration({"a": 1}))
    b = _thing(configuration=Configuration({"a": 2}))

    assert not things_equal(a, b)


def test_things_equal_ignores_label_and_properties() -> None:
    a = _thing(label="One")
    b = (
        ThingBuilder.create(BULB_TYPE_UID, BULB_UID)
        .with_bridge(BRIDGE_UID)
        .with_label("Two")
        .with_properties({"vendor": "Philips"})
        .build()
    )

    assert things_equal(a, b)


def test_things_equal_ignores_bridge_children(bridge, bridge_children) -> None:
    empty_bridge = (
        BridgeBuilder.create(bridge.thing_type_uid, bridge.uid)
        .with_configuration(bridge.configuration)
        .build()
    )

    assert len(bridge.things) == 2
    assert things_equal(bridge, empty_bridge)


def test_things_equal_with_empty_channel_lists() -> None:
    assert things_equal(_thing(channels=[]), _thing(channels=()))


def test_things_equal_rejects_none(bulb: Thing) -> None:
    with pytest.raises(InvalidArgumentError):
        things_equal(None, bulb)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        things_equal(bulb, None)  # type: ignore[arg-type]


def test_things_equal_distinguishes_boolean_from_number_configuration() -> None:
    flag = _thing(configuration=Configuration({"a": True}))
    number = _thing(configuration=Configuration({"a": 1}))

    assert not things_equal(flag, number)
    assert not things_equal(number, flag)
