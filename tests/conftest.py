from __future__ import annotations

import sys
from pathlib import Path

import pytest

from thing_reconciler.domain.builders.thing_builder import (
    BridgeBuilder,
    ChannelBuilder,
    ThingBuilder,
)
from thing_reconciler.domain.entities.channel import Channel
from thing_reconciler.domain.entities.configuration import Configuration
from thing_reconciler.domain.entities.thing import Bridge, Thing
from thing_reconciler.domain.entities.uid import ChannelUID, ThingTypeUID, ThingUID

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


BRIDGE_TYPE_UID = ThingTypeUID.of("hue", "bridge")
BULB_TYPE_UID = ThingTypeUID.of("hue", "0210")
BRIDGE_UID = ThingUID.of(BRIDGE_TYPE_UID, "bridge1")
BULB_UID = ThingUID.of(BULB_TYPE_UID, "bulb1", bridge_uid=BRIDGE_UID)


def make_channel(
    thing_uid: ThingUID, channel_id: str, item_type: str | None = "Switch"
) -> Channel:
    channel_uid = ChannelUID.of(thing_uid, channel_id)
    return ChannelBuilder.create(channel_uid, item_type).build()


@pytest.fixture()
def bulb() -> Thing:
    return (
        ThingBuilder.create(BULB_TYPE_UID, BULB_UID)
        .with_label("Old")
        .with_bridge(BRIDGE_UID)
        .with_configuration(Configuration({"lightId": "1", "fadeTime": 400}))
        .with_properties({"vendor": "Philips", "modelId": "LCT001"})
        .with_channels(
            [
                make_channel(BULB_UID, "color", "Color"),
                make_channel(BULB_UID, "brightness", "Dimmer"),
            ]
        )
        .build()
    )


@pytest.fixture()
def bridge() -> Bridge:
    return (
        BridgeBuilder.create(BRIDGE_TYPE_UID, BRIDGE_UID)
        .with_label("Hue bridge")
        .with_configuration(Configuration({"ipAddress": "192.168.0.2"}))
        .with_properties({"serialNumber": "0017880ec0"})
        .build()
    )


@pytest.fixture()
def bridge_children(bridge: Bridge) -> list[Thing]:
    children = [
        ThingBuilder.create(BULB_TYPE_UID, ThingUID.of(BULB_TYPE_UID, name, BRIDGE_UID))
        .with_bridge(BRIDGE_UID)
        .build()
        for name in ("x", "y")
    ]
    for child in children:
        bridge.add_thing(child)
    return children
