"""
Thing DTOs - Application Layer

Partial representations of things and channels as they arrive from an
outer layer (e.g. a decoded request body). Every field is optional: ``None``
means "keep the existing value", anything else means "replace it".
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from thing_reconciler.domain.entities.channel import ChannelKind


class ChannelDTO(BaseModel):
    """DTO for a single channel."""

    uid: str = Field(description="Full channel UID")
    id: Optional[str] = Field(None, description="Channel id within the thing")
    channel_type_uid: Optional[str] = Field(
        None, alias="channelTypeUID", description="Channel type UID"
    )
    item_type: Optional[str] = Field(
        None, alias="itemType", description="Accepted item type"
    )
    kind: Optional[ChannelKind] = Field(None, description="STATE or TRIGGER")
    label: Optional[str] = Field(None, description="Human readable label")
    description: Optional[str] = Field(None, description="Channel description")
    default_tags: List[str] = Field(
        default_factory=list, alias="defaultTags", description="Default tags"
    )
    properties: Dict[str, str] = Field(
        default_factory=dict, description="Channel properties"
    )
    configuration: Dict[str, Any] = Field(
        default_factory=dict, description="Channel configuration"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "uid": "hue:0210:bridge1:bulb1:color",
                "id": "color",
                "channelTypeUID": "hue:color",
                "itemType": "Color",
                "kind": "STATE",
                "label": "Color",
                "defaultTags": [],
                "properties": {},
                "configuration": {},
            }
        },
    }


class ThingDTO(BaseModel):
    """DTO carrying an update for a thing."""

    thing_type_uid: Optional[str] = Field(
        None, alias="thingTypeUID", description="Thing type UID"
    )
    uid: Optional[str] = Field(None, alias="UID", description="Thing UID")
    label: Optional[str] = Field(None, description="Human readable label")
    bridge_uid: Optional[str] = Field(
        None, alias="bridgeUID", description="UID of the parent bridge"
    )
    configuration: Optional[Dict[str, Any]] = Field(
        None, description="Replacement configuration, ignored when empty"
    )
    properties: Optional[Dict[str, str]] = Field(
        None, description="Replacement properties"
    )
    channels: Optional[List[ChannelDTO]] = Field(
        None, description="Replacement channel list"
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "thingTypeUID": "hue:0210",
                "UID": "hue:0210:bridge1:bulb1",
                "label": "Living room bulb",
                "bridgeUID": "hue:bridge:bridge1",
                "configuration": {"lightId": "1"},
                "properties": {"vendor": "Philips"},
                "channels": [
                    {
                        "uid": "hue:0210:bridge1:bulb1:color",
                        "itemType": "Color",
                    }
                ],
            }
        },
    }
