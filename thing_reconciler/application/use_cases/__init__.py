"""Use cases reconciling things with updates."""

from .thing_use_cases import (
    AddChannelsUseCase,
    CompareThingsUseCase,
    MergeThingUseCase,
    add_channels_to_thing,
    merge_thing,
)

__all__ = [
    "MergeThingUseCase",
    "CompareThingsUseCase",
    "AddChannelsUseCase",
    "merge_thing",
    "add_channels_to_thing",
]
