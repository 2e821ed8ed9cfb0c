from __future__ import annotations

import pytest

from thing_reconciler.application.dtos.mappers import to_channel
from thing_reconciler.application.dtos.thing_dto import ThingDTO
from thing_reconciler.application.use_cases.thing_use_cases import (
    AddChannelsUseCase,
    CompareThingsUseCase,
    MergeThingUseCase,
)
from thing_reconciler.main.config import AppSettings
from thing_reconciler.main.container import get_container, init_container


def test_init_and_get_container(monkeypatch) -> None:
    monkeypatch.setenv("MERGE_LOG_FIELD_CHANGES", "false")

    container = init_container(AppSettings())

    assert get_container() is container
    assert container.channel_mapper() is to_channel
    assert container.config.merge.log_field_changes() is False


def test_container_provides_use_cases(bulb) -> None:
    container = init_container(AppSettings())

    merge_use_case = container.merge_thing_use_case()
    merged = merge_use_case.execute(bulb, ThingDTO(label="From container"))

    assert isinstance(merge_use_case, MergeThingUseCase)
    assert merged.label == "From container"
    assert isinstance(container.compare_things_use_case(), CompareThingsUseCase)
    assert isinstance(container.add_channels_use_case(), AddChannelsUseCase)


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("thing_reconciler.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
