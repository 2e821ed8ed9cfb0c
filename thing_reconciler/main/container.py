"""
Dependency container injection module - Main Layer

Composition root wiring the channel mapper and settings into the thing use
cases.
"""

from dependency_injector import containers, providers

from thing_reconciler.application.dtos.mappers import to_channel
from thing_reconciler.application.use_cases.thing_use_cases import (
    AddChannelsUseCase,
    CompareThingsUseCase,
    MergeThingUseCase,
)
from thing_reconciler.shared import get_logger, update_logging_from_settings

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    channel_mapper = providers.Object(to_channel)

    # Application (use cases)
    merge_thing_use_case = providers.Factory(
        MergeThingUseCase,
        channel_mapper=channel_mapper,
        log_field_changes=config.merge.log_field_changes,
    )

    compare_things_use_case = providers.Factory(CompareThingsUseCase)

    add_channels_use_case = providers.Factory(AddChannelsUseCase)


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    update_logging_from_settings(settings)

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    logger.info("container.initialized", environment=settings.environment.value)
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
