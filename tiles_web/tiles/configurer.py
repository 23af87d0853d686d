"""Startup registration of the Tiles definitions factory."""

from fastapi import FastAPI

from tiles_web.config import Settings
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.protocols import DefinitionsFactoryProtocol
from tiles_web.tiles.factory import JsonDefinitionsFactory

logger = get_logger(__name__)

# app.state attribute holding the process-wide definitions factory
DEFINITIONS_FACTORY = "tiles_definitions_factory"


class TilesConfigurer:
    """Builds the definitions factory from settings and registers it on the app.

    Views look the factory up under DEFINITIONS_FACTORY when they are
    initialized, so register() must run before any Tiles view is created.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def create_definitions_factory(self) -> DefinitionsFactoryProtocol:
        return JsonDefinitionsFactory.from_files(self.settings.definitions_files)

    def register(self, app: FastAPI) -> DefinitionsFactoryProtocol:
        factory = self.create_definitions_factory()
        setattr(app.state, DEFINITIONS_FACTORY, factory)
        log_with_context(
            logger,
            "info",
            "Tiles definitions factory registered",
            definitions=len(factory.definition_names()),
            files=[str(path) for path in self.settings.definitions_files],
            event_type="tiles_factory_ready",
        )
        return factory


def get_registered_factory(app: FastAPI) -> DefinitionsFactoryProtocol | None:
    """Return the factory registered on the app, or None."""
    return getattr(app.state, DEFINITIONS_FACTORY, None)
