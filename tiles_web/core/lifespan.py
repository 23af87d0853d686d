"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tiles_web import __version__
from tiles_web.exceptions import TilesConfigurationException
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.tiles.configurer import TilesConfigurer
from tiles_web.views.resolver import TilesViewResolver

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load Tiles definitions at startup and create the view resolver.

    A broken Tiles configuration aborts startup instead of failing on the
    first request.
    """
    settings = app.state.settings
    app.state.startup_time = time.time()
    app.state.request_count = 0

    log_with_context(
        logger,
        "info",
        "Starting Tiles Web application",
        version=__version__,
        event_type="app_startup",
    )

    try:
        factory = TilesConfigurer(settings).register(app)
        resolver = TilesViewResolver(app)
        if settings.preload_views:
            resolver.warm(factory.definition_names())
    except TilesConfigurationException as e:
        log_with_context(
            logger,
            "critical",
            "Tiles configuration failed",
            error=e.message,
            error_code=e.code.value,
            details=e.details,
            event_type="tiles_config_error",
        )
        raise

    app.state.view_resolver = resolver

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        resolver.clear_cache()
        log_with_context(
            logger,
            "info",
            "Shutting down Tiles Web application",
            event_type="app_shutdown",
        )
