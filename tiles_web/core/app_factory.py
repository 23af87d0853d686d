"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from tiles_web import __version__
from tiles_web.config import Settings, get_settings
from tiles_web.core.lifespan import lifespan
from tiles_web.core.middleware import setup_middleware
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.middleware.error_handlers import register_error_handlers
from tiles_web.routers import health_router, view_router

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the global singleton

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Tiles Web",
        description="Pages composed from Tiles definitions: a layout template plus named tiles.",
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    setup_middleware(app, settings)
    register_error_handlers(app)

    if settings.static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")
    else:
        log_with_context(
            logger,
            "warning",
            "Static directory not found, /static not mounted",
            static_dir=str(settings.static_dir),
            event_type="static_missing",
        )

    # Pages rendered from Tiles definitions - no prefix
    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])

    return app
