"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from tiles_web.config import Settings, get_settings
from tiles_web.views.resolver import TilesViewResolver


async def get_view_resolver(request: Request) -> TilesViewResolver:
    """
    Get the Tiles view resolver from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared TilesViewResolver instance.

    Raises:
        RuntimeError: If the resolver is not initialized.
    """
    resolver: TilesViewResolver | None = getattr(request.app.state, "view_resolver", None)

    if resolver is None:
        raise RuntimeError("Tiles view resolver not initialized.")

    return resolver


async def get_app_settings(request: Request) -> Settings:
    """
    Get the Settings the application was created with.

    Falls back to the global settings singleton when the app factory did not
    store any (e.g. a bare FastAPI app in tests).
    """
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()
