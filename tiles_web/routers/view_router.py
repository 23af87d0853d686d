"""Page routes rendering Tiles definitions."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from tiles_web.config import Settings
from tiles_web.dependencies import get_app_settings, get_view_resolver
from tiles_web.views.resolver import TilesViewResolver

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    resolver: TilesViewResolver = Depends(get_view_resolver),
    settings: Settings = Depends(get_app_settings),
):
    """Render the site's index definition."""
    view = resolver.resolve_view(settings.index_definition)
    return await view.render(request)


@router.get("/pages/{definition_name}", response_class=HTMLResponse)
async def page(
    definition_name: str,
    request: Request,
    resolver: TilesViewResolver = Depends(get_view_resolver),
):
    """Render any Tiles definition by name."""
    view = resolver.resolve_view(definition_name)
    return await view.render(request)
