"""Component controllers used by the bundled site definitions."""

from datetime import datetime

from fastapi import Request, Response

from tiles_web import __version__
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.tiles.context import ComponentContext, RenderState
from tiles_web.tiles.controller import ComponentControllerSupport
from tiles_web.views.tiles_view import TilesView

logger = get_logger(__name__)


class LayoutSwitchController(ComponentControllerSupport):
    """Switches to an alternative layout named by the ``layout`` query parameter.

    Alternatives come from Settings.layouts; unknown names keep the
    definition's own layout.
    """

    async def do_perform(
        self,
        context: ComponentContext,
        request: Request,
        response: Response,
        state: RenderState,
    ) -> None:
        layout = request.query_params.get("layout")
        if not layout:
            return

        layout_path = self.settings.layouts.get(layout)
        if layout_path is None:
            log_with_context(
                logger,
                "warning",
                "Unknown layout requested",
                layout=layout,
                available=sorted(self.settings.layouts),
                event_type="tiles_layout_unknown",
            )
            return

        TilesView.set_path(state, layout_path)
        context.put_attribute("layout", layout)


class NavigationController(LayoutSwitchController):
    """Layout switching plus the current path for the menu highlight."""

    async def do_perform(
        self,
        context: ComponentContext,
        request: Request,
        response: Response,
        state: RenderState,
    ) -> None:
        await super().do_perform(context, request, response, state)
        context.put_attribute("active_path", request.url.path)


class StatusController(NavigationController):
    """Fills the status tile and disables caching of the page."""

    async def do_perform(
        self,
        context: ComponentContext,
        request: Request,
        response: Response,
        state: RenderState,
    ) -> None:
        await super().do_perform(context, request, response, state)
        context.put_attribute("last_updated", datetime.now().strftime("%H:%M:%S"))
        context.put_attribute("version", __version__)
        context.put_attribute("index_definition", self.settings.index_definition)
        response.headers["Cache-Control"] = "no-store"
