"""Jinja2-backed view that renders a template resource for a request."""

from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tiles_web.exceptions import ErrorCode, TilesConfigurationException
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.tiles.context import ComponentContext, RenderState

logger = get_logger(__name__)

# Headers that belong to the rendered body, never copied from the working response
_BODY_HEADERS = (b"content-length", b"content-type")


class TemplateView:
    """A view that renders the template named by its url.

    Subclasses override prepare_for_rendering() to compute a different
    template path per request; rendering itself stays here.
    """

    def __init__(
        self,
        url: str,
        attributes: Mapping[str, Any] | None = None,
        templates: Jinja2Templates | None = None,
    ):
        """Create a view.

        Args:
            url: Template path (or, for subclasses, a logical name)
            attributes: Static attributes added to every render's template context
            templates: Jinja2 environment; defaults to app.state.templates at init
        """
        self.url = url
        self.attributes = dict(attributes or {})
        self.templates = templates
        self.app: FastAPI | None = None

    def init_application(self, app: FastAPI) -> None:
        """Bind the view to the application it renders for.

        Raises:
            TilesConfigurationException: If no Jinja2 templates are available
        """
        if self.templates is None:
            self.templates = getattr(app.state, "templates", None)
        if self.templates is None:
            raise TilesConfigurationException(
                "Jinja2 templates not found on application state",
                code=ErrorCode.CONFIG_MISSING,
                details={"view": self.url},
            )
        self.app = app

    @property
    def initialized(self) -> bool:
        return self.app is not None

    async def render(
        self,
        request: Request,
        model: Mapping[str, Any] | None = None,
        state: RenderState | None = None,
    ) -> HTMLResponse:
        """Render the view for a request.

        Args:
            request: Current HTTP request
            model: Values for the template context
            state: Render state shared with an enclosing render, if any

        Returns:
            HTMLResponse carrying the status code and headers set during preparation
        """
        if not self.initialized:
            raise RuntimeError(f"View '{self.url}' used before init_application()")

        state = state or RenderState()
        working_response = Response()

        path = await self.prepare_for_rendering(request, working_response, state)

        log_with_context(
            logger,
            "debug",
            "Rendering template",
            view=self.url,
            template=path,
            event_type="view_render",
        )

        rendered = self.templates.TemplateResponse(
            request,
            path,
            self.build_template_context(model, state),
            status_code=working_response.status_code,
        )
        for key, value in working_response.raw_headers:
            if key not in _BODY_HEADERS:
                rendered.raw_headers.append((key, value))
        return rendered

    async def prepare_for_rendering(self, request: Request, response: Response, state: RenderState) -> str:
        """Return the template path to render."""
        return self.url

    def build_template_context(self, model: Mapping[str, Any] | None, state: RenderState) -> dict[str, Any]:
        """Merge static attributes, the model and the component context.

        Model values win over static attributes. The component context is
        exposed as ``tiles``.
        """
        context: dict[str, Any] = {}
        context.update(self.attributes)
        context.update(model or {})
        context["tiles"] = state.component_context if state.component_context is not None else ComponentContext()
        return context

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.url!r})"
