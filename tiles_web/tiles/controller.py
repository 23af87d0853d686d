"""Tiles component controllers.

A controller is optional pre-render logic attached to a definition. It runs
once per render, before the layout path is resolved, and may add attributes
to the component context or switch the layout with TilesView.set_path().
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response

if TYPE_CHECKING:
    from tiles_web.config import Settings
    from tiles_web.tiles.context import ComponentContext, RenderState


class Controller(ABC):
    """Base class for all Tiles component controllers."""

    @abstractmethod
    async def perform(
        self,
        context: "ComponentContext",
        request: Request,
        response: Response,
        state: "RenderState",
    ) -> None:
        """Run pre-render logic for a definition.

        Args:
            context: Component context of the current render
            request: Current HTTP request (the application is request.app)
            response: Working response; status code, headers and cookies set
                here are copied onto the rendered page
            state: Per-render state, used to set a path override
        """


class ApplicationContextAware(ABC):
    """Opt-in interface for controllers that need the application object.

    The view hands over the application immediately before the controller runs.
    """

    @abstractmethod
    def set_application_context(self, app: FastAPI) -> None:
        pass


class ComponentControllerSupport(Controller, ApplicationContextAware):
    """Convenient base class for application-aware controllers.

    Subclasses implement do_perform() and can use self.app and self.settings.
    """

    def __init__(self):
        self._app: FastAPI | None = None

    def set_application_context(self, app: FastAPI) -> None:
        self._app = app

    @property
    def app(self) -> FastAPI:
        if self._app is None:
            raise RuntimeError(f"{type(self).__name__} is not running with an application context")
        return self._app

    @property
    def settings(self) -> "Settings":
        """Settings registered on the application by the app factory."""
        return self.app.state.settings

    async def perform(
        self,
        context: "ComponentContext",
        request: Request,
        response: Response,
        state: "RenderState",
    ) -> None:
        if self._app is None:
            raise RuntimeError(f"{type(self).__name__} is not running with an application context")
        await self.do_perform(context, request, response, state)

    @abstractmethod
    async def do_perform(
        self,
        context: "ComponentContext",
        request: Request,
        response: Response,
        state: "RenderState",
    ) -> None:
        """Perform the controller logic with the application available."""
