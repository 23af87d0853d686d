"""View that renders a Tiles definition.

The view's url is the name of a Tiles definition. Rendering looks the
definition up in the definitions factory registered by TilesConfigurer,
merges its attributes into the component context, runs the definition's
controller (if any) and renders the definition's layout template.

A controller can switch the layout for the current render with
TilesView.set_path(state, "layouts/other.html").
"""

from typing import Any

from fastapi import FastAPI, Request, Response

from tiles_web.exceptions import (
    DefinitionNotFoundException,
    ErrorCode,
    PathNotDeterminedException,
    TilesConfigurationException,
)
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.protocols import DefinitionsFactoryProtocol
from tiles_web.tiles.configurer import get_registered_factory
from tiles_web.tiles.context import ComponentContext, RenderState
from tiles_web.tiles.controller import ApplicationContextAware, Controller
from tiles_web.tiles.definition import ComponentDefinition
from tiles_web.views.template_view import TemplateView

logger = get_logger(__name__)


class TilesView(TemplateView):
    """TemplateView whose url names a Tiles definition."""

    definitions_factory: DefinitionsFactoryProtocol | None = None

    @staticmethod
    def set_path(state: RenderState, path: Any) -> None:
        """Override the layout path for the current render only."""
        state.path_override = path

    def init_application(self, app: FastAPI) -> None:
        """Bind the view and fetch the definitions factory.

        Raises:
            TilesConfigurationException: If no definitions factory is registered
        """
        super().init_application(app)
        factory = get_registered_factory(app)
        if factory is None:
            raise TilesConfigurationException(
                "Tiles definitions factory not found: TilesConfigurer not registered?",
                code=ErrorCode.CONFIG_MISSING,
                details={"view": self.url},
            )
        self.definitions_factory = factory

    async def prepare_for_rendering(self, request: Request, response: Response, state: RenderState) -> str:
        """Run the definition's controller and determine the layout path."""
        definition = self.get_component_definition(self.definitions_factory, request)
        if definition is None:
            raise DefinitionNotFoundException(self.url)

        context = self.get_component_context(definition, state)

        controller = self.get_controller(definition, request)
        if controller is not None:
            log_with_context(
                logger,
                "debug",
                "Executing Tiles controller",
                definition=definition.name,
                controller=type(controller).__name__,
                event_type="tiles_controller_execute",
            )
            await self.execute_controller(controller, context, request, response, state)

        path = self.get_dispatcher_path(definition, state)
        if path is None:
            raise PathNotDeterminedException(definition.name)
        return path

    def get_component_definition(
        self, factory: DefinitionsFactoryProtocol, request: Request
    ) -> ComponentDefinition | None:
        return factory.get_definition(self.url, request, self.app)

    def get_component_context(self, definition: ComponentDefinition, state: RenderState) -> ComponentContext:
        """Create the render's component context, or add missing attributes to the existing one."""
        if state.component_context is None:
            state.component_context = ComponentContext(definition.attributes)
        else:
            state.component_context.add_missing(definition.attributes)
        return state.component_context

    def get_controller(self, definition: ComponentDefinition, request: Request) -> Controller | None:
        controller = definition.get_or_create_controller()
        if isinstance(controller, ApplicationContextAware):
            controller.set_application_context(self.app)
        return controller

    async def execute_controller(
        self,
        controller: Controller,
        context: ComponentContext,
        request: Request,
        response: Response,
        state: RenderState,
    ) -> None:
        await controller.perform(context, request, response, state)

    def get_dispatcher_path(self, definition: ComponentDefinition, state: RenderState) -> str | None:
        """Path override for this render if set, else the definition's path."""
        if state.path_override is not None:
            return str(state.path_override)
        return definition.path
