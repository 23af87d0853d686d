"""Runtime Tiles definitions."""

import importlib
from collections.abc import Mapping
from typing import Any

from tiles_web.exceptions import ErrorCode, TilesConfigurationException
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.tiles.controller import Controller

logger = get_logger(__name__)


def resolve_controller_class(dotted_path: str) -> type[Controller]:
    """Import a controller class from 'package.module:Class' or 'package.module.Class'.

    Raises:
        TilesConfigurationException: If the class cannot be imported or is not a Controller
    """
    if ":" in dotted_path:
        module_name, _, class_name = dotted_path.partition(":")
    else:
        module_name, _, class_name = dotted_path.rpartition(".")

    if not module_name or not class_name:
        raise TilesConfigurationException(
            f"Invalid controller reference '{dotted_path}'",
            code=ErrorCode.CONFIG_INVALID,
            details={"controller": dotted_path},
        )

    try:
        module = importlib.import_module(module_name)
        controller_class = getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise TilesConfigurationException(
            f"Cannot import controller '{dotted_path}': {e}",
            code=ErrorCode.CONFIG_INVALID,
            details={"controller": dotted_path},
        ) from e

    if not (isinstance(controller_class, type) and issubclass(controller_class, Controller)):
        raise TilesConfigurationException(
            f"Controller '{dotted_path}' is not a Controller subclass",
            code=ErrorCode.CONFIG_INVALID,
            details={"controller": dotted_path},
        )
    return controller_class


class ComponentDefinition:
    """A named page layout: default template path, attributes and optional controller.

    The controller is created from its class on first use and reused afterwards.
    """

    def __init__(
        self,
        name: str,
        path: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        controller_class: type[Controller] | None = None,
        controller: Controller | None = None,
    ):
        self._name = name
        self._path = path
        self._attributes = dict(attributes or {})
        self._controller_class = controller_class
        self._controller = controller

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the definition's attributes."""
        return dict(self._attributes)

    @property
    def controller_class(self) -> type[Controller] | None:
        return self._controller_class

    def get_or_create_controller(self) -> Controller | None:
        """Return the controller instance, creating it on first call.

        Raises:
            TilesConfigurationException: If the controller class cannot be instantiated
        """
        if self._controller is None and self._controller_class is not None:
            try:
                self._controller = self._controller_class()
            except Exception as e:
                raise TilesConfigurationException(
                    f"Cannot instantiate controller for Tiles definition '{self._name}': {e}",
                    code=ErrorCode.CONFIG_INVALID,
                    details={"definition": self._name, "controller": self._controller_class.__name__},
                ) from e
            log_with_context(
                logger,
                "debug",
                "Created Tiles controller",
                definition=self._name,
                controller=self._controller_class.__name__,
                event_type="tiles_controller_created",
            )
        return self._controller

    def __repr__(self) -> str:
        return f"ComponentDefinition(name={self._name!r}, path={self._path!r})"
