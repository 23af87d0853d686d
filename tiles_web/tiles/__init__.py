"""Tiles page composition: definitions, component contexts and controllers."""

from tiles_web.tiles.configurer import DEFINITIONS_FACTORY, TilesConfigurer, get_registered_factory
from tiles_web.tiles.context import ComponentContext, RenderState
from tiles_web.tiles.controller import ApplicationContextAware, ComponentControllerSupport, Controller
from tiles_web.tiles.definition import ComponentDefinition
from tiles_web.tiles.factory import JsonDefinitionsFactory

__all__ = [
    "DEFINITIONS_FACTORY",
    "ApplicationContextAware",
    "ComponentContext",
    "ComponentControllerSupport",
    "ComponentDefinition",
    "Controller",
    "JsonDefinitionsFactory",
    "RenderState",
    "TilesConfigurer",
    "get_registered_factory",
]
