"""Tiles Web models"""

from tiles_web.models.base_models import DetailedHealthResponse, ErrorResponse, HealthResponse
from tiles_web.models.definition import DefinitionConfig, DefinitionsFile

__all__ = [
    "DetailedHealthResponse",
    "ErrorResponse",
    "HealthResponse",
    "DefinitionConfig",
    "DefinitionsFile",
]
