"""Definitions factory backed by JSON definitions files.

A definitions file looks like::

    {
      "definitions": [
        {"name": "site.base", "path": "layouts/main.html",
         "attributes": {"title": "Home", "header": "tiles/header.html"}},
        {"name": "site.index", "extends": "site.base",
         "controller": "tiles_web.controllers.site_controllers:StatusController",
         "attributes": {"body": "pages/index.html"}}
      ]
    }

A definition that extends another inherits the parent's path and controller
when it has none, and every parent attribute it does not redefine.
"""

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from pydantic import ValidationError

from tiles_web.exceptions import ErrorCode, TilesConfigurationException
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.models.definition import DefinitionConfig, DefinitionsFile
from tiles_web.tiles.definition import ComponentDefinition, resolve_controller_class

logger = get_logger(__name__)


def load_definitions_file(file_path: Path) -> list[DefinitionConfig]:
    """Read and validate one JSON definitions file.

    Raises:
        TilesConfigurationException: If the file is missing, not JSON or fails validation
    """
    if not file_path.exists():
        raise TilesConfigurationException(
            f"Tiles definitions file not found: {file_path}",
            code=ErrorCode.CONFIG_MISSING,
            details={"file_path": str(file_path)},
        )

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
        parsed = DefinitionsFile.model_validate(data)
    except json.JSONDecodeError as e:
        log_with_context(
            logger,
            "error",
            "Invalid JSON in Tiles definitions file",
            file_path=str(file_path),
            error=str(e),
            event_type="tiles_definitions_invalid",
        )
        raise TilesConfigurationException(
            f"Tiles definitions file contains invalid JSON: {e}",
            code=ErrorCode.CONFIG_INVALID,
            details={"file_path": str(file_path)},
        ) from e
    except ValidationError as e:
        log_with_context(
            logger,
            "error",
            "Tiles definitions file failed validation",
            file_path=str(file_path),
            error_count=e.error_count(),
            event_type="tiles_definitions_invalid",
        )
        raise TilesConfigurationException(
            f"Tiles definitions file is invalid: {file_path}",
            code=ErrorCode.CONFIG_INVALID,
            details={"file_path": str(file_path), "errors": e.errors(include_url=False)},
        ) from e

    return parsed.definitions


def resolve_inheritance(configs: Mapping[str, DefinitionConfig]) -> dict[str, DefinitionConfig]:
    """Flatten 'extends' chains into standalone definition configs.

    Raises:
        TilesConfigurationException: On an unknown parent or an inheritance cycle
    """
    resolved: dict[str, DefinitionConfig] = {}

    def resolve(name: str, chain: list[str]) -> DefinitionConfig:
        if name in resolved:
            return resolved[name]

        config = configs[name]
        if config.extends is None:
            resolved[name] = config
            return config

        if config.extends not in configs:
            raise TilesConfigurationException(
                f"Tiles definition '{name}' extends unknown definition '{config.extends}'",
                code=ErrorCode.CONFIG_INVALID,
                details={"definition": name, "extends": config.extends},
            )
        if config.extends in chain:
            cycle = [*chain, name, config.extends]
            raise TilesConfigurationException(
                f"Tiles definition inheritance cycle: {' -> '.join(cycle)}",
                code=ErrorCode.CONFIG_INVALID,
                details={"cycle": cycle},
            )

        parent = resolve(config.extends, [*chain, name])
        merged = DefinitionConfig(
            name=name,
            path=config.path or parent.path,
            controller=config.controller or parent.controller,
            attributes={**parent.attributes, **config.attributes},
        )
        resolved[name] = merged
        return merged

    for definition_name in configs:
        resolve(definition_name, [])
    return resolved


class JsonDefinitionsFactory:
    """In-memory definitions table built from JSON definitions files."""

    def __init__(self, definitions: Mapping[str, ComponentDefinition] | None = None):
        self._definitions: dict[str, ComponentDefinition] = dict(definitions or {})

    @classmethod
    def from_configs(cls, configs: Iterable[DefinitionConfig]) -> "JsonDefinitionsFactory":
        """Build a factory from definition configs; later configs replace earlier ones by name."""
        by_name: dict[str, DefinitionConfig] = {}
        for config in configs:
            if config.name in by_name:
                log_with_context(
                    logger,
                    "info",
                    "Tiles definition overridden",
                    definition=config.name,
                    event_type="tiles_definition_override",
                )
            by_name[config.name] = config

        definitions = {}
        for definition_name, config in resolve_inheritance(by_name).items():
            controller_class = resolve_controller_class(config.controller) if config.controller else None
            definitions[definition_name] = ComponentDefinition(
                name=definition_name,
                path=config.path,
                attributes=config.attributes,
                controller_class=controller_class,
            )
        return cls(definitions)

    @classmethod
    def from_files(cls, files: Sequence[Path]) -> "JsonDefinitionsFactory":
        """Load definitions from files in order."""
        configs: list[DefinitionConfig] = []
        for file_path in files:
            file_configs = load_definitions_file(Path(file_path))
            log_with_context(
                logger,
                "info",
                "Loaded Tiles definitions file",
                file_path=str(file_path),
                count=len(file_configs),
                event_type="tiles_definitions_loaded",
            )
            configs.extend(file_configs)
        return cls.from_configs(configs)

    def get_definition(
        self,
        name: str,
        request: Request | None = None,
        app: FastAPI | None = None,
    ) -> ComponentDefinition | None:
        return self._definitions.get(name)

    def add_definition(self, definition: ComponentDefinition) -> None:
        self._definitions[definition.name] = definition

    def definition_names(self) -> list[str]:
        return sorted(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: Any) -> bool:
        return name in self._definitions
