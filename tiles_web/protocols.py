"""Protocol definitions for dependency injection."""

from typing import TYPE_CHECKING, Protocol

from fastapi import FastAPI, Request

if TYPE_CHECKING:
    from tiles_web.tiles.definition import ComponentDefinition


class DefinitionsFactoryProtocol(Protocol):
    """Source of Tiles definitions.

    The Tiles view only depends on this interface, so any store (JSON files,
    a database, an in-memory test double) can back it.
    """

    def get_definition(
        self, name: str, request: Request | None, app: FastAPI | None
    ) -> "ComponentDefinition | None":
        """Look up a definition by name.

        Args:
            name: Logical definition name
            request: Current HTTP request (lets a factory vary definitions per request)
            app: Application the view is running in

        Returns:
            The definition, or None when the name is unknown
        """
        ...

    def definition_names(self) -> list[str]:
        """Names of all definitions the factory can return."""
        ...
