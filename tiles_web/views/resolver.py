"""Resolves view names to initialized Tiles views."""

from collections.abc import Iterable

from fastapi import FastAPI

from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.tiles.configurer import get_registered_factory
from tiles_web.views.tiles_view import TilesView

logger = get_logger(__name__)


class TilesViewResolver:
    """Creates one TilesView per definition name and caches it.

    Views are initialized when created, so a missing definitions factory
    surfaces as soon as the first view is resolved (at startup when the
    cache is warmed).
    """

    def __init__(self, app: FastAPI, view_class: type[TilesView] = TilesView):
        self.app = app
        self.view_class = view_class
        self._cache: dict[str, TilesView] = {}

    def resolve_view(self, name: str) -> TilesView:
        view = self._cache.get(name)
        if view is not None:
            return view

        view = self.view_class(name)
        view.init_application(self.app)

        # Unknown names still get a view (rendering reports the missing
        # definition) but are not cached
        factory = get_registered_factory(self.app)
        if factory is not None and name in factory.definition_names():
            self._cache[name] = view
        return view

    def warm(self, names: Iterable[str]) -> int:
        """Resolve every name up front; returns the number of cached views."""
        for name in names:
            self.resolve_view(name)
        log_with_context(
            logger,
            "info",
            "Tiles views created",
            views=len(self._cache),
            event_type="tiles_views_ready",
        )
        return len(self._cache)

    def cached_names(self) -> list[str]:
        return sorted(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()
