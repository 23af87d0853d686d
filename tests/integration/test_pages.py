"""Integration tests for the page and health routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tiles_web.config import Settings
from tiles_web.core.app_factory import create_app
from tiles_web.exceptions import TilesConfigurationException
from tiles_web.tiles.configurer import DEFINITIONS_FACTORY
from tiles_web.tiles.controller import Controller
from tiles_web.tiles.definition import ComponentDefinition


class ExplodingController(Controller):
    """Controller that always fails."""

    async def perform(self, context, request, response, state):
        raise RuntimeError("tile failed")


@pytest.fixture
def site_app() -> FastAPI:
    """App serving the bundled site."""
    return create_app(Settings())


@pytest.fixture
def client(site_app):
    """Test client with lifespan context."""
    with TestClient(site_app) as test_client:
        yield test_client


class TestBundledSite:
    """Tests rendering the bundled definitions."""

    def test_index_page(self, client):
        """Test / renders site.index in the main layout."""
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<!DOCTYPE html>" in response.text
        assert "<title>Home</title>" in response.text
        assert 'class="layout-main"' in response.text
        assert "composed from Tiles definitions" in response.text

    def test_compact_layout_override(self, client):
        """Test the layout query parameter switches the layout."""
        response = client.get("/?layout=compact")

        assert response.status_code == 200
        assert 'class="layout-compact"' in response.text
        assert "<header>" not in response.text

    def test_unknown_layout_keeps_default(self, client):
        """Test unknown layout names fall back to the definition's layout."""
        response = client.get("/?layout=bogus")

        assert 'class="layout-main"' in response.text

    def test_about_page_highlights_menu(self, client):
        """Test the navigation controller marks the active menu entry."""
        response = client.get("/pages/site.about")

        assert response.status_code == 200
        assert '<li class="active"><a href="/pages/site.about">About</a></li>' in response.text

    def test_about_page_compact_layout(self, client):
        """Test pages extending the base definition honor the layout parameter."""
        response = client.get("/pages/site.about?layout=compact")

        assert response.status_code == 200
        assert 'class="layout-compact"' in response.text

    def test_index_and_status_highlight_menu(self, client):
        """Test every page extending the base definition marks its menu entry."""
        index = client.get("/")
        status = client.get("/pages/site.status")

        assert '<li class="active"><a href="/">Home</a></li>' in index.text
        assert '<li class="active"><a href="/pages/site.status">Status</a></li>' in status.text

    def test_status_page(self, client):
        """Test the status controller fills the page and sets headers."""
        response = client.get("/pages/site.status")

        assert response.status_code == 200
        assert "Last updated" in response.text
        assert response.headers["cache-control"] == "no-store"

    def test_status_tile_fragment(self, client):
        """Test a definition can render a bare tile."""
        response = client.get("/pages/tile.status")

        assert response.status_code == 200
        assert "<html" not in response.text
        assert 'class="tile tile-status"' in response.text

    def test_unknown_definition(self, client):
        """Test unknown names return a structured error naming the definition."""
        response = client.get("/pages/site.nothing")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "DEFINITION_NOT_FOUND"
        assert "site.nothing" in error["message"]

    def test_views_preloaded(self, client, site_app):
        """Test the resolver created a view for every definition at startup."""
        factory = getattr(site_app.state, DEFINITIONS_FACTORY)

        assert site_app.state.view_resolver.cached_names() == factory.definition_names()


class TestErrors:
    """Tests for failures during rendering."""

    def test_missing_path(self, client, site_app):
        """Test a definition without path returns a structured error."""
        getattr(site_app.state, DEFINITIONS_FACTORY).add_definition(ComponentDefinition("site.nopath"))

        response = client.get("/pages/site.nopath")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "PATH_NOT_DETERMINED"

    def test_controller_failure(self, site_app):
        """Test controller errors surface as internal errors."""
        with TestClient(site_app, raise_server_exceptions=False) as test_client:
            getattr(site_app.state, DEFINITIONS_FACTORY).add_definition(
                ComponentDefinition("site.explode", path="layouts/main.html", controller=ExplodingController())
            )

            response = test_client.get("/pages/site.explode")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"

    def test_startup_fails_on_missing_definitions(self, tmp_path):
        """Test a broken Tiles configuration prevents startup."""
        app = create_app(Settings(definitions_files=[tmp_path / "missing.json"]))

        with pytest.raises(TilesConfigurationException):
            with TestClient(app):
                pass


class TestHealth:
    """Tests for health endpoints."""

    def test_health(self, client):
        """Test basic health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_liveness(self, client):
        """Test liveness check."""
        assert client.get("/health/live").json()["status"] == "alive"

    def test_readiness(self, client):
        """Test readiness after startup."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["definitions_factory"] == "ok"
        assert data["definitions"] == 5
        assert data["uptime_seconds"] >= 0
        assert data["requests"] >= 1

    def test_readiness_before_startup(self, site_app):
        """Test readiness fails when the lifespan has not run."""
        response = TestClient(site_app).get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["definitions_factory"] == "not_initialized"

    def test_readiness_counts_requests(self, client):
        """Test readiness reports every request handled since startup."""
        client.get("/health")
        client.get("/health/live")

        data = client.get("/health/ready").json()

        assert data["requests"] == 3


class TestRateLimiting:
    """Tests for the per-IP request limit."""

    def test_requests_over_limit_rejected(self):
        """Test requests beyond the configured limit get 429."""
        app = create_app(Settings(rate_limit="3/minute"))

        with TestClient(app) as test_client:
            statuses = [test_client.get("/health").status_code for _ in range(5)]

        assert statuses[:3] == [200, 200, 200]
        assert statuses[3:] == [429, 429]

    def test_limit_applies_to_pages(self):
        """Test page routes are limited like the health routes."""
        app = create_app(Settings(rate_limit="1/minute"))

        with TestClient(app) as test_client:
            first = test_client.get("/pages/site.about")
            second = test_client.get("/pages/site.about")

        assert first.status_code == 200
        assert second.status_code == 429
