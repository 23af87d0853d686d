"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.requests import Request

from tiles_web.config import Settings
from tiles_web.tiles.configurer import DEFINITIONS_FACTORY
from tiles_web.tiles.context import RenderState
from tiles_web.tiles.definition import ComponentDefinition
from tiles_web.tiles.factory import JsonDefinitionsFactory

TEST_TEMPLATES = {
    "layouts/main.html": "main:{{ tiles.title }}|{% include tiles.body %}",
    "layouts/alt.html": "alt:{{ tiles.title }}|{% include tiles.body %}",
    "pages/body.html": "body:{{ greeting | default('none') }}",
}


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """Directory with minimal templates that do not need static files."""
    root = tmp_path / "templates"
    for name, source in TEST_TEMPLATES.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source, encoding="utf-8")
    return root


@pytest.fixture
def definitions_file(tmp_path: Path) -> Path:
    """Definitions file using the test templates."""
    path = tmp_path / "tiles-defs.json"
    path.write_text(
        json.dumps(
            {
                "definitions": [
                    {
                        "name": "test.base",
                        "path": "layouts/main.html",
                        "attributes": {"title": "Base", "body": "pages/body.html"},
                    },
                    {"name": "test.page", "extends": "test.base", "attributes": {"title": "Page"}},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def test_settings(templates_dir: Path, definitions_file: Path, tmp_path: Path) -> Settings:
    """Settings pointing at the temporary templates and definitions."""
    return Settings(
        templates_dir=templates_dir,
        static_dir=tmp_path / "static",
        definitions_files=[definitions_file],
        index_definition="test.page",
        layouts={"alt": "layouts/alt.html"},
    )


@pytest.fixture
def definitions_factory() -> JsonDefinitionsFactory:
    """Factory holding a single plain definition."""
    return JsonDefinitionsFactory(
        {
            "test.page": ComponentDefinition(
                name="test.page",
                path="layouts/main.html",
                attributes={"title": "Page", "body": "pages/body.html"},
            )
        }
    )


@pytest.fixture
def bare_app(templates_dir: Path, test_settings: Settings) -> FastAPI:
    """FastAPI app with templates and settings but no definitions factory."""
    app = FastAPI()
    app.state.templates = Jinja2Templates(directory=str(templates_dir))
    app.state.settings = test_settings
    return app


@pytest.fixture
def tiles_app(bare_app: FastAPI, definitions_factory: JsonDefinitionsFactory) -> FastAPI:
    """App with a registered definitions factory."""
    setattr(bare_app.state, DEFINITIONS_FACTORY, definitions_factory)
    return bare_app


@pytest.fixture
def make_request():
    """Build a Starlette request bound to an app without running a server."""

    def _make_request(app: FastAPI, path: str = "/", query_string: bytes = b"") -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "root_path": "",
            "path": path,
            "query_string": query_string,
            "headers": [(b"host", b"testserver")],
            "app": app,
        }
        return Request(scope)

    return _make_request


@pytest.fixture
def render_state() -> RenderState:
    """Fresh render state."""
    return RenderState()
