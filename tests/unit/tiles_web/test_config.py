"""Unit tests for configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from tiles_web.config import PACKAGE_DIR, Settings, get_settings


def test_settings_defaults():
    """Test Settings has working defaults for the bundled site."""
    settings = Settings()

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.index_definition == "site.index"
    assert settings.templates_dir == PACKAGE_DIR / "templates"
    assert settings.definitions_files == [PACKAGE_DIR / "templates" / "tiles-defs.json"]
    assert settings.layouts == {"compact": "layouts/compact.html"}


def test_settings_env_loading():
    """Test settings can load from TILES_ environment variables."""
    with patch.dict(
        "os.environ",
        {
            "TILES_API_PORT": "9000",
            "TILES_INDEX_DEFINITION": "site.about",
            "TILES_DEFINITIONS_FILES": '["/etc/tiles/a.json", "/etc/tiles/b.json"]',
            "TILES_LAYOUTS": '{"print": "layouts/print.html"}',
        },
    ):
        settings = Settings()

        assert settings.api_port == 9000
        assert settings.index_definition == "site.about"
        assert settings.definitions_files == [Path("/etc/tiles/a.json"), Path("/etc/tiles/b.json")]
        assert settings.layouts == {"print": "layouts/print.html"}


def test_log_level_normalized():
    """Test the log level is upper-cased."""
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level():
    """Test unknown log levels are rejected."""
    with pytest.raises(ValueError):
        Settings(log_level="chatty")


def test_empty_definitions_files_rejected():
    """Test at least one definitions file is required."""
    with pytest.raises(ValueError):
        Settings(definitions_files=[])


def test_blank_layouts_dropped():
    """Test layouts with empty paths are ignored."""
    settings = Settings(layouts={"compact": "layouts/compact.html", "broken": "  "})

    assert settings.layouts == {"compact": "layouts/compact.html"}


def test_invalid_port():
    """Test port bounds are validated."""
    with pytest.raises(ValueError):
        Settings(api_port=70000)


def test_get_settings_singleton():
    """Test get_settings returns singleton instance."""
    assert get_settings() is get_settings()


def test_logging_and_rate_limit_settings():
    """Test the log directory and rate limit can be configured from the environment."""
    with patch.dict("os.environ", {"TILES_RATE_LIMIT": "10/second", "TILES_LOG_DIR": "/var/log/tiles"}):
        settings = Settings()

    assert settings.rate_limit == "10/second"
    assert settings.log_dir == Path("/var/log/tiles")


def test_empty_rate_limit_rejected():
    """Test an empty rate limit is invalid."""
    with pytest.raises(ValueError):
        Settings(rate_limit="")
