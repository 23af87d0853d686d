from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tiles_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
BASE_DIR = PACKAGE_DIR.parent


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working default so the bundled site runs out of the box.
    Values can be overridden with TILES_* environment variables or a .env file.
    """

    # Server
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Console log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the rotating JSON log file")
    rate_limit: str = Field(default="120/minute", min_length=1, description="Per-IP request limit (slowapi syntax)")

    # Templates
    templates_dir: Path = Field(default=PACKAGE_DIR / "templates", description="Jinja2 template directory")
    static_dir: Path = Field(default=PACKAGE_DIR / "static", description="Static files directory")

    # Tiles
    definitions_files: list[Path] = Field(
        default_factory=lambda: [PACKAGE_DIR / "templates" / "tiles-defs.json"],
        description="JSON definitions files, later files override earlier ones",
    )
    index_definition: str = Field(default="site.index", min_length=1, description="Definition rendered at /")
    layouts: dict[str, str] = Field(
        default_factory=lambda: {"compact": "layouts/compact.html"},
        description="Alternative layouts selectable with the ?layout= query parameter",
    )
    preload_views: bool = Field(default=True, description="Create a view for every definition at startup")

    # Security
    trusted_hosts: list[str] = Field(
        default_factory=lambda: ["localhost", "127.0.0.1", "testserver"],
        description="Accepted Host header values",
    )
    cors_origin_regex: str = Field(
        default=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
        description="Regex for allowed CORS origins",
    )

    model_config = SettingsConfigDict(
        env_prefix="TILES_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @field_validator("definitions_files", mode="after")
    @classmethod
    def validate_definitions_files(cls, v: list[Path]) -> list[Path]:
        """Require at least one definitions file."""
        if not v:
            raise ValueError("definitions_files must name at least one file")
        return v

    @field_validator("layouts", mode="after")
    @classmethod
    def validate_layouts(cls, v: dict[str, str]) -> dict[str, str]:
        """Drop layout entries with blank template paths."""
        cleaned = {key.strip(): path.strip() for key, path in v.items() if path and path.strip()}
        if len(cleaned) != len(v):
            log_with_context(
                logger,
                "warning",
                "Ignoring layouts with empty template paths",
                configured=sorted(v),
                kept=sorted(cleaned),
                event_type="config_layouts_invalid",
            )
        return cleaned


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Example:
        @app.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"index": settings.index_definition}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
