"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv
from fastapi.responses import Response

from tiles_web.config import get_settings
from tiles_web.core.app_factory import create_app
from tiles_web.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

settings = get_settings()

# Configure structured logging (JSON to file + console)
setup_logging(settings.log_level, settings.log_dir)

app = create_app(settings)


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    """Return empty favicon to prevent 404 errors."""
    return Response(content=b"", media_type="image/x-icon")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tiles_web.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
