"""Health endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from tiles_web import __version__
from tiles_web.models import DetailedHealthResponse, HealthResponse
from tiles_web.tiles.configurer import get_registered_factory

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    For readiness including the Tiles configuration, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/live", response_model=HealthResponse)
async def liveness_check():
    """Liveness check - is the process serving requests?"""
    return HealthResponse(status="alive", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(request: Request):
    """Readiness check - can the application render pages?

    **Returns:**
    - 200: Templates and definitions are loaded, with uptime and request count
    - 503: Startup did not complete
    """
    checks = {}
    all_healthy = True

    templates = getattr(request.app.state, "templates", None)
    checks["templates"] = "ok" if templates is not None else "not_initialized"
    if templates is None:
        all_healthy = False

    factory = get_registered_factory(request.app)
    definition_count = len(factory.definition_names()) if factory is not None else 0
    if factory is None:
        checks["definitions_factory"] = "not_initialized"
        all_healthy = False
    elif definition_count == 0:
        checks["definitions_factory"] = "empty"
        all_healthy = False
    else:
        checks["definitions_factory"] = "ok"

    startup_time = getattr(request.app.state, "startup_time", None)
    uptime = int(time.time() - startup_time) if startup_time is not None else 0

    resolver = getattr(request.app.state, "view_resolver", None)
    checks["view_resolver"] = "ok" if resolver is not None else "not_initialized"
    if resolver is None:
        all_healthy = False

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
            definitions=definition_count,
            uptime_seconds=uptime,
            requests=getattr(request.app.state, "request_count", 0),
        ).model_dump(mode="json"),
    )
