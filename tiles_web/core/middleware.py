"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from tiles_web.config import Settings
from tiles_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> Limiter:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings

    Returns:
        Limiter instance for rate limiting
    """
    log_with_context(
        logger,
        "info",
        "Configuring CORS middleware with regex pattern",
        event_type="security_config",
        pattern=settings.cors_origin_regex,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Prevent host header injection
    log_with_context(
        logger,
        "info",
        "Configuring TrustedHost middleware",
        event_type="security_config",
        hosts=settings.trusted_hosts,
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.trusted_hosts,
    )

    # Per-IP limit applied to every route by SlowAPIMiddleware
    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    log_with_context(
        logger,
        "info",
        "Configuring rate limiting",
        event_type="security_config",
        limit=settings.rate_limit,
    )

    @app.middleware("http")
    async def count_requests(request, call_next):
        """Count total requests for the readiness endpoint."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        return await call_next(request)

    return limiter
