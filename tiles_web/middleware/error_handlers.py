"""Exception handlers for the application."""

from fastapi import Request
from fastapi.responses import JSONResponse

from tiles_web.exceptions import ErrorCode, TilesException
from tiles_web.logging_config import get_logger, log_with_context
from tiles_web.models import ErrorResponse

logger = get_logger(__name__)


async def tiles_exception_handler(request: Request, exc: TilesException) -> JSONResponse:
    """Handle tiles exceptions with their HTTP status codes.

    Returns a structured JSON error with error code, message and details.
    """
    log_with_context(
        logger,
        "warning",
        "Tiles error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="tiles_error",
    )

    error_content = ErrorResponse(code=exc.code.value, message=exc.message, details=exc.details)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_content.model_dump()},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions (including controller failures) with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    error_content = ErrorResponse(code=ErrorCode.INTERNAL_ERROR.value, message="Internal server error")

    return JSONResponse(
        status_code=500,
        content={"error": error_content.model_dump()},
    )


def register_error_handlers(app) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    from slowapi import _rate_limit_exceeded_handler
    from slowapi.errors import RateLimitExceeded

    app.add_exception_handler(TilesException, tiles_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
