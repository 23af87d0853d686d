"""Custom exceptions for Tiles Web with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    TILES_ERROR = "TILES_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Rendering errors
    DEFINITION_NOT_FOUND = "DEFINITION_NOT_FOUND"
    PATH_NOT_DETERMINED = "PATH_NOT_DETERMINED"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"
    CONFIG_INVALID = "CONFIG_INVALID"


class TilesException(Exception):
    """Base exception for tiles errors with HTTP status code support.

    All custom exceptions inherit from this class so the registered
    exception handler can turn them into structured error responses.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TILES_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize tiles exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class RenderException(TilesException):
    """A definition could not be prepared for rendering."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TILES_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class DefinitionNotFoundException(RenderException):
    """The definitions factory has no definition for the requested name."""

    def __init__(self, name: str, details: dict[str, Any] | None = None):
        self.name = name
        super().__init__(
            f"No Tiles definition found for name '{name}'",
            code=ErrorCode.DEFINITION_NOT_FOUND,
            status_code=500,
            details={"definition": name, **(details or {})},
        )


class PathNotDeterminedException(RenderException):
    """Neither a path override nor a default path exists for a definition."""

    def __init__(self, name: str, details: dict[str, Any] | None = None):
        self.name = name
        super().__init__(
            f"Could not determine a path for Tiles definition '{name}'",
            code=ErrorCode.PATH_NOT_DETERMINED,
            status_code=500,
            details={"definition": name, **(details or {})},
        )


class TilesConfigurationException(TilesException):
    """Configuration errors (missing factory, invalid definitions files)."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
