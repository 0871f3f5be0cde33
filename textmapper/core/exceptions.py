"""
Custom exception hierarchy for the text mapper.

All mapper-specific exceptions inherit from AppException,
enabling consistent error handling and structured error responses.

Hierarchy:
    AppException
    ├── ConfigurationException       # Invalid mapper setup (payload / options)
    │   └── TemplateCompilationException # Malformed template text
    ├── MappingStateException        # Group assembly used out of order
    └── ValidationException          # Input/output data validation failures
"""

from typing import Any


class AppException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:     Human-readable error description.
        status_code: HTTP status code to return to the client.
        error_code:  Machine-readable error identifier (e.g. "MAPPER_CONFIGURATION_ERROR").
        details:     Optional dict with extra context for debugging.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred.",
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception into a JSON-friendly dict."""
        payload: dict[str, Any] = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


# ─── Setup-time Errors ───────────────────────────────────────────────


class ConfigurationException(AppException):
    """Raised when a mapper cannot be set up from the given stream and options."""

    def __init__(
        self,
        message: str = "Invalid text mapper configuration.",
        status_code: int = 422,
        error_code: str = "MAPPER_CONFIGURATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)


class TemplateCompilationException(ConfigurationException):
    """Raised when template text cannot be compiled."""

    def __init__(
        self,
        template_name: str,
        reason: str = "Malformed template.",
        line: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=f"Failed to compile template '{template_name}': {reason}",
            status_code=422,
            error_code="TEMPLATE_COMPILATION_ERROR",
            details={**(details or {}), "template": template_name, "line": line},
        )


# ─── Mapping Errors ──────────────────────────────────────────────────


class MappingStateException(AppException):
    """Raised when a mapping component is driven through an invalid state."""

    def __init__(
        self,
        message: str = "Invalid mapping state.",
        status_code: int = 500,
        error_code: str = "MAPPING_STATE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)


# ─── Validation Errors ───────────────────────────────────────────────


class ValidationException(AppException):
    """Raised when request or response data fails validation."""

    def __init__(
        self,
        message: str = "Validation error.",
        status_code: int = 422,
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code, error_code, details)
