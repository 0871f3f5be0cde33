"""
Global error handlers registered on the FastAPI application.

Every error leaves the API in the same shape:

    {
        "error": true,
        "error_code": "MAPPER_CONFIGURATION_ERROR",
        "message": "Text sink-mapper does not support multiple @payload mappings, ...",
        "details": { ... },
        "request_id": "abc-123"
    }
"""

import uuid
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from textmapper.core.exceptions import AppException, ValidationException
from textmapper.core.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach all global exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        # Client-side configuration errors are expected traffic for a preview API
        log = logger.warning if exc.status_code < 500 else logger.error
        log(
            "Application error",
            extra=_request_extra(
                request,
                error_code=exc.error_code,
                status_code=exc.status_code,
                details=exc.details,
            ),
        )
        return _error_response(request, exc.status_code, exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", [])),
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning(
            "Request validation failed",
            extra=_request_extra(request, validation_errors=errors),
        )
        wrapped = ValidationException(
            message="Request validation failed.", details={"errors": errors}
        )
        return _error_response(request, wrapped.status_code, wrapped.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.warning(
            "HTTP error",
            extra=_request_extra(request, status_code=exc.status_code, detail=exc.detail),
        )
        return _error_response(
            request,
            exc.status_code,
            {"error": True, "error_code": "HTTP_ERROR", "message": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.critical(
            "Unhandled exception",
            extra=_request_extra(request, exception_type=type(exc).__name__),
            exc_info=True,
        )
        return _error_response(
            request,
            500,
            {
                "error": True,
                "error_code": "INTERNAL_ERROR",
                "message": "An unexpected internal error occurred.",
            },
        )


# ─── Helpers ──────────────────────────────────────────────────────────


def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or uuid.uuid4().hex


def _request_extra(request: Request, **fields: Any) -> dict[str, Any]:
    return {
        "request_id": _get_request_id(request),
        "path": request.url.path,
        "method": request.method,
        **fields,
    }


def _error_response(request: Request, status_code: int, body: dict[str, Any]) -> JSONResponse:
    body["request_id"] = _get_request_id(request)
    return JSONResponse(status_code=status_code, content=body)
