"""
Global exception handlers.

Every failure leaves the API as {"success": false, "message": ...}; the status
code comes from the ApiError subclass. Unexpected exceptions are logged with
their traceback and reported as a generic InternalError.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from easysolutions.core.errors import ApiError, InternalError, RouteNotFound, ValidationError

logger = logging.getLogger(__name__)


def error_response(exc: ApiError) -> JSONResponse:
    content = {"success": False, "message": exc.message}
    if exc.detail:
        content["error"] = exc.detail
    return JSONResponse(status_code=exc.http_status, content=content)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}"
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return error_response(ValidationError())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and known paths with the wrong method look the same to clients
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return error_response(RouteNotFound())
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(f"Server error on {request.url.path}: {exc}", exc_info=True)
        return error_response(InternalError())
