"""
Error handling middleware for FastAPI.
Provides centralized exception handling and error responses.

Every error leaves the API as ``{"error", "message", "details"}``. Server
errors (5xx) never carry details; the underlying cause is only logged.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_api.exceptions import AppError, DecodeError

logger = logging.getLogger(__name__)


def _error_body(error: str, message: str, details: dict = None) -> dict:
    return {"error": error, "message": message, "details": details or {}}


def add_exception_handlers(app: FastAPI) -> None:
    """
    Add exception handlers to FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Handle custom AppError exceptions."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}: {exc.message}")
            content = _error_body(exc.error, exc.message)
        else:
            logger.warning(
                f"{request.method} {request.url.path} -> {exc.status_code} {exc.error}: {exc.message} {exc.details}"
            )
            content = _error_body(exc.error, exc.message, exc.details)

        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON or a body that isn't an object: report as a decode error."""
        errors = [
            {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        logger.warning(f"{request.method} {request.url.path} -> 400 decode_error: {errors}")

        decode_error = DecodeError()
        return JSONResponse(
            status_code=decode_error.status_code,
            content=_error_body(decode_error.error, decode_error.message, {"errors": errors}),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions (unknown routes, wrong methods)."""
        logger.warning(f"HTTP {exc.status_code}: {exc.detail}")

        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body("http_error", str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other unhandled exceptions."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("internal_error", "An unexpected error occurred"),
        )
