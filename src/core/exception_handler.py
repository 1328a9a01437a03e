"""
Global exception handler for the Session Auth API.
Every error leaves the service as JSON with a boolean `success` field.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .exceptions import (
    ValidationException,
    AuthenticationException,
    InternalException
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message}
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg')}"
    return f"Invalid request: {first.get('msg')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return _error_response(400, _describe_validation_error(exc))

    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        return _error_response(400, exc.message)

    @app.exception_handler(AuthenticationException)
    async def handle_authentication_error(request: Request, exc: AuthenticationException):
        logger.info("Authentication rejected on %s: %s", request.url.path, exc.message)
        return _error_response(401, exc.message)

    @app.exception_handler(InternalException)
    async def handle_internal_error(request: Request, exc: InternalException):
        logger.error("Internal error on %s: %s", request.url.path, exc.message, exc_info=exc)
        return _error_response(500, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return _error_response(500, GENERIC_ERROR_MESSAGE)
