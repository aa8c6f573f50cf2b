"""
Exception Handlers.

FastAPI exception handlers that convert application exceptions
to the API's error body: {"error": ..., "code": ..., "details": [...]}.
All exceptions are logged; store failures never leak internals.

Usage:
    from heyo.backend.core.exception_handlers import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from heyo.backend.core.exceptions import (
    ApplicationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from heyo.backend.core.logging import get_logger
from heyo.backend.schemas.base import ErrorResponse, ValidationErrorItem

logger = get_logger(__name__)

# Map exception types to HTTP status codes
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
    DatabaseError: 500,
}


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state or headers."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


async def application_error_handler(
    request: Request,
    exc: ApplicationError,
) -> JSONResponse:
    """
    Handle all ApplicationError subclasses.

    Converts application exceptions to JSON error bodies
    with appropriate HTTP status codes.
    """
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    request_id = _get_request_id(request)

    log_extra = {
        "code": exc.code,
        "message": exc.message,
        "status": status_code,
        "path": request.url.path,
        "method": request.method,
    }
    if request_id:
        log_extra["request_id"] = request_id

    if status_code >= 500:
        logger.error("Server error", extra=log_extra)
    else:
        logger.warning("Client error", extra=log_extra)

    body = ErrorResponse(error=exc.message, code=exc.code)
    if isinstance(exc, ValidationError) and exc.details:
        body.details = [ValidationErrorItem(**item) for item in exc.details]

    return _error_response(status_code, body)


def _error_field(err: dict) -> str:
    """Dotted field path of a request error, or "body" for whole-body errors."""
    if err.get("type") == "json_invalid":
        return "body"
    # Drop the leading "body" location segment
    return ".".join(str(loc) for loc in err.get("loc", [])[1:]) or "body"


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle FastAPI/Pydantic request validation errors.

    Malformed or missing fields become a ValidationError (400) with one
    entry per failing field.
    """
    errors = exc.errors()

    logger.warning(
        "Request validation failed",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
            "request_id": _get_request_id(request),
        },
    )

    error = ValidationError(
        "Invalid data",
        details=[
            {
                "field": _error_field(err),
                "message": err.get("msg", "Validation error"),
                "type": err.get("type", "unknown"),
            }
            for err in errors
        ],
    )
    return await application_error_handler(request, error)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full traceback and returns a generic 500 body.
    """
    request_id = _get_request_id(request)

    logger.exception(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "request_id": request_id,
        },
    )

    body = ErrorResponse(
        error="An unexpected error occurred",
        code="SYS_INTERNAL_ERROR",
    )
    return _error_response(500, body)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.debug("Exception handlers registered")
