"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_lookup.exceptions import INTERNAL_ERROR_MESSAGE, ErrorCode, WeatherLookupException
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.middleware.logging_middleware import redact_sensitive_data

logger = get_logger(__name__)

ENDPOINT_NOT_FOUND_MESSAGE = "Endpoint not found"

# Unsupported methods on a known path are reported like unknown paths
_ROUTE_MISS_STATUSES = {404, 405}


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


async def weather_lookup_exception_handler(request: Request, exc: WeatherLookupException) -> JSONResponse:
    """Handle weather lookup exceptions with their own HTTP status codes.

    Server errors are logged at error level, client errors at warning. Only
    ``exc.message`` is sent to the client; ``exc.details`` stays in the log.
    """
    log_with_context(
        logger,
        "error" if exc.status_code >= 500 else "warning",
        "Error fetching weather",
        error_code=exc.code.value,
        error_message=exc.message,
        error_details=exc.details,
        status_code=exc.status_code,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="weather_lookup_error",
    )

    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP errors, mostly unmatched routes."""
    if exc.status_code in _ROUTE_MISS_STATUSES:
        log_with_context(
            logger,
            "info",
            "Endpoint not found",
            error_code=ErrorCode.ENDPOINT_NOT_FOUND.value,
            method=request.method,
            path=request.url.path,
            event_type="route_not_found",
        )
        return JSONResponse(status_code=404, content=error_body(ENDPOINT_NOT_FOUND_MESSAGE))

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled error",
        error=str(exc),
        error_type=type(exc).__name__,
        error_code=ErrorCode.INTERNAL_ERROR.value,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(status_code=500, content=error_body(INTERNAL_ERROR_MESSAGE))


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(WeatherLookupException, weather_lookup_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
