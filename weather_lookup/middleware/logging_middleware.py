"""Request logging middleware with sensitive data redaction."""

import re
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

from weather_lookup.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

# Query parameters whose values never reach the logs
SENSITIVE_PARAMS = [
    "appid",
    "api_key",
    "apikey",
    "token",
    "password",
    "secret",
    "key",
    "access_token",
    "authorization",
]

_SENSITIVE_PATTERN = re.compile(
    rf"([?&](?:{'|'.join(SENSITIVE_PARAMS)})=)[^&\s\"#]*",
    re.IGNORECASE,
)


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    return _SENSITIVE_PATTERN.sub(r"\1***REDACTED***", url)


async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log every inbound request with its status and timing."""
    start_time = time.perf_counter()
    url = redact_sensitive_data(str(request.url))

    try:
        response = await call_next(request)
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "HTTP request failed",
            method=request.method,
            url=url,
            error=str(e),
            process_time=time.perf_counter() - start_time,
            event_type="inbound_request_failed",
        )
        raise

    process_time = time.perf_counter() - start_time
    log_with_context(
        logger,
        "info",
        "HTTP request completed",
        method=request.method,
        url=url,
        status_code=response.status_code,
        process_time=process_time,
        event_type="inbound_request",
    )
    response.headers["X-Process-Time"] = f"{process_time:.6f}"
    return response
