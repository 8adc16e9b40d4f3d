"""Custom exceptions for Weather Lookup with proper HTTP status codes."""

from enum import Enum
from typing import Any

GENERIC_FAILURE_MESSAGE = "Failed to fetch weather data"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    # Generic errors
    WEATHER_LOOKUP_ERROR = "WEATHER_LOOKUP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"

    # Request errors
    INVALID_INPUT = "INVALID_INPUT"

    # Configuration errors
    SERVICE_MISCONFIGURED = "SERVICE_MISCONFIGURED"

    # Upstream provider errors
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPSTREAM_UNREACHABLE = "UPSTREAM_UNREACHABLE"
    UPSTREAM_INVALID_PAYLOAD = "UPSTREAM_INVALID_PAYLOAD"


class WeatherLookupException(Exception):
    """Base exception for weather lookup errors with HTTP status code support.

    ``message`` is the only text that reaches the client. Anything internal
    (upstream bodies, transport errors) belongs in ``details``, which is
    logged but never returned.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_LOOKUP_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize weather lookup exception.

        Args:
            message: Client-facing error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context for the server log
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class InvalidInputException(WeatherLookupException):
    """City query parameter missing or blank."""

    def __init__(self, message: str = "City parameter is required", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.INVALID_INPUT,
            status_code=400,
            details=details,
        )


class ServiceMisconfiguredException(WeatherLookupException):
    """Provider credential not configured."""

    def __init__(self, message: str = "Weather service not configured", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SERVICE_MISCONFIGURED,
            status_code=500,
            details=details,
        )


class CityNotFoundException(WeatherLookupException):
    """Upstream provider does not know the requested city."""

    def __init__(self, message: str = "City not found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.CITY_NOT_FOUND,
            status_code=404,
            details=details,
        )


class UpstreamAPIException(WeatherLookupException):
    """Upstream provider answered with an HTTP error; its status is passed through."""

    def __init__(
        self,
        message: str = GENERIC_FAILURE_MESSAGE,
        status_code: int = 502,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code=ErrorCode.UPSTREAM_ERROR,
            status_code=status_code,
            details=details,
        )


class UpstreamUnreachableException(WeatherLookupException):
    """No HTTP response from the upstream provider at all."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.UPSTREAM_UNREACHABLE,
            status_code=500,
            details=details,
        )


class UpstreamPayloadException(WeatherLookupException):
    """Upstream answered successfully but the payload could not be mapped."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.UPSTREAM_INVALID_PAYLOAD,
            status_code=500,
            details=details,
        )
