"""Tests for custom exception classes."""

from weather_lookup.exceptions import (
    CityNotFoundException,
    ErrorCode,
    InvalidInputException,
    ServiceMisconfiguredException,
    UpstreamAPIException,
    UpstreamPayloadException,
    UpstreamUnreachableException,
    WeatherLookupException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.WEATHER_LOOKUP_ERROR == "WEATHER_LOOKUP_ERROR"
        assert ErrorCode.INVALID_INPUT == "INVALID_INPUT"
        assert ErrorCode.CITY_NOT_FOUND == "CITY_NOT_FOUND"
        assert ErrorCode.UPSTREAM_ERROR == "UPSTREAM_ERROR"


class TestWeatherLookupException:
    """Tests for WeatherLookupException."""

    def test_exception_basic(self):
        """Test creating basic exception."""
        exc = WeatherLookupException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.WEATHER_LOOKUP_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_exception_with_details(self):
        """Test exception with details."""
        exc = WeatherLookupException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value", "count": 42}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["count"] == 42


class TestSpecificExceptions:
    """Tests for the client-facing messages and statuses."""

    def test_invalid_input(self):
        exc = InvalidInputException()

        assert exc.status_code == 400
        assert exc.message == "City parameter is required"
        assert isinstance(exc, WeatherLookupException)

    def test_service_misconfigured(self):
        exc = ServiceMisconfiguredException()

        assert exc.status_code == 500
        assert exc.message == "Weather service not configured"

    def test_city_not_found(self):
        exc = CityNotFoundException(details={"city": "Atlantis"})

        assert exc.status_code == 404
        assert exc.message == "City not found"
        assert exc.details == {"city": "Atlantis"}

    def test_upstream_api_defaults(self):
        exc = UpstreamAPIException()

        assert exc.status_code == 502
        assert exc.message == "Failed to fetch weather data"

    def test_upstream_api_passthrough(self):
        exc = UpstreamAPIException("Invalid API key", status_code=401)

        assert exc.status_code == 401
        assert exc.message == "Invalid API key"

    def test_upstream_failures_hide_details(self):
        """Test transport and payload failures share the internal message."""
        for exc in (
            UpstreamUnreachableException(details={"error": "DNS failure"}),
            UpstreamPayloadException(details={"error": "missing field"}),
        ):
            assert exc.status_code == 500
            assert exc.message == "Internal server error"
