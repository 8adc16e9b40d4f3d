"""Tests for dependency injection functions."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from weather_lookup.core.context import AppContext
from weather_lookup.dependencies import get_app_context, get_app_settings, get_http_client


class TestDependencies:
    """Tests for dependency injection functions."""

    @pytest.mark.asyncio
    async def test_get_app_context(self, mock_settings):
        """Test getting the context from app state."""
        context = AppContext(settings=mock_settings, http_client=AsyncMock(spec=AsyncClient))
        mock_request = MagicMock()
        mock_request.app.state.context = context

        assert await get_app_context(mock_request) is context

    @pytest.mark.asyncio
    async def test_get_app_context_missing(self):
        """Test a request before startup fails loudly."""
        mock_request = MagicMock()
        mock_request.app.state.context = None

        with pytest.raises(RuntimeError, match="not initialized"):
            await get_app_context(mock_request)

    @pytest.mark.asyncio
    async def test_get_http_client(self, mock_settings):
        """Test getting the shared HTTP client from the context."""
        mock_client = AsyncMock(spec=AsyncClient)
        context = AppContext(settings=mock_settings, http_client=mock_client)

        assert await get_http_client(context) is mock_client

    @pytest.mark.asyncio
    async def test_get_app_settings(self, mock_settings):
        """Test getting settings from the context."""
        context = AppContext(settings=mock_settings, http_client=AsyncMock(spec=AsyncClient))

        assert await get_app_settings(context) is mock_settings


class TestAppContext:
    """Tests for AppContext."""

    def test_uptime_is_non_negative(self, mock_settings):
        """Test uptime starts at zero or above."""
        context = AppContext(settings=mock_settings, http_client=AsyncMock(spec=AsyncClient))

        assert context.uptime_seconds() >= 0
        assert context.started_at.tzinfo is not None
