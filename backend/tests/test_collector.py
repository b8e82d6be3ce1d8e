"""
Tests for the statistics server collector.
"""

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from socceroo.collector import CollectorError, StatsServerCollector, get_collector


URL = "http://stats.example.test/socceroo/"


@pytest.fixture
def collector():
    """Create a collector pointed at a test URL."""
    return StatsServerCollector(url=URL, timeout=5.0)


def response(status_code):
    return httpx.Response(status_code, text="ok", request=httpx.Request("POST", URL))


class TestStatsServerCollector:
    """Tests for StatsServerCollector."""

    def test_collector_name(self, collector):
        assert collector.collector_name == "http"

    def test_get_collector(self):
        assert isinstance(get_collector("http"), StatsServerCollector)

    def test_get_collector_unknown(self):
        with pytest.raises(ValueError, match="Unsupported collector"):
            get_collector("carrier-pigeon")

    @pytest.mark.asyncio
    async def test_submit_posts_form_field(self, collector):
        """Results are sent as the `data` form field."""
        payload = '[{"home":"AJAX","away":"MILAN","homeGoals":1,"awayGoals":0}]'
        with patch.object(httpx.AsyncClient, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = response(200)
            assert await collector.submit_results(payload) is True

        mock_post.assert_awaited_once_with(URL, data={"data": payload})

    @pytest.mark.asyncio
    async def test_empty_payload_rejected(self, collector):
        """An empty string means serialization failed and is never sent."""
        with patch.object(httpx.AsyncClient, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(CollectorError, match="serialization failed"):
                await collector.submit_results("")
        mock_post.assert_not_called()

    @pytest.mark.asyncio
    async def test_server_error(self, collector):
        with patch.object(httpx.AsyncClient, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = response(500)
            with pytest.raises(CollectorError, match="Statistics server error"):
                await collector.submit_results("[]")

    @pytest.mark.asyncio
    async def test_network_error(self, collector):
        with patch.object(httpx.AsyncClient, "post", new_callable=AsyncMock) as mock_post:
            mock_post.side_effect = httpx.ConnectError("connection refused")
            with pytest.raises(CollectorError, match="Network error"):
                await collector.submit_results("[]")
