"""
HTTP statistics collector.

Posts group results to the worldwide statistics server as a form field,
the same way the mobile app always has: `data=<json array>`.
"""

import logging
import os

import httpx

from .base import ResultsCollector, CollectorError


logger = logging.getLogger(__name__)

STATS_COLLECTOR_URL = os.getenv("STATS_COLLECTOR_URL", "http://testdrive.madthijs.com/socceroo/")
STATS_COLLECTOR_TIMEOUT = float(os.getenv("STATS_COLLECTOR_TIMEOUT", "30"))


class StatsServerCollector(ResultsCollector):
    """Sends results to the statistics server over HTTP."""

    def __init__(self, url: str = STATS_COLLECTOR_URL, timeout: float = STATS_COLLECTOR_TIMEOUT):
        """
        Initialize the collector.

        Args:
            url: Statistics server endpoint
            timeout: HTTP request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    @property
    def collector_name(self) -> str:
        return "http"

    async def submit_results(self, results_json: str) -> bool:
        # An empty string is the serializer's failure signal, not "no matches"
        if not results_json:
            raise CollectorError("No results to submit: serialization failed")

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(self.url, data={"data": results_json})
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(f"Statistics server rejected results: {e}")
                raise CollectorError(f"Statistics server error: {e}")
            except httpx.RequestError as e:
                logger.warning(f"Could not reach statistics server: {e}")
                raise CollectorError(f"Network error: {e}")

        logger.info(f"Submitted results to {self.url} ({response.status_code})")
        return True
