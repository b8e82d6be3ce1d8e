"""
Abstract base class for match result collectors.

A collector receives the serialized results of a simulated group and
forwards them somewhere outside the simulator (a statistics server, a log).
"""

from abc import ABC, abstractmethod


class ResultsCollector(ABC):
    """Abstract base class for result collectors."""

    @property
    @abstractmethod
    def collector_name(self) -> str:
        """Return the collector name (e.g., 'http')."""
        pass

    @abstractmethod
    async def submit_results(self, results_json: str) -> bool:
        """
        Submit serialized match results.

        Args:
            results_json: JSON array produced by results_to_json

        Returns:
            True if the collector accepted the results

        Raises:
            CollectorError: If the payload is empty or the collector failed
        """
        pass


class CollectorError(Exception):
    """Raised when results cannot be delivered to a collector."""
    pass
