"""
Result collectors.

Forward serialized group results to consumers outside the simulator.
"""

from .base import ResultsCollector, CollectorError
from .stats_server import StatsServerCollector


def get_collector(name: str = "http") -> ResultsCollector:
    """
    Get a results collector by name.

    Args:
        name: Collector name ('http')

    Returns:
        Collector instance

    Raises:
        ValueError: If the collector is not supported
    """
    if name.lower() == "http":
        return StatsServerCollector()

    raise ValueError(f"Unsupported collector: {name}. Supported: http")


__all__ = [
    "ResultsCollector",
    "CollectorError",
    "StatsServerCollector",
    "get_collector",
]
