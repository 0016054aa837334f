"""
Nutrition Service Interface (Port).

Defines the interface for the external nutrition lookup. The API passes the
upstream response through unchanged.
"""
from typing import Protocol, List, Dict, Any


class NutritionService(Protocol):
    """Protocol for nutrition lookups by free-text query (e.g. "100g apple")."""

    async def lookup(self, query: str) -> List[Dict[str, Any]]:
        """
        Look up nutrition facts.

        Args:
            query: Free-text food description with optional quantity

        Returns:
            The upstream JSON array, unchanged

        Raises:
            UpstreamFailure: If the service is unreachable or returns an error
        """
        ...
