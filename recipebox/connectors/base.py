"""
Base connector abstract class for recipe catalog integrations.

This module defines the interface every recipe catalog connector implements so
the catalog proxy does not depend on a particular provider's API.

All connectors must:
- Implement the provider attribute (e.g., "mealdb")
- Provide search_recipes, returning the provider's raw recipe records
- Provide random_recipes, returning the provider's raw records for a random pick

Connectors return raw records; recipebox.normalize turns them into Recipe objects.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseCatalogConnector(ABC):
    """
    Abstract base class for all recipe catalog connectors.

    Attributes:
        provider: String identifier for the catalog (e.g., "mealdb")
    """
    provider: str

    @abstractmethod
    def search_recipes(self, query: str) -> List[Dict[str, Any]]:
        """
        Run a free-text search against the catalog.

        Args:
            query: Non-blank search string (e.g., "chicken")

        Returns:
            List of raw recipe records, empty if nothing matched.

        Raises:
            UpstreamError: If the catalog cannot be reached or answers with an error.
        """
        pass

    @abstractmethod
    def random_recipes(self) -> List[Dict[str, Any]]:
        """
        Ask the catalog for a random recipe.

        Returns:
            List of raw recipe records (normally one), empty if the catalog returned none.

        Raises:
            UpstreamError: If the catalog cannot be reached or answers with an error.
        """
        pass
