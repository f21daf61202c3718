"""
Catalog proxy over the upstream recipe API.

This module is the backend's single entry point for catalog reads:
- search(): free-text search, normalized into a list of Recipe objects
- random_recipe(): one random Recipe, or None when the catalog returns nothing

Blank queries short-circuit to an empty list without touching the network.
Upstream failures propagate as UpstreamError; nothing is cached and no partial
results are ever returned.

Search flow: Streamlit -> GET /api/search -> search() -> MealDBConnector.search_recipes() -> normalize_recipe() -> Recipe
"""

import logging
from typing import List, Optional

from recipebox.models import Recipe
from recipebox.normalize import normalize_recipe

from .connectors.base import BaseCatalogConnector
from .connectors.mealdb_connector import MealDBConnector

logger = logging.getLogger(__name__)


def get_connector() -> BaseCatalogConnector:
    """Instantiate the catalog connector. Looked up at call time so tests can patch it."""
    return MealDBConnector()


def search(query: str, connector: Optional[BaseCatalogConnector] = None) -> List[Recipe]:
    """
    Search the recipe catalog.

    Args:
        query: Free-text query. Blank or whitespace-only queries return [] immediately.
        connector: Connector to use (optional, defaults to the configured provider)

    Returns:
        Normalized recipes in the order the catalog returned them

    Raises:
        UpstreamError: If the catalog request fails
    """
    q = (query or "").strip()
    if not q:
        return []

    connector = connector or get_connector()
    meals = connector.search_recipes(q)
    recipes = [normalize_recipe(meal) for meal in meals]
    logger.info("Catalog search '%s': %d recipes", q, len(recipes))
    return recipes


def random_recipe(connector: Optional[BaseCatalogConnector] = None) -> Optional[Recipe]:
    """
    Pick a random recipe from the catalog.

    Returns:
        The first returned entry, normalized, or None if the catalog returned no entries

    Raises:
        UpstreamError: If the catalog request fails
    """
    connector = connector or get_connector()
    meals = connector.random_recipes()
    if not meals:
        logger.info("Catalog random pick returned no entries")
        return None
    return normalize_recipe(meals[0])
