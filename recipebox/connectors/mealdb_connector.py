"""
TheMealDB connector.

This connector talks to TheMealDB's public JSON API with ``requests``:

- ``GET {base_url}/search.php?s=<query>`` for free-text search
- ``GET {base_url}/random.php`` for a random pick

Both endpoints answer ``{"meals": [...]}`` or ``{"meals": null}`` when nothing
matched. The connector only extracts that list; normalization into the
canonical recipe shape happens in recipebox.normalize.

The base URL defaults to the free v1 test key endpoint and can be overridden
with MEALDB_BASE_URL. MEALDB_TIMEOUT sets a request timeout in seconds; when
unset, requests wait for the upstream indefinitely.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from api.config import MealDBConfig
from recipebox.errors import UpstreamError

from .base import BaseCatalogConnector

logger = logging.getLogger(__name__)


class MealDBConnector(BaseCatalogConnector):
    """
    Connector for TheMealDB recipe catalog.
    """
    provider = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API root (optional, reads MEALDB_BASE_URL or uses the public v1 endpoint)
            timeout: Request timeout in seconds (optional, reads MEALDB_TIMEOUT; None waits forever)
            session: requests.Session to reuse (optional, module-level requests is used otherwise)
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()
        self.session = session

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Issue a GET request and return the decoded JSON body.

        Raises:
            UpstreamError: On network errors, non-2xx status codes, or invalid JSON.
        """
        url = f"{self.base_url}/{path}"
        http = self.session or requests

        logger.debug("MealDB request: %s params=%s", url, params)
        try:
            response = http.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise UpstreamError(
                f"MealDB returned HTTP {status_code} for {path}", status_code=status_code
            ) from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Could not reach MealDB ({path}): {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"MealDB returned invalid JSON for {path}") from e

        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected response format from MealDB for {path}")
        return data

    @staticmethod
    def _extract_meals(data: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Return the ``meals`` list, treating an absent or null list as empty."""
        meals = data.get("meals")
        if not isinstance(meals, list):
            return []
        return [meal for meal in meals if isinstance(meal, dict)]

    def search_recipes(self, query: str) -> List[Dict[str, Any]]:
        """
        Search TheMealDB by meal name.

        Args:
            query: Search string, already stripped by the caller

        Returns:
            Raw meal dictionaries (idMeal, strMeal, strMealThumb, strSource, strYoutube, ...)
        """
        data = self._get("search.php", params={"s": query})
        meals = self._extract_meals(data)
        logger.debug("MealDB search '%s' returned %d meals", query, len(meals))
        return meals

    def random_recipes(self) -> List[Dict[str, Any]]:
        """
        Fetch a random meal from TheMealDB.

        Returns:
            Raw meal dictionaries (TheMealDB returns exactly one, or null)
        """
        data = self._get("random.php")
        return self._extract_meals(data)
