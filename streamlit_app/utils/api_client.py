"""
Backend API Client Module.

This module is the **single source of truth** for all backend API communication.
All HTTP calls from the Streamlit frontend to the FastAPI backend go through the
functions in this module.

Key principles:
- Every function either returns parsed JSON or raises ApiError
- ApiError carries the HTTP status (when there was a response) and a short
  message the page shows to the user as-is
- No retries and no caching: the favorites list must always reflect the database
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from api.config import FrontendConfig

# Seconds to wait for the backend; catalog calls are proxied to TheMealDB so they get more room
DEFAULT_TIMEOUT = 10
CATALOG_TIMEOUT = 30


class ApiError(Exception):
    """
    Raised when a backend call fails.

    Attributes:
        message: User-facing message (e.g. "Search failed: 500")
        status_code: HTTP status of the failed response, or None for network errors
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def get_backend_url() -> str:
    """
    Get the backend API base URL from environment variable or use default.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000.
    """
    return FrontendConfig.get_backend_url()


def _request(method: str, path: str, action: str, timeout: float = DEFAULT_TIMEOUT, **kwargs) -> Any:
    """
    Perform a backend request and decode the JSON body.

    Args:
        method: HTTP method ("GET", "POST", "PUT", "DELETE")
        path: Path below the backend URL, starting with "/"
        action: Label used in error messages (e.g. "Search")

    Raises:
        ApiError: On connection problems, timeouts, non-2xx responses or invalid JSON
    """
    url = f"{get_backend_url()}{path}"
    try:
        response = requests.request(method, url, timeout=timeout, **kwargs)
    except requests.exceptions.Timeout as e:
        raise ApiError(f"{action} failed: request timed out") from e
    except requests.exceptions.ConnectionError as e:
        raise ApiError(f"{action} failed: could not connect to backend") from e
    except requests.exceptions.RequestException as e:
        raise ApiError(f"{action} failed: {e}") from e

    if not response.ok:
        raise ApiError(f"{action} failed: {response.status_code}", status_code=response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise ApiError(f"{action} failed: invalid response from backend", status_code=response.status_code) from e


def search_recipes(query: str) -> List[Dict[str, Any]]:
    """
    Search the recipe catalog.

    Args:
        query: Search query string (e.g., "chicken")

    Returns:
        List of recipe dicts with id, title, thumb, source. Non-list bodies count as no results.
    """
    data = _request("GET", "/api/search", "Search", timeout=CATALOG_TIMEOUT, params={"q": query})
    return data if isinstance(data, list) else []


def get_random_recipe() -> Optional[Dict[str, Any]]:
    """
    Get a random recipe.

    Returns:
        Recipe dict, or None if the catalog returned nothing
    """
    data = _request("GET", "/api/random", "Random", timeout=CATALOG_TIMEOUT)
    return data or None


def list_favorites() -> List[Dict[str, Any]]:
    """
    Get saved favorites, newest first.
    """
    data = _request("GET", "/api/favorites", "Favorites")
    return data if isinstance(data, list) else []


def save_favorite(recipe_id: str, title: str, thumb: str = "", source: str = "") -> Dict[str, Any]:
    """
    Save (upsert) a favorite.

    Returns:
        Acknowledgement dict ({"ok": true})
    """
    payload = {"id": recipe_id, "title": title, "thumb": thumb, "source": source}
    return _request("POST", "/api/favorites", "Save", json=payload)


def update_favorite_title(recipe_id: str, title: str) -> Dict[str, Any]:
    """
    Rename a favorite.
    """
    return _request(
        "PUT",
        f"/api/favorites/{quote(str(recipe_id), safe='')}",
        "Update",
        json={"title": title},
    )


def remove_favorite(recipe_id: str) -> Dict[str, Any]:
    """
    Delete a favorite.
    """
    return _request(
        "DELETE",
        f"/api/favorites/{quote(str(recipe_id), safe='')}",
        "Delete",
    )

