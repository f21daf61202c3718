"""
Configuration management for the Recipe Favorites app.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early in both the backend (api/main.py) and
the frontend (streamlit_app/app.py) so .env is loaded before any other code
reads environment variables.

In production .env will usually not exist; load_dotenv() then is a no-op and
platform environment variables are used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT: Optional, upstream request timeout in seconds (unset = no timeout)
- DATABASE_URL: Optional, SQLAlchemy URL (defaults to sqlite file data/recipes.db)
- BACKEND_URL: Optional, backend URL for the frontend (defaults to http://localhost:8000)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# api/config.py -> api/ -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_DATABASE_PATH = PROJECT_ROOT / "data" / "recipes.db"
DEFAULT_BACKEND_URL = "http://localhost:8000"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in the file.
    """
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB catalog connector."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get TheMealDB API root.

        Returns:
            Base URL without trailing slash (default: public v1 endpoint)
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_MEALDB_BASE_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the upstream request timeout in seconds.

        Returns:
            Timeout as float, or None (wait indefinitely) if unset or not a number
        """
        raw = os.getenv("MEALDB_TIMEOUT")
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid MEALDB_TIMEOUT=%r", raw)
            return None
        return timeout if timeout > 0 else None


class DatabaseConfig:
    """Configuration for the favorites database."""

    @staticmethod
    def get_database_url() -> str:
        """
        Get the SQLAlchemy database URL.

        Returns:
            DATABASE_URL if set, otherwise a SQLite file at data/recipes.db
        """
        return os.getenv("DATABASE_URL") or f"sqlite:///{DEFAULT_DATABASE_PATH}"


class FrontendConfig:
    """Configuration for the Streamlit frontend."""

    @staticmethod
    def get_backend_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Backend URL with trailing slash removed (default: http://localhost:8000)
        """
        return os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")


def describe_config() -> Dict[str, Any]:
    """
    Summarize the active configuration for status endpoints.

    Returns:
        Dictionary with keys:
        - mealdb_base_url: str
        - mealdb_timeout: float or None
        - database_url_set: bool (True if DATABASE_URL overrides the default file)
    """
    return {
        "mealdb_base_url": MealDBConfig.get_base_url(),
        "mealdb_timeout": MealDBConfig.get_timeout(),
        "database_url_set": bool(os.getenv("DATABASE_URL")),
    }
