"""
FastAPI application for the Recipe Favorites API.

This module defines the JSON API used by the Streamlit frontend:
- GET /api/search: Search the recipe catalog (TheMealDB)
- GET /api/random: Get one random recipe from the catalog
- GET /api/favorites: List saved favorites, newest first
- POST /api/favorites: Save (upsert) a favorite
- PUT /api/favorites/{id}: Rename a favorite
- DELETE /api/favorites/{id}: Remove a favorite

Errors are answered with a short ``{"error": "..."}`` body: 400 for missing
required fields, 500 for catalog or database failures.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Body, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recipebox import catalog, favorites
from recipebox.db import init_db, get_database_backend, db_count_favorites
from recipebox.errors import StorageError, UpstreamError, ValidationError
from recipebox.models import Favorite, Recipe
from api.schemas import ErrorResponse, FavoriteCreate, FavoriteTitleUpdate, OkResponse

logger = logging.getLogger(__name__)

APP_NAME = "Recipe Favorites API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "Search TheMealDB, pick a random recipe, and keep a list of favorite recipes"

# Track app start time for uptime calculation
_APP_START_TIME = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the favorites table on startup if it does not exist."""
    init_db()
    yield


app = FastAPI(
    title=APP_NAME,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "catalog",
            "description": "Search and random picks from the upstream recipe catalog.",
        },
        {
            "name": "favorites",
            "description": "Create, list, rename and delete saved favorites.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing required field"},
    500: {"model": ErrorResponse, "description": "Catalog or database failure"},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": message}`` response used by every endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with 400 {"error": ...} instead of 422."""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")


@app.get(
    "/api/search",
    response_model=List[Recipe],
    responses={500: ERROR_RESPONSES[500]},
    tags=["catalog"],
    summary="Search the recipe catalog",
)
def search_recipes(
    q: str = Query("", description="Search query (e.g., 'chicken'). Blank returns an empty list."),
):
    """
    Search the recipe catalog by name.

    Args:
        q: Search query string. Blank or whitespace-only queries return [] without
           calling the catalog.

    Returns:
        List of normalized recipes ``{id, title, thumb, source}``

    Example:
        ```bash
        GET /api/search?q=chicken
        ```
    """
    try:
        return catalog.search(q)
    except UpstreamError as e:
        logger.error("SEARCH error: %s", e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "search failed")
    except Exception:
        logger.exception("SEARCH error")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "search failed")


@app.get(
    "/api/random",
    response_model=Optional[Recipe],
    responses={500: ERROR_RESPONSES[500]},
    tags=["catalog"],
    summary="Get a random recipe",
)
def random_recipe():
    """
    Get one random recipe from the catalog.

    Returns:
        A normalized recipe, or null if the catalog returned no entries
    """
    try:
        return catalog.random_recipe()
    except UpstreamError as e:
        logger.error("RANDOM error: %s", e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "random failed")
    except Exception:
        logger.exception("RANDOM error")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "random failed")


@app.get(
    "/api/favorites",
    response_model=List[Favorite],
    responses={500: ERROR_RESPONSES[500]},
    tags=["favorites"],
    summary="List saved favorites",
)
def list_favorites():
    """
    List all saved favorites, most recently saved first.
    """
    try:
        return favorites.list_favorites()
    except StorageError as e:
        logger.error("DB READ error: %s", e.__cause__ or e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)


@app.post(
    "/api/favorites",
    response_model=OkResponse,
    responses=ERROR_RESPONSES,
    tags=["favorites"],
    summary="Save a favorite",
    description="Insert a favorite, or overwrite title/thumb/source if the id is already saved.",
)
def create_favorite(payload: Optional[FavoriteCreate] = Body(None)):
    """
    Save a favorite (upsert by id).

    Example:
        ```bash
        POST /api/favorites
        Body: {"id": "52772", "title": "Teriyaki Chicken Casserole"}
        ```
    """
    payload = payload or FavoriteCreate()
    try:
        favorites.upsert_favorite(payload.id, payload.title, payload.thumb, payload.source)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except StorageError as e:
        logger.error("DB UPSERT error: %s", e.__cause__ or e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    return OkResponse()


@app.put(
    "/api/favorites/{favorite_id}",
    response_model=OkResponse,
    responses=ERROR_RESPONSES,
    tags=["favorites"],
    summary="Rename a favorite",
    description="Set a new title. Unknown ids are ignored and still answer {ok: true}.",
)
def update_favorite(favorite_id: str, payload: Optional[FavoriteTitleUpdate] = Body(None)):
    """
    Update the title of a favorite.

    Example:
        ```bash
        PUT /api/favorites/52772
        Body: {"title": "New Name"}
        ```
    """
    payload = payload or FavoriteTitleUpdate()
    try:
        favorites.update_favorite_title(favorite_id, payload.title)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.message)
    except StorageError as e:
        logger.error("DB UPDATE error: %s", e.__cause__ or e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    return OkResponse()


@app.delete(
    "/api/favorites/{favorite_id}",
    response_model=OkResponse,
    responses={500: ERROR_RESPONSES[500]},
    tags=["favorites"],
    summary="Remove a favorite",
    description="Delete a favorite. Deleting an unknown id is a no-op.",
)
def delete_favorite(favorite_id: str):
    """Remove a favorite by id."""
    try:
        favorites.remove_favorite(favorite_id)
    except StorageError as e:
        logger.error("DB DELETE error: %s", e.__cause__ or e)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    return OkResponse()


@app.get("/health", tags=["health"])
def health():
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Dictionary with status, API metadata, uptime and database information.
        Always returns 200 OK if the endpoint is reachable; database problems are
        reported in the body.
    """
    uptime_seconds = int(time.time() - _APP_START_TIME)

    database = {"backend": None, "favorites": None, "ok": False}
    try:
        database["backend"] = get_database_backend()
        database["favorites"] = db_count_favorites()
        database["ok"] = True
    except Exception as e:
        logger.warning("Health check could not query the database: %s", e)

    return {
        "status": "ok",
        "name": APP_NAME,
        "version": APP_VERSION,
        "uptime_seconds": uptime_seconds,
        "database": database,
        "config": api.config.describe_config(),
    }


@app.get("/")
def root():
    """
    Root endpoint providing API information.
    """
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "description": APP_DESCRIPTION,
        "docs": "/docs",
    }
