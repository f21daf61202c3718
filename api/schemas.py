"""
Pydantic schemas for FastAPI request and response models.

The schemas include:
- FavoriteCreate: body of POST /api/favorites
- FavoriteTitleUpdate: body of PUT /api/favorites/{id}
- OkResponse: ``{"ok": true}`` acknowledgement for write endpoints
- ErrorResponse: ``{"error": "..."}`` body for 400/500 answers

Recipe and Favorite response models live in recipebox.models.

NOTE: Request fields are optional at the schema level. Missing or
    empty id/title produce a 400 {"error": ...} from the favorites store,
    not FastAPI's default 422 validation payload.
"""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class FavoriteCreate(BaseModel):
    """
    Request body for saving a favorite.
    """
    id: Optional[str] = Field(None, description="Recipe identifier (required, non-empty)")
    title: Optional[str] = Field(None, description="Recipe title (required, non-empty)")
    thumb: Optional[str] = Field("", description="Thumbnail URL")
    source: Optional[str] = Field("", description="Source URL")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,  # TheMealDB ids are numeric strings; accept plain numbers too
        json_schema_extra={
            "example": {
                "id": "52772",
                "title": "Teriyaki Chicken Casserole",
                "thumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
                "source": "",
            }
        },
    )


class FavoriteTitleUpdate(BaseModel):
    """
    Request body for renaming a favorite.
    """
    title: Optional[str] = Field(None, description="New title (required, non-empty)")

    model_config = ConfigDict(coerce_numbers_to_str=True)


class OkResponse(BaseModel):
    """Acknowledgement returned by write endpoints."""
    ok: bool = True


class ErrorResponse(BaseModel):
    """Short error message returned with 400 and 500 responses."""
    error: str
