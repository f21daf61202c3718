"""
Recipe and favorite models for the recipe box.

This module defines the two canonical shapes used throughout the backend:

- Recipe: transient, normalized view of a catalog entry. Only lives for the
  duration of a search or random-pick response and is never persisted.
- Favorite: a recipe reference the user saved, as stored in the favorites table.

Both share the canonical ``{id, title, thumb, source}`` fields produced by
recipebox.normalize. Missing values are empty strings, never None, so the
frontend can render them without extra checks.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class Recipe(BaseModel):
    """
    Normalized recipe record returned by the catalog proxy.
    """
    id: str = Field("", description="Provider-assigned recipe identifier (e.g. TheMealDB idMeal)")
    title: str = Field("", description="Recipe title")
    thumb: str = Field("", description="URL to a thumbnail image, empty if unknown")
    source: str = Field("", description="URL to the original recipe or video, empty if unknown")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "52772",
                "title": "Teriyaki Chicken Casserole",
                "thumb": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
                "source": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
            }
        }
    )


class Favorite(BaseModel):
    """
    A persisted, user-saved recipe reference.

    ``saved_at`` is assigned on first insert and is not refreshed when the
    same id is saved again or its title is edited.
    Rows are returned as stored; the non-empty id and title rule is enforced
    when saving, not when listing.
    """
    id: str = Field(..., description="Recipe identifier (primary key)")
    title: str = Field(..., description="Title shown in the favorites list")
    thumb: str = Field("", description="Thumbnail URL")
    source: str = Field("", description="Source URL")
    saved_at: Optional[datetime] = Field(None, description="When the favorite was first saved (UTC)")

    model_config = ConfigDict(from_attributes=True)
