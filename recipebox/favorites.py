"""
Favorites store.

Thin service layer over the favorites table in recipebox.db:
- Validates required fields before touching the database (ValidationError)
- Converts rows into Favorite models
- Maps database failures onto StorageError

Update and delete deliberately skip existence checks: editing or removing an
unknown id is a silent no-op that still reports success.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from recipebox import db
from recipebox.errors import StorageError, ValidationError
from recipebox.models import Favorite

logger = logging.getLogger(__name__)


def list_favorites() -> List[Favorite]:
    """
    List all favorites, most recently saved first.

    Raises:
        StorageError: If the favorites table cannot be read
    """
    try:
        return [Favorite(**row) for row in db.db_list_favorites()]
    except (SQLAlchemyError, PydanticValidationError) as e:
        raise StorageError("read failed") from e


def upsert_favorite(
    favorite_id: str,
    title: str,
    thumb: Optional[str] = "",
    source: Optional[str] = "",
) -> None:
    """
    Save a favorite, overwriting title, thumb and source if the id exists.

    The original saved_at is kept when the id already exists.

    Raises:
        ValidationError: If favorite_id or title is None or ""
        StorageError: If the statement fails
    """
    if not favorite_id or not title:
        raise ValidationError("id and title required")

    try:
        db.db_upsert_favorite(str(favorite_id), title, thumb or "", source or "")
    except SQLAlchemyError as e:
        raise StorageError("save failed") from e
    logger.info("Saved favorite %s", favorite_id)


def update_favorite_title(favorite_id: str, title: str) -> None:
    """
    Rename a favorite. Unknown ids are ignored.

    Raises:
        ValidationError: If title is None or ""
        StorageError: If the statement fails
    """
    if not title:
        raise ValidationError("title required")

    try:
        updated = db.db_update_favorite_title(favorite_id, title)
    except SQLAlchemyError as e:
        raise StorageError("update failed") from e
    logger.debug("Title update for favorite %s touched %d rows", favorite_id, updated)


def remove_favorite(favorite_id: str) -> None:
    """
    Delete a favorite. Idempotent.

    Raises:
        StorageError: If the statement fails
    """
    try:
        deleted = db.db_delete_favorite(favorite_id)
    except SQLAlchemyError as e:
        raise StorageError("delete failed") from e
    logger.debug("Delete of favorite %s touched %d rows", favorite_id, deleted)
