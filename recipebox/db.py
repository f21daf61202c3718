"""
Database persistence layer for favorites.

Favorites live in a single ``favorites`` table in a file-backed SQLite database
(``data/recipes.db`` at the project root by default). Set DATABASE_URL to point
the store at another SQLAlchemy URL; SQLite and PostgreSQL are supported for
the upsert statement.

The table is created on startup if it does not exist (init_db). There are no
migrations beyond that.

Every repository function below runs exactly one statement in its own session
and commits it. Errors are logged, rolled back and re-raised; recipebox.favorites
turns them into StorageError for the API.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from sqlalchemy import create_engine, Column, Text, DateTime
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.sql import func

from api.config import DatabaseConfig

logger = logging.getLogger(__name__)

Base = declarative_base()

# Engine and session factory, replaced by configure_engine()
engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None


class FavoriteRow(Base):
    """Favorites table - one row per saved recipe id."""
    __tablename__ = "favorites"

    id = Column(Text, primary_key=True)
    title = Column(Text, nullable=False)
    thumb = Column(Text, nullable=True)
    source = Column(Text, nullable=True)
    saved_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True, index=True)


def utcnow() -> datetime:
    """Timestamp assigned to newly saved favorites."""
    return datetime.now(timezone.utc)


def _sqlite_file_path(url: str) -> Optional[Path]:
    """Return the database file of a SQLite URL, or None for other backends and :memory:."""
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return None
    database = parsed.database
    if not database or database == ":memory:":
        return None
    return Path(database)


def configure_engine(database_url: Optional[str] = None) -> Engine:
    """
    (Re)create the engine and session factory.

    Args:
        database_url: SQLAlchemy URL (optional, defaults to DatabaseConfig.get_database_url())

    Returns:
        The new Engine
    """
    global engine, SessionLocal

    url = database_url or DatabaseConfig.get_database_url()

    connect_args = {}
    if url.startswith("sqlite"):
        # One engine is shared by all request threads
        connect_args = {"check_same_thread": False}

    if engine is not None:
        engine.dispose()

    engine = create_engine(url, connect_args=connect_args, echo=False)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    logger.debug("Database engine configured for %s", make_url(url).get_backend_name())
    return engine


def get_engine() -> Engine:
    """Return the current engine, configuring it from the environment on first use."""
    if engine is None:
        configure_engine()
    return engine


def get_database_backend() -> str:
    """Name of the database backend in use (e.g. "sqlite")."""
    return get_engine().dialect.name


def init_db() -> None:
    """
    Create the favorites table if it does not exist.

    For file-backed SQLite the parent directory is created first. Safe to call
    multiple times.

    Raises:
        Exception: If the directory or table cannot be created
    """
    current = get_engine()

    db_file = _sqlite_file_path(str(current.url))
    if db_file is not None:
        db_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        Base.metadata.create_all(bind=current)
        logger.info("Database tables initialized (or already exist)")
    except Exception as e:
        logger.error("Failed to initialize database tables: %s", e)
        raise


def get_db_session() -> Session:
    """
    Get a database session bound to the current engine.

    Returns:
        SQLAlchemy Session object
    """
    get_engine()
    return SessionLocal()


def _row_to_dict(row: FavoriteRow) -> dict:
    return {
        "id": row.id,
        "title": row.title,
        "thumb": row.thumb or "",
        "source": row.source or "",
        "saved_at": row.saved_at,
    }


def _insert_for(dialect_name: str):
    """Return the dialect-specific insert() that supports ON CONFLICT."""
    if dialect_name == "postgresql":
        return postgresql.insert
    return sqlite.insert


# ============================================================================
# Favorites Repository Functions
# ============================================================================

def db_list_favorites() -> List[dict]:
    """
    Get all favorites, newest saved_at first.

    Returns:
        List of dictionaries with id, title, thumb, source and saved_at keys
    """
    db = get_db_session()
    try:
        rows = db.query(FavoriteRow).order_by(FavoriteRow.saved_at.desc()).all()
        return [_row_to_dict(row) for row in rows]
    except Exception as e:
        logger.error("Error reading favorites from database: %s", e)
        raise
    finally:
        db.close()


def db_upsert_favorite(favorite_id: str, title: str, thumb: str = "", source: str = "") -> None:
    """
    Insert a favorite, or overwrite title/thumb/source if the id already exists.

    saved_at is only set on insert; a conflicting save keeps the original value.

    Args:
        favorite_id: Recipe identifier (primary key)
        title: Recipe title
        thumb: Thumbnail URL
        source: Source URL
    """
    db = get_db_session()
    try:
        insert = _insert_for(db.get_bind().dialect.name)
        stmt = insert(FavoriteRow.__table__).values(
            id=favorite_id,
            title=title,
            thumb=thumb,
            source=source,
            saved_at=utcnow(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["id"],
            set_={
                "title": stmt.excluded.title,
                "thumb": stmt.excluded.thumb,
                "source": stmt.excluded.source,
            },
        )
        db.execute(stmt)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error("Error upserting favorite %s: %s", favorite_id, e)
        raise
    finally:
        db.close()


def db_update_favorite_title(favorite_id: str, title: str) -> int:
    """
    Set the title of a favorite.

    Args:
        favorite_id: Recipe identifier
        title: New title

    Returns:
        Number of rows updated (0 when the id does not exist)
    """
    db = get_db_session()
    try:
        updated = (
            db.query(FavoriteRow)
            .filter(FavoriteRow.id == favorite_id)
            .update({FavoriteRow.title: title}, synchronize_session=False)
        )
        db.commit()
        return updated
    except Exception as e:
        db.rollback()
        logger.error("Error updating favorite %s: %s", favorite_id, e)
        raise
    finally:
        db.close()


def db_delete_favorite(favorite_id: str) -> int:
    """
    Delete a favorite.

    Args:
        favorite_id: Recipe identifier

    Returns:
        Number of rows deleted (0 when the id does not exist)
    """
    db = get_db_session()
    try:
        deleted = (
            db.query(FavoriteRow)
            .filter(FavoriteRow.id == favorite_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted
    except Exception as e:
        db.rollback()
        logger.error("Error deleting favorite %s: %s", favorite_id, e)
        raise
    finally:
        db.close()


def db_count_favorites() -> int:
    """
    Get the number of saved favorites.
    """
    db = get_db_session()
    try:
        return db.query(FavoriteRow).count()
    finally:
        db.close()
