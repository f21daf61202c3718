"""
Recipe normalization.

Recipe records arrive in several shapes: TheMealDB entries (``idMeal``,
``strMeal``, ...), records that were already normalized, and loosely-shaped
dictionaries coming from other clients (``name``, ``image``, ``link``). This
module maps all of them onto the canonical ``{id, title, thumb, source}`` shape.

Each canonical field has an ordered list of aliases. The first alias holding a
non-empty value wins; if none does, the field is an empty string. Normalizing
never raises.
"""

from typing import Any, Dict, List, Mapping

from recipebox.models import Recipe

# Canonical field -> aliases in priority order
FIELD_ALIASES: Dict[str, List[str]] = {
    "id": ["id", "idMeal"],
    "title": ["title", "name", "strMeal"],
    "thumb": ["thumb", "image", "strMealThumb"],
    "source": ["source", "link", "strSource", "strYoutube"],
}


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def resolve_field(record: Any, aliases: List[str]) -> str:
    """
    Return the first present, non-empty value among ``aliases`` as a string.

    Args:
        record: Mapping to read from. Anything that is not a mapping resolves to "".
        aliases: Candidate keys, highest priority first.

    Returns:
        The resolved value converted to ``str``, or "" if no alias matched.

    Examples:
        >>> resolve_field({"strMeal": "Arrabiata", "name": ""}, ["title", "name", "strMeal"])
        'Arrabiata'
        >>> resolve_field({}, ["id", "idMeal"])
        ''
    """
    if not isinstance(record, Mapping):
        return ""

    for alias in aliases:
        value = record.get(alias)
        if not _is_missing(value):
            return str(value)
    return ""


def normalize_record(record: Any) -> Dict[str, str]:
    """Normalize ``record`` into a plain ``{id, title, thumb, source}`` dict."""
    return {field: resolve_field(record, aliases) for field, aliases in FIELD_ALIASES.items()}


def normalize_recipe(record: Any) -> Recipe:
    """
    Normalize any known recipe shape into a Recipe.

    Args:
        record: TheMealDB meal, already-normalized recipe, or stored favorite.

    Returns:
        Recipe with every field set (missing fields are empty strings)
    """
    return Recipe(**normalize_record(record))
