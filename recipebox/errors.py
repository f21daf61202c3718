"""
Error taxonomy for the recipe favorites backend.

Every failure that reaches the HTTP layer is one of these exceptions. The API
maps them onto status codes and a short ``{"error": ...}`` body:

- ValidationError: required client input is missing (400)
- UpstreamError: the recipe catalog could not be reached or returned garbage (500)
- StorageError: the favorites database failed (500)
"""

from typing import Optional


class RecipeBoxError(Exception):
    """Base class for all recipe favorites errors."""

    def __init__(self, message: str = "recipe box error"):
        super().__init__(message)
        self.message = message


class ValidationError(RecipeBoxError):
    """
    Raised when a required field (id or title) is missing or blank.
    """
    pass


class UpstreamError(RecipeBoxError):
    """
    Raised when the external recipe catalog fails.

    This covers network errors, timeouts, non-success HTTP status codes and
    responses that are not valid JSON.
    """

    def __init__(self, message: str = "upstream request failed", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StorageError(RecipeBoxError):
    """
    Raised when a favorites database statement fails.
    """
    pass
