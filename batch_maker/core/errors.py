# batch_maker/core/errors.py
from __future__ import annotations


class RecipeImportError(Exception):
    """Base for everything the recipe import path raises on purpose."""


class EmptyRecipeError(RecipeImportError, ValueError):
    def __init__(self, message: str = "Empty recipe text"):
        super().__init__(message)


class RecipeNotFoundError(RecipeImportError, ValueError):
    def __init__(self, message: str = "Could not find recipe in page"):
        super().__init__(message)


class RecipeFetchError(RecipeImportError):
    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch: {status_code} {reason}".rstrip())
