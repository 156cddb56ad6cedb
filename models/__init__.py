"""
Data models for the Chefs Table application.

This module contains the entity classes (Chef, Ingredient, Recipe), the
paging types shared by every repository, and the error taxonomy.
"""

from .user_models import Chef
from .recipe_models import Ingredient, Recipe, RecipeIngredient
from .page_models import PageOptions, Page
from .errors import (
    CookbookError, InvalidArgumentError, ConflictError, UnauthenticatedError, StorageError
)

__all__ = [
    'Chef',
    'Ingredient',
    'Recipe',
    'RecipeIngredient',
    'PageOptions',
    'Page',
    'CookbookError',
    'InvalidArgumentError',
    'ConflictError',
    'UnauthenticatedError',
    'StorageError'
]
