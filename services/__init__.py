"""
Services package for the Chefs Table application.

Contains the sqlite row store, the pagination engine, one repository and one
service per entity, and session-based authentication.
"""

from .database_service import DatabaseService
from .pagination import calculate_total_pages, paginate, build_page, build_page_options
from .chef_repository import ChefRepository
from .ingredient_repository import IngredientRepository
from .recipe_repository import RecipeRepository
from .chef_service import ChefService
from .ingredient_service import IngredientService
from .recipe_service import RecipeService
from .session_store import SessionStore
from .auth_service import AuthService
from .seed import seed_sample_data

__all__ = [
    'DatabaseService',
    'calculate_total_pages',
    'paginate',
    'build_page',
    'build_page_options',
    'ChefRepository',
    'IngredientRepository',
    'RecipeRepository',
    'ChefService',
    'IngredientService',
    'RecipeService',
    'SessionStore',
    'AuthService',
    'seed_sample_data'
]
