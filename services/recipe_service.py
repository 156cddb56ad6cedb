"""
Recipe management service for the Chefs Table application.

Validates author and ingredient references before handing recipes to
RecipeRepository, so callers get InvalidArgumentError instead of a storage
constraint failure.
"""

from typing import List, Optional, Union

from models import Recipe, RecipeIngredient, Page, PageOptions, InvalidArgumentError
from utils import get_logger

from .chef_repository import ChefRepository
from .ingredient_repository import IngredientRepository
from .recipe_repository import RecipeRepository

logger = get_logger(__name__)


class RecipeService:
    """Recipe CRUD, search, and ingredient line management."""

    def __init__(self, recipe_repository: RecipeRepository, chef_repository: ChefRepository,
                 ingredient_repository: IngredientRepository):
        self.recipe_repository = recipe_repository
        self.chef_repository = chef_repository
        self.ingredient_repository = ingredient_repository

    def find_recipe(self, recipe_id: int) -> Optional[Recipe]:
        return self.recipe_repository.get_by_id(recipe_id)

    def get_recipes_by_chef(self, chef_id: int) -> List[Recipe]:
        return self.recipe_repository.get_by_chef(chef_id)

    def save_recipe(self, recipe: Recipe) -> Recipe:
        """
        Create when the recipe has no id yet, otherwise update it.
        Returns the stored recipe with its author and ingredient lines resolved.
        """
        if not (recipe.name or "").strip():
            raise InvalidArgumentError("Recipe name is required")
        if recipe.author is None or not self.chef_repository.exists(recipe.author.id):
            raise InvalidArgumentError(f"Unknown author: {recipe.author_id}")
        for line in recipe.ingredients:
            self._require_ingredient(line.ingredient_id)

        if recipe.id == 0:
            self.recipe_repository.create(recipe)
            logger.info(f"Created recipe {recipe.id}: {recipe.name}")
        else:
            self.recipe_repository.update(recipe)
        return self.recipe_repository.get_by_id(recipe.id)

    def delete_recipe(self, recipe_id: int) -> bool:
        return self.recipe_repository.delete(recipe_id)

    def search_recipes(self, term: Optional[str] = None,
                       page_options: Optional[PageOptions] = None) -> Union[List[Recipe], Page[Recipe]]:
        if page_options is None:
            return self.recipe_repository.search(term)
        return self.recipe_repository.search_page(term, page_options)

    def add_ingredient_to_recipe(self, recipe_id: int, ingredient_id: int, quantity: float = 0.0,
                                 unit: str = "") -> Optional[RecipeIngredient]:
        """Add an ingredient line; None when the recipe does not exist"""
        if not self.recipe_repository.exists(recipe_id):
            return None
        self._require_ingredient(ingredient_id)
        return self.recipe_repository.add_ingredient(recipe_id, ingredient_id, quantity, unit)

    def remove_ingredient_from_recipe(self, recipe_id: int, ingredient_id: int) -> bool:
        return self.recipe_repository.remove_ingredient(recipe_id, ingredient_id)

    def _require_ingredient(self, ingredient_id: int):
        if not self.ingredient_repository.exists(ingredient_id):
            raise InvalidArgumentError(f"Unknown ingredient: {ingredient_id}")
