"""
Ingredient management service for the Chefs Table application.

Provides ingredient CRUD and search on top of IngredientRepository.
Deleting an ingredient also unlinks it from every recipe that uses it.
"""

from typing import List, Optional, Union

from models import Ingredient, Page, PageOptions, InvalidArgumentError
from utils import get_logger

from .ingredient_repository import IngredientRepository

logger = get_logger(__name__)


class IngredientService:
    """Ingredient CRUD and search."""

    def __init__(self, ingredient_repository: IngredientRepository):
        self.ingredient_repository = ingredient_repository

    def find_ingredient(self, ingredient_id: int) -> Optional[Ingredient]:
        return self.ingredient_repository.get_by_id(ingredient_id)

    def save_ingredient(self, ingredient: Ingredient) -> Ingredient:
        """Create when the ingredient has no id yet, otherwise update"""
        name = (ingredient.name or "").strip()
        if not name:
            raise InvalidArgumentError("Ingredient name is required")
        ingredient.name = name

        if ingredient.id == 0:
            self.ingredient_repository.create(ingredient)
            logger.info(f"Created ingredient {ingredient.id}: {ingredient.name}")
        else:
            self.ingredient_repository.update(ingredient)
        return ingredient

    def delete_ingredient(self, ingredient_id: int) -> bool:
        return self.ingredient_repository.delete(ingredient_id)

    def search_ingredients(self, term: Optional[str] = None,
                           page_options: Optional[PageOptions] = None) -> Union[List[Ingredient], Page[Ingredient]]:
        if page_options is None:
            return self.ingredient_repository.search(term)
        return self.ingredient_repository.search_page(term, page_options)
