"""
Ingredient persistence (raw SQL).
"""

import sqlite3
from typing import List, Sequence, Union

from models import Ingredient
from utils import get_logger

from .base_repository import BaseRepository

logger = get_logger(__name__)


class IngredientRepository(BaseRepository[Ingredient]):
    """Ingredient rows; searched by name."""

    table = "ingredient"
    search_column = "name"
    sortable_columns = {
        'id': 'id',
        'name': 'name',
    }

    def _rows_to_entities(self, rows: Sequence[sqlite3.Row]) -> List[Ingredient]:
        return [Ingredient(id=row['id'], name=row['name']) for row in rows]

    def create(self, ingredient: Ingredient) -> int:
        with self.db.transaction() as conn:
            cursor = conn.execute("INSERT INTO ingredient (name) VALUES (?)", (ingredient.name,))
            ingredient.id = cursor.lastrowid
        return ingredient.id

    def update(self, ingredient: Ingredient) -> bool:
        with self.db.transaction() as conn:
            cursor = conn.execute("UPDATE ingredient SET name = ? WHERE id = ?",
                                  (ingredient.name, ingredient.id))
            return cursor.rowcount > 0

    def delete(self, ingredient_or_id: Union[Ingredient, int]) -> bool:
        """Remove the ingredient from every recipe, then delete it"""
        ingredient_id = self._entity_id(ingredient_or_id)
        if not self._is_storable_id(ingredient_id):
            return False
        with self.db.transaction() as conn:
            unlinked = conn.execute("DELETE FROM recipe_ingredient WHERE ingredient_id = ?",
                                    (ingredient_id,)).rowcount
            cursor = conn.execute("DELETE FROM ingredient WHERE id = ?", (ingredient_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted ingredient {ingredient_id} ({unlinked} recipe links removed)")
        return deleted
