"""
Recipe persistence (raw SQL).

Every recipe read resolves its author to a full Chef through ChefRepository
and loads its ingredient lines. Both are done per batch of rows, so a page
of recipes costs two extra queries rather than two per recipe.
"""

import sqlite3
from collections import defaultdict
from typing import Dict, List, Sequence, Union

from models import Recipe, RecipeIngredient
from utils import get_logger

from .base_repository import BaseRepository
from .chef_repository import ChefRepository
from .database_service import DatabaseService

logger = get_logger(__name__)


class RecipeRepository(BaseRepository[Recipe]):
    """Recipe rows; searched by name."""

    table = "recipe"
    search_column = "name"
    sortable_columns = {
        'id': 'id',
        'name': 'name',
        'author': 'chef_id',
        'chef_id': 'chef_id',
    }

    def __init__(self, database_service: DatabaseService, chef_repository: ChefRepository):
        super().__init__(database_service)
        self.chef_repository = chef_repository

    # Mapping

    def _rows_to_entities(self, rows: Sequence[sqlite3.Row]) -> List[Recipe]:
        if not rows:
            return []
        authors = self.chef_repository.get_by_ids(row['chef_id'] for row in rows if row['chef_id'] is not None)
        lines = self._get_ingredient_lines([row['id'] for row in rows])

        recipes = []
        for row in rows:
            author = authors.get(row['chef_id'])
            if author is None:
                logger.warning(f"Recipe {row['id']} references missing chef {row['chef_id']}")
            recipes.append(Recipe(
                id=row['id'],
                name=row['name'],
                instructions=row['instructions'] or '',
                author=author,
                ingredients=lines.get(row['id'], [])
            ))
        return recipes

    def _get_ingredient_lines(self, recipe_ids: List[int]) -> Dict[int, List[RecipeIngredient]]:
        placeholders = ','.join(['?'] * len(recipe_ids))
        with self.db.get_connection() as conn:
            rows = conn.execute(f"""
                SELECT ri.*, i.name AS ingredient_name
                FROM recipe_ingredient ri
                JOIN ingredient i ON ri.ingredient_id = i.id
                WHERE ri.recipe_id IN ({placeholders})
                ORDER BY ri.id
            """, recipe_ids).fetchall()

        lines = defaultdict(list)
        for row in rows:
            lines[row['recipe_id']].append(RecipeIngredient(
                id=row['id'],
                recipe_id=row['recipe_id'],
                ingredient_id=row['ingredient_id'],
                quantity=row['quantity'],
                unit=row['unit'] or '',
                ingredient_name=row['ingredient_name']
            ))
        return lines

    # Queries

    def get_by_chef(self, chef_id: int) -> List[Recipe]:
        if not self._is_storable_id(chef_id):
            return []
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT * FROM recipe WHERE chef_id = ? ORDER BY id", (chef_id,)).fetchall()
        return self._rows_to_entities(rows)

    # Mutations

    def create(self, recipe: Recipe) -> int:
        """Insert a recipe with its ingredient lines and set its id"""
        with self.db.transaction() as conn:
            cursor = conn.execute("""
                INSERT INTO recipe (name, instructions, chef_id) VALUES (?, ?, ?)
            """, (recipe.name, recipe.instructions, recipe.author_id or None))
            recipe.id = cursor.lastrowid
            for line in recipe.ingredients:
                line.recipe_id = recipe.id
                line.id = self._insert_line(conn, line)
        return recipe.id

    def update(self, recipe: Recipe) -> bool:
        """Update name, instructions and author; ingredient lines are managed separately"""
        with self.db.transaction() as conn:
            cursor = conn.execute("""
                UPDATE recipe SET name = ?, instructions = ?, chef_id = ? WHERE id = ?
            """, (recipe.name, recipe.instructions, recipe.author_id or None, recipe.id))
            return cursor.rowcount > 0

    def delete(self, recipe_or_id: Union[Recipe, int]) -> bool:
        """Delete a recipe and its ingredient lines"""
        recipe_id = self._entity_id(recipe_or_id)
        if not self._is_storable_id(recipe_id):
            return False
        with self.db.transaction() as conn:
            conn.execute("DELETE FROM recipe_ingredient WHERE recipe_id = ?", (recipe_id,))
            cursor = conn.execute("DELETE FROM recipe WHERE id = ?", (recipe_id,))
            return cursor.rowcount > 0

    def add_ingredient(self, recipe_id: int, ingredient_id: int, quantity: float = 0.0,
                       unit: str = "") -> RecipeIngredient:
        line = RecipeIngredient(recipe_id=recipe_id, ingredient_id=ingredient_id,
                                quantity=quantity, unit=unit)
        with self.db.transaction() as conn:
            line.id = self._insert_line(conn, line)
        return line

    def remove_ingredient(self, recipe_id: int, ingredient_id: int) -> bool:
        if not (self._is_storable_id(recipe_id) and self._is_storable_id(ingredient_id)):
            return False
        with self.db.transaction() as conn:
            cursor = conn.execute("""
                DELETE FROM recipe_ingredient WHERE recipe_id = ? AND ingredient_id = ?
            """, (recipe_id, ingredient_id))
            return cursor.rowcount > 0

    def _insert_line(self, conn: sqlite3.Connection, line: RecipeIngredient) -> int:
        cursor = conn.execute("""
            INSERT INTO recipe_ingredient (recipe_id, ingredient_id, quantity, unit)
            VALUES (?, ?, ?, ?)
        """, (line.recipe_id, line.ingredient_id, line.quantity, line.unit))
        return cursor.lastrowid
