"""
Recipe-related data models for the Chefs Table application.

All models use dataclasses that map to the sqlite tables managed by
DatabaseService. An id of 0 means the entity has not been persisted yet.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Dict, Any

from .user_models import Chef


@dataclass
class Ingredient:
    """Ingredient model mapping to the ingredient table."""
    id: int = 0
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}


@dataclass
class RecipeIngredient:
    """
    Join row between a recipe and an ingredient with its quantity.
    Enables the many-to-many relationship between recipes and ingredients.
    """
    recipe_id: int
    ingredient_id: int
    quantity: float = 0.0
    unit: str = ""
    ingredient_name: str = ""
    id: int = 0

    def get_display_text(self) -> str:
        """Format ingredient line for display in a recipe"""
        quantity_str = f"{self.quantity:g}" if self.quantity != int(self.quantity) else str(int(self.quantity))
        text = f"{quantity_str} {self.unit}".strip()
        if self.ingredient_name:
            text += f" {self.ingredient_name}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'recipeId': self.recipe_id,
            'ingredientId': self.ingredient_id,
            'ingredientName': self.ingredient_name,
            'quantity': self.quantity,
            'unit': self.unit,
        }


@dataclass
class Recipe:
    """
    Core recipe model mapping to the recipe table.
    The author is always resolved to a full Chef by RecipeRepository.
    """
    id: int = 0
    name: str = ""
    instructions: str = ""
    author: Optional[Chef] = None

    # Relationship fields (populated by RecipeRepository)
    ingredients: List[RecipeIngredient] = field(default_factory=list)

    @property
    def author_id(self) -> int:
        return self.author.id if self.author else 0

    @property
    def ingredient_ids(self) -> Set[int]:
        return {line.ingredient_id for line in self.ingredients}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'instructions': self.instructions,
            'author': self.author.to_dict() if self.author else None,
            'ingredients': [line.to_dict() for line in self.ingredients],
        }
