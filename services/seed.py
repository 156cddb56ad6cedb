"""
Sample data for a fresh Chefs Table database.
"""

from models import Chef, Ingredient, Recipe, RecipeIngredient
from utils import get_logger, log_operation

from .chef_repository import ChefRepository
from .database_service import DatabaseService
from .ingredient_repository import IngredientRepository
from .recipe_repository import RecipeRepository

logger = get_logger(__name__)

SAMPLE_CHEFS = [
    ("JoeCool", "snoopy@null.com", "redbarron", False),
    ("CharlieBrown", "goodgrief@peanuts.com", "thegreatpumpkin", False),
    ("HeadChef", "headchef@example.com", "darkgreenlight", True),
]

SAMPLE_INGREDIENTS = [
    "carrot", "potato", "tomato", "lemon", "rice", "stone",
]

# (name, instructions, author index, [(ingredient index, quantity, unit)])
SAMPLE_RECIPES = [
    ("carrot soup", "Put carrot in water. Boil. Maybe salt.", 0,
     [(0, 4, "whole"), (1, 2, "whole")]),
    ("potato soup", "Put potato in water. Boil. Maybe salt.", 1,
     [(1, 3, "whole")]),
    ("tomato soup", "Put tomato in water. Boil. Maybe salt.", 1,
     [(2, 5, "whole"), (3, 0.5, "whole")]),
    ("lemon rice soup", "Put lemon and rice in water. Boil. Maybe salt.", 1,
     [(3, 1, "whole"), (4, 1, "cup")]),
    ("stone soup", "Put stone in water. Boil. Maybe salt.", 2,
     [(5, 1, "whole"), (0, 1, "whole"), (1, 1, "whole")]),
]


def seed_sample_data(db: DatabaseService) -> bool:
    """Insert sample chefs, ingredients and recipes if the database is empty"""
    if not db.is_empty():
        logger.info("Database already has data; skipping sample data")
        return False

    chef_repository = ChefRepository(db)
    ingredient_repository = IngredientRepository(db)
    recipe_repository = RecipeRepository(db, chef_repository)

    with log_operation(logger, "seed sample data") as operation:
        chefs = []
        for username, email, password, is_admin in SAMPLE_CHEFS:
            chef = Chef(username=username, email=email, password=password, is_admin=is_admin)
            chef_repository.create(chef)
            chefs.append(chef)

        ingredients = []
        for name in SAMPLE_INGREDIENTS:
            ingredient = Ingredient(name=name)
            ingredient_repository.create(ingredient)
            ingredients.append(ingredient)

        for name, instructions, author_index, lines in SAMPLE_RECIPES:
            recipe = Recipe(
                name=name,
                instructions=instructions,
                author=chefs[author_index],
                ingredients=[
                    RecipeIngredient(recipe_id=0, ingredient_id=ingredients[index].id,
                                     quantity=quantity, unit=unit)
                    for index, quantity, unit in lines
                ]
            )
            recipe_repository.create(recipe)
        operation.info(f"{len(chefs)} chefs, {len(ingredients)} ingredients, {len(SAMPLE_RECIPES)} recipes")
    return True
