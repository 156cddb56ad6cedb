"""
Recipe API endpoints, including the ingredient lines of a recipe.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from models import Chef, PageOptions, Recipe, RecipeIngredient
from services import RecipeService

from . import schemas
from .dependencies import get_current_chef, get_page_options, get_recipe_service

router = APIRouter()


@router.get("/recipes")
def list_recipes(
    term: str | None = Query(default=None, max_length=200),
    page_options: PageOptions | None = Depends(get_page_options),
    recipe_service: RecipeService = Depends(get_recipe_service),
):
    return schemas.serialize(recipe_service.search_recipes(term, page_options))


@router.get("/recipes/{recipe_id}")
def get_recipe(recipe_id: int, recipe_service: RecipeService = Depends(get_recipe_service)) -> dict:
    recipe = recipe_service.find_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe.to_dict()


@router.post("/recipes", status_code=status.HTTP_201_CREATED)
def create_recipe(
    request: schemas.RecipeRequest,
    recipe_service: RecipeService = Depends(get_recipe_service),
    chef: Chef = Depends(get_current_chef),
) -> dict:
    recipe = Recipe(
        name=request.name,
        instructions=request.instructions,
        author=Chef(id=request.author_id or chef.id),
        ingredients=[
            RecipeIngredient(recipe_id=0, ingredient_id=line.ingredient_id,
                             quantity=line.quantity, unit=line.unit)
            for line in request.ingredients
        ],
    )
    return recipe_service.save_recipe(recipe).to_dict()


@router.put("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_recipe(
    recipe_id: int,
    request: schemas.RecipeRequest,
    recipe_service: RecipeService = Depends(get_recipe_service),
    chef: Chef = Depends(get_current_chef),
) -> Response:
    """Update name, instructions and author; ingredient lines have their own endpoints."""
    existing = recipe_service.find_recipe(recipe_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    recipe_service.save_recipe(Recipe(
        id=recipe_id,
        name=request.name,
        instructions=request.instructions,
        author=Chef(id=request.author_id or existing.author_id or chef.id),
    ))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/recipes/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
    _: Chef = Depends(get_current_chef),
) -> Response:
    recipe_service.delete_recipe(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/recipes/{recipe_id}/ingredients", status_code=status.HTTP_201_CREATED)
def add_recipe_ingredient(
    recipe_id: int,
    request: schemas.RecipeIngredientRequest,
    recipe_service: RecipeService = Depends(get_recipe_service),
    _: Chef = Depends(get_current_chef),
) -> dict:
    line = recipe_service.add_ingredient_to_recipe(
        recipe_id, request.ingredient_id, request.quantity, request.unit,
    )
    if line is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return line.to_dict()


@router.delete("/recipes/{recipe_id}/ingredients/{ingredient_id}",
               status_code=status.HTTP_204_NO_CONTENT)
def remove_recipe_ingredient(
    recipe_id: int,
    ingredient_id: int,
    recipe_service: RecipeService = Depends(get_recipe_service),
    _: Chef = Depends(get_current_chef),
) -> Response:
    recipe_service.remove_ingredient_from_recipe(recipe_id, ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
