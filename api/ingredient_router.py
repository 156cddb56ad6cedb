"""
Ingredient API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from models import Chef, Ingredient, PageOptions
from services import IngredientService

from . import schemas
from .dependencies import get_current_chef, get_ingredient_service, get_page_options

router = APIRouter()


@router.get("/ingredients")
def list_ingredients(
    term: str | None = Query(default=None, max_length=200),
    page_options: PageOptions | None = Depends(get_page_options),
    ingredient_service: IngredientService = Depends(get_ingredient_service),
):
    return schemas.serialize(ingredient_service.search_ingredients(term, page_options))


@router.get("/ingredients/{ingredient_id}")
def get_ingredient(
    ingredient_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
) -> dict:
    ingredient = ingredient_service.find_ingredient(ingredient_id)
    if ingredient is None:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return ingredient.to_dict()


@router.post("/ingredients", status_code=status.HTTP_201_CREATED)
def create_ingredient(
    request: schemas.IngredientRequest,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    _: Chef = Depends(get_current_chef),
) -> dict:
    return ingredient_service.save_ingredient(Ingredient(name=request.name)).to_dict()


@router.put("/ingredients/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_ingredient(
    ingredient_id: int,
    request: schemas.IngredientRequest,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    _: Chef = Depends(get_current_chef),
) -> Response:
    if ingredient_service.find_ingredient(ingredient_id) is None:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    ingredient_service.save_ingredient(Ingredient(id=ingredient_id, name=request.name))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/ingredients/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ingredient(
    ingredient_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    _: Chef = Depends(get_current_chef),
) -> Response:
    ingredient_service.delete_ingredient(ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
