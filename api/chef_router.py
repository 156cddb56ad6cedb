"""
Chef API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from models import Chef, PageOptions
from services import ChefService, RecipeService

from . import schemas
from .dependencies import get_chef_service, get_current_chef, get_page_options, get_recipe_service

router = APIRouter()


@router.get("/chefs")
def list_chefs(
    term: str | None = Query(default=None, max_length=200),
    page_options: PageOptions | None = Depends(get_page_options),
    chef_service: ChefService = Depends(get_chef_service),
):
    return schemas.serialize(chef_service.search_chefs(term, page_options))


@router.get("/chefs/{chef_id}")
def get_chef(chef_id: int, chef_service: ChefService = Depends(get_chef_service)) -> dict:
    chef = chef_service.find_chef(chef_id)
    if chef is None:
        raise HTTPException(status_code=404, detail="Chef not found")
    return chef.to_dict()


@router.get("/chefs/{chef_id}/recipes")
def get_chef_recipes(
    chef_id: int,
    chef_service: ChefService = Depends(get_chef_service),
    recipe_service: RecipeService = Depends(get_recipe_service),
) -> list:
    if chef_service.find_chef(chef_id) is None:
        raise HTTPException(status_code=404, detail="Chef not found")
    return schemas.serialize(recipe_service.get_recipes_by_chef(chef_id))


@router.put("/chefs/{chef_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_chef(
    chef_id: int,
    request: schemas.ChefRequest,
    chef_service: ChefService = Depends(get_chef_service),
    _: Chef = Depends(get_current_chef),
) -> Response:
    if chef_service.find_chef(chef_id) is None:
        raise HTTPException(status_code=404, detail="Chef not found")
    chef_service.save_chef(Chef(
        id=chef_id,
        username=request.username,
        email=request.email,
        password=request.password,
        is_admin=request.is_admin,
    ))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/chefs/{chef_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_chef(
    chef_id: int,
    chef_service: ChefService = Depends(get_chef_service),
    _: Chef = Depends(get_current_chef),
) -> Response:
    chef_service.delete_chef(chef_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
