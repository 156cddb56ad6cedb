"""
Shared FastAPI dependencies: service lookup, paging options and sessions.
"""

from __future__ import annotations

from fastapi import Depends, Header, Query, Request

from models import Chef, PageOptions, UnauthenticatedError
from services import (
    AuthService, ChefService, IngredientService, RecipeService, build_page_options,
)


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_chef_service(request: Request) -> ChefService:
    return request.app.state.chef_service


def get_ingredient_service(request: Request) -> IngredientService:
    return request.app.state.ingredient_service


def get_recipe_service(request: Request) -> RecipeService:
    return request.app.state.recipe_service


def get_page_options(
    request: Request,
    page: int | None = Query(default=None),
    page_size: int | None = Query(default=None, alias="pageSize"),
    sort_by: str | None = Query(default=None, alias="sortBy", max_length=50),
    sort_direction: str | None = Query(default=None, alias="sortDirection", max_length=10),
) -> PageOptions | None:
    """
    None unless at least one paging parameter is present; any of them
    switches the response from a plain list to a Page envelope.
    """
    if page is None and page_size is None and sort_by is None and sort_direction is None:
        return None
    config = request.app.state.config
    return build_page_options(
        page=page,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
        default_page_size=config.default_page_size,
        max_page_size=config.max_page_size,
    )


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    token = AuthService.extract_token(authorization)
    if not token:
        raise UnauthenticatedError("Missing Authorization header.")
    return token


def get_current_chef(
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> Chef:
    return auth_service.require_chef(token)
