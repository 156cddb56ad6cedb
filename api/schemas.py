"""
Request schemas for the HTTP API.

Field aliases follow the camelCase names used on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from models import Page


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(default="", max_length=320)
    password: str = Field(..., min_length=1, max_length=128)
    is_admin: bool = Field(default=False, alias="isAdmin")


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class ChefRequest(RegisterRequest):
    """Full replacement of a chef's fields."""


class IngredientRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)


class RecipeIngredientRequest(CamelModel):
    ingredient_id: int = Field(..., alias="ingredientId", ge=1)
    quantity: float = Field(default=0.0, ge=0)
    unit: str = Field(default="", max_length=50)


class RecipeRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    instructions: str = Field(default="", max_length=20000)
    # Defaults to the chef making the request
    author_id: int | None = Field(default=None, alias="authorId", ge=1)
    ingredients: list[RecipeIngredientRequest] = Field(default_factory=list)


def serialize(result) -> list | dict:
    """Render a plain list or a Page of entities as JSON-ready data."""
    if isinstance(result, Page):
        return result.map(lambda entity: entity.to_dict()).to_dict()
    return [entity.to_dict() for entity in result]
