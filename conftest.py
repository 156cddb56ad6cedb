"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from api import create_app
from models import Chef, Ingredient
from services import (
    AuthService, ChefRepository, ChefService, DatabaseService, IngredientRepository,
    IngredientService, RecipeRepository, RecipeService,
)
from utils import Config


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    database = DatabaseService(":memory:")
    yield database
    database.close()


@pytest.fixture
def chef_repository(db):
    return ChefRepository(db)


@pytest.fixture
def ingredient_repository(db):
    return IngredientRepository(db)


@pytest.fixture
def recipe_repository(db, chef_repository):
    return RecipeRepository(db, chef_repository)


@pytest.fixture
def chef_service(chef_repository):
    return ChefService(chef_repository)


@pytest.fixture
def ingredient_service(ingredient_repository):
    return IngredientService(ingredient_repository)


@pytest.fixture
def recipe_service(recipe_repository, chef_repository, ingredient_repository):
    return RecipeService(recipe_repository, chef_repository, ingredient_repository)


@pytest.fixture
def auth_service(chef_service):
    service = AuthService(chef_service)
    yield service
    service.close()


@pytest.fixture
def chef(chef_repository):
    """A stored chef that can log in as chef1/secret."""
    stored = Chef(username="chef1", email="chef1@example.com", password="secret")
    chef_repository.create(stored)
    return stored


@pytest.fixture
def make_ingredients(ingredient_repository):
    """Factory storing ingredients named with a prefix and a zero-padded index."""
    def _make(count, prefix="ingredient"):
        created = []
        for index in range(1, count + 1):
            ingredient = Ingredient(name=f"{prefix} {index:02d}")
            ingredient_repository.create(ingredient)
            created.append(ingredient)
        return created
    return _make


@pytest.fixture
def client(db):
    """HTTP client over an app sharing the test database."""
    config = Config(database_path=":memory:", default_page_size=10, max_page_size=100)
    app = create_app(config, db)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client, chef):
    response = client.post("/login", json={"username": "chef1", "password": "secret"})
    assert response.status_code == 200
    return {"Authorization": response.headers["Authorization"]}
