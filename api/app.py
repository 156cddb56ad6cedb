"""
FastAPI application factory for the Chefs Table API.

Wires one DatabaseService, the repositories and services, and a single
AuthService (with its SessionStore) onto ``app.state``, and maps the
application's error taxonomy onto HTTP status codes.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from models import (
    ConflictError, CookbookError, InvalidArgumentError, StorageError, UnauthenticatedError,
)
from services import (
    AuthService, ChefRepository, ChefService, DatabaseService, IngredientRepository,
    IngredientService, RecipeRepository, RecipeService,
)
from utils import Config, get_config, get_logger

from . import auth_router, chef_router, ingredient_router, recipe_router

logger = get_logger(__name__)

ERROR_STATUS_CODES = {
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    ConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _status_code_for(error: CookbookError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_cookbook_error(request: Request, exc: CookbookError) -> JSONResponse:
    status_code = _status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        detail = "Internal storage error"
    else:
        detail = str(exc)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)


def create_app(config: Optional[Config] = None, database: Optional[DatabaseService] = None) -> FastAPI:
    """
    Build the application.

    Without a database the one named by config.database_path is opened; the
    app then owns it and closes it on shutdown.
    """
    config = config or get_config()
    owns_database = database is None
    if database is None:
        database = DatabaseService(config.database_path)

    chef_repository = ChefRepository(database)
    ingredient_repository = IngredientRepository(database)
    recipe_repository = RecipeRepository(database, chef_repository)

    chef_service = ChefService(chef_repository)
    ingredient_service = IngredientService(ingredient_repository)
    recipe_service = RecipeService(recipe_repository, chef_repository, ingredient_repository)
    auth_service = AuthService(chef_service)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Chefs Table API starting")
        try:
            yield
        finally:
            auth_service.close()
            if owns_database:
                database.close()
            logger.info("Chefs Table API stopped")

    app = FastAPI(title="Chefs Table", debug=config.debug_mode, lifespan=lifespan)

    app.state.config = config
    app.state.database = database
    app.state.chef_service = chef_service
    app.state.ingredient_service = ingredient_service
    app.state.recipe_service = recipe_service
    app.state.auth_service = auth_service

    app.add_exception_handler(CookbookError, handle_cookbook_error)

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(chef_router.router, tags=["chefs"])
    app.include_router(ingredient_router.router, tags=["ingredients"])
    app.include_router(recipe_router.router, tags=["recipes"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app
