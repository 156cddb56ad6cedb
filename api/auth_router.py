"""
Registration, login and logout endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, Response, status

from models import Chef, UnauthenticatedError
from services import AuthService

from . import schemas
from .dependencies import get_auth_service

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    request: schemas.RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> dict:
    chef = Chef(
        username=request.username,
        email=request.email,
        password=request.password,
        is_admin=request.is_admin,
    )
    return auth_service.register_chef(chef).to_dict()


@router.post("/login")
def login(
    request: schemas.LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
) -> dict:
    token = auth_service.login(request.username, request.password)
    if not token:
        raise UnauthenticatedError("Invalid username or password")
    response.headers["Authorization"] = f"Bearer {token}"
    return {"token": token, "tokenType": "bearer"}


@router.post("/logout")
def logout(
    authorization: str | None = Header(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> dict:
    # Logging out an unknown or already removed token still succeeds
    auth_service.logout(authorization)
    return {"message": "Logout successful"}
