"""Auth API routes — login, register, me."""

from fastapi import APIRouter, Depends, status

from castboard.application.services.auth_service import (
    authenticate_user,
    issue_token,
    register_user,
)
from castboard.core.exceptions import UnauthenticatedError
from castboard.domain.models.user import User
from castboard.domain.repositories.user_repository import UserRepository
from castboard.domain.schemas.auth import LoginRequest, TokenResponse, UserCreate, UserRead
from castboard.interfaces.api.deps import get_current_user
from castboard.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.email, body.password)
    if not user:
        raise UnauthenticatedError("Invalid email or password")

    return TokenResponse(
        access_token=issue_token(user),
        user=UserRead.model_validate(user),
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, repo: UserRepository = Depends(get_user_repository)):
    user = register_user(repo, body)
    return TokenResponse(
        access_token=issue_token(user),
        user=UserRead.model_validate(user),
    )


@router.get("/me", response_model=UserRead)
def me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)
