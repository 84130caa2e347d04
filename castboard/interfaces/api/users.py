"""User API routes — profiles, role changes and account removal."""

from typing import List

from fastapi import APIRouter, Depends, Query

from castboard.application.services import user_service
from castboard.application.services.access_guard import Principal
from castboard.domain.repositories.user_repository import UserRepository
from castboard.domain.schemas.auth import UserRead
from castboard.domain.schemas.user import ProfileUpdate, RoleChangeRead, RoleUpdate
from castboard.interfaces.api.deps import get_principal
from castboard.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[UserRead])
def list_users(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    repo: UserRepository = Depends(get_user_repository),
    caller: Principal = Depends(get_principal),
):
    users = user_service.list_users(repo, caller, page=page, page_size=page_size)
    return [UserRead.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    caller: Principal = Depends(get_principal),
):
    return UserRead.model_validate(user_service.get_user(repo, user_id, caller))


@router.put("/{user_id}", response_model=UserRead)
def update_profile(
    user_id: int,
    body: ProfileUpdate,
    repo: UserRepository = Depends(get_user_repository),
    caller: Principal = Depends(get_principal),
):
    return UserRead.model_validate(user_service.update_profile(repo, user_id, caller, body))


@router.put("/{user_id}/role", response_model=UserRead)
def change_role(
    user_id: int,
    body: RoleUpdate,
    repo: UserRepository = Depends(get_user_repository),
    caller: Principal = Depends(get_principal),
):
    user_service.change_role(repo, user_id, caller, body.role)
    return UserRead.model_validate(user_service.load_user(repo, user_id))


@router.get("/{user_id}/role-changes", response_model=List[RoleChangeRead])
def role_changes(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    caller: Principal = Depends(get_principal),
):
    return [RoleChangeRead.model_validate(c) for c in user_service.list_role_changes(repo, user_id, caller)]


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    caller: Principal = Depends(get_principal),
):
    removed = user_service.delete_user(repo, user_id, caller)
    return {"message": "User deleted successfully", "removed": removed}
