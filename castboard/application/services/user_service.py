"""User service — profile edits and admin-only account management."""

from typing import List, Optional

import structlog

from castboard.application.services.access_guard import (
    Principal,
    authorize_owner,
    enforce,
    require_role,
)
from castboard.core.exceptions import InvalidStateError, NotFoundError, ValidationError
from castboard.domain.enums import Role
from castboard.domain.models.role_change import RoleChange
from castboard.domain.models.user import User
from castboard.domain.repositories.user_repository import UserRepository
from castboard.domain.schemas.user import ProfileUpdate

logger = structlog.get_logger(__name__)


def load_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found", {"user_id": user_id})
    return user


def list_users(
    repo: UserRepository, caller: Optional[Principal], page: int = 1, page_size: int = 50
) -> List[User]:
    require_role(caller, Role.ADMIN)
    return repo.list(skip=(page - 1) * page_size, limit=page_size)


def get_user(repo: UserRepository, user_id: int, caller: Optional[Principal]) -> User:
    enforce(authorize_owner(caller, user_id))
    return load_user(repo, user_id)


def update_profile(
    repo: UserRepository, user_id: int, caller: Optional[Principal], data: ProfileUpdate
) -> User:
    enforce(authorize_owner(caller, user_id))
    user = load_user(repo, user_id)

    changes = data.model_dump(exclude_unset=True)
    if "name" in changes and not (changes["name"] or "").strip():
        raise ValidationError("Name cannot be empty", {"field": "name"})
    if not changes:
        return user

    user = repo.update(user, changes)
    logger.info("profile_updated", user_id=user.id, fields=sorted(changes), by=caller.id)
    return user


def change_role(
    repo: UserRepository, user_id: int, caller: Optional[Principal], new_role: Role
) -> Optional[RoleChange]:
    """Admin command; returns the audit row, or None when nothing changed."""
    require_role(caller, Role.ADMIN)
    user = load_user(repo, user_id)

    new_role = Role(new_role)
    if user.role == new_role.value:
        return None
    if user.id == caller.id:
        raise InvalidStateError("Admins cannot change their own role")

    change = repo.change_role(user, new_role.value, changed_by_id=caller.id)
    logger.info(
        "role_changed",
        user_id=user.id,
        old_role=change.old_role,
        new_role=change.new_role,
        by=caller.id,
    )
    return change


def list_role_changes(repo: UserRepository, user_id: int, caller: Optional[Principal]) -> List[RoleChange]:
    require_role(caller, Role.ADMIN)
    return repo.list_role_changes(user_id)


def delete_user(repo: UserRepository, user_id: int, caller: Optional[Principal]) -> dict:
    """Delete a user together with their registrations and authored tickets."""
    require_role(caller, Role.ADMIN)
    user = load_user(repo, user_id)
    if user.id == caller.id:
        raise InvalidStateError("Admins cannot delete their own account")

    removed = repo.delete_cascade(user)
    logger.info("user_deleted", user_id=user_id, by=caller.id, **removed)
    return removed
