"""FastAPI dependency — JWT auth middleware."""

from typing import Optional

import structlog
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from castboard.application.services.access_guard import Principal
from castboard.application.services.auth_service import decode_access_token
from castboard.core.exceptions import UnauthenticatedError
from castboard.domain.models.user import User
from castboard.domain.repositories.user_repository import UserRepository
from castboard.interfaces.deps import get_user_repository

security = HTTPBearer(auto_error=False)
logger = structlog.get_logger(__name__)


def _resolve_user(
    credentials: Optional[HTTPAuthorizationCredentials],
    repo: UserRepository,
) -> Optional[User]:
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthenticatedError("Invalid or expired token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise UnauthenticatedError("Invalid token") from None

    user = repo.get_by_id(user_id)
    if user is None:
        raise UnauthenticatedError("User not found")
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Extract and validate the current user from JWT token."""
    user = _resolve_user(credentials, repo)
    if user is None:
        raise UnauthenticatedError("Authentication required")
    return user


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    repo: UserRepository = Depends(get_user_repository),
) -> Optional[User]:
    """Like get_current_user, but anonymous or stale credentials resolve to None."""
    try:
        return _resolve_user(credentials, repo)
    except UnauthenticatedError as exc:
        logger.debug("optional_auth_ignored", reason=exc.message)
        return None


def get_principal(user: User = Depends(get_current_user)) -> Principal:
    return Principal.from_user(user)


def get_optional_principal(user: Optional[User] = Depends(get_optional_user)) -> Optional[Principal]:
    return Principal.from_user(user) if user is not None else None
