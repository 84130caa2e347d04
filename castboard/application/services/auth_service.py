"""Auth service — JWT token management, password hashing and sign-up."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from castboard.config import get_settings
from castboard.core.exceptions import ConflictError, ForbiddenError
from castboard.domain.enums import Role
from castboard.domain.models.user import User
from castboard.domain.repositories.user_repository import UserRepository
from castboard.domain.schemas.auth import UserCreate

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SELF_SERVICE_ROLES = (Role.USER, Role.CASTING)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def issue_token(user: User) -> str:
    # sub must be a string per RFC 7519
    return create_access_token(data={"sub": str(user.id), "role": user.role})


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[User]:
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def create_user(
    repo: UserRepository,
    name: str,
    email: str,
    password: str,
    role: Role = Role.USER,
    last_name: Optional[str] = None,
) -> User:
    if repo.get_by_email(email):
        raise ConflictError("Email already registered")
    user = repo.create(
        {
            "name": name.strip(),
            "last_name": last_name.strip() if last_name else None,
            "email": email.strip().lower(),
            "password_hash": hash_password(password),
            "role": Role(role).value,
        }
    )
    logger.info("user_created", user_id=user.id, role=user.role)
    return user


def register_user(repo: UserRepository, body: UserCreate) -> User:
    """Public sign-up; admin accounts can only be granted by another admin."""
    if body.role not in SELF_SERVICE_ROLES:
        raise ForbiddenError("Cannot self-register as admin")
    return create_user(
        repo,
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        last_name=body.last_name,
    )


def ensure_admin(repo: UserRepository, name: str, email: str, password: str) -> User:
    """Create the bootstrap admin, or promote and reset an existing account."""
    existing = repo.get_by_email(email)
    if existing is None:
        return create_user(repo, name=name, email=email, password=password, role=Role.ADMIN)

    existing = repo.update(
        existing, {"role": Role.ADMIN.value, "password_hash": hash_password(password)}
    )
    logger.info("admin_updated", user_id=existing.id)
    return existing
