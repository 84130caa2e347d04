"""Access guard — role and ownership decisions.

`authorize` answers "can this role ever do X"; `authorize_owner` answers
"can this caller do X to this resource". Both are pure: they return a
Decision and never touch storage. `enforce` turns a denial into the
matching AppError at the service boundary.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from castboard.core.exceptions import ForbiddenError, UnauthenticatedError
from castboard.domain.enums import Role

UNAUTHENTICATED = "Unauthenticated"
FORBIDDEN = "Forbidden"


@dataclass(frozen=True)
class Principal:
    """An authenticated caller: who they are and what role they hold."""

    id: int
    role: Role

    @classmethod
    def from_user(cls, user) -> "Principal":
        return cls(id=user.id, role=Role(user.role))

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class Decision:
    permitted: bool
    reason: Optional[str] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.permitted


PERMIT = Decision(permitted=True)


def authorize(caller: Optional[Principal], allowed_roles: Iterable[Role]) -> Decision:
    if caller is None:
        return Decision(False, UNAUTHENTICATED, "Authentication required")
    allowed = frozenset(allowed_roles)
    if caller.role not in allowed:
        roles = ", ".join(sorted(r.value for r in allowed))
        return Decision(False, FORBIDDEN, f"Requires role: {roles}")
    return PERMIT


def authorize_owner(caller: Optional[Principal], owner_id: int) -> Decision:
    """Permit the resource owner or any admin."""
    if caller is None:
        return Decision(False, UNAUTHENTICATED, "Authentication required")
    if caller.is_admin or caller.id == owner_id:
        return PERMIT
    return Decision(False, FORBIDDEN, "Not authorized")


def enforce(decision: Decision, message: Optional[str] = None) -> None:
    if decision.permitted:
        return
    if decision.reason == UNAUTHENTICATED:
        raise UnauthenticatedError(decision.message)
    raise ForbiddenError(message or decision.message)


def require_role(caller: Optional[Principal], *roles: Role) -> Principal:
    enforce(authorize(caller, roles))
    return caller


def require_owner_or_admin(
    caller: Optional[Principal],
    owner_id: int,
    roles: Iterable[Role] = (Role.CASTING, Role.ADMIN),
    message: Optional[str] = None,
) -> Principal:
    """Role check first, then ownership; both must pass."""
    enforce(authorize(caller, roles), message)
    enforce(authorize_owner(caller, owner_id), message)
    return caller
