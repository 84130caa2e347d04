"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from castboard.core.exceptions import ConflictError
from castboard.domain.models.registration import Registration
from castboard.domain.models.role_change import RoleChange
from castboard.domain.models.ticket import Ticket
from castboard.domain.models.user import User
from castboard.domain.repositories.user_repository import UserRepository
from castboard.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def create(self, obj_in: Any) -> User:
        # Unique email index backs the service pre-check under concurrent sign-ups
        try:
            return super().create(obj_in)
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()

    def change_role(self, user: User, new_role: str, changed_by_id: int) -> RoleChange:
        change = RoleChange(
            user_id=user.id,
            changed_by_id=changed_by_id,
            old_role=user.role,
            new_role=new_role,
        )
        user.role = new_role
        self.db.add(change)
        self._commit()
        self.db.refresh(user)
        self.db.refresh(change)
        return change

    def list_role_changes(self, user_id: int) -> List[RoleChange]:
        return (
            self.db.query(RoleChange)
            .filter(RoleChange.user_id == user_id)
            .order_by(RoleChange.changed_at.desc(), RoleChange.id.desc())
            .all()
        )

    def delete_cascade(self, user: User) -> dict:
        authored = [t.id for t in self.db.query(Ticket.id).filter(Ticket.created_by_id == user.id)]

        # Registrations on the user's own tickets go with those tickets
        removed_registrations = (
            self.db.query(Registration)
            .filter(
                (Registration.user_id == user.id) | (Registration.ticket_id.in_(authored))
            )
            .delete(synchronize_session="fetch")
        )
        removed_tickets = (
            self.db.query(Ticket)
            .filter(Ticket.id.in_(authored))
            .delete(synchronize_session="fetch")
        )
        self.db.delete(user)
        self._commit()
        return {"tickets": removed_tickets, "registrations": removed_registrations}
