"""
SQLAlchemy Implementation of Registration Repository.
"""

from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError

from castboard.core.exceptions import ConflictError
from castboard.domain.models.registration import Registration
from castboard.domain.repositories.registration_repository import RegistrationRepository
from castboard.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyRegistrationRepository(SQLAlchemyRepository[Registration], RegistrationRepository):
    """Registration repository implementation using SQLAlchemy."""

    def create(self, obj_in: Any) -> Registration:
        # The (ticket_id, user_id) unique constraint is the authoritative
        # duplicate guard; surface it as the same Conflict the pre-check raises.
        try:
            return super().create(obj_in)
        except IntegrityError as exc:
            raise ConflictError("Already registered") from exc

    def get_for_pair(self, ticket_id: int, user_id: int) -> Optional[Registration]:
        return (
            self.db.query(Registration)
            .filter(Registration.ticket_id == ticket_id, Registration.user_id == user_id)
            .first()
        )

    def list_for_ticket(self, ticket_id: int) -> List[Registration]:
        return (
            self.db.query(Registration)
            .filter(Registration.ticket_id == ticket_id)
            .order_by(Registration.created_at.desc(), Registration.id.desc())
            .all()
        )

    def list_for_user(self, user_id: int) -> List[Registration]:
        return (
            self.db.query(Registration)
            .filter(Registration.user_id == user_id)
            .order_by(Registration.created_at.desc(), Registration.id.desc())
            .all()
        )

    def set_status(self, registration: Registration, status: str) -> Registration:
        registration.status = status
        self._commit()
        self.db.refresh(registration)
        return registration
