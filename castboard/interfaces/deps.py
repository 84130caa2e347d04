"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from castboard.domain.models.registration import Registration
from castboard.domain.models.ticket import Ticket
from castboard.domain.models.user import User
from castboard.domain.repositories.registration_repository import RegistrationRepository
from castboard.domain.repositories.ticket_repository import TicketRepository
from castboard.domain.repositories.user_repository import UserRepository
from castboard.infrastructure.database import get_db
from castboard.infrastructure.repositories.registration_repository import SQLAlchemyRegistrationRepository
from castboard.infrastructure.repositories.ticket_repository import SQLAlchemyTicketRepository
from castboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_ticket_repository(db: Session = Depends(get_db)) -> TicketRepository:
    """Get ticket repository instance."""
    return SQLAlchemyTicketRepository(db, Ticket)


def get_registration_repository(db: Session = Depends(get_db)) -> RegistrationRepository:
    """Get registration repository instance."""
    return SQLAlchemyRegistrationRepository(db, Registration)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
