"""
SQLAlchemy Implementation of Ticket Repository.
"""

from typing import List, Optional, Sequence

from sqlalchemy import or_

from castboard.domain.enums import TicketStatus
from castboard.domain.models.ticket import Ticket
from castboard.domain.repositories.ticket_repository import TicketRepository
from castboard.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyTicketRepository(SQLAlchemyRepository[Ticket], TicketRepository):
    """Ticket repository implementation using SQLAlchemy."""

    def list_tickets(
        self,
        statuses: Optional[Sequence[str]] = None,
        unrestricted: bool = True,
        owner_id: Optional[int] = None,
    ) -> List[Ticket]:
        query = self.db.query(Ticket)

        if statuses is not None:
            query = query.filter(Ticket.status.in_(list(statuses)))

        if not unrestricted:
            visible = Ticket.status == TicketStatus.APPROVED.value
            if owner_id is not None:
                visible = or_(visible, Ticket.created_by_id == owner_id)
            query = query.filter(visible)

        return query.order_by(Ticket.created_at.desc(), Ticket.id.desc()).all()

    def set_status(self, ticket: Ticket, status: str) -> Ticket:
        ticket.status = status
        self._commit()
        self.db.refresh(ticket)
        return ticket

    def delete_with_registrations(self, ticket: Ticket) -> int:
        removed = len(ticket.registrations)
        # Registrations cascade through the relationship in the same flush
        self.db.delete(ticket)
        self._commit()
        return removed
