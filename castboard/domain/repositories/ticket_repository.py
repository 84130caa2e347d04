"""
Ticket Repository Interface.
"""

from typing import List, Optional, Sequence

from castboard.domain.repositories.base import BaseRepository
from castboard.domain.models.ticket import Ticket


class TicketRepository(BaseRepository[Ticket]):
    """Interface for Ticket-specific operations."""

    def list_tickets(
        self,
        statuses: Optional[Sequence[str]] = None,
        unrestricted: bool = True,
        owner_id: Optional[int] = None,
    ) -> List[Ticket]:
        """List tickets newest-first.

        `statuses` of None matches every status. When `unrestricted` is False
        only approved tickets, plus any ticket owned by `owner_id`, are returned.
        """
        ...

    def set_status(self, ticket: Ticket, status: str) -> Ticket:
        """Persist a new status."""
        ...

    def delete_with_registrations(self, ticket: Ticket) -> int:
        """Delete the ticket and every registration for it in one transaction.

        Returns the number of registrations removed.
        """
        ...
