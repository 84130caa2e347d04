"""
Registration Repository Interface.
"""

from typing import List, Optional

from castboard.domain.repositories.base import BaseRepository
from castboard.domain.models.registration import Registration


class RegistrationRepository(BaseRepository[Registration]):
    """Interface for Registration-specific operations."""

    def get_for_pair(self, ticket_id: int, user_id: int) -> Optional[Registration]:
        """Get the registration of a user for a ticket, if any."""
        ...

    def list_for_ticket(self, ticket_id: int) -> List[Registration]:
        """All registrations for a ticket, newest-first."""
        ...

    def list_for_user(self, user_id: int) -> List[Registration]:
        """All registrations of a user, newest-first."""
        ...

    def set_status(self, registration: Registration, status: str) -> Registration:
        """Persist a new status."""
        ...
