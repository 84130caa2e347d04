"""
User Repository Interface.
"""

from typing import List, Optional

from castboard.domain.repositories.base import BaseRepository
from castboard.domain.models.role_change import RoleChange
from castboard.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (case-insensitive) email."""
        ...

    def change_role(self, user: User, new_role: str, changed_by_id: int) -> RoleChange:
        """Set the role and write the audit row in one transaction."""
        ...

    def list_role_changes(self, user_id: int) -> List[RoleChange]:
        """Audit rows for a user, newest-first."""
        ...

    def delete_cascade(self, user: User) -> dict:
        """Delete the user, their registrations and their tickets in one transaction."""
        ...
