"""Role change audit trail — one row per admin-issued role change."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from castboard.infrastructure.database import Base


class RoleChange(Base):
    __tablename__ = "role_changes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Plain ids, so the trail survives deletion of either user
    user_id = Column(Integer, nullable=False, index=True)
    changed_by_id = Column(Integer, nullable=False)
    old_role = Column(String(20), nullable=False)
    new_role = Column(String(20), nullable=False)
    changed_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<RoleChange user={self.user_id} {self.old_role}->{self.new_role}>"
