"""Registration domain model — a user's application to a ticket."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from castboard.domain.enums import RegistrationStatus
from castboard.infrastructure.database import Base


class Registration(Base):
    __tablename__ = "registrations"
    __table_args__ = (
        UniqueConstraint("ticket_id", "user_id", name="uq_registration_ticket_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    phone_number = Column(String(30), nullable=False)
    photos = Column(JSON, nullable=False, default=list)
    videos = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default=RegistrationStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    ticket = relationship("Ticket", back_populates="registrations")
    user = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Registration ticket={self.ticket_id} user={self.user_id} ({self.status})>"
