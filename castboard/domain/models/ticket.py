"""Ticket domain model — an audition posting, maps to the 'tickets' table."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from castboard.domain.enums import TicketStatus
from castboard.infrastructure.database import Base


class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(20), nullable=False)  # cinema, serial
    location = Column(String(300), nullable=False)
    date = Column(Date, nullable=False)  # scheduled audition day, not checked against "now"
    images = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default=TicketStatus.PENDING.value, index=True)

    created_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    creator = relationship("User", lazy="joined")
    registrations = relationship(
        "Registration", back_populates="ticket", lazy="selectin", cascade="all, delete"
    )

    @property
    def registered_user_ids(self) -> list[int]:
        """Derived from the registrations table; never stored."""
        return sorted({reg.user_id for reg in self.registrations})

    @property
    def registered_count(self) -> int:
        return len(self.registrations)

    def __repr__(self):
        return f"<Ticket {self.id} - {self.title} ({self.status})>"
