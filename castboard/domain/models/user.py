"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Text
from sqlalchemy.sql import func

from castboard.domain.enums import Role
from castboard.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    last_name = Column(String(200), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=Role.USER.value)  # user, casting, admin

    # Optional profile
    date_of_birth = Column(Date, nullable=True)
    age = Column(Integer, nullable=True)
    address = Column(String(500), nullable=True)
    phone_number = Column(String(30), nullable=True)
    profile_photo = Column(Text, nullable=True)  # opaque blob reference

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
