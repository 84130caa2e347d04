"""Closed value sets shared by models, schemas and services."""

from enum import Enum


class Role(str, Enum):
    USER = "user"
    CASTING = "casting"
    ADMIN = "admin"


class TicketStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RegistrationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Category(str, Enum):
    CINEMA = "cinema"
    SERIAL = "serial"
