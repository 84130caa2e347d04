"""Pytest configuration and shared fixtures."""

import datetime as dt
import itertools
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from castboard.main import app
from castboard.application.services.access_guard import Principal
from castboard.application.services.auth_service import issue_token
from castboard.domain.enums import Role, TicketStatus
from castboard.domain.models.registration import Registration
from castboard.domain.models.ticket import Ticket
from castboard.domain.models.user import User
from castboard.infrastructure.database import Base, get_db
from castboard.infrastructure.repositories.registration_repository import SQLAlchemyRegistrationRepository
from castboard.infrastructure.repositories.ticket_repository import SQLAlchemyTicketRepository
from castboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

_emails = itertools.count(1)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db) -> TestClient:
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_repo(db):
    return SQLAlchemyUserRepository(db, User)


@pytest.fixture
def ticket_repo(db):
    return SQLAlchemyTicketRepository(db, Ticket)


@pytest.fixture
def registration_repo(db):
    return SQLAlchemyRegistrationRepository(db, Registration)


@pytest.fixture
def make_user(user_repo):
    def _make(role: Role = Role.USER, name: str = "Test", **profile) -> User:
        return user_repo.create(
            {
                "name": name,
                "email": f"{role.value}{next(_emails)}@example.com",
                "password_hash": "not-a-real-hash",
                "role": role.value,
                **profile,
            }
        )

    return _make


@pytest.fixture
def admin(make_user) -> User:
    return make_user(Role.ADMIN, name="Ada")


@pytest.fixture
def director(make_user) -> User:
    return make_user(Role.CASTING, name="Carla")


@pytest.fixture
def applicant(make_user) -> User:
    return make_user(
        Role.USER,
        name="Uma",
        last_name="Ulrich",
        address="1 Stage Street",
        age=27,
        date_of_birth=dt.date(1998, 4, 2),
        phone_number="555-0000",
    )


def as_principal(user: User) -> Principal:
    return Principal.from_user(user)


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def make_ticket(ticket_repo):
    def _make(creator: User, status: TicketStatus = TicketStatus.PENDING, **fields) -> Ticket:
        data = {
            "title": "Lead Role",
            "description": "Feature film lead",
            "category": "cinema",
            "location": "Mumbai",
            "date": dt.date(2030, 1, 15),
            "images": [],
            "status": status.value,
            "created_by_id": creator.id,
        }
        data.update(fields)
        return ticket_repo.create(data)

    return _make
