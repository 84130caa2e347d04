"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from castboard.config import get_settings
from castboard.infrastructure.database import engine, Base, SessionLocal
from castboard.core.logging import configure_logging
from castboard.core.middleware import setup_middleware
from castboard.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
from castboard.domain.models.user import User
from castboard.domain.models.ticket import Ticket  # noqa: F401
from castboard.domain.models.registration import Registration  # noqa: F401
from castboard.domain.models.role_change import RoleChange  # noqa: F401

# Import routers
from castboard.interfaces.api.auth import router as auth_router
from castboard.interfaces.api.tickets import router as tickets_router
from castboard.interfaces.api.registrations import router as registrations_router
from castboard.interfaces.api.users import router as users_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def bootstrap_admin() -> None:
    """Create the configured admin account if it does not exist yet."""
    from castboard.application.services.auth_service import create_user
    from castboard.domain.enums import Role
    from castboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        if repo.get_by_email(settings.ADMIN_EMAIL) is None:
            create_user(
                repo,
                name=settings.ADMIN_NAME,
                email=settings.ADMIN_EMAIL,
                password=settings.ADMIN_PASSWORD,
                role=Role.ADMIN,
            )
            logger.info("Default admin user created", email=settings.ADMIN_EMAIL)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Castboard...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only; use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    bootstrap_admin()

    yield

    logger.info("Castboard stopped")


app = FastAPI(
    title="Castboard",
    description="Casting calls, auditions and applicant review",
    version="1.0.0",
    lifespan=lifespan,
)

# Correlation ID + request logging
setup_middleware(app)

# Every error leaves as {"error": {kind, message, details, path}}
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(tickets_router)
app.include_router(registrations_router)
app.include_router(users_router)


@app.get("/")
def root():
    return {
        "name": "Castboard",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
