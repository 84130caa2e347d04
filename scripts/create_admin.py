"""Create or promote the admin account.

Usage: python scripts/create_admin.py --email admin@example.com --password secret
Defaults come from ADMIN_* settings.
"""

import argparse
import sys
import os

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from castboard.config import get_settings
from castboard.core.logging import configure_logging
from castboard.infrastructure.database import Base, SessionLocal, engine
from castboard.application.services.auth_service import ensure_admin
from castboard.domain.models.user import User
from castboard.domain.models.ticket import Ticket  # noqa: F401
from castboard.domain.models.registration import Registration  # noqa: F401
from castboard.domain.models.role_change import RoleChange  # noqa: F401
from castboard.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

logger = structlog.get_logger("create_admin")


def main(argv=None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--name", default=settings.ADMIN_NAME)
    parser.add_argument("--email", default=settings.ADMIN_EMAIL)
    parser.add_argument("--password", default=settings.ADMIN_PASSWORD)
    args = parser.parse_args(argv)

    configure_logging()
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        admin = ensure_admin(
            SQLAlchemyUserRepository(db, User),
            name=args.name,
            email=args.email,
            password=args.password,
        )
        logger.info("Admin ready", user_id=admin.id, email=admin.email)
        return 0
    except Exception:
        logger.exception("Admin setup failed")
        db.rollback()
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
