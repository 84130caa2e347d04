"""Registration service — applications of users to approved tickets.

A registration starts pending and only the ticket owner or an admin can
approve or reject it. The (ticket, user) unique constraint in storage is the
real duplicate guard; the lookup done here only produces a friendlier early
failure and both paths raise the same ConflictError.
"""

from typing import List, Optional

import structlog

from castboard.application.services.access_guard import Principal, require_owner_or_admin, require_role
from castboard.application.services.ticket_service import load_ticket
from castboard.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from castboard.domain.enums import RegistrationStatus, Role, TicketStatus
from castboard.domain.models.registration import Registration
from castboard.domain.models.ticket import Ticket
from castboard.domain.repositories.registration_repository import RegistrationRepository
from castboard.domain.repositories.ticket_repository import TicketRepository
from castboard.domain.schemas.registration import RegistrationCreate

logger = structlog.get_logger(__name__)


def register(
    ticket_repo: TicketRepository,
    registration_repo: RegistrationRepository,
    ticket_id: int,
    caller: Optional[Principal],
    data: RegistrationCreate,
) -> Registration:
    require_role(caller, Role.USER)

    phone_number = (data.phone_number or "").strip()
    if not phone_number:
        raise ValidationError("Phone number is required", {"field": "phone_number"})

    ticket = load_ticket(ticket_repo, ticket_id)
    if ticket.status != TicketStatus.APPROVED.value:
        raise InvalidStateError("This ticket is not approved yet", {"status": ticket.status})

    if registration_repo.get_for_pair(ticket.id, caller.id) is not None:
        logger.warning("registration_conflict", ticket_id=ticket.id, user_id=caller.id)
        raise ConflictError("Already registered")

    try:
        registration = registration_repo.create(
            {
                "ticket_id": ticket.id,
                "user_id": caller.id,
                "phone_number": phone_number,
                "photos": list(data.photos),
                "videos": list(data.videos),
                "status": RegistrationStatus.PENDING.value,
            }
        )
    except ConflictError:
        logger.warning("registration_conflict", ticket_id=ticket.id, user_id=caller.id, source="constraint")
        raise

    logger.info("registration_created", registration_id=registration.id, ticket_id=ticket.id, user_id=caller.id)
    return registration


def list_for_ticket(
    ticket_repo: TicketRepository,
    registration_repo: RegistrationRepository,
    ticket_id: int,
    caller: Optional[Principal],
) -> tuple[Ticket, List[Registration]]:
    ticket = load_ticket(ticket_repo, ticket_id)
    require_owner_or_admin(caller, ticket.created_by_id, message="Not authorized to view registrations")
    return ticket, registration_repo.list_for_ticket(ticket.id)


def list_for_user(
    registration_repo: RegistrationRepository,
    caller: Optional[Principal],
    user_id: Optional[int] = None,
) -> List[Registration]:
    require_role(caller, Role.USER)
    if user_id is not None and user_id != caller.id:
        raise ForbiddenError("Not authorized")
    return registration_repo.list_for_user(caller.id)


def load_registration(registration_repo: RegistrationRepository, registration_id: int) -> Registration:
    registration = registration_repo.get_by_id(registration_id)
    if registration is None:
        raise NotFoundError("Registration not found", {"registration_id": registration_id})
    return registration


def _set_status(
    registration_repo: RegistrationRepository,
    registration_id: int,
    caller: Optional[Principal],
    status: RegistrationStatus,
) -> Registration:
    registration = load_registration(registration_repo, registration_id)
    require_owner_or_admin(caller, registration.ticket.created_by_id)

    if registration.status == status.value:
        return registration

    previous = registration.status
    registration = registration_repo.set_status(registration, status.value)
    logger.info(
        "registration_status_changed",
        registration_id=registration.id,
        ticket_id=registration.ticket_id,
        old_status=previous,
        new_status=status.value,
        by=caller.id,
    )
    return registration


def approve_registration(
    registration_repo: RegistrationRepository, registration_id: int, caller: Optional[Principal]
) -> Registration:
    return _set_status(registration_repo, registration_id, caller, RegistrationStatus.APPROVED)


def reject_registration(
    registration_repo: RegistrationRepository, registration_id: int, caller: Optional[Principal]
) -> Registration:
    return _set_status(registration_repo, registration_id, caller, RegistrationStatus.REJECTED)
