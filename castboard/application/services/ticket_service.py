"""Ticket service — lifecycle of audition postings.

Status machine: pending -> approved | rejected. Only admins move a ticket
between states; creators edit content through an explicit field allow-list.
"""

from typing import Any, Dict, List, Optional

import structlog

from castboard.application.services.access_guard import (
    Principal,
    require_owner_or_admin,
    require_role,
)
from castboard.application.services.projections import can_manage
from castboard.core.exceptions import NotFoundError, ValidationError
from castboard.domain.enums import Category, Role, TicketStatus
from castboard.domain.models.ticket import Ticket
from castboard.domain.repositories.ticket_repository import TicketRepository
from castboard.domain.schemas.ticket import TicketCreate, TicketUpdate

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("title", "description", "category", "location", "date")
MUTABLE_FIELDS = ("title", "description", "category", "location", "date", "images")
STATUS_FILTER_ALL = "all"


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = {}
    for name, value in fields.items():
        if name not in MUTABLE_FIELDS:
            raise ValidationError(f"Field '{name}' cannot be changed", {"field": name})
        if name == "images":
            cleaned[name] = list(value or [])
            continue
        if _blank(value):
            raise ValidationError(f"Field '{name}' cannot be empty", {"field": name})
        if name == "category":
            try:
                value = Category(value.strip().lower()).value
            except ValueError:
                allowed = ", ".join(c.value for c in Category)
                raise ValidationError(f"Category must be one of: {allowed}", {"field": name}) from None
        elif isinstance(value, str):
            value = value.strip()
        cleaned[name] = value
    return cleaned


def create_ticket(repo: TicketRepository, caller: Optional[Principal], data: TicketCreate) -> Ticket:
    require_role(caller, Role.CASTING, Role.ADMIN)

    fields = data.model_dump()
    missing = [name for name in REQUIRED_FIELDS if _blank(fields.get(name))]
    if missing:
        raise ValidationError("Please provide all fields", {"missing": missing})

    ticket = repo.create(
        {
            **_clean_fields(fields),
            "status": TicketStatus.PENDING.value,
            "created_by_id": caller.id,
        }
    )
    logger.info("ticket_created", ticket_id=ticket.id, created_by=caller.id)
    return ticket


def _parse_status_filter(status: Optional[str]) -> Optional[str]:
    if status is None or status == STATUS_FILTER_ALL:
        return status
    try:
        return TicketStatus(status).value
    except ValueError:
        raise ValidationError(
            f"Unknown status filter '{status}'",
            {"allowed": [s.value for s in TicketStatus] + [STATUS_FILTER_ALL]},
        ) from None


def list_tickets(
    repo: TicketRepository,
    caller: Optional[Principal] = None,
    status: Optional[str] = None,
) -> List[Ticket]:
    """List tickets visible to the caller.

    No filter always means approved-only. Otherwise admins see every match,
    casting directors see approved matches plus their own, and everyone else
    sees approved matches only.
    """
    status = _parse_status_filter(status)
    if status is None:
        return repo.list_tickets(statuses=[TicketStatus.APPROVED.value])

    statuses = None if status == STATUS_FILTER_ALL else [status]
    if caller is not None and caller.is_admin:
        return repo.list_tickets(statuses=statuses)
    if caller is not None and caller.role is Role.CASTING:
        return repo.list_tickets(statuses=statuses, unrestricted=False, owner_id=caller.id)
    return repo.list_tickets(statuses=statuses, unrestricted=False)


def load_ticket(repo: TicketRepository, ticket_id: int) -> Ticket:
    ticket = repo.get_by_id(ticket_id)
    if ticket is None:
        raise NotFoundError("Ticket not found", {"ticket_id": ticket_id})
    return ticket


def get_ticket(repo: TicketRepository, ticket_id: int, caller: Optional[Principal] = None) -> Ticket:
    """Get a ticket; unapproved tickets only exist for their creator and admins."""
    ticket = load_ticket(repo, ticket_id)
    if ticket.status != TicketStatus.APPROVED.value and not can_manage(ticket, caller):
        raise NotFoundError("Ticket not found", {"ticket_id": ticket_id})
    return ticket


def update_ticket(
    repo: TicketRepository,
    ticket_id: int,
    caller: Optional[Principal],
    data: TicketUpdate,
) -> Ticket:
    ticket = load_ticket(repo, ticket_id)
    require_owner_or_admin(caller, ticket.created_by_id)

    changes = _clean_fields(data.model_dump(exclude_unset=True))
    if not changes:
        return ticket

    ticket = repo.update(ticket, changes)
    logger.info("ticket_updated", ticket_id=ticket.id, fields=sorted(changes), by=caller.id)
    return ticket


def _set_status(repo: TicketRepository, ticket_id: int, caller: Optional[Principal], status: TicketStatus) -> Ticket:
    require_role(caller, Role.ADMIN)
    ticket = load_ticket(repo, ticket_id)
    if ticket.status == status.value:
        return ticket

    previous = ticket.status
    ticket = repo.set_status(ticket, status.value)
    logger.info(
        "ticket_status_changed",
        ticket_id=ticket.id,
        old_status=previous,
        new_status=status.value,
        by=caller.id,
    )
    return ticket


def approve_ticket(repo: TicketRepository, ticket_id: int, caller: Optional[Principal]) -> Ticket:
    return _set_status(repo, ticket_id, caller, TicketStatus.APPROVED)


def reject_ticket(repo: TicketRepository, ticket_id: int, caller: Optional[Principal]) -> Ticket:
    return _set_status(repo, ticket_id, caller, TicketStatus.REJECTED)


def delete_ticket(repo: TicketRepository, ticket_id: int, caller: Optional[Principal]) -> None:
    ticket = load_ticket(repo, ticket_id)
    require_owner_or_admin(caller, ticket.created_by_id)

    removed = repo.delete_with_registrations(ticket)
    logger.info("ticket_deleted", ticket_id=ticket_id, registrations_removed=removed, by=caller.id)


def registered_user_ids(repo: TicketRepository, ticket_id: int) -> List[int]:
    """Users registered for a ticket, always computed from registration rows."""
    return load_ticket(repo, ticket_id).registered_user_ids
