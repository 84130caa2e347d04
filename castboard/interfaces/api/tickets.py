"""Ticket API routes — casting calls, their approval, and registration."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from castboard.application.services import registration_service, ticket_service
from castboard.application.services.access_guard import Principal
from castboard.application.services.projections import roster_view, ticket_view, ticket_views
from castboard.domain.repositories.registration_repository import RegistrationRepository
from castboard.domain.repositories.ticket_repository import TicketRepository
from castboard.domain.schemas.registration import RegistrationCreate, RegistrationRead, RosterResponse
from castboard.domain.schemas.ticket import TicketCreate, TicketRead, TicketUpdate
from castboard.interfaces.api.deps import get_optional_principal, get_principal
from castboard.interfaces.deps import get_registration_repository, get_ticket_repository

router = APIRouter(prefix="/api/tickets", tags=["Tickets"])


@router.get("", response_model=List[TicketRead])
def list_tickets(
    status_filter: Optional[str] = Query(None, alias="status", description="pending, approved, rejected or all"),
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Optional[Principal] = Depends(get_optional_principal),
):
    """List tickets; approved only unless a status filter is given."""
    tickets = ticket_service.list_tickets(repo, caller, status_filter)
    return ticket_views(tickets, caller)


@router.get("/{ticket_id}", response_model=TicketRead)
def get_ticket(
    ticket_id: int,
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Optional[Principal] = Depends(get_optional_principal),
):
    return ticket_view(ticket_service.get_ticket(repo, ticket_id, caller), caller)


@router.post("", response_model=TicketRead, status_code=status.HTTP_201_CREATED)
def create_ticket(
    body: TicketCreate,
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Principal = Depends(get_principal),
):
    return ticket_view(ticket_service.create_ticket(repo, caller, body), caller)


@router.put("/{ticket_id}", response_model=TicketRead)
def update_ticket(
    ticket_id: int,
    body: TicketUpdate,
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Principal = Depends(get_principal),
):
    return ticket_view(ticket_service.update_ticket(repo, ticket_id, caller, body), caller)


@router.patch("/{ticket_id}/approve", response_model=TicketRead)
def approve_ticket(
    ticket_id: int,
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Principal = Depends(get_principal),
):
    return ticket_view(ticket_service.approve_ticket(repo, ticket_id, caller), caller)


@router.patch("/{ticket_id}/reject", response_model=TicketRead)
def reject_ticket(
    ticket_id: int,
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Principal = Depends(get_principal),
):
    return ticket_view(ticket_service.reject_ticket(repo, ticket_id, caller), caller)


@router.delete("/{ticket_id}")
def delete_ticket(
    ticket_id: int,
    repo: TicketRepository = Depends(get_ticket_repository),
    caller: Principal = Depends(get_principal),
):
    ticket_service.delete_ticket(repo, ticket_id, caller)
    return {"message": "Ticket deleted successfully"}


@router.post("/{ticket_id}/register", response_model=RegistrationRead, status_code=status.HTTP_201_CREATED)
def register(
    ticket_id: int,
    body: RegistrationCreate,
    ticket_repo: TicketRepository = Depends(get_ticket_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
    caller: Principal = Depends(get_principal),
):
    registration = registration_service.register(ticket_repo, registration_repo, ticket_id, caller, body)
    return RegistrationRead.model_validate(registration)


@router.get("/{ticket_id}/registrations", response_model=RosterResponse)
def list_registrations(
    ticket_id: int,
    ticket_repo: TicketRepository = Depends(get_ticket_repository),
    registration_repo: RegistrationRepository = Depends(get_registration_repository),
    caller: Principal = Depends(get_principal),
):
    """Applicant roster; only the ticket creator or an admin may see it."""
    ticket, registrations = registration_service.list_for_ticket(
        ticket_repo, registration_repo, ticket_id, caller
    )
    return roster_view(ticket, registrations)
