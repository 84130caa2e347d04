"""Projection layer — shapes entities into the view each caller may see.

Three shapes, each redacting differently:
- ticket_view: ticket fields plus creator name/email only
- roster_view: full applicant profile, for the ticket owner or an admin
- my_registration_view: an applicant's own registration with a ticket summary
"""

from typing import List, Optional

from castboard.application.services.access_guard import Principal
from castboard.domain.models.registration import Registration
from castboard.domain.models.ticket import Ticket
from castboard.domain.schemas.registration import (
    MyRegistrationRead,
    RosterEntry,
    RosterResponse,
    RosterTicket,
    TicketSummary,
)
from castboard.domain.schemas.ticket import CreatorSummary, TicketRead


def can_manage(ticket: Ticket, caller: Optional[Principal]) -> bool:
    return caller is not None and (caller.is_admin or caller.id == ticket.created_by_id)


def ticket_view(ticket: Ticket, caller: Optional[Principal] = None) -> TicketRead:
    registered = ticket.registered_user_ids
    return TicketRead(
        id=ticket.id,
        title=ticket.title,
        description=ticket.description,
        category=ticket.category,
        location=ticket.location,
        date=ticket.date,
        images=list(ticket.images or []),
        status=ticket.status,
        created_by=CreatorSummary(
            id=ticket.creator.id,
            name=ticket.creator.name,
            email=ticket.creator.email,
        ),
        registered_count=len(registered),
        is_registered=caller is not None and caller.id in registered,
        registered_user_ids=registered if can_manage(ticket, caller) else None,
        created_at=ticket.created_at,
        updated_at=ticket.updated_at,
    )


def ticket_views(tickets: List[Ticket], caller: Optional[Principal] = None) -> List[TicketRead]:
    return [ticket_view(t, caller) for t in tickets]


def roster_entry(registration: Registration) -> RosterEntry:
    applicant = registration.user
    return RosterEntry(
        registration_id=registration.id,
        user_id=applicant.id,
        name=applicant.name,
        last_name=applicant.last_name,
        date_of_birth=applicant.date_of_birth,
        age=applicant.age,
        address=applicant.address,
        # The number given for this application, not the profile number
        phone_number=registration.phone_number,
        email=applicant.email,
        role=applicant.role,
        profile_photo=applicant.profile_photo,
        photos=list(registration.photos or []),
        videos=list(registration.videos or []),
        status=registration.status,
        registered_at=registration.created_at,
    )


def roster_view(ticket: Ticket, registrations: List[Registration]) -> RosterResponse:
    return RosterResponse(
        ticket=RosterTicket(id=ticket.id, title=ticket.title, registered_count=len(registrations)),
        registrations=[roster_entry(r) for r in registrations],
    )


def ticket_summary(ticket: Ticket) -> TicketSummary:
    return TicketSummary(
        id=ticket.id,
        title=ticket.title,
        description=ticket.description,
        category=ticket.category,
        location=ticket.location,
        date=ticket.date,
        status=ticket.status,
        images=list(ticket.images or []),
    )


def my_registration_view(registration: Registration) -> MyRegistrationRead:
    return MyRegistrationRead(
        id=registration.id,
        ticket=ticket_summary(registration.ticket),
        phone_number=registration.phone_number,
        photos=list(registration.photos or []),
        videos=list(registration.videos or []),
        status=registration.status,
        registered_at=registration.created_at,
    )
