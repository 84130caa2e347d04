"""Registration API routes — the applicant's own list and owner decisions."""

from typing import List

from fastapi import APIRouter, Depends

from castboard.application.services import registration_service
from castboard.application.services.access_guard import Principal
from castboard.application.services.projections import my_registration_view
from castboard.domain.repositories.registration_repository import RegistrationRepository
from castboard.domain.schemas.registration import MyRegistrationRead, RegistrationRead
from castboard.interfaces.api.deps import get_principal
from castboard.interfaces.deps import get_registration_repository

router = APIRouter(prefix="/api/registrations", tags=["Registrations"])


@router.get("/mine", response_model=List[MyRegistrationRead])
def my_registrations(
    repo: RegistrationRepository = Depends(get_registration_repository),
    caller: Principal = Depends(get_principal),
):
    return [my_registration_view(r) for r in registration_service.list_for_user(repo, caller)]


@router.patch("/{registration_id}/approve", response_model=RegistrationRead)
def approve_registration(
    registration_id: int,
    repo: RegistrationRepository = Depends(get_registration_repository),
    caller: Principal = Depends(get_principal),
):
    registration = registration_service.approve_registration(repo, registration_id, caller)
    return RegistrationRead.model_validate(registration)


@router.patch("/{registration_id}/reject", response_model=RegistrationRead)
def reject_registration(
    registration_id: int,
    repo: RegistrationRepository = Depends(get_registration_repository),
    caller: Principal = Depends(get_principal),
):
    registration = registration_service.reject_registration(repo, registration_id, caller)
    return RegistrationRead.model_validate(registration)
