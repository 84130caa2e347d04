"""Media limits live at the request boundary."""

import pytest
from pydantic import ValidationError

from castboard.domain.schemas.registration import RegistrationCreate
from castboard.domain.schemas.ticket import TicketCreate, TicketUpdate
from castboard.domain.schemas.user import ProfileUpdate


def test_photo_limit():
    RegistrationCreate(phone_number="1", photos=["p"] * 5)
    with pytest.raises(ValidationError, match="Maximum 5 photos"):
        RegistrationCreate(phone_number="1", photos=["p"] * 6)


def test_video_limit():
    RegistrationCreate(phone_number="1", videos=["v"] * 3)
    with pytest.raises(ValidationError, match="Maximum 3 videos"):
        RegistrationCreate(phone_number="1", videos=["v"] * 4)


def test_oversized_media_reference(monkeypatch):
    from castboard.domain.schemas import registration

    monkeypatch.setattr(registration.settings, "MAX_MEDIA_REF_LENGTH", 10)
    with pytest.raises(ValidationError, match="File too large"):
        RegistrationCreate(phone_number="1", photos=["x" * 11])


def test_ticket_image_limit():
    with pytest.raises(ValidationError, match="Maximum 5 images"):
        TicketCreate(images=["i"] * 6)
    with pytest.raises(ValidationError):
        TicketUpdate(images=["i"] * 6)


@pytest.mark.parametrize("field", ["status", "created_by_id", "id"])
def test_update_rejects_protected_fields(field):
    with pytest.raises(ValidationError):
        TicketUpdate(**{field: "x"})


def test_oversized_profile_photo(monkeypatch):
    from castboard.domain.schemas import user

    monkeypatch.setattr(user.settings, "MAX_MEDIA_REF_LENGTH", 10)
    assert ProfileUpdate(profile_photo="x" * 10).profile_photo == "x" * 10
    with pytest.raises(ValidationError, match="File too large"):
        ProfileUpdate(profile_photo="x" * 11)
