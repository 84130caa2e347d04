"""Unit tests for profile edits, role changes and account removal."""

import pytest

from castboard.application.services import auth_service, registration_service, user_service
from castboard.application.services.access_guard import Principal
from castboard.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)
from castboard.domain.enums import Role, TicketStatus
from castboard.domain.schemas.auth import UserCreate
from castboard.domain.schemas.registration import RegistrationCreate
from castboard.domain.schemas.user import ProfileUpdate

from conftest import as_principal


class TestProfile:
    def test_user_edits_own_profile(self, user_repo, applicant):
        updated = user_service.update_profile(
            user_repo, applicant.id, as_principal(applicant), ProfileUpdate(address="2 Set Lane", age=28)
        )
        assert updated.address == "2 Set Lane"
        assert updated.age == 28
        assert updated.name == "Uma"

    def test_admin_edits_any_profile(self, user_repo, admin, applicant):
        updated = user_service.update_profile(
            user_repo, applicant.id, as_principal(admin), ProfileUpdate(phone_number="555-9999")
        )
        assert updated.phone_number == "555-9999"

    def test_cannot_edit_someone_else(self, user_repo, director, applicant):
        with pytest.raises(ForbiddenError):
            user_service.update_profile(
                user_repo, applicant.id, as_principal(director), ProfileUpdate(address="x")
            )

    def test_role_is_not_a_profile_field(self):
        with pytest.raises(ValueError):
            ProfileUpdate(role="admin")

    def test_get_user_self_or_admin(self, user_repo, admin, applicant, director):
        assert user_service.get_user(user_repo, applicant.id, as_principal(applicant)).id == applicant.id
        assert user_service.get_user(user_repo, applicant.id, as_principal(admin)).id == applicant.id
        with pytest.raises(ForbiddenError):
            user_service.get_user(user_repo, applicant.id, as_principal(director))

    def test_list_users_admin_only(self, user_repo, admin, applicant):
        assert {u.id for u in user_service.list_users(user_repo, as_principal(admin))} == {admin.id, applicant.id}
        with pytest.raises(ForbiddenError):
            user_service.list_users(user_repo, as_principal(applicant))

    def test_list_users_pages(self, user_repo, admin, make_user):
        for _ in range(4):
            make_user(Role.USER)
        caller = as_principal(admin)

        first = user_service.list_users(user_repo, caller, page=1, page_size=2)
        past_end = user_service.list_users(user_repo, caller, page=2, page_size=10)

        assert len(first) == 2
        assert past_end == []
        assert len(user_service.list_users(user_repo, caller, page=2, page_size=2)) == 2
        assert len(user_service.list_users(user_repo, caller, page=3, page_size=2)) == 1


class TestChangeRole:
    def test_change_is_audited(self, user_repo, admin, applicant):
        change = user_service.change_role(user_repo, applicant.id, as_principal(admin), Role.CASTING)

        assert change.old_role == Role.USER.value
        assert change.new_role == Role.CASTING.value
        assert change.changed_by_id == admin.id
        assert user_repo.get_by_id(applicant.id).role == Role.CASTING.value

        history = user_service.list_role_changes(user_repo, applicant.id, as_principal(admin))
        assert [c.id for c in history] == [change.id]

    def test_same_role_is_a_no_op(self, user_repo, admin, applicant):
        assert user_service.change_role(user_repo, applicant.id, as_principal(admin), Role.USER) is None
        assert user_service.list_role_changes(user_repo, applicant.id, as_principal(admin)) == []

    def test_admin_cannot_demote_self(self, user_repo, admin):
        with pytest.raises(InvalidStateError):
            user_service.change_role(user_repo, admin.id, as_principal(admin), Role.USER)

    def test_non_admin_forbidden(self, user_repo, director, applicant):
        with pytest.raises(ForbiddenError):
            user_service.change_role(user_repo, applicant.id, as_principal(director), Role.CASTING)
        assert user_repo.get_by_id(applicant.id).role == Role.USER.value

    def test_missing_user(self, user_repo, admin):
        with pytest.raises(NotFoundError):
            user_service.change_role(user_repo, 404, as_principal(admin), Role.CASTING)


class TestDeleteUser:
    def test_cascades_registrations_and_authored_tickets(
        self, user_repo, ticket_repo, registration_repo, make_ticket, make_user, admin, director, applicant
    ):
        authored = make_ticket(director, TicketStatus.APPROVED)
        other = make_ticket(make_user(Role.CASTING), TicketStatus.APPROVED)
        for ticket in (authored, other):
            registration_service.register(
                ticket_repo, registration_repo, ticket.id, as_principal(applicant),
                RegistrationCreate(phone_number="555-0100"),
            )
        authored_id, other_id = authored.id, other.id

        removed = user_service.delete_user(user_repo, director.id, as_principal(admin))

        assert removed == {"tickets": 1, "registrations": 1}
        assert ticket_repo.get_by_id(authored_id) is None
        assert ticket_repo.get_by_id(other_id) is not None
        assert [r.ticket_id for r in registration_repo.list_for_user(applicant.id)] == [other_id]

    def test_deleting_applicant_clears_their_registrations(
        self, user_repo, ticket_repo, registration_repo, make_ticket, admin, director, applicant
    ):
        ticket = make_ticket(director, TicketStatus.APPROVED)
        registration_service.register(
            ticket_repo, registration_repo, ticket.id, as_principal(applicant),
            RegistrationCreate(phone_number="555-0100"),
        )
        applicant_id = applicant.id

        user_service.delete_user(user_repo, applicant_id, as_principal(admin))

        assert user_repo.get_by_id(applicant_id) is None
        assert registration_repo.list_for_ticket(ticket.id) == []

    def test_admin_cannot_delete_self(self, user_repo, admin):
        with pytest.raises(InvalidStateError):
            user_service.delete_user(user_repo, admin.id, as_principal(admin))

    def test_non_admin_forbidden(self, user_repo, director, applicant):
        with pytest.raises(ForbiddenError):
            user_service.delete_user(user_repo, applicant.id, as_principal(director))


class TestSignUp:
    def test_register_hashes_password(self, user_repo):
        user = auth_service.register_user(
            user_repo, UserCreate(name="Nia", email="Nia@Example.com", password="secret1")
        )
        assert user.email == "nia@example.com"
        assert user.password_hash != "secret1"
        assert auth_service.authenticate_user(user_repo, "NIA@example.com", "secret1").id == user.id
        assert auth_service.authenticate_user(user_repo, "nia@example.com", "wrong") is None

    def test_duplicate_email_conflicts(self, user_repo):
        body = UserCreate(name="Nia", email="nia@example.com", password="secret1")
        auth_service.register_user(user_repo, body)
        with pytest.raises(ConflictError):
            auth_service.register_user(user_repo, body)

    def test_email_constraint_race_maps_to_conflict(self, user_repo, monkeypatch):
        body = UserCreate(name="Nia", email="nia@example.com", password="secret1")
        auth_service.register_user(user_repo, body)
        # Both sign-ups pass the lookup before either row is written
        monkeypatch.setattr(user_repo, "get_by_email", lambda email: None)

        with pytest.raises(ConflictError, match="Email already registered"):
            auth_service.register_user(user_repo, body.model_copy(update={"email": "NIA@example.com"}))
        assert len(user_service.list_users(user_repo, Principal(id=0, role=Role.ADMIN))) == 1

    def test_cannot_self_register_as_admin(self, user_repo):
        with pytest.raises(ForbiddenError):
            auth_service.register_user(
                user_repo, UserCreate(name="Eve", email="eve@example.com", password="secret1", role=Role.ADMIN)
            )

    def test_ensure_admin_promotes_existing(self, user_repo, applicant):
        admin = auth_service.ensure_admin(user_repo, "Root", applicant.email, "new-password")
        assert admin.id == applicant.id
        assert admin.role == Role.ADMIN.value
        assert auth_service.verify_password("new-password", admin.password_hash)
