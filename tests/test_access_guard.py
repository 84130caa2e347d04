"""Unit tests for the access guard."""

import pytest

from castboard.application.services.access_guard import (
    FORBIDDEN,
    UNAUTHENTICATED,
    Principal,
    authorize,
    authorize_owner,
    enforce,
    require_owner_or_admin,
    require_role,
)
from castboard.core.exceptions import ForbiddenError, UnauthenticatedError
from castboard.domain.enums import Role

ADMIN = Principal(id=1, role=Role.ADMIN)
DIRECTOR = Principal(id=2, role=Role.CASTING)
OTHER_DIRECTOR = Principal(id=3, role=Role.CASTING)
APPLICANT = Principal(id=4, role=Role.USER)


class TestAuthorize:
    def test_permits_allowed_role(self):
        assert authorize(DIRECTOR, [Role.CASTING, Role.ADMIN]).permitted

    def test_missing_caller_is_unauthenticated(self):
        decision = authorize(None, [Role.USER])
        assert not decision
        assert decision.reason == UNAUTHENTICATED

    def test_wrong_role_is_forbidden(self):
        decision = authorize(APPLICANT, [Role.CASTING, Role.ADMIN])
        assert not decision
        assert decision.reason == FORBIDDEN
        assert "admin" in decision.message and "casting" in decision.message


class TestAuthorizeOwner:
    def test_owner_permitted(self):
        assert authorize_owner(DIRECTOR, owner_id=DIRECTOR.id)

    def test_admin_permitted_for_any_owner(self):
        assert authorize_owner(ADMIN, owner_id=DIRECTOR.id)

    def test_other_caller_forbidden(self):
        decision = authorize_owner(OTHER_DIRECTOR, owner_id=DIRECTOR.id)
        assert decision.reason == FORBIDDEN


class TestEnforce:
    def test_unauthenticated_raises_401_error(self):
        with pytest.raises(UnauthenticatedError):
            enforce(authorize(None, [Role.ADMIN]))

    def test_forbidden_raises_with_override_message(self):
        with pytest.raises(ForbiddenError, match="Not authorized to view"):
            enforce(authorize(APPLICANT, [Role.ADMIN]), "Not authorized to view")

    def test_require_role_returns_caller(self):
        assert require_role(ADMIN, Role.ADMIN) is ADMIN

    def test_owner_check_needs_role_as_well(self):
        # A plain user can never pass, even when the ids line up
        with pytest.raises(ForbiddenError):
            require_owner_or_admin(APPLICANT, owner_id=APPLICANT.id)

    def test_owner_check_rejects_foreign_director(self):
        with pytest.raises(ForbiddenError):
            require_owner_or_admin(OTHER_DIRECTOR, owner_id=DIRECTOR.id)
