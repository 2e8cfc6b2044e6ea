"""Tests for CallerContext."""

import pytest

from console_core.permissions import CallerContext, Role
from console_core.utils.errors import InsufficientRoleError, InvalidRoleError


class TestCallerContext:
    """Tests for CallerContext."""

    def test_from_session_parses_role(self):
        """Test session role strings are validated into Roles."""
        ctx = CallerContext.from_session("u1", "o1", "Admin", client_id="c1")

        assert ctx.role is Role.ADMIN
        assert ctx.metadata == {"client_id": "c1"}

    def test_from_session_rejects_unknown_role(self):
        """Test unknown roles fail at the boundary."""
        with pytest.raises(InvalidRoleError):
            CallerContext.from_session("u1", "o1", "superadmin")

    def test_can(self):
        """Test can() follows the hierarchy."""
        ctx = CallerContext.from_session("u1", "o1", "member")

        assert ctx.can(Role.VIEWER)
        assert ctx.can(Role.MEMBER)
        assert not ctx.can(Role.ADMIN)

    def test_require_passes(self):
        """Test require() is silent when the role is sufficient."""
        CallerContext.from_session("u1", "o1", "owner").require(Role.ADMIN)

    def test_require_raises(self):
        """Test require() raises InsufficientRoleError."""
        ctx = CallerContext.from_session("u1", "o1", "viewer")

        with pytest.raises(InsufficientRoleError) as exc_info:
            ctx.require(Role.ADMIN)

        assert exc_info.value.role == "viewer"
        assert exc_info.value.required == "admin"
        assert isinstance(exc_info.value, PermissionError)

    def test_catalog_delegates(self, search_deploy_catalog):
        """Test catalog() returns the caller's visible tools."""
        ctx = CallerContext.from_session("u1", "o1", "member")

        assert [d.name for d in ctx.catalog(search_deploy_catalog)] == ["search"]

    def test_to_dict(self):
        """Test serialization."""
        ctx = CallerContext.from_session("u1", "o1", "viewer")

        assert ctx.to_dict() == {
            "user_id": "u1",
            "org_id": "o1",
            "role": "viewer",
            "metadata": {},
        }
        assert str(ctx) == "CallerContext(u1@o1, role=viewer)"
