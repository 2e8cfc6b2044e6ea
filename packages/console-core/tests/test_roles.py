"""Tests for the role hierarchy."""

import itertools

import pytest

from console_core.permissions.roles import ROLE_HIERARCHY, Role, meets_minimum
from console_core.utils.errors import InvalidRoleError

ORDERED = [Role.VIEWER, Role.MEMBER, Role.ADMIN, Role.OWNER]


class TestRoleHierarchy:
    """Tests for role ranks."""

    def test_ranks_increase_with_privilege(self):
        """Test roles are ordered viewer < member < admin < owner."""
        assert [r.rank for r in ORDERED] == [0, 1, 2, 3]

    def test_every_role_has_unique_rank(self):
        """Test no two roles share a rank."""
        assert set(ROLE_HIERARCHY) == set(Role)
        assert len(set(ROLE_HIERARCHY.values())) == len(Role)

    def test_lowest_and_highest(self):
        """Test lowest/highest helpers."""
        assert Role.lowest() is Role.VIEWER
        assert Role.highest() is Role.OWNER


class TestMeetsMinimum:
    """Tests for meets_minimum."""

    @pytest.mark.parametrize(
        ("caller", "required"), list(itertools.product(ORDERED, repeat=2))
    )
    def test_all_pairs(self, caller, required):
        """Test all 16 role pairs against their ranks."""
        expected = ORDERED.index(caller) >= ORDERED.index(required)
        assert meets_minimum(caller, required) is expected

    def test_same_role_meets_itself(self):
        """Test a role always meets its own requirement."""
        for role in Role:
            assert meets_minimum(role, role)

    def test_rejects_raw_strings(self):
        """Test unvalidated strings are a contract violation."""
        with pytest.raises(AssertionError):
            meets_minimum("admin", Role.VIEWER)


class TestRoleParse:
    """Tests for Role.parse at the authentication boundary."""

    @pytest.mark.parametrize("value", ["viewer", "MEMBER", " Admin ", "owner"])
    def test_parses_known_roles(self, value):
        """Test known role names parse case-insensitively."""
        assert Role.parse(value).value == value.strip().lower()

    def test_passes_through_role(self):
        """Test a Role is returned unchanged."""
        assert Role.parse(Role.ADMIN) is Role.ADMIN

    @pytest.mark.parametrize("value", ["superuser", "", None, 3])
    def test_rejects_unknown_values(self, value):
        """Test unknown values raise InvalidRoleError."""
        with pytest.raises(InvalidRoleError) as exc_info:
            Role.parse(value)
        assert exc_info.value.value == value

    def test_invalid_role_is_value_error(self):
        """Test InvalidRoleError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Role.parse("root")

    def test_str_is_value(self):
        """Test roles render as their plain names."""
        assert str(Role.MEMBER) == "member"
        assert f"{Role.OWNER}" == "owner"
