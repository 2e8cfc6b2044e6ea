"""Role hierarchy.

Roles form a fixed total order by privilege. A caller satisfies a requirement
when its rank is at least the required role's rank.
"""

from __future__ import annotations

from enum import Enum

from ..utils.errors import InvalidRoleError


class Role(str, Enum):
    """Caller trust levels, in increasing order of privilege.

    Example:
        if meets_minimum(Role.MEMBER, Role.VIEWER):
            print("members can do anything viewers can")
    """

    VIEWER = "viewer"
    MEMBER = "member"
    ADMIN = "admin"
    OWNER = "owner"

    @property
    def rank(self) -> int:
        """Numeric privilege rank (higher is more privileged)."""
        return ROLE_HIERARCHY[self]

    @classmethod
    def parse(cls, value: str | Role) -> Role:
        """Validate an untrusted role value at the authentication boundary.

        Args:
            value: Role name (case-insensitive) or a Role

        Returns:
            The matching Role

        Raises:
            InvalidRoleError: If the value is not a known role
        """
        if isinstance(value, Role):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidRoleError(value)

    @classmethod
    def lowest(cls) -> Role:
        return min(cls, key=lambda r: r.rank)

    @classmethod
    def highest(cls) -> Role:
        return max(cls, key=lambda r: r.rank)

    def __str__(self) -> str:
        return self.value


ROLE_HIERARCHY: dict[Role, int] = {
    Role.VIEWER: 0,
    Role.MEMBER: 1,
    Role.ADMIN: 2,
    Role.OWNER: 3,
}


def meets_minimum(caller_role: Role, required_role: Role) -> bool:
    """Check whether a caller's role satisfies a required minimum role.

    Both arguments must already be Role members; validate raw strings with
    Role.parse() first.

    Args:
        caller_role: The caller's role
        required_role: The minimum role required

    Returns:
        True if the caller's rank is at least the required rank
    """
    assert isinstance(caller_role, Role), f"caller_role must be a Role, got {caller_role!r}"
    assert isinstance(required_role, Role), f"required_role must be a Role, got {required_role!r}"
    return ROLE_HIERARCHY[caller_role] >= ROLE_HIERARCHY[required_role]
