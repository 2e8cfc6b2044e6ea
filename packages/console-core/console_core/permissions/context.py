"""Caller context for role-gated requests.

A CallerContext is what the authentication boundary hands to the core once a
session has been verified. It is immutable and carries a validated Role.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..utils.errors import InsufficientRoleError
from .catalog import CapabilityCatalog, CapabilityDescriptor
from .roles import Role, meets_minimum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerContext:
    """Identity and role of an authenticated caller.

    Attributes:
        user_id: The authenticated user's ID
        org_id: Organization the request is scoped to
        role: The caller's role within that organization
        metadata: Additional context (session id, client id, etc.)

    Example:
        ctx = CallerContext.from_session(user_id="u1", org_id="o1", role="member")
        tools = ctx.catalog(default_catalog())
        ctx.require(Role.ADMIN)  # raises InsufficientRoleError
    """

    user_id: str
    org_id: str
    role: Role
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_session(
        cls,
        user_id: str,
        org_id: str,
        role: str | Role,
        **metadata: Any,
    ) -> CallerContext:
        """Create a context from session data, validating the role.

        Raises:
            InvalidRoleError: If the role is not a known role
        """
        return cls(user_id=user_id, org_id=org_id, role=Role.parse(role), metadata=metadata)

    def can(self, min_role: Role) -> bool:
        """Check if this caller meets a minimum role."""
        return meets_minimum(self.role, min_role)

    def require(self, min_role: Role) -> None:
        """Require that this caller meets a minimum role.

        Raises:
            InsufficientRoleError: If the caller's role is too low
        """
        if not self.can(min_role):
            logger.info(
                f"Denied {self.user_id} ({self.role}) in org {self.org_id}: requires {min_role}"
            )
            raise InsufficientRoleError(self.role.value, min_role.value)

    def catalog(self, catalog: CapabilityCatalog) -> list[CapabilityDescriptor]:
        """Tools this caller may see, in catalog order."""
        return catalog.catalog_for(self.role)

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "org_id": self.org_id,
            "role": self.role.value,
            "metadata": self.metadata,
        }

    def __str__(self) -> str:
        return f"CallerContext({self.user_id}@{self.org_id}, role={self.role})"
