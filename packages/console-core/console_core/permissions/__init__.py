"""Role-gated capability resolution.

This module decides which tools a caller may see and use:

- Role: Fixed, totally ordered trust levels (viewer < member < admin < owner)
- CapabilityDescriptor: One tool, tagged with its minimum role
- CapabilityCatalog: Immutable ordered registry with role filtering
- CallerContext: Validated caller identity handed over by the auth boundary
- AgentDefinition: Agents gated by role, with tool allow-lists

Example usage:
    catalog = default_catalog()
    ctx = CallerContext.from_session(user_id="u1", org_id="o1", role="member")
    payload = [d.to_dict() for d in ctx.catalog(catalog)]

Security model:
- A role sees a tool iff rank(role) >= rank(tool.min_role)
- Lower roles see a strict subset of higher roles, in the same order
- Unknown role strings are rejected at the boundary (Role.parse)
"""

from .agents import SUPERVISOR_SLUG, AgentDefinition, agents_for, tools_for_agent
from .catalog import CapabilityCatalog, CapabilityDescriptor, catalog_for
from .context import CallerContext
from .roles import ROLE_HIERARCHY, Role, meets_minimum
from .tool_catalog import ALL_TOOL_NAMES, TOOL_CATALOG, default_catalog

__all__ = [
    "ALL_TOOL_NAMES",
    "AgentDefinition",
    "CallerContext",
    "CapabilityCatalog",
    "CapabilityDescriptor",
    "ROLE_HIERARCHY",
    "Role",
    "SUPERVISOR_SLUG",
    "TOOL_CATALOG",
    "agents_for",
    "catalog_for",
    "default_catalog",
    "meets_minimum",
    "tools_for_agent",
]
