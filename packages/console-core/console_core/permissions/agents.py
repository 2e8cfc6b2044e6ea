"""Role gating for agent definitions.

Agents carry their own minimum role and a tool allow-list. A caller sees an
agent only if their role meets it, and the agent only gets the tools from its
allow-list that the caller's role also permits.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .catalog import CapabilityCatalog, CapabilityDescriptor
from .roles import Role, meets_minimum

SUPERVISOR_SLUG = "supervisor"


@dataclass(frozen=True)
class AgentDefinition:
    """An agent available in the console.

    Attributes:
        slug: Unique identifier (e.g., "workflow-builder")
        name: Display name
        min_role: Minimum role required to use the agent
        allowed_tools: Tool names the agent may call, in preference order
        description: Human-readable description
        category: "system", "template" or "custom"
    """

    slug: str
    name: str
    min_role: Role
    allowed_tools: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    category: str = "custom"


def agents_for(
    role: Role,
    agents: Iterable[AgentDefinition],
    include_supervisor: bool = True,
) -> list[AgentDefinition]:
    """Return the agents a role may use, preserving input order.

    Args:
        role: The caller's role
        agents: Agent definitions
        include_supervisor: If False, the supervisor agent is left out (it is
            the router, not a delegation target)
    """
    return [
        agent
        for agent in agents
        if meets_minimum(role, agent.min_role)
        and (include_supervisor or agent.slug != SUPERVISOR_SLUG)
    ]


def tools_for_agent(
    agent: AgentDefinition,
    role: Role,
    catalog: CapabilityCatalog,
) -> list[CapabilityDescriptor]:
    """Resolve the tools an agent may use on behalf of a caller.

    An agent never gets more than the caller could use directly.
    """
    return catalog.resolve_tools(agent.allowed_tools, role)
