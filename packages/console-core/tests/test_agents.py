"""Tests for agent role gating."""

from console_core.permissions import (
    SUPERVISOR_SLUG,
    AgentDefinition,
    Role,
    agents_for,
    default_catalog,
    tools_for_agent,
)

AGENTS = [
    AgentDefinition(SUPERVISOR_SLUG, "Supervisor", Role.VIEWER, category="system"),
    AgentDefinition(
        "helpdesk",
        "Helpdesk",
        Role.VIEWER,
        allowed_tools=("list_tickets", "create_ticket", "get_ticket"),
        category="system",
    ),
    AgentDefinition(
        "workflow-builder",
        "Workflow Builder",
        Role.ADMIN,
        allowed_tools=("list_workflows", "create_workflow"),
        category="template",
    ),
]


class TestAgentsFor:
    """Tests for agents_for."""

    def test_filters_by_role(self):
        """Test agents above the caller's role are hidden."""
        visible = agents_for(Role.MEMBER, AGENTS)

        assert [a.slug for a in visible] == [SUPERVISOR_SLUG, "helpdesk"]

    def test_admin_sees_all(self):
        """Test admins see every agent."""
        assert len(agents_for(Role.ADMIN, AGENTS)) == 3

    def test_excludes_supervisor(self):
        """Test the supervisor can be excluded from delegation targets."""
        visible = agents_for(Role.OWNER, AGENTS, include_supervisor=False)

        assert [a.slug for a in visible] == ["helpdesk", "workflow-builder"]


class TestToolsForAgent:
    """Tests for tools_for_agent."""

    def test_agent_limited_by_caller_role(self):
        """Test a viewer using helpdesk does not get write tools."""
        tools = tools_for_agent(AGENTS[1], Role.VIEWER, default_catalog())

        assert [t.name for t in tools] == ["list_tickets", "get_ticket"]

    def test_member_gets_write_tools(self):
        """Test a member using helpdesk gets create_ticket."""
        tools = tools_for_agent(AGENTS[1], Role.MEMBER, default_catalog())

        assert [t.name for t in tools] == ["list_tickets", "create_ticket", "get_ticket"]

    def test_agent_without_tools(self):
        """Test an agent with no allow-list gets no tools."""
        assert tools_for_agent(AGENTS[0], Role.OWNER, default_catalog()) == []
