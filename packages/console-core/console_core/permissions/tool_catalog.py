"""Built-in tool registry for the operator console.

Defines every tool the console's agents can invoke and the minimum role needed
to see or use it. Order here is the order callers see.
"""

from __future__ import annotations

from typing import Any

from .catalog import CapabilityCatalog, CapabilityDescriptor
from .roles import Role


def _schema(required: list[str] | None = None, **properties: str) -> dict[str, Any]:
    """Build a flat JSON schema whose properties are all of the given types."""
    return {
        "type": "object",
        "properties": {name: {"type": type_} for name, type_ in properties.items()},
        "required": required or [],
    }


def _id_schema() -> dict[str, Any]:
    return _schema(required=["id"], id="string")


def _list_schema() -> dict[str, Any]:
    return _schema(limit="integer", cursor="string")



CONSOLE_READ = "Console (Read)"
CONSOLE_WRITE = "Console (Write)"
N8N_WORKFLOWS = "n8n Workflows"
N8N_EXECUTIONS = "n8n Executions"
N8N_CREDENTIALS = "n8n Credentials"
N8N_TAGS = "n8n Tags"
N8N_VARIABLES = "n8n Variables"
N8N_USERS = "n8n Users"
N8N_PROJECTS = "n8n Projects"
N8N_ADMIN = "n8n Admin"
SYSTEM_ADMIN = "System Admin"


def _tool(
    name: str,
    description: str,
    min_role: Role,
    category: str,
    input_schema: dict[str, Any] | None = None,
) -> CapabilityDescriptor:
    return CapabilityDescriptor(
        name=name,
        description=description,
        min_role=min_role,
        category=category,
        input_schema=input_schema if input_schema is not None else _schema(),
    )


TOOL_CATALOG: tuple[CapabilityDescriptor, ...] = (
    # =========================================================================
    # Console read tools - every role
    # =========================================================================
    _tool("list_requests", "List requests for the organization", Role.VIEWER, CONSOLE_READ,
          _schema(status="string", limit="integer")),
    _tool("get_request", "Get a specific request with comments", Role.VIEWER, CONSOLE_READ,
          _id_schema()),
    _tool("list_projects", "List projects for the organization", Role.VIEWER, CONSOLE_READ,
          _schema(status="string")),
    _tool("get_project", "Get a specific project with milestones", Role.VIEWER, CONSOLE_READ,
          _id_schema()),
    _tool("list_tickets", "List support tickets", Role.VIEWER, CONSOLE_READ,
          _schema(status="string", priority="string")),
    _tool("get_ticket", "Get a specific ticket with comments", Role.VIEWER, CONSOLE_READ,
          _id_schema()),
    _tool("list_documents", "List documents for the organization", Role.VIEWER, CONSOLE_READ,
          _list_schema()),
    _tool("get_dashboard_stats", "Get summary statistics", Role.VIEWER, CONSOLE_READ),
    _tool("search_activity", "Search the activity log", Role.VIEWER, CONSOLE_READ,
          _schema(required=["query"], query="string", limit="integer")),

    # =========================================================================
    # Console write tools - member and above
    # =========================================================================
    _tool("create_request", "Create a new request", Role.MEMBER, CONSOLE_WRITE,
          _schema(required=["title"], title="string", description="string",
                  priority="string")),
    _tool("update_request_status", "Update request status (admin+)", Role.MEMBER, CONSOLE_WRITE,
          _schema(required=["id", "status"], id="string", status="string")),
    _tool("add_comment", "Add a comment to a request or ticket", Role.MEMBER, CONSOLE_WRITE,
          _schema(required=["target_id", "content"], target_id="string", content="string")),
    _tool("create_ticket", "Create a new support ticket", Role.MEMBER, CONSOLE_WRITE,
          _schema(required=["subject"], subject="string", description="string",
                  priority="string")),
    _tool("update_ticket_status", "Update ticket status (admin+)", Role.MEMBER, CONSOLE_WRITE,
          _schema(required=["id", "status"], id="string", status="string")),

    # =========================================================================
    # n8n tools - admin and above
    # =========================================================================
    _tool("list_workflows", "List n8n workflows", Role.ADMIN, N8N_WORKFLOWS, _list_schema()),
    _tool("get_workflow", "Get workflow details", Role.ADMIN, N8N_WORKFLOWS, _id_schema()),
    _tool("create_workflow", "Create a new workflow", Role.ADMIN, N8N_WORKFLOWS,
          _schema(required=["name"], name="string", nodes="array", connections="object")),
    _tool("update_workflow", "Update a workflow", Role.ADMIN, N8N_WORKFLOWS,
          _schema(required=["id"], id="string", name="string", nodes="array",
                  connections="object")),
    _tool("delete_workflow", "Delete a workflow", Role.ADMIN, N8N_WORKFLOWS, _id_schema()),
    _tool("activate_workflow", "Activate or deactivate a workflow", Role.ADMIN, N8N_WORKFLOWS,
          _schema(required=["id", "active"], id="string", active="boolean")),
    _tool("get_workflow_tags", "Get tags on a workflow", Role.ADMIN, N8N_WORKFLOWS, _id_schema()),
    _tool("update_workflow_tags", "Update tags on a workflow", Role.ADMIN, N8N_WORKFLOWS,
          _schema(required=["id", "tag_ids"], id="string", tag_ids="array")),
    _tool("transfer_workflow", "Transfer workflow to another project", Role.ADMIN, N8N_WORKFLOWS,
          _schema(required=["id", "project_id"], id="string", project_id="string")),
    _tool("list_executions", "List recent workflow executions", Role.ADMIN, N8N_EXECUTIONS,
          _schema(workflow_id="string", status="string", limit="integer")),
    _tool("get_execution", "Get execution details with node results", Role.ADMIN, N8N_EXECUTIONS,
          _id_schema()),
    _tool("delete_execution", "Delete an execution record", Role.ADMIN, N8N_EXECUTIONS,
          _id_schema()),
    _tool("retry_execution", "Retry a failed execution", Role.ADMIN, N8N_EXECUTIONS, _id_schema()),
    _tool("create_credential", "Create a credential for external services", Role.ADMIN,
          N8N_CREDENTIALS,
          _schema(required=["name", "type", "data"], name="string", type="string",
                  data="object")),
    _tool("delete_credential", "Delete a credential", Role.ADMIN, N8N_CREDENTIALS, _id_schema()),
    _tool("get_credential_schema", "Get schema for a credential type", Role.ADMIN,
          N8N_CREDENTIALS, _schema(required=["type"], type="string")),
    _tool("transfer_credential", "Transfer credential to another project", Role.ADMIN,
          N8N_CREDENTIALS,
          _schema(required=["id", "project_id"], id="string", project_id="string")),
    _tool("list_tags", "List all n8n tags", Role.ADMIN, N8N_TAGS, _list_schema()),
    _tool("get_tag", "Get tag details", Role.ADMIN, N8N_TAGS, _id_schema()),
    _tool("create_tag", "Create a new tag", Role.ADMIN, N8N_TAGS,
          _schema(required=["name"], name="string")),
    _tool("update_tag", "Rename a tag", Role.ADMIN, N8N_TAGS,
          _schema(required=["id", "name"], id="string", name="string")),
    _tool("delete_tag", "Delete a tag", Role.ADMIN, N8N_TAGS, _id_schema()),
    _tool("list_variables", "List n8n environment variables", Role.ADMIN, N8N_VARIABLES,
          _list_schema()),
    _tool("create_variable", "Create an environment variable", Role.ADMIN, N8N_VARIABLES,
          _schema(required=["key", "value"], key="string", value="string")),
    _tool("update_variable", "Update an environment variable", Role.ADMIN, N8N_VARIABLES,
          _schema(required=["id", "key", "value"], id="string", key="string", value="string")),
    _tool("delete_variable", "Delete an environment variable", Role.ADMIN, N8N_VARIABLES,
          _id_schema()),
    _tool("list_n8n_users", "List all n8n users", Role.ADMIN, N8N_USERS, _list_schema()),
    _tool("get_n8n_user", "Get n8n user by ID or email", Role.ADMIN, N8N_USERS,
          _schema(required=["id_or_email"], id_or_email="string")),
    _tool("create_n8n_users", "Invite users to n8n", Role.ADMIN, N8N_USERS,
          _schema(required=["users"], users="array")),
    _tool("delete_n8n_user", "Delete an n8n user", Role.ADMIN, N8N_USERS, _id_schema()),
    _tool("change_n8n_user_role", "Change an n8n user's role", Role.ADMIN, N8N_USERS,
          _schema(required=["id", "role"], id="string", role="string")),
    _tool("list_n8n_projects", "List n8n projects", Role.ADMIN, N8N_PROJECTS, _list_schema()),
    _tool("create_n8n_project", "Create an n8n project", Role.ADMIN, N8N_PROJECTS,
          _schema(required=["name"], name="string")),
    _tool("update_n8n_project", "Rename an n8n project", Role.ADMIN, N8N_PROJECTS,
          _schema(required=["id", "name"], id="string", name="string")),
    _tool("delete_n8n_project", "Delete an n8n project", Role.ADMIN, N8N_PROJECTS, _id_schema()),
    _tool("source_control_pull", "Pull from source control repository", Role.ADMIN, N8N_ADMIN,
          _schema(force="boolean")),
    _tool("generate_audit", "Generate a security audit report", Role.ADMIN, N8N_ADMIN,
          _schema(categories="array")),

    # =========================================================================
    # System admin tools - admin and above
    # =========================================================================
    _tool("get_system_status", "Get system component health", Role.ADMIN, SYSTEM_ADMIN),
    _tool("check_updates", "Check for available updates", Role.ADMIN, SYSTEM_ADMIN),
    _tool("get_update_history", "Get update/rollback history", Role.ADMIN, SYSTEM_ADMIN,
          _schema(limit="integer")),
)


def default_catalog() -> CapabilityCatalog:
    """Build the console's built-in capability catalog."""
    return CapabilityCatalog(TOOL_CATALOG)


ALL_TOOL_NAMES: list[str] = [t.name for t in TOOL_CATALOG]
