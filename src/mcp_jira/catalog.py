"""Static declaration of the tools exposed by the MCP Jira server."""

from mcp.types import Tool

NUMBER_OF_RESULTS_DESCRIPTION = "Number of results to return"
ISSUE_ID_OR_KEY_DESCRIPTION = "The issue id or key (e.g. 'SCRUM-12' or '10001')"

TOOLS: tuple[Tool, ...] = (
    Tool(
        name="execute_jql",
        description="Execute a JQL query on Jira on the api /rest/api/3/search",
        inputSchema={
            "type": "object",
            "properties": {
                "jql": {
                    "type": "string",
                    "description": "JQL query string",
                },
                "number_of_results": {
                    "type": "integer",
                    "description": NUMBER_OF_RESULTS_DESCRIPTION,
                    "default": 1,
                },
            },
            "required": ["jql"],
        },
    ),
    # Same search as execute_jql, trimmed so more tickets fit in an agent's context
    Tool(
        name="get_only_ticket_name_and_description",
        description="Get the name and description of the requested tickets on the api /rest/api/3/search",
        inputSchema={
            "type": "object",
            "properties": {
                "jql": {
                    "type": "string",
                    "description": "JQL query string",
                },
                "number_of_results": {
                    "type": "integer",
                    "description": NUMBER_OF_RESULTS_DESCRIPTION,
                    "default": 1,
                },
            },
            "required": ["jql"],
        },
    ),
    Tool(
        name="create_ticket",
        description="Create a ticket on Jira on the api /rest/api/3/issue",
        inputSchema={
            "type": "object",
            "properties": {
                "project": {
                    "type": "object",
                    "properties": {
                        "key": {
                            "type": "string",
                            "description": "The project key",
                        },
                    },
                    "required": ["key"],
                },
                "summary": {
                    "type": "string",
                    "description": "The summary of the ticket",
                },
                "description": {
                    "type": "string",
                    "description": "The description of the ticket",
                },
                "issuetype": {
                    "type": "object",
                    "properties": {
                        "name": {
                            "type": "string",
                            "description": "The name of the issue type",
                        },
                    },
                    "required": ["name"],
                },
                "parent": {
                    "type": "string",
                    "description": "Optional key of the parent issue (e.g. the epic 'SCRUM-1')",
                },
            },
            "required": ["project", "summary", "description", "issuetype"],
        },
    ),
    Tool(
        name="list_projects",
        description="List all the projects on Jira on the api /rest/api/3/project",
        inputSchema={
            "type": "object",
            "properties": {
                "number_of_results": {
                    "type": "integer",
                    "description": NUMBER_OF_RESULTS_DESCRIPTION,
                    "default": 1,
                },
            },
        },
    ),
    Tool(
        name="delete_ticket",
        description="Delete a ticket on Jira on the api /rest/api/3/issue/{issueIdOrKey}",
        inputSchema={
            "type": "object",
            "properties": {
                "issueIdOrKey": {
                    "type": "string",
                    "description": ISSUE_ID_OR_KEY_DESCRIPTION,
                },
            },
            "required": ["issueIdOrKey"],
        },
    ),
    Tool(
        name="edit_ticket",
        description="Edit a ticket on Jira on the api /rest/api/3/issue/{issueIdOrKey}. "
        "Only the fields provided are changed, except the description, which is "
        "reset to 'No description provided' when omitted; pass null to keep it.",
        inputSchema={
            "type": "object",
            "properties": {
                "issueIdOrKey": {
                    "type": "string",
                    "description": ISSUE_ID_OR_KEY_DESCRIPTION,
                },
                "summary": {
                    "type": "string",
                    "description": "The summary of the ticket",
                },
                "description": {
                    "type": ["string", "null"],
                    "description": "The description of the ticket",
                },
                "labels": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "The labels of the ticket",
                },
                "parent": {
                    "type": "string",
                    "description": "Key of the new parent issue (e.g. the epic 'SCRUM-1')",
                },
                "priority": {
                    "type": "string",
                    "description": "The name of the priority (e.g. 'High')",
                },
                "components": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {
                                "type": "string",
                                "description": "The name of the component",
                            },
                        },
                        "required": ["name"],
                    },
                    "description": "The components of the ticket",
                },
            },
            "required": ["issueIdOrKey"],
        },
    ),
    Tool(
        name="get_all_statuses",
        description="Get all the status on Jira on the api /rest/api/3/status",
        inputSchema={
            "type": "object",
            "properties": {
                "number_of_results": {
                    "type": "integer",
                    "description": NUMBER_OF_RESULTS_DESCRIPTION,
                    "default": 50,
                },
            },
        },
    ),
    Tool(
        name="assign_ticket",
        description="Assign a ticket on Jira on the api /rest/api/3/issue/{issueIdOrKey}/assignee",
        inputSchema={
            "type": "object",
            "properties": {
                "accountId": {
                    "type": "string",
                    "description": "The account id of the assignee",
                },
                "issueIdOrKey": {
                    "type": "string",
                    "description": ISSUE_ID_OR_KEY_DESCRIPTION,
                },
            },
            "required": ["accountId", "issueIdOrKey"],
        },
    ),
    Tool(
        name="query_assignable",
        description="Find the users assignable to issues of a project on the api "
        "/rest/api/3/user/assignable/search",
        inputSchema={
            "type": "object",
            "properties": {
                "project_key": {
                    "type": "string",
                    "description": "The project key (e.g. 'SCRUM')",
                },
            },
            "required": ["project_key"],
        },
    ),
)


def list_tools() -> list[Tool]:
    """Return every tool definition, always in the same order."""
    return list(TOOLS)


def get_tool(name: str) -> Tool | None:
    """Look up a tool definition by name."""
    return next((tool for tool in TOOLS if tool.name == name), None)
