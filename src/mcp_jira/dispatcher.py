"""Tool dispatch: argument decoding, one backend call, normalized output."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, cast
from urllib.parse import quote

from anyio import to_thread
from mcp.types import TextContent

from .catalog import get_tool
from .client import JiraClient
from .exceptions import UnknownToolError
from .logging_config import ContextualLogger, log_operation
from .models.adf import DEFAULT_DESCRIPTION, text_to_adf
from .models.arguments import (
    AssignableUsersArguments,
    AssignTicketArguments,
    CreateTicketArguments,
    DeleteTicketArguments,
    EditTicketArguments,
    JqlSearchArguments,
    ListProjectsArguments,
    StatusListArguments,
    ToolArguments,
)
from .models.backend import (
    BackendFailure,
    BackendRequest,
    BackendResult,
    BackendSuccess,
)

logger = cast(ContextualLogger, logging.getLogger("mcp-jira.dispatcher"))

ASSIGNED_PREFIX = "Ticket assigned : "


def to_json(value: Any) -> str:
    """Pretty-print a value the way every tool reports it."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def issue_path(issue_id_or_key: str, suffix: str = "") -> str:
    return f"/issue/{quote(issue_id_or_key, safe='')}{suffix}"


# Request builders


def build_search_request(args: JqlSearchArguments) -> BackendRequest:
    return BackendRequest(
        "GET", "/search", params={"jql": args.jql, "maxResults": args.number_of_results}
    )


def build_create_request(args: CreateTicketArguments) -> BackendRequest:
    fields: dict[str, Any] = {
        "project": {"key": args.project.key},
        "summary": args.summary,
    }
    if args.description:
        fields["description"] = text_to_adf(args.description)
    fields["issuetype"] = {"name": args.issuetype.name}
    if args.parent:
        fields["parent"] = {"key": args.parent}
    return BackendRequest("POST", "/issue", json={"fields": fields})


def build_list_projects_request(args: ListProjectsArguments) -> BackendRequest:
    return BackendRequest("GET", "/project", params={"maxResults": args.number_of_results})


def build_delete_request(args: DeleteTicketArguments) -> BackendRequest:
    return BackendRequest("DELETE", issue_path(args.issue_id_or_key))


def build_edit_request(args: EditTicketArguments) -> BackendRequest:
    """Build a partial update.

    Fields the caller did not mention are not sent, so Jira leaves them
    alone. The description is the exception: an omitted description is
    replaced by a default text, and only an explicit ``null`` keeps it.
    """
    fields: dict[str, Any] = {}
    if args.summary is not None:
        fields["summary"] = args.summary
    if "description" not in args.model_fields_set or args.description is not None:
        fields["description"] = text_to_adf(args.description or DEFAULT_DESCRIPTION)
    if args.labels is not None:
        fields["labels"] = args.labels
    if args.parent is not None:
        fields["parent"] = {"key": args.parent}
    if args.priority is not None:
        fields["priority"] = {"name": args.priority}
    if args.components is not None:
        fields["components"] = [component.model_dump() for component in args.components]
    return BackendRequest("PUT", issue_path(args.issue_id_or_key), json={"fields": fields})


def build_statuses_request(args: StatusListArguments) -> BackendRequest:
    return BackendRequest("GET", "/status", params={"maxResults": args.number_of_results})


def build_assign_request(args: AssignTicketArguments) -> BackendRequest:
    return BackendRequest(
        "PUT",
        issue_path(args.issue_id_or_key, "/assignee"),
        json={"accountId": args.account_id},
    )


def build_assignable_request(args: AssignableUsersArguments) -> BackendRequest:
    return BackendRequest(
        "GET", "/user/assignable/search", params={"project": args.project_key}
    )


# Renderers


def render_payload(result: BackendResult) -> str:
    if isinstance(result, BackendFailure):
        return to_json({"error": result.payload})
    return to_json(result.payload)


def render_name_and_description(result: BackendResult) -> str:
    if isinstance(result, BackendFailure):
        return render_payload(result)

    issues = result.payload.get("issues", []) if isinstance(result.payload, dict) else []
    tickets = []
    for issue in issues:
        if not isinstance(issue, dict):
            continue
        fields = issue.get("fields") or {}
        tickets.append(
            {
                "key": issue.get("key"),
                "summary": fields.get("summary"),
                "description": fields.get("description"),
            }
        )
    return to_json(tickets)


def render_created(result: BackendResult) -> str:
    # Failures are reported as the bare Jira error body, without an "error" key
    return to_json(result.payload)


def render_assigned(result: BackendResult) -> str:
    if isinstance(result, BackendSuccess):
        return ASSIGNED_PREFIX + to_json(result.to_response_dict())
    return render_payload(result)


@dataclass(frozen=True)
class ToolRoute:
    """How one tool maps onto a single backend call."""

    arguments: type[ToolArguments]
    build_request: Callable[[Any], BackendRequest]
    render: Callable[[BackendResult], str] = render_payload


ROUTES: dict[str, ToolRoute] = {
    "execute_jql": ToolRoute(JqlSearchArguments, build_search_request),
    "get_only_ticket_name_and_description": ToolRoute(
        JqlSearchArguments, build_search_request, render_name_and_description
    ),
    "create_ticket": ToolRoute(CreateTicketArguments, build_create_request, render_created),
    "list_projects": ToolRoute(ListProjectsArguments, build_list_projects_request),
    "delete_ticket": ToolRoute(DeleteTicketArguments, build_delete_request),
    "edit_ticket": ToolRoute(EditTicketArguments, build_edit_request),
    "get_all_statuses": ToolRoute(StatusListArguments, build_statuses_request),
    "assign_ticket": ToolRoute(AssignTicketArguments, build_assign_request, render_assigned),
    "query_assignable": ToolRoute(AssignableUsersArguments, build_assignable_request),
}


class ToolDispatcher:
    """Executes exactly one tool per call against a shared Jira client."""

    def __init__(self, client: JiraClient) -> None:
        self.client = client

    def resolve(self, name: str) -> ToolRoute:
        """Find the route of a catalogued tool.

        Raises:
            UnknownToolError: If the tool is not in the catalog
        """
        if get_tool(name) is None or name not in ROUTES:
            raise UnknownToolError(name)
        return ROUTES[name]

    async def invoke(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[TextContent]:
        """Run one tool and return its single-block text envelope.

        Args:
            name: Tool name
            arguments: Raw tool arguments

        Returns:
            One TextContent holding pretty-printed JSON

        Raises:
            UnknownToolError: If the tool does not exist
            MissingArgumentError: If a required argument is absent
            InvalidArgumentError: If an argument is malformed
        """
        with log_operation(logger, f"tool:{name}", tool=name):
            route = self.resolve(name)
            args = route.arguments.from_arguments(name, arguments)
            request = route.build_request(args)
            logger.info(f"Calling Jira: {request.method} {request.path}")

            result = await to_thread.run_sync(
                partial(
                    self.client.request,
                    request.method,
                    request.path,
                    params=request.params,
                    json=request.json,
                )
            )
            if isinstance(result, BackendFailure):
                logger.warning(f"Tool {name} returned a Jira error (status {result.status})")

            return [TextContent(type="text", text=route.render(result))]
