"""
Data models for the MCP Jira server.

Pydantic models decode tool arguments; dataclasses describe the REST calls
made on their behalf.
"""

from .adf import DEFAULT_DESCRIPTION, text_to_adf
from .arguments import (
    AssignableUsersArguments,
    AssignTicketArguments,
    CreateTicketArguments,
    DeleteTicketArguments,
    EditTicketArguments,
    IssueTypeRef,
    JqlSearchArguments,
    ListProjectsArguments,
    ProjectRef,
    StatusListArguments,
    ToolArguments,
)
from .backend import BackendFailure, BackendRequest, BackendResult, BackendSuccess

__all__ = [
    "DEFAULT_DESCRIPTION",
    "AssignTicketArguments",
    "AssignableUsersArguments",
    "BackendFailure",
    "BackendRequest",
    "BackendResult",
    "BackendSuccess",
    "CreateTicketArguments",
    "DeleteTicketArguments",
    "EditTicketArguments",
    "IssueTypeRef",
    "JqlSearchArguments",
    "ListProjectsArguments",
    "ProjectRef",
    "StatusListArguments",
    "ToolArguments",
    "text_to_adf",
]
