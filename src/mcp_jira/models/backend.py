"""
Shapes exchanged with the Jira REST backend.

A ``BackendRequest`` is derived from one tool invocation; the client answers
it with exactly one ``BackendSuccess`` or ``BackendFailure``.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BackendRequest:
    """One outbound REST call."""

    method: str
    path: str
    params: dict[str, Any] | None = None
    json: dict[str, Any] | None = None


@dataclass(frozen=True)
class BackendSuccess:
    """A 2xx response: the decoded body plus the response metadata."""

    payload: Any
    status: int = 200
    reason: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def to_response_dict(self) -> dict[str, Any]:
        """Serialize the whole response, not just its body."""
        return {
            "status": self.status,
            "statusText": self.reason,
            "headers": self.headers,
            "data": self.payload,
        }


@dataclass(frozen=True)
class BackendFailure:
    """A non-2xx response, or a transport fault when ``status`` is None."""

    payload: Any
    status: int | None = None


BackendResult = BackendSuccess | BackendFailure
