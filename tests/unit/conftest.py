"""
Shared fixtures for MCP Jira unit tests.

HTTP is mocked at ``requests.Session.request`` so that the real
``JiraClient`` (URL building, header handling, response classification)
runs in every test that goes through the dispatcher.
"""

import json
import os
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira.client import JiraClient
from mcp_jira.config import JiraConfig
from mcp_jira.dispatcher import ToolDispatcher

JIRA_URL = "https://test.atlassian.net"


def build_response(
    status_code: int = 200,
    payload: Any = None,
    text: str | None = None,
    reason: str = "OK",
    headers: dict[str, str] | None = None,
) -> MagicMock:
    """Create a mock ``requests.Response``.

    ``payload`` is served as a JSON body; ``text`` as a non-JSON body. With
    neither, the body is empty (as for 204 No Content).
    """
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.headers = headers if headers is not None else {}

    if payload is not None:
        response.text = json.dumps(payload)
        response.content = response.text.encode("utf-8")
        response.json.return_value = payload
    elif text is not None:
        response.text = text
        response.content = text.encode("utf-8")
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.text = ""
        response.content = b""
        response.json.side_effect = ValueError("Expecting value")
    return response


@pytest.fixture
def make_response():
    """
    Factory for mock HTTP responses.

    Example:
        def test_x(make_response):
            response = make_response(404, {"errorMessages": ["nope"]})
    """
    return build_response


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Returns:
        Callable: Function that creates JiraConfig instances
    """

    def _create_config(**overrides):
        defaults = {
            "url": JIRA_URL,
            "email": "test@example.com",
            "api_token": "test_token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def jira_config(jira_config_factory):
    """Standard test configuration."""
    return jira_config_factory()


@pytest.fixture
def mock_request():
    """Patch the HTTP layer; by default every call answers 200 with ``{}``."""
    with patch("requests.Session.request") as mock:
        mock.return_value = build_response(200, {})
        yield mock


@pytest.fixture
def jira_client(jira_config, mock_request):
    """A real JiraClient whose HTTP calls hit ``mock_request``."""
    return JiraClient(config=jira_config)


@pytest.fixture
def dispatcher(jira_client):
    """A dispatcher wired to the mocked client."""
    return ToolDispatcher(jira_client)


@pytest.fixture
def jira_environment():
    """Jira credentials in the environment, under the server's variable names."""
    jira_env = {
        "JIRA_URL": JIRA_URL,
        "JIRA_API_MAIL": "env@example.com",
        "JIRA_API_KEY": "env_token",
    }
    with patch.dict(os.environ, jira_env, clear=False):
        yield jira_env
