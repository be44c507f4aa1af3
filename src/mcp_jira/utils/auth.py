"""Authentication utilities for Jira Cloud REST calls."""

import base64
import logging

logger = logging.getLogger("mcp-jira.utils.auth")


def build_basic_auth_headers(email: str, api_token: str) -> dict[str, str]:
    """Build the header set sent with every Jira REST call.

    Jira Cloud authenticates API tokens with HTTP Basic auth, using the
    account email as the user name and the token as the password.

    Args:
        email: Atlassian account email
        api_token: Atlassian API token

    Returns:
        Authorization and Content-Type headers
    """
    logger.debug("Building Basic authentication headers")
    credentials = f"{email}:{api_token}".encode()
    return {
        "Authorization": f"Basic {base64.b64encode(credentials).decode('ascii')}",
        "Content-Type": "application/json",
    }
