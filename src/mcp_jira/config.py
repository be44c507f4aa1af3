"""Configuration module for Jira API interactions."""

import logging
from dataclasses import dataclass

from .utils.auth import build_basic_auth_headers
from .utils.env import getenv, is_env_ssl_verify

logger = logging.getLogger("mcp-jira.config")


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Built once at startup and shared, unmodified, by every tool call.
    """

    url: str  # Base URL for Jira, e.g. https://your-domain.atlassian.net
    email: str  # Account email used as the Basic auth user name
    api_token: str  # API token used as the Basic auth password
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @property
    def base_url(self) -> str:
        """The Jira URL without a trailing slash."""
        return self.url.rstrip("/")

    @property
    def auth_headers(self) -> dict[str, str]:
        """Headers sent with every REST call."""
        return build_basic_auth_headers(self.email, self.api_token)

    @property
    def is_complete(self) -> bool:
        """Whether URL, email and token are all set."""
        return all([self.url, self.email, self.api_token])

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Missing values are not rejected here; they surface as
        authentication failures on the first backend call.

        Returns:
            JiraConfig with values from environment variables
        """
        config = cls(
            url=getenv("JIRA_URL", default=""),
            email=getenv("JIRA_API_MAIL", "JIRA_USERNAME", default=""),
            api_token=getenv("JIRA_API_KEY", "JIRA_API_TOKEN", default=""),
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
        if not config.is_complete:
            logger.warning(
                "Jira configuration is incomplete; set JIRA_URL, JIRA_API_MAIL "
                "and JIRA_API_KEY. Tool calls will fail until they are provided."
            )
        return config
