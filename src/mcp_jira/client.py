"""Base client module for Jira REST API interactions."""

import logging
from typing import Any

import requests

from .config import JiraConfig
from .models.backend import BackendFailure, BackendResult, BackendSuccess

# Configure logging
logger = logging.getLogger("mcp-jira.client")

API_PREFIX = "/rest/api/3"


class JiraClient:
    """Issues single REST calls against Jira and classifies their outcome."""

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, it is loaded from
                environment variables.
        """
        self.config = config or JiraConfig.from_env()
        self.headers = {**self.config.auth_headers, "Accept": "application/json"}

    def _new_session(self) -> requests.Session:
        # Calls run on worker threads, so each one gets its own session
        session = requests.Session()
        session.headers.update(self.headers)
        session.verify = self.config.ssl_verify
        return session

    def url_for(self, path: str) -> str:
        """Build the absolute URL of a REST API path such as ``/search``."""
        return f"{self.config.base_url}{API_PREFIX}{path}"

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> BackendResult:
        """Make one request to the Jira REST API.

        Never raises for HTTP or network errors: both come back as a
        ``BackendFailure`` so callers always have a JSON-serializable result.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path below ``/rest/api/3``
            params: Query parameters
            json: JSON request body

        Returns:
            BackendSuccess for 2xx responses, BackendFailure otherwise
        """
        url = self.url_for(path)
        logger.debug(f"{method} {url} params={params}")

        try:
            with self._new_session() as session:
                response = session.request(method, url, params=params, json=json)
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error during {method} {path}: {e}")
            return BackendFailure(payload={"errorMessages": [str(e)]}, status=None)

        payload = self._decode_body(response)

        if response.ok:
            return BackendSuccess(
                payload=payload,
                status=response.status_code,
                reason=response.reason or "",
                headers=dict(response.headers),
            )

        if response.status_code in (401, 403):
            logger.error(
                f"Authentication failed for Jira API ({response.status_code}). "
                "Token may be expired or invalid. Please verify credentials."
            )
        logger.error(f"Jira API error {response.status_code} on {method} {path}")
        logger.debug(f"Error details: {payload}")
        return BackendFailure(payload=payload, status=response.status_code)

    @staticmethod
    def _decode_body(response: requests.Response) -> Any:
        """Return the JSON body, or the raw text when it is not JSON."""
        if not response.content:
            return response.text
        try:
            return response.json()
        except ValueError:
            return response.text
