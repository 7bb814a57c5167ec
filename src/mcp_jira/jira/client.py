"""Base client module for Jira API interactions."""

import base64
import logging
from typing import Any

import httpx

from ..exceptions import JiraApiError, MCPJiraAuthenticationError
from .config import JiraConfig

logger = logging.getLogger("mcp-jira.client")


def get_jira_headers(config: JiraConfig) -> dict[str, str]:
    """Build the headers sent with every Jira request.

    Args:
        config: Jira configuration

    Returns:
        Basic authorization plus JSON Accept/Content-Type headers
    """
    credentials = f"{config.username}:{config.api_token}".encode()
    return {
        "Authorization": f"Basic {base64.b64encode(credentials).decode('ascii')}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


class JiraClient:
    """Base client for Jira REST API interactions."""

    def __init__(
        self,
        config: JiraConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return get_jira_headers(self.config)

    def _create_session(self) -> httpx.AsyncClient:
        """Create an HTTP session bound to the Jira base URL.

        Returns:
            Authenticated async HTTP session
        """
        return httpx.AsyncClient(
            base_url=self.config.url,
            headers=self.headers,
            verify=self.config.ssl_verify,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request to the Jira API.

        Query parameters whose value is None are left out of the URL.

        Args:
            method: HTTP method
            path: API endpoint path (without base URL)
            params: Query parameters
            json: JSON request body

        Returns:
            Decoded JSON response body

        Raises:
            JiraApiError: If Jira answers with a non-2xx status
        """
        query = {key: value for key, value in (params or {}).items() if value is not None}
        logger.debug(f"Sending {method} request to {path} with params {query}")

        async with self._create_session() as session:
            response = await session.request(
                method, path, params=query or None, json=json
            )

        if not response.is_success:
            logger.error(
                f"HTTP error {response.status_code} for {method} {path}: {response.text}"
            )
            error_cls = (
                MCPJiraAuthenticationError
                if response.status_code in (401, 403)
                else JiraApiError
            )
            raise error_cls(response.status_code, response.reason_phrase, response.text)

        return response.json()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send GET request to the Jira API."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json: dict[str, Any]) -> Any:
        """Send POST request with a JSON body to the Jira API."""
        return await self._request("POST", path, json=json)
