"""Configuration module for Jira API interactions."""

from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import MCPJiraConfigurationError
from ..utils.env import getenv, is_env_ssl_verify

# Required variables and the hint shown when one is missing
REQUIRED_ENV_VARS: dict[str, str] = {
    "JIRA_URL": "Your Jira instance URL (e.g., https://yourcompany.atlassian.net)",
    "JIRA_EMAIL": "Your Jira email address",
    "JIRA_API_TOKEN": "Your Jira API token",
}


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Built once at startup and shared read-only by every tool invocation.
    Authentication is HTTP Basic with the account email and an API token.
    """

    url: str  # Base URL for Jira, without trailing slash
    username: str  # Account email
    api_token: str  # API token
    ssl_verify: bool = True  # Whether to verify SSL certificates

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def from_env(cls, overrides: Mapping[str, str | None] | None = None) -> "JiraConfig":
        """Create configuration from environment variables.

        Args:
            overrides: Values that take precedence over the process
                environment, keyed by environment variable name.

        Returns:
            JiraConfig with values from the environment.

        Raises:
            MCPJiraConfigurationError: If any required variable is missing or empty.
        """
        env = overrides or {}

        url = getenv(env, "JIRA_URL")
        username = getenv(env, "JIRA_EMAIL") or getenv(env, "JIRA_USERNAME")
        api_token = getenv(env, "JIRA_API_TOKEN")

        missing = [
            name
            for name, value in (
                ("JIRA_URL", url),
                ("JIRA_EMAIL", username),
                ("JIRA_API_TOKEN", api_token),
            )
            if not value
        ]
        if missing:
            raise MCPJiraConfigurationError(missing)

        return cls(
            url=url,
            username=username,
            api_token=api_token,
            ssl_verify=is_env_ssl_verify(env, "JIRA_SSL_VERIFY"),
        )


def describe_missing(missing: list[str]) -> str:
    """Render the startup diagnostic for missing settings."""
    lines = ["Missing required Jira environment variables:"]
    for name in missing:
        lines.append(f"- {name}: {REQUIRED_ENV_VARS[name]}")
    return "\n".join(lines)
