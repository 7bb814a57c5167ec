"""Unit tests for the JiraConfig class."""

import pytest

from mcp_jira.exceptions import MCPJiraConfigurationError
from mcp_jira.jira.config import JiraConfig, describe_missing


def test_from_env_success(clean_jira_env):
    """Test that from_env successfully creates a config from environment variables."""
    clean_jira_env.setenv("JIRA_URL", "https://test.atlassian.net/")
    clean_jira_env.setenv("JIRA_EMAIL", "user@example.com")
    clean_jira_env.setenv("JIRA_API_TOKEN", "token")

    config = JiraConfig.from_env()

    assert config.url == "https://test.atlassian.net"
    assert config.username == "user@example.com"
    assert config.api_token == "token"
    assert config.ssl_verify is True


def test_from_env_username_alias(clean_jira_env):
    clean_jira_env.setenv("JIRA_URL", "https://test.atlassian.net")
    clean_jira_env.setenv("JIRA_USERNAME", "legacy@example.com")
    clean_jira_env.setenv("JIRA_API_TOKEN", "token")

    assert JiraConfig.from_env().username == "legacy@example.com"


def test_from_env_email_wins_over_username(clean_jira_env):
    clean_jira_env.setenv("JIRA_URL", "https://test.atlassian.net")
    clean_jira_env.setenv("JIRA_EMAIL", "user@example.com")
    clean_jira_env.setenv("JIRA_USERNAME", "legacy@example.com")
    clean_jira_env.setenv("JIRA_API_TOKEN", "token")

    assert JiraConfig.from_env().username == "user@example.com"


def test_from_env_missing_all(clean_jira_env):
    """Test that from_env names every missing variable."""
    with pytest.raises(MCPJiraConfigurationError) as excinfo:
        JiraConfig.from_env()

    assert excinfo.value.missing == ["JIRA_URL", "JIRA_EMAIL", "JIRA_API_TOKEN"]
    assert "JIRA_URL" in str(excinfo.value)


def test_from_env_empty_value_counts_as_missing(clean_jira_env):
    clean_jira_env.setenv("JIRA_URL", "https://test.atlassian.net")
    clean_jira_env.setenv("JIRA_EMAIL", "user@example.com")
    clean_jira_env.setenv("JIRA_API_TOKEN", "")

    with pytest.raises(MCPJiraConfigurationError) as excinfo:
        JiraConfig.from_env()

    assert excinfo.value.missing == ["JIRA_API_TOKEN"]


def test_from_env_overrides_take_precedence(clean_jira_env):
    clean_jira_env.setenv("JIRA_URL", "https://env.atlassian.net")
    clean_jira_env.setenv("JIRA_EMAIL", "env@example.com")
    clean_jira_env.setenv("JIRA_API_TOKEN", "env-token")

    config = JiraConfig.from_env(
        {
            "JIRA_URL": "https://cli.atlassian.net",
            "JIRA_EMAIL": None,
            "JIRA_API_TOKEN": "cli-token",
        }
    )

    assert config.url == "https://cli.atlassian.net"
    assert config.username == "env@example.com"
    assert config.api_token == "cli-token"


def test_from_env_overrides_satisfy_required(clean_jira_env):
    config = JiraConfig.from_env(
        {
            "JIRA_URL": "https://cli.atlassian.net",
            "JIRA_EMAIL": "cli@example.com",
            "JIRA_API_TOKEN": "cli-token",
        }
    )

    assert config.username == "cli@example.com"


@pytest.mark.parametrize(
    "value,expected",
    [("false", False), ("0", False), ("NO", False), ("true", True), ("yes", True)],
)
def test_from_env_ssl_verify(clean_jira_env, value, expected):
    clean_jira_env.setenv("JIRA_URL", "https://test.atlassian.net")
    clean_jira_env.setenv("JIRA_EMAIL", "user@example.com")
    clean_jira_env.setenv("JIRA_API_TOKEN", "token")
    clean_jira_env.setenv("JIRA_SSL_VERIFY", value)

    assert JiraConfig.from_env().ssl_verify is expected


def test_config_is_frozen():
    config = JiraConfig(url="https://x.atlassian.net", username="u", api_token="t")

    with pytest.raises(AttributeError):
        config.url = "https://other.atlassian.net"  # type: ignore[misc]


def test_describe_missing():
    message = describe_missing(["JIRA_URL", "JIRA_API_TOKEN"])

    lines = message.splitlines()
    assert lines[0] == "Missing required Jira environment variables:"
    assert lines[1].startswith("- JIRA_URL: ")
    assert lines[2] == "- JIRA_API_TOKEN: Your Jira API token"
