"""Shared fixtures for the MCP Jira test suite."""

import pytest

from mcp_jira.jira import JiraFetcher
from tests.utils.factories import JiraConfigFactory
from tests.utils.mocks import MockJiraHttp


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def jira_config():
    return JiraConfigFactory.create()


@pytest.fixture
def jira_http():
    """Mock Jira HTTP endpoint; register routes with `jira_http.add(...)`."""
    return MockJiraHttp()


@pytest.fixture
def jira_fetcher(jira_config, jira_http):
    """JiraFetcher whose requests go to the mock endpoint."""
    return JiraFetcher(config=jira_config, transport=jira_http.transport)


@pytest.fixture
def clean_jira_env(monkeypatch):
    """Remove every Jira setting from the process environment."""
    for name in (
        "JIRA_URL",
        "JIRA_EMAIL",
        "JIRA_USERNAME",
        "JIRA_API_TOKEN",
        "JIRA_SSL_VERIFY",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
