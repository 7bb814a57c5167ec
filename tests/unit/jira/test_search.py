"""Tests for the Jira search mixin."""

import pytest

from mcp_jira.jira.constants import DEFAULT_SEARCH_FIELDS
from tests.fixtures.jira_mocks import MOCK_JIRA_SEARCH_RESPONSE


@pytest.fixture
def search_route(jira_http):
    jira_http.add("POST", "/rest/api/3/search", MOCK_JIRA_SEARCH_RESPONSE)
    return jira_http


@pytest.mark.anyio
async def test_search_issues_defaults(jira_fetcher, search_route):
    result = await jira_fetcher.search_issues("project=PROJ")

    assert search_route.last_json() == {
        "jql": "project=PROJ",
        "startAt": 0,
        "maxResults": 50,
        "fields": DEFAULT_SEARCH_FIELDS,
    }
    assert result.total == 2
    assert [issue.key for issue in result.issues] == ["PROJ-123", "PROJ-124"]


@pytest.mark.anyio
async def test_search_issues_custom_page_and_fields(jira_fetcher, search_route):
    await jira_fetcher.search_issues(
        "assignee = currentUser()",
        start_at=20,
        max_results=10,
        fields="summary, status,,labels",
    )

    body = search_route.last_json()
    assert body["startAt"] == 20
    assert body["maxResults"] == 10
    assert body["fields"] == ["summary", "status", "labels"]


@pytest.mark.anyio
async def test_get_project_issues_jql(jira_fetcher, search_route):
    await jira_fetcher.get_project_issues("PROJ")
    assert search_route.last_json()["jql"] == "project=PROJ"

    await jira_fetcher.get_project_issues("PROJ", jql_tail='AND status="Done"')
    assert search_route.last_json()["jql"] == 'project=PROJ AND status="Done"'
