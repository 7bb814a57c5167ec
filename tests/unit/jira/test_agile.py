"""Tests for the Jira boards and sprints mixins."""

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_JIRA_BOARDS_RESPONSE,
    MOCK_JIRA_SEARCH_RESPONSE,
    MOCK_JIRA_SPRINTS_RESPONSE,
)


@pytest.mark.anyio
async def test_list_boards_filters(jira_fetcher, jira_http):
    jira_http.add("GET", "/rest/agile/1.0/board", MOCK_JIRA_BOARDS_RESPONSE)

    page = await jira_fetcher.list_boards(
        board_type="scrum", project_key_or_id="PROJ", max_results=25
    )

    assert jira_http.last_params() == {
        "type": "scrum",
        "projectKeyOrId": "PROJ",
        "maxResults": "25",
    }
    assert page.boards[0].id == 7
    assert page.boards[0].location["projectKey"] == "PROJ"


@pytest.mark.anyio
async def test_get_board_sprints(jira_fetcher, jira_http):
    jira_http.add("GET", "/rest/agile/1.0/board/7/sprint", MOCK_JIRA_SPRINTS_RESPONSE)

    page = await jira_fetcher.get_board_sprints(7, state="active")

    assert jira_http.last_params() == {"state": "active"}
    assert page.board_id == 7
    # No total in the response: falls back to the number of sprints returned
    assert page.window.total == 2
    assert page.sprints[1].complete_date == "2024-03-01T08:30:00.000Z"


@pytest.mark.anyio
async def test_get_sprint_issues(jira_fetcher, jira_http):
    jira_http.add("GET", "/rest/agile/1.0/sprint/42/issue", MOCK_JIRA_SEARCH_RESPONSE)

    result = await jira_fetcher.get_sprint_issues(42, start_at=0, jql="status=Done")

    assert jira_http.last_params() == {"startAt": "0", "jql": "status=Done"}
    assert result.total == 2
    assert result.issues[0].url == "https://test.atlassian.net/browse/PROJ-123"
