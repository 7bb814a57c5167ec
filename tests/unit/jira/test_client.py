"""Tests for the Jira client module."""

import base64

import pytest

from mcp_jira.exceptions import JiraApiError, MCPJiraAuthenticationError
from mcp_jira.jira.client import JiraClient, get_jira_headers
from tests.fixtures.jira_mocks import MOCK_JIRA_ERROR_BODY


def test_get_jira_headers(jira_config):
    headers = get_jira_headers(jira_config)

    expected = base64.b64encode(b"user@example.com:secret-token").decode("ascii")
    assert headers == {
        "Authorization": f"Basic {expected}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


@pytest.mark.anyio
async def test_get_sends_auth_and_drops_none_params(jira_config, jira_http):
    jira_http.add("GET", "/rest/api/3/thing", {"ok": True})
    client = JiraClient(jira_config, transport=jira_http.transport)

    data = await client.get(
        "/rest/api/3/thing", params={"startAt": 5, "maxResults": None}
    )

    assert data == {"ok": True}
    request = jira_http.last_request
    assert request.url.host == "test.atlassian.net"
    assert request.headers["Authorization"].startswith("Basic ")
    assert request.headers["Accept"] == "application/json"
    assert jira_http.last_params() == {"startAt": "5"}


@pytest.mark.anyio
async def test_get_without_params_has_no_query(jira_config, jira_http):
    jira_http.add("GET", "/rest/api/3/thing", {})
    client = JiraClient(jira_config, transport=jira_http.transport)

    await client.get("/rest/api/3/thing", params={"startAt": None})

    assert jira_http.last_request.url.query == b""


@pytest.mark.anyio
async def test_post_sends_json_body(jira_config, jira_http):
    jira_http.add("POST", "/rest/api/3/search", {"issues": []})
    client = JiraClient(jira_config, transport=jira_http.transport)

    await client.post("/rest/api/3/search", json={"jql": "project=PROJ"})

    assert jira_http.last_request.method == "POST"
    assert jira_http.last_json() == {"jql": "project=PROJ"}


@pytest.mark.anyio
async def test_non_success_raises_jira_api_error(jira_config, jira_http):
    jira_http.add("GET", "/rest/api/3/issue/NOPE-1", MOCK_JIRA_ERROR_BODY, 404)
    client = JiraClient(jira_config, transport=jira_http.transport)

    with pytest.raises(JiraApiError) as excinfo:
        await client.get("/rest/api/3/issue/NOPE-1")

    error = excinfo.value
    assert not isinstance(error, MCPJiraAuthenticationError)
    assert error.status_code == 404
    assert error.reason == "Not Found"
    assert error.body == MOCK_JIRA_ERROR_BODY
    assert str(error) == f"404 Not Found\n{MOCK_JIRA_ERROR_BODY}"


@pytest.mark.parametrize("status_code", [401, 403])
@pytest.mark.anyio
async def test_auth_failures_raise_authentication_error(
    jira_config, jira_http, status_code
):
    jira_http.add("GET", "/rest/api/3/myself", "denied", status_code)
    client = JiraClient(jira_config, transport=jira_http.transport)

    with pytest.raises(MCPJiraAuthenticationError) as excinfo:
        await client.get("/rest/api/3/myself")

    assert excinfo.value.status_code == status_code
    assert excinfo.value.body == "denied"
