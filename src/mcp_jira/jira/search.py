"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import (
    API_PATH,
    DEFAULT_MAX_RESULTS,
    DEFAULT_SEARCH_FIELDS,
    DEFAULT_START_AT,
)
from .utils import build_project_jql, parse_fields

logger = logging.getLogger("mcp-jira.search")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    async def search_issues(
        self,
        jql: str,
        start_at: int | None = None,
        max_results: int | None = None,
        fields: str | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string
            start_at: Index of the first result (default 0)
            max_results: Page size (default 50)
            fields: Comma-separated fields to return (default: key, summary,
                status, assignee, priority, issuetype, updated)

        Returns:
            JiraSearchResult for the requested page

        Raises:
            JiraApiError: If Jira rejects the search
        """
        body = {
            "jql": jql,
            "startAt": DEFAULT_START_AT if start_at is None else start_at,
            "maxResults": DEFAULT_MAX_RESULTS if max_results is None else max_results,
            "fields": parse_fields(fields, DEFAULT_SEARCH_FIELDS),
        }
        logger.debug(f"Searching issues with JQL: {jql}")
        data = await self.post(f"{API_PATH}/search", json=body)
        return JiraSearchResult.from_api_response(data, base_url=self.config.url)

    async def get_project_issues(
        self,
        project_key: str,
        jql_tail: str | None = None,
        start_at: int | None = None,
        max_results: int | None = None,
    ) -> JiraSearchResult:
        """
        Get the issues of a project, optionally narrowed by extra JQL.

        Args:
            project_key: The project key
            jql_tail: JQL appended after the project clause
            start_at: Index of the first result (default 0)
            max_results: Page size (default 50)

        Returns:
            JiraSearchResult for the requested page
        """
        return await self.search_issues(
            build_project_jql(project_key, jql_tail),
            start_at=start_at,
            max_results=max_results,
        )
