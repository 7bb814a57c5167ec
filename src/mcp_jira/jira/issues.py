"""Module for Jira issue operations."""

import logging

from ..models.jira import JiraIssue
from .client import JiraClient
from .constants import API_PATH
from .utils import quote_path

logger = logging.getLogger("mcp-jira.issues")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    async def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue by its key.

        Args:
            issue_key: The issue key (e.g. PROJ-123)

        Returns:
            JiraIssue projection of the issue

        Raises:
            JiraApiError: If Jira rejects the request
        """
        data = await self.get(f"{API_PATH}/issue/{quote_path(issue_key)}")
        return JiraIssue.from_api_response(data, base_url=self.config.url)
