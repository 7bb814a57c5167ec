"""Module for Jira comment operations."""

import logging

from ..models.jira import JiraCommentPage
from .client import JiraClient
from .constants import API_PATH
from .utils import quote_path

logger = logging.getLogger("mcp-jira.comments")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    async def get_issue_comments(
        self,
        issue_id_or_key: str,
        start_at: int | None = None,
        max_results: int | None = None,
    ) -> JiraCommentPage:
        """
        Get one page of comments for a specific issue.

        Args:
            issue_id_or_key: The issue key or ID
            start_at: Index of the first comment
            max_results: Page size

        Returns:
            JiraCommentPage for the requested page
        """
        data = await self.get(
            f"{API_PATH}/issue/{quote_path(issue_id_or_key)}/comment",
            params={"startAt": start_at, "maxResults": max_results},
        )
        return JiraCommentPage.from_api_response(data, issue_id_or_key=issue_id_or_key)
