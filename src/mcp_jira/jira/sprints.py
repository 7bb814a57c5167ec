"""Module for Jira sprints operations."""

import logging

from ..models.jira import JiraSearchResult, JiraSprintPage
from .client import JiraClient
from .constants import AGILE_PATH
from .utils import quote_path

logger = logging.getLogger("mcp-jira.sprints")


class SprintsMixin(JiraClient):
    """Mixin for Jira sprints operations."""

    async def get_board_sprints(
        self,
        board_id: int,
        state: str | None = None,
        start_at: int | None = None,
        max_results: int | None = None,
    ) -> JiraSprintPage:
        """
        Get the sprints of a board.

        Args:
            board_id: Board ID
            state: Sprint state (active, future, closed); all states if None
            start_at: Index of the first sprint
            max_results: Page size

        Returns:
            JiraSprintPage for the requested page
        """
        params = {
            "state": state or None,
            "startAt": start_at,
            "maxResults": max_results,
        }
        data = await self.get(
            f"{AGILE_PATH}/board/{quote_path(board_id)}/sprint", params=params
        )
        return JiraSprintPage.from_api_response(data, board_id=board_id)

    async def get_sprint_issues(
        self,
        sprint_id: int,
        start_at: int | None = None,
        max_results: int | None = None,
        jql: str | None = None,
    ) -> JiraSearchResult:
        """
        Get the issues of a sprint.

        Args:
            sprint_id: Sprint ID
            start_at: Index of the first issue
            max_results: Page size
            jql: Extra JQL filter applied within the sprint

        Returns:
            JiraSearchResult for the requested page
        """
        params = {
            "startAt": start_at,
            "maxResults": max_results,
            "jql": jql or None,
        }
        data = await self.get(
            f"{AGILE_PATH}/sprint/{quote_path(sprint_id)}/issue", params=params
        )
        return JiraSearchResult.from_api_response(data, base_url=self.config.url)
