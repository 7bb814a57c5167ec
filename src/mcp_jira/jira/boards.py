"""Module for Jira agile board operations."""

import logging

from ..models.jira import JiraBoardPage
from .client import JiraClient
from .constants import AGILE_PATH

logger = logging.getLogger("mcp-jira.boards")


class BoardsMixin(JiraClient):
    """Mixin for Jira agile board operations."""

    async def list_boards(
        self,
        board_type: str | None = None,
        project_key_or_id: str | None = None,
        start_at: int | None = None,
        max_results: int | None = None,
    ) -> JiraBoardPage:
        """
        List agile boards, optionally filtered by type and project.

        Args:
            board_type: 'scrum' or 'kanban'
            project_key_or_id: Only boards of this project
            start_at: Index of the first board
            max_results: Page size

        Returns:
            JiraBoardPage for the requested page
        """
        params = {
            "type": board_type or None,
            "projectKeyOrId": project_key_or_id or None,
            "startAt": start_at,
            "maxResults": max_results,
        }
        data = await self.get(f"{AGILE_PATH}/board", params=params)
        return JiraBoardPage.from_api_response(data)
