"""Module for Jira project operations."""

import logging

from ..models.jira import JiraProject, JiraProjectPage, JiraProjectStatuses
from .client import JiraClient
from .constants import API_PATH
from .utils import quote_path

logger = logging.getLogger("mcp-jira.projects")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    async def list_projects(
        self,
        query: str | None = None,
        start_at: int | None = None,
        max_results: int | None = None,
    ) -> JiraProjectPage:
        """
        List the projects visible to the user.

        Args:
            query: Optional text matched against project key and name
            start_at: Index of the first project
            max_results: Page size

        Returns:
            JiraProjectPage for the requested page
        """
        params = {
            "query": query or None,
            "startAt": start_at,
            "maxResults": max_results,
        }
        data = await self.get(f"{API_PATH}/project/search", params=params)
        return JiraProjectPage.from_api_response(data)

    async def get_project(self, project_id_or_key: str) -> JiraProject:
        """
        Get the full metadata of a project.

        Args:
            project_id_or_key: Project key or numeric ID

        Returns:
            JiraProject projection
        """
        data = await self.get(f"{API_PATH}/project/{quote_path(project_id_or_key)}")
        return JiraProject.from_api_response(data, base_url=self.config.url)

    async def get_project_statuses(self, project_id_or_key: str) -> JiraProjectStatuses:
        """
        Get the statuses available to each issue type of a project.

        Args:
            project_id_or_key: Project key or numeric ID

        Returns:
            JiraProjectStatuses with one entry per issue type
        """
        data = await self.get(
            f"{API_PATH}/project/{quote_path(project_id_or_key)}/statuses"
        )
        return JiraProjectStatuses.from_api_response(
            data, project_id_or_key=project_id_or_key
        )
