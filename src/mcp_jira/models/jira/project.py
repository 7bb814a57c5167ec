"""
Jira project models.

This module provides Pydantic models for Jira projects, project listings and
the per-issue-type status lists of a project.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, PageWindow, display_name
from ..constants import EMPTY_STRING

logger = logging.getLogger("mcp-jira.models.jira.project")


class JiraProjectSummary(ApiModel):
    """
    Model representing one row of the project search listing.
    """

    id: str | None = None
    key: str | None = None
    name: str | None = None
    lead: str | None = None
    project_type: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraProjectSummary":
        if not data or not isinstance(data, dict):
            return cls()

        project_id = data.get("id")
        return cls(
            id=str(project_id) if project_id is not None else None,
            key=data.get("key"),
            name=data.get("name"),
            lead=display_name(data.get("lead")),
            project_type=data.get("projectTypeKey"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "lead": self.lead,
            "projectType": self.project_type,
        }


class JiraProjectPage(ApiModel):
    """
    Model representing one page of the project search listing.
    """

    window: PageWindow = Field(default_factory=PageWindow)
    projects: list[JiraProjectSummary] = Field(default_factory=list)
    raw: Any = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraProjectPage":
        if not data or not isinstance(data, dict):
            return cls(raw=data)

        projects = [
            JiraProjectSummary.from_api_response(project)
            for project in data.get("values") or []
        ]
        return cls(
            window=PageWindow.from_api_response(data, count=len(projects)),
            projects=projects,
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            **self.window.to_simplified_dict(),
            "projects": [project.to_simplified_dict() for project in self.projects],
            "raw": self.raw,
        }


class JiraProject(ApiModel):
    """
    Model representing the full metadata of a Jira project.

    Lead, components and issue types are passed through as Jira returns them.
    """

    id: str | None = None
    key: str = EMPTY_STRING
    name: str = EMPTY_STRING
    url: str = EMPTY_STRING
    lead: Any = None
    components: Any = None
    issue_types: Any = None
    raw: Any = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: The project data from the Jira API
            **kwargs: `base_url`, used to build the project link

        Returns:
            A JiraProject instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary project data")
            return cls(raw=data)

        key = str(data.get("key") or EMPTY_STRING)
        base_url = kwargs.get("base_url", EMPTY_STRING)
        project_id = data.get("id")

        return cls(
            id=str(project_id) if project_id is not None else None,
            key=key,
            name=data.get("name") or EMPTY_STRING,
            url=f"{base_url}/jira/software/c/projects/{key}" if base_url else EMPTY_STRING,
            lead=data.get("lead"),
            components=data.get("components"),
            issue_types=data.get("issueTypes"),
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "url": self.url,
            "lead": self.lead,
            "components": self.components,
            "issueTypes": self.issue_types,
            "raw": self.raw,
        }


class JiraIssueTypeStatuses(ApiModel):
    """
    Model representing the statuses available to one issue type of a project.
    """

    issue_type: str | None = None
    statuses: list[str] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueTypeStatuses":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            issue_type=data.get("name"),
            statuses=[
                status.get("name")
                for status in data.get("statuses") or []
                if isinstance(status, dict) and status.get("name")
            ],
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"issueType": self.issue_type, "statuses": self.statuses}


class JiraProjectStatuses(ApiModel):
    """
    Model representing the statuses of every issue type in a project.

    The endpoint answers with a bare JSON list, one entry per issue type.
    """

    project_id_or_key: str = EMPTY_STRING
    types: list[JiraIssueTypeStatuses] = Field(default_factory=list)
    raw: Any = None

    @classmethod
    def from_api_response(
        cls, data: list[dict[str, Any]], **kwargs: Any
    ) -> "JiraProjectStatuses":
        project_id_or_key = kwargs.get("project_id_or_key", EMPTY_STRING)
        if not isinstance(data, list):
            logger.debug("Received non-list statuses data, returning empty types")
            return cls(project_id_or_key=project_id_or_key, raw=data)

        return cls(
            project_id_or_key=project_id_or_key,
            types=[JiraIssueTypeStatuses.from_api_response(item) for item in data],
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "projectIdOrKey": self.project_id_or_key,
            "types": [issue_type.to_simplified_dict() for issue_type in self.types],
            "raw": self.raw,
        }
