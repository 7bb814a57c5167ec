"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results and for
the sprint issue listing, which shares the same response shape.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, PageWindow
from .issue import JiraIssueSummary

logger = logging.getLogger("mcp-jira.models.jira.search")


class JiraSearchResult(ApiModel):
    """
    Model representing one page of issues returned by a JQL search.
    """

    window: PageWindow = Field(default_factory=PageWindow)
    issues: list[JiraIssueSummary] = Field(default_factory=list)
    raw: Any = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: `base_url`, passed on to each issue

        Returns:
            A JiraSearchResult instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary search data")
            return cls(raw=data)

        issues_data = data.get("issues") or []
        issues = [
            JiraIssueSummary.from_api_response(issue, **kwargs)
            for issue in issues_data
            if issue
        ]

        return cls(
            window=PageWindow.from_api_response(data, count=len(issues)),
            issues=issues,
            raw=data,
        )

    @property
    def total(self) -> int:
        return self.window.total

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            **self.window.to_simplified_dict(),
            "issues": [issue.to_simplified_dict() for issue in self.issues],
            "raw": self.raw,
        }
