"""
Jira issue models.

This module provides Pydantic models for a single Jira issue, both the
detailed view returned by the issue endpoint and the one-line summary used by
search and sprint listings.
"""

import logging
from typing import Any

from ...utils.date import parse_date_short
from ...utils.text import strip_html_tags
from ..base import ApiModel, display_name, named, to_text
from ..constants import (
    EMPTY_STRING,
    NO_DESCRIPTION,
    NO_PRIORITY,
    NO_SUMMARY,
    UNASSIGNED,
    UNKNOWN_DATE,
    UNKNOWN_REPORTER,
    UNKNOWN_STATUS,
    UNKNOWN_TYPE,
)

logger = logging.getLogger("mcp-jira.models.jira.issue")


def clean_description(description: Any) -> str:
    """
    Render an issue description as plain text.

    Strings lose their HTML tags; anything else (such as an Atlassian
    Document Format tree) is serialized as JSON without being interpreted.
    """
    if not description:
        description = NO_DESCRIPTION
    if isinstance(description, str):
        return strip_html_tags(description)
    return to_text(description)


class JiraIssue(ApiModel):
    """
    Model representing the detailed view of a Jira issue.
    """

    key: str = EMPTY_STRING
    summary: str = NO_SUMMARY
    description: str = NO_DESCRIPTION
    status: str = UNKNOWN_STATUS
    issue_type: str = UNKNOWN_TYPE
    priority: str = NO_PRIORITY
    assignee: str = UNASSIGNED
    reporter: str = UNKNOWN_REPORTER
    created: str = UNKNOWN_DATE
    updated: str = UNKNOWN_DATE
    url: str = EMPTY_STRING
    raw: Any = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: `base_url`, used to build the browse link

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls(raw=data)

        fields = data.get("fields") or {}
        key = str(data.get("key") or EMPTY_STRING)
        base_url = kwargs.get("base_url", EMPTY_STRING)

        return cls(
            key=key,
            summary=fields.get("summary") or NO_SUMMARY,
            description=clean_description(fields.get("description")),
            status=named(fields.get("status")) or UNKNOWN_STATUS,
            issue_type=named(fields.get("issuetype")) or UNKNOWN_TYPE,
            priority=named(fields.get("priority")) or NO_PRIORITY,
            assignee=display_name(fields.get("assignee")) or UNASSIGNED,
            reporter=display_name(fields.get("reporter")) or UNKNOWN_REPORTER,
            created=parse_date_short(fields.get("created")) or UNKNOWN_DATE,
            updated=parse_date_short(fields.get("updated")) or UNKNOWN_DATE,
            url=f"{base_url}/browse/{key}" if base_url else EMPTY_STRING,
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "issueKey": self.key,
            "summary": self.summary,
            "description": self.description,
            "status": self.status,
            "issueType": self.issue_type,
            "priority": self.priority,
            "assignee": self.assignee,
            "reporter": self.reporter,
            "created": self.created,
            "updated": self.updated,
            "url": self.url,
            "raw": self.raw,
        }

    def to_markdown(self) -> str:
        """Render the issue as the Markdown block shown to the assistant."""
        return (
            f"**{self.key}: {self.summary}**\n"
            "\n"
            f"**Status:** {self.status}\n"
            f"**Type:** {self.issue_type}\n"
            f"**Priority:** {self.priority}\n"
            f"**Assignee:** {self.assignee}\n"
            f"**Reporter:** {self.reporter}\n"
            f"**Created:** {self.created}\n"
            f"**Updated:** {self.updated}\n"
            "\n"
            "**Description:**\n"
            f"{self.description}\n"
            "\n"
            "**Full Issue Data:** Available in structured content below."
        )


class JiraIssueSummary(ApiModel):
    """
    Model representing one row of an issue listing.
    """

    key: str = EMPTY_STRING
    summary: str = NO_SUMMARY
    status: str = UNKNOWN_STATUS
    assignee: str = UNASSIGNED
    priority: str = NO_PRIORITY
    type: str = UNKNOWN_TYPE
    updated: str | None = None
    url: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueSummary":
        if not data or not isinstance(data, dict):
            return cls()

        fields = data.get("fields") or {}
        key = str(data.get("key") or EMPTY_STRING)
        base_url = kwargs.get("base_url", EMPTY_STRING)

        return cls(
            key=key,
            summary=fields.get("summary") or NO_SUMMARY,
            status=named(fields.get("status")) or UNKNOWN_STATUS,
            assignee=display_name(fields.get("assignee")) or UNASSIGNED,
            priority=named(fields.get("priority")) or NO_PRIORITY,
            type=named(fields.get("issuetype")) or UNKNOWN_TYPE,
            updated=fields.get("updated"),
            url=f"{base_url}/browse/{key}" if base_url else EMPTY_STRING,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "summary": self.summary,
            "status": self.status,
            "assignee": self.assignee,
            "priority": self.priority,
            "type": self.type,
            "updated": self.updated,
            "url": self.url,
        }
