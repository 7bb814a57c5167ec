"""
Jira comment models.

This module provides Pydantic models for Jira comments.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, PageWindow, display_name, to_text
from ..constants import EMPTY_STRING

logger = logging.getLogger("mcp-jira.models.jira.comment")


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    id: str = EMPTY_STRING
    author: str | None = None
    created: str | None = None
    updated: str | None = None
    body: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Cloud returns the body as an Atlassian Document Format tree; it is kept
        as JSON text rather than rendered.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary comment data")
            return cls()

        comment_id = data.get("id")
        body = data.get("body")

        return cls(
            id=str(comment_id) if comment_id is not None else EMPTY_STRING,
            author=display_name(data.get("author")),
            created=data.get("created"),
            updated=data.get("updated"),
            body=to_text(body) if body is not None else EMPTY_STRING,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "created": self.created,
            "updated": self.updated,
            "body": self.body,
        }


class JiraCommentPage(ApiModel):
    """
    Model representing one page of comments on an issue.
    """

    issue_id_or_key: str = EMPTY_STRING
    window: PageWindow = Field(default_factory=PageWindow)
    comments: list[JiraComment] = Field(default_factory=list)
    raw: Any = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCommentPage":
        issue_id_or_key = kwargs.get("issue_id_or_key", EMPTY_STRING)
        if not data or not isinstance(data, dict):
            return cls(issue_id_or_key=issue_id_or_key, raw=data)

        comments = [
            JiraComment.from_api_response(comment)
            for comment in data.get("comments") or []
        ]
        return cls(
            issue_id_or_key=issue_id_or_key,
            window=PageWindow.from_api_response(data, count=len(comments)),
            comments=comments,
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "issueIdOrKey": self.issue_id_or_key,
            **self.window.to_simplified_dict(),
            "comments": [comment.to_simplified_dict() for comment in self.comments],
            "raw": self.raw,
        }
