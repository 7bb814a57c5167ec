"""
Jira agile models.

This module provides Pydantic models for boards and sprints returned by the
Jira Software (agile) API.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel, PageWindow

logger = logging.getLogger("mcp-jira.models.jira.agile")


class JiraBoard(ApiModel):
    """
    Model representing a Jira agile board.
    """

    id: int | None = None
    name: str | None = None
    type: str | None = None
    location: dict[str, Any] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraBoard":
        if not data or not isinstance(data, dict):
            return cls()

        location = data.get("location")
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            type=data.get("type"),
            location=location if isinstance(location, dict) else None,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "location": self.location,
        }


class JiraSprint(ApiModel):
    """
    Model representing a Jira sprint.
    """

    id: int | None = None
    name: str | None = None
    state: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    complete_date: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraSprint":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            id=data.get("id"),
            name=data.get("name"),
            state=data.get("state"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            complete_date=data.get("completeDate"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "state": self.state,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "completeDate": self.complete_date,
        }


class JiraBoardPage(ApiModel):
    """
    Model representing one page of the board listing.
    """

    window: PageWindow = Field(default_factory=PageWindow)
    boards: list[JiraBoard] = Field(default_factory=list)
    raw: Any = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraBoardPage":
        if not data or not isinstance(data, dict):
            return cls(raw=data)

        boards = [JiraBoard.from_api_response(board) for board in data.get("values") or []]
        return cls(
            window=PageWindow.from_api_response(data, count=len(boards)),
            boards=boards,
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            **self.window.to_simplified_dict(),
            "boards": [board.to_simplified_dict() for board in self.boards],
            "raw": self.raw,
        }


class JiraSprintPage(ApiModel):
    """
    Model representing one page of sprints on a board.
    """

    board_id: int | None = None
    window: PageWindow = Field(default_factory=PageWindow)
    sprints: list[JiraSprint] = Field(default_factory=list)
    raw: Any = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSprintPage":
        board_id = kwargs.get("board_id")
        if not data or not isinstance(data, dict):
            return cls(board_id=board_id, raw=data)

        sprints = [
            JiraSprint.from_api_response(sprint) for sprint in data.get("values") or []
        ]
        return cls(
            board_id=board_id,
            window=PageWindow.from_api_response(data, count=len(sprints)),
            sprints=sprints,
            raw=data,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            **self.window.to_simplified_dict(),
            "boardId": self.board_id,
            "sprints": [sprint.to_simplified_dict() for sprint in self.sprints],
            "raw": self.raw,
        }
