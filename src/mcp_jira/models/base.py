"""
Base models shared by the Jira projections.
"""

import json
import logging
from abc import abstractmethod
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("mcp-jira.models.base")

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for read-only views of Jira API payloads.

    Subclasses build themselves with `from_api_response` and render the
    camelCase dictionary returned to the MCP host with `to_simplified_dict`.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    @abstractmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """Create a model instance from a Jira API response."""

    @abstractmethod
    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""


class PageWindow(ApiModel):
    """
    Pagination window reported by paged Jira endpoints.

    Jira omits these values on some endpoints; the fallbacks describe the
    page that was actually returned.
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "PageWindow":
        """
        Read the pagination fields of a response.

        Args:
            data: The paged response from the Jira API
            **kwargs: `count`, the number of items on the page

        Returns:
            A PageWindow instance
        """
        count = kwargs.get("count", 0)
        if not isinstance(data, dict):
            return cls(total=count, start_at=0, max_results=count)

        return cls(
            total=_int_or(data.get("total"), count),
            start_at=_int_or(data.get("startAt"), 0),
            max_results=_int_or(data.get("maxResults"), count),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "startAt": self.start_at,
            "maxResults": self.max_results,
        }


def _int_or(value: Any, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        logger.debug(f"Non-numeric pagination value {value!r}, using {default}")
        return default


def display_name(user: Any) -> str | None:
    """Return the display name of a Jira user object, if any."""
    if isinstance(user, dict):
        return user.get("displayName")
    return None


def named(value: Any) -> str | None:
    """Return the `name` of a nested Jira object such as a status or priority."""
    if isinstance(value, dict):
        return value.get("name")
    return None


def to_text(value: Any) -> str:
    """Serialize a non-string Jira value (e.g. an ADF document) as compact JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
