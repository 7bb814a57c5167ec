"""
Pydantic models for the Jira API responses exposed by the MCP tools.
"""

from .base import ApiModel, PageWindow
from .jira import (
    JiraBoard,
    JiraBoardPage,
    JiraComment,
    JiraCommentPage,
    JiraIssue,
    JiraIssueSummary,
    JiraIssueTypeStatuses,
    JiraProject,
    JiraProjectPage,
    JiraProjectStatuses,
    JiraProjectSummary,
    JiraSearchResult,
    JiraSprint,
    JiraSprintPage,
)

__all__ = [
    "ApiModel",
    "PageWindow",
    "JiraBoard",
    "JiraBoardPage",
    "JiraComment",
    "JiraCommentPage",
    "JiraIssue",
    "JiraIssueSummary",
    "JiraIssueTypeStatuses",
    "JiraProject",
    "JiraProjectPage",
    "JiraProjectStatuses",
    "JiraProjectSummary",
    "JiraSearchResult",
    "JiraSprint",
    "JiraSprintPage",
]
