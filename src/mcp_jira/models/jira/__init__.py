"""
Jira data models for the MCP Jira server.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .agile import JiraBoard, JiraBoardPage, JiraSprint, JiraSprintPage
from .comment import JiraComment, JiraCommentPage
from .issue import JiraIssue, JiraIssueSummary
from .project import (
    JiraIssueTypeStatuses,
    JiraProject,
    JiraProjectPage,
    JiraProjectStatuses,
    JiraProjectSummary,
)
from .search import JiraSearchResult

__all__ = [
    "JiraIssue",
    "JiraIssueSummary",
    "JiraSearchResult",
    "JiraProject",
    "JiraProjectPage",
    "JiraProjectSummary",
    "JiraProjectStatuses",
    "JiraIssueTypeStatuses",
    "JiraComment",
    "JiraCommentPage",
    "JiraBoard",
    "JiraBoardPage",
    "JiraSprint",
    "JiraSprintPage",
]
