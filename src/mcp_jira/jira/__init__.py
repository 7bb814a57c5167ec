"""Jira API module for the MCP Jira server.

This module provides various Jira API client implementations.
"""

from .boards import BoardsMixin
from .client import JiraClient, get_jira_headers
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .sprints import SprintsMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    ProjectsMixin,
    CommentsMixin,
    BoardsMixin,
    SprintsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Single issue lookup
    - SearchMixin: JQL search and project issue listing
    - ProjectsMixin: Project listing, details and statuses
    - CommentsMixin: Issue comments
    - BoardsMixin: Agile boards
    - SprintsMixin: Board sprints and sprint issues

    Every method performs exactly one HTTP request.
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient", "get_jira_headers"]
