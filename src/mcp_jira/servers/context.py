from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira.jira import JiraFetcher
    from mcp_jira.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the Jira config and the fetcher shared by all tools."""

    jira_config: JiraConfig
    jira_fetcher: JiraFetcher
