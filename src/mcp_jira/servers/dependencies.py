"""Dependency providers for tool functions.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_jira.jira import JiraFetcher
from mcp_jira.servers.context import MainAppContext

logger = logging.getLogger("mcp-jira.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext:
    """Returns the MainAppContext created by the server lifespan."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context
    app_lifespan_ctx = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    if not isinstance(app_lifespan_ctx, MainAppContext):
        logger.error("Application context is not available in the lifespan context.")
        raise ValueError("Jira client is not configured or available.")
    return app_lifespan_ctx


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns the JiraFetcher configured at startup."""
    return get_app_context(ctx).jira_fetcher
