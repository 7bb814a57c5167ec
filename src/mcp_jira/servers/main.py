"""Main FastMCP server setup for the Jira integration."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Literal

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig
from mcp_jira.logging_config import mask_sensitive

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-jira.server.main")

Transport = Literal["stdio", "sse", "streamable-http"]


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def make_lifespan(
    config: JiraConfig, fetcher: JiraFetcher | None = None
) -> Callable[[FastMCP[MainAppContext]], AbstractAsyncContextManager[dict]]:
    """Build the server lifespan that shares one config and fetcher across tools."""

    @asynccontextmanager
    async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
        logger.info("Main Jira MCP server lifespan starting...")
        logger.info(
            f"Jira configuration loaded: url={config.url}, "
            f"email={config.username}, token={mask_sensitive(config.api_token)}, "
            f"ssl_verify={config.ssl_verify}"
        )
        app_context = MainAppContext(
            jira_config=config,
            jira_fetcher=fetcher or JiraFetcher(config=config),
        )
        try:
            yield {"app_lifespan_context": app_context}
        except Exception as e:
            logger.error(f"Error during lifespan: {e}", exc_info=True)
            raise
        finally:
            logger.info("Main Jira MCP server lifespan shutdown complete.")

    return main_lifespan


class JiraMCP(FastMCP[MainAppContext]):
    """FastMCP server exposing the read-only Jira tools."""


def create_main_mcp(
    config: JiraConfig, fetcher: JiraFetcher | None = None
) -> JiraMCP:
    """Create the MCP server for a validated configuration.

    Args:
        config: Jira configuration built at startup
        fetcher: Optional pre-built client, used instead of one built from `config`

    Returns:
        The server with every Jira tool mounted and a /healthz route
    """
    main_mcp = JiraMCP(name="Jira MCP", lifespan=make_lifespan(config, fetcher))
    main_mcp.mount(jira_mcp)

    @main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
    async def _health_check_route(request: Request) -> JSONResponse:
        return await health_check(request)

    return main_mcp


async def run_server(
    config: JiraConfig,
    transport: Transport = "stdio",
    host: str = "0.0.0.0",  # noqa: S104
    port: int = 8000,
) -> None:
    """Run the MCP Jira server with the specified transport."""
    main_mcp = create_main_mcp(config)
    if transport == "stdio":
        await main_mcp.run_async(transport="stdio")
    else:
        logger.info(f"Listening on http://{host}:{port} ({transport})")
        await main_mcp.run_async(transport=transport, host=host, port=port)
