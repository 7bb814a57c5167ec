"""MCP Jira Servers Package."""

from .main import create_main_mcp, run_server

__all__ = ["create_main_mcp", "run_server"]
