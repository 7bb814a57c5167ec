"""
Utility functions for the MCP Jira server.
"""

from .date import parse_date, parse_date_short
from .env import getenv, is_env_ssl_verify, load_env_file
from .text import strip_html_tags

__all__ = [
    "getenv",
    "is_env_ssl_verify",
    "load_env_file",
    "parse_date",
    "parse_date_short",
    "strip_html_tags",
]
