"""Utility functions specific to Jira operations."""

from urllib.parse import quote


def quote_path(segment: str | int) -> str:
    """Percent-encode a value interpolated into a REST path."""
    return quote(str(segment), safe="")


def build_project_jql(project_key: str, jql_tail: str | None = None) -> str:
    """Build the JQL used to list the issues of one project.

    The tail is appended verbatim after a single space, so callers write it
    as a continuation, e.g. 'AND status="Done"'.
    """
    jql = f"project={project_key}"
    if jql_tail:
        jql = f"{jql} {jql_tail}"
    return jql


def parse_fields(fields: str | None, default: list[str]) -> list[str]:
    """Split a comma-separated field list, dropping blanks."""
    if not fields:
        return list(default)
    return [field.strip() for field in fields.split(",") if field.strip()]
