class MCPJiraError(Exception):
    """Base exception for MCP Jira errors."""

    pass


class MCPJiraConfigurationError(MCPJiraError):
    """Raised when required Jira settings are missing at startup."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "Missing required Jira environment variables: " + ", ".join(missing)
        )


class JiraApiError(MCPJiraError):
    """Raised when Jira answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"{status_code} {reason}\n{body}")


class MCPJiraAuthenticationError(JiraApiError):
    """Raised when Jira API authentication fails (401/403)."""

    pass
