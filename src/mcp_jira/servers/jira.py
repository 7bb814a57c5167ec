"""Jira FastMCP server instance and tool definitions."""

import logging
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from mcp_jira.servers.dependencies import get_jira_fetcher
from mcp_jira.utils.decorators import handle_tool_errors

logger = logging.getLogger("mcp-jira.servers.jira")

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides read-only tools for looking up Atlassian Jira data.",
)

# Pagination arguments shared by the listing tools
StartAt = Annotated[
    int | None,
    Field(description="Pagination start index (default 0)", ge=0),
]
MaxResults = Annotated[
    int | None,
    Field(description="Page size (1-100, default 50)", ge=1, le=100),
]


def _tool_result(text: str, payload: dict[str, Any]) -> ToolResult:
    """One text block for the host plus the structured payload."""
    return ToolResult(
        content=[TextContent(type="text", text=text)],
        structured_content=payload,
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Jira Issue", "readOnlyHint": True},
)
@handle_tool_errors("fetch Jira issue {issueKey}", "fetching Jira issue {issueKey}")
async def get_jira_issue(
    ctx: Context,
    issueKey: Annotated[
        str, Field(description="The Jira issue key (e.g., PROJ-123, TASK-456)")
    ],
) -> ToolResult:
    """Get detailed information about a Jira issue by its key (e.g., PROJ-123)."""
    jira = await get_jira_fetcher(ctx)
    issue = await jira.get_issue(issueKey)
    return _tool_result(
        text=issue.to_markdown(),
        payload=issue.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Jira Projects", "readOnlyHint": True},
)
@handle_tool_errors("list projects", "listing projects")
async def list_jira_projects(
    ctx: Context,
    query: Annotated[
        str | None, Field(description="Optional search query for project key/name")
    ] = None,
    startAt: StartAt = None,
    maxResults: MaxResults = None,
) -> ToolResult:
    """List accessible Jira projects with pagination and optional query."""
    jira = await get_jira_fetcher(ctx)
    page = await jira.list_projects(
        query=query, start_at=startAt, max_results=maxResults
    )
    return _tool_result(
        text=f"Found {page.window.total} projects (showing {len(page.projects)}).",
        payload=page.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Jira Project Details", "readOnlyHint": True},
)
@handle_tool_errors("get project {projectIdOrKey}", "getting project {projectIdOrKey}")
async def get_jira_project(
    ctx: Context,
    projectIdOrKey: Annotated[
        str, Field(description="Project key or ID (e.g., PROJ or 10001)")
    ],
) -> ToolResult:
    """Get full metadata for a Jira project by key or ID."""
    jira = await get_jira_fetcher(ctx)
    project = await jira.get_project(projectIdOrKey)
    return _tool_result(
        text=f"Project {project.key}: {project.name}",
        payload=project.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Project Issue Types and Statuses", "readOnlyHint": True},
)
@handle_tool_errors(
    "get statuses for {projectIdOrKey}",
    "getting project statuses for {projectIdOrKey}",
)
async def get_project_statuses(
    ctx: Context,
    projectIdOrKey: Annotated[
        str, Field(description="Project key or ID (e.g., PROJ or 10001)")
    ],
) -> ToolResult:
    """Get available statuses for each issue type in a project."""
    jira = await get_jira_fetcher(ctx)
    statuses = await jira.get_project_statuses(projectIdOrKey)
    return _tool_result(
        text=f"Found {len(statuses.types)} issue types with statuses.",
        payload=statuses.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Search Jira Issues (JQL)", "readOnlyHint": True},
)
@handle_tool_errors("search issues", "searching issues")
async def search_jira_issues(
    ctx: Context,
    jql: Annotated[
        str,
        Field(description='JQL query (e.g., project=PROJ AND status="In Progress")'),
    ],
    startAt: StartAt = None,
    maxResults: MaxResults = None,
    fields: Annotated[
        str | None,
        Field(
            description=(
                "Comma-separated fields to return "
                "(default: key,summary,status,assignee,priority,issuetype,updated)"
            )
        ),
    ] = None,
) -> ToolResult:
    """Search issues using JQL with pagination and field selection."""
    jira = await get_jira_fetcher(ctx)
    result = await jira.search_issues(
        jql, start_at=startAt, max_results=maxResults, fields=fields
    )
    return _tool_result(
        text=f"Found {result.total} issues (showing {len(result.issues)}).",
        payload=result.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Issues in Project", "readOnlyHint": True},
)
@handle_tool_errors("list project issues", "listing issues for {projectKey}")
async def list_project_issues(
    ctx: Context,
    projectKey: Annotated[str, Field(description="Project key (e.g., PROJ)")],
    jqlTail: Annotated[
        str | None,
        Field(description='Optional extra JQL, e.g., AND status="In Progress"'),
    ] = None,
    startAt: StartAt = None,
    maxResults: MaxResults = None,
) -> ToolResult:
    """List issues for a project with optional JQL tail filters."""
    jira = await get_jira_fetcher(ctx)
    result = await jira.get_project_issues(
        projectKey, jql_tail=jqlTail, start_at=startAt, max_results=maxResults
    )
    return _tool_result(
        text=(
            f"Found {result.total} issues in {projectKey} "
            f"(showing {len(result.issues)})."
        ),
        payload={**result.to_simplified_dict(), "projectKey": projectKey},
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Jira Issue Comments", "readOnlyHint": True},
)
@handle_tool_errors(
    "get comments for {issueIdOrKey}", "getting comments for {issueIdOrKey}"
)
async def get_jira_issue_comments(
    ctx: Context,
    issueIdOrKey: Annotated[str, Field(description="Issue key or ID (e.g., PROJ-123)")],
    startAt: StartAt = None,
    maxResults: MaxResults = None,
) -> ToolResult:
    """Retrieve comments for a Jira issue with pagination."""
    jira = await get_jira_fetcher(ctx)
    page = await jira.get_issue_comments(
        issueIdOrKey, start_at=startAt, max_results=maxResults
    )
    return _tool_result(
        text=f"Found {page.window.total} comments (showing {len(page.comments)}).",
        payload=page.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Boards", "readOnlyHint": True},
)
@handle_tool_errors("list boards", "listing boards")
async def list_boards(
    ctx: Context,
    type: Annotated[
        Literal["scrum", "kanban"] | None, Field(description="Board type filter")
    ] = None,
    projectKeyOrId: Annotated[
        str | None, Field(description="Filter boards by project key or ID")
    ] = None,
    startAt: StartAt = None,
    maxResults: MaxResults = None,
) -> ToolResult:
    """List Jira boards with optional type and project filter."""
    jira = await get_jira_fetcher(ctx)
    page = await jira.list_boards(
        board_type=type,
        project_key_or_id=projectKeyOrId,
        start_at=startAt,
        max_results=maxResults,
    )
    return _tool_result(
        text=f"Found {page.window.total} boards (showing {len(page.boards)}).",
        payload=page.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Board Sprints", "readOnlyHint": True},
)
@handle_tool_errors(
    "list sprints for board {boardId}", "listing sprints for board {boardId}"
)
async def list_board_sprints(
    ctx: Context,
    boardId: Annotated[int, Field(description="Board ID")],
    state: Annotated[
        Literal["active", "future", "closed"] | None,
        Field(description="Sprint state filter"),
    ] = None,
    startAt: StartAt = None,
    maxResults: MaxResults = None,
) -> ToolResult:
    """List sprints for a given board with optional state filter."""
    jira = await get_jira_fetcher(ctx)
    page = await jira.get_board_sprints(
        boardId, state=state, start_at=startAt, max_results=maxResults
    )
    return _tool_result(
        text=f"Found {page.window.total} sprints (showing {len(page.sprints)}).",
        payload=page.to_simplified_dict(),
    )


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Sprint Issues", "readOnlyHint": True},
)
@handle_tool_errors("list sprint issues", "listing sprint issues")
async def list_sprint_issues(
    ctx: Context,
    sprintId: Annotated[int, Field(description="Sprint ID")],
    startAt: StartAt = None,
    maxResults: MaxResults = None,
    jql: Annotated[
        str | None,
        Field(description="Optional additional JQL to filter sprint issues"),
    ] = None,
) -> ToolResult:
    """List issues in a given sprint with pagination."""
    jira = await get_jira_fetcher(ctx)
    result = await jira.get_sprint_issues(
        sprintId, start_at=startAt, max_results=maxResults, jql=jql
    )
    return _tool_result(
        text=(
            f"Found {result.total} issues in sprint {sprintId} "
            f"(showing {len(result.issues)})."
        ),
        payload={"sprintId": sprintId, **result.to_simplified_dict()},
    )
