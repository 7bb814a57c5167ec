import inspect
import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from fastmcp.exceptions import ToolError

from mcp_jira.exceptions import JiraApiError

logger = logging.getLogger("mcp-jira.utils.decorators")


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_tool_errors(failure: str, error: str) -> Callable[[F], F]:
    """
    Decorator for FastMCP tools that turns every failure into a ToolError.

    FastMCP reports a ToolError to the host as an `isError` result whose only
    content is the message, so a tool either returns its structured payload or
    a single diagnostic. Nothing else escapes the tool.

    Both templates are `str.format` strings filled with the tool's arguments,
    e.g. "fetch Jira issue {issueKey}".

    Args:
        failure: Action used for non-2xx answers ("Failed to <failure>: ...").
        error: Action used for any other exception ("Error <error>: ...").
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            arguments = signature.bind_partial(*args, **kwargs).arguments
            try:
                return await func(*args, **kwargs)
            except ToolError:
                raise
            except JiraApiError as e:
                message = (
                    f"Failed to {failure.format(**arguments)}: "
                    f"{e.status_code} {e.reason}\n{e.body}"
                )
                logger.warning(f"Tool '{func.__name__}' got HTTP {e.status_code}")
                raise ToolError(message) from e
            except Exception as e:  # noqa: BLE001 - every failure becomes a tool result
                message = f"Error {error.format(**arguments)}: {e}"
                logger.error(f"Tool '{func.__name__}' failed: {e}", exc_info=True)
                raise ToolError(message) from e

        return wrapper  # type: ignore

    return decorator
