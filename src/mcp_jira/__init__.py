import asyncio
import sys

import click

__version__ = "1.0.0"

from .exceptions import MCPJiraConfigurationError
from .jira.config import JiraConfig, describe_missing
from .logging_config import log_operation, setup_logger
from .utils.env import DEFAULT_ENV_FILE, load_env_file

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file",
    default=DEFAULT_ENV_FILE,
    show_default=True,
    help="Seed file with KEY=VALUE lines; a missing file is ignored",
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse or streamable-http)",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind for HTTP transports",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for HTTP transports",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates (default: JIRA_SSL_VERIFY or verify)",
)
def main(
    verbose: int,
    env_file: str,
    transport: str,
    host: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool | None,
) -> None:
    """MCP Jira Server - read-only Jira Cloud tools for MCP."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="mcp-jira",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    config: JiraConfig | None = None
    with log_operation(logger, "application_startup", app_version=__version__):
        load_env_file(env_file)

        overrides: dict[str, str | None] = {
            "JIRA_URL": jira_url,
            "JIRA_EMAIL": jira_email,
            "JIRA_API_TOKEN": jira_token,
        }
        if jira_ssl_verify is not None:
            overrides["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()

        try:
            config = JiraConfig.from_env(overrides)
        except MCPJiraConfigurationError as e:
            click.echo(describe_missing(e.missing), err=True)

    if config is None:
        sys.exit(1)

    from .servers import run_server

    logger.info(f"Starting MCP Jira v{__version__} with {transport} transport")
    try:
        asyncio.run(
            run_server(config, transport=transport, host=host, port=port)  # type: ignore[arg-type]
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Error running server: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
