"""Unit tests for the command line entry point."""

import os
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from mcp_jira import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def keep_logging_config():
    """Stop the CLI from binding handlers to the runner's temporary stderr."""
    with patch("mcp_jira.setup_logger"):
        yield


@pytest.fixture
def mock_run_server():
    with patch("mcp_jira.servers.run_server", new_callable=AsyncMock) as mocked:
        yield mocked


def test_missing_environment_exits(runner, clean_jira_env, tmp_path, mock_run_server):
    clean_jira_env.chdir(tmp_path)

    result = runner.invoke(main, ["--env-file", "absent.env"])

    assert result.exit_code == 1
    assert "Missing required Jira environment variables:" in result.output
    assert "- JIRA_URL:" in result.output
    assert "- JIRA_EMAIL:" in result.output
    assert "- JIRA_API_TOKEN:" in result.output
    mock_run_server.assert_not_called()


def test_missing_environment_is_not_logged_as_failed_startup(
    runner, clean_jira_env, tmp_path, mock_run_server
):
    clean_jira_env.chdir(tmp_path)

    with patch("mcp_jira.logger") as mock_logger:
        result = runner.invoke(main, ["--env-file", "absent.env"])

    assert result.exit_code == 1
    mock_logger.error.assert_not_called()
    completed = [call.args[0] for call in mock_logger.debug.call_args_list]
    assert any("Operation completed: application_startup" in msg for msg in completed)


def test_cli_flags_build_config(runner, clean_jira_env, tmp_path, mock_run_server):
    clean_jira_env.chdir(tmp_path)

    result = runner.invoke(
        main,
        [
            "--env-file",
            "absent.env",
            "--jira-url",
            "https://cli.atlassian.net/",
            "--jira-email",
            "cli@example.com",
            "--jira-token",
            "cli-token",
            "--no-jira-ssl-verify",
        ],
    )

    assert result.exit_code == 0, result.output
    config = mock_run_server.call_args.args[0]
    assert config.url == "https://cli.atlassian.net"
    assert config.username == "cli@example.com"
    assert config.api_token == "cli-token"
    assert config.ssl_verify is False
    assert mock_run_server.call_args.kwargs == {
        "transport": "stdio",
        "host": "0.0.0.0",
        "port": 8000,
    }


def test_cli_flags_are_not_written_to_environment(
    runner, clean_jira_env, tmp_path, mock_run_server
):
    clean_jira_env.chdir(tmp_path)

    runner.invoke(
        main,
        [
            "--env-file",
            "absent.env",
            "--jira-url",
            "https://cli.atlassian.net",
            "--jira-email",
            "cli@example.com",
            "--jira-token",
            "cli-token",
        ],
    )

    assert "JIRA_API_TOKEN" not in os.environ


def test_env_file_seeds_config(runner, clean_jira_env, tmp_path, mock_run_server):
    clean_jira_env.chdir(tmp_path)
    (tmp_path / "jira.env").write_text(
        "JIRA_URL=https://seed.atlassian.net\n"
        "JIRA_EMAIL=seed@example.com\n"
        "JIRA_API_TOKEN=seed-token\n"
    )
    # load_dotenv writes into os.environ; register the names for cleanup
    for name in ("JIRA_URL", "JIRA_EMAIL", "JIRA_API_TOKEN"):
        clean_jira_env.setenv(name, "placeholder")
        clean_jira_env.delenv(name)

    result = runner.invoke(
        main, ["--env-file", "jira.env", "--transport", "sse", "--port", "9000"]
    )

    assert result.exit_code == 0, result.output
    config = mock_run_server.call_args.args[0]
    assert config.url == "https://seed.atlassian.net"
    assert mock_run_server.call_args.kwargs["transport"] == "sse"
    assert mock_run_server.call_args.kwargs["port"] == 9000


def test_server_failure_exits_with_error(
    runner, clean_jira_env, tmp_path, mock_run_server
):
    clean_jira_env.chdir(tmp_path)
    mock_run_server.side_effect = OSError("address already in use")

    result = runner.invoke(
        main,
        [
            "--env-file",
            "absent.env",
            "--jira-url",
            "https://cli.atlassian.net",
            "--jira-email",
            "cli@example.com",
            "--jira-token",
            "cli-token",
        ],
    )

    assert result.exit_code == 1
